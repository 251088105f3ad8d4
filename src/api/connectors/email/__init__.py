"""Connector Email: envio transacional via SendGrid."""

from .sendgrid_client import SendGridClient

__all__ = ["SendGridClient"]
