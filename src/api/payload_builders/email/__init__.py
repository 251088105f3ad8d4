"""Payload builders do canal Email."""

from .mail import build_mail_payload

__all__ = ["build_mail_payload"]
