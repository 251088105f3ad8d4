"""Connector Discord: webhooks de canal (somente envio)."""

from .webhook_client import DiscordWebhookClient

__all__ = ["DiscordWebhookClient"]
