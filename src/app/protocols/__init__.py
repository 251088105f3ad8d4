"""Protocolos e contratos do core da aplicação."""

from .models import ChatEmbed, EmailAddress, EmailMessage, EmbedField
from .notification_channel import ChatNotifierProtocol, EmailSenderProtocol
from .rate_limiter import RateLimiterProtocol

__all__ = [
    "ChatEmbed",
    "ChatNotifierProtocol",
    "EmailAddress",
    "EmailMessage",
    "EmailSenderProtocol",
    "EmbedField",
    "RateLimiterProtocol",
]
