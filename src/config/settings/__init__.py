"""Agregador de settings do serviço de formulários.

Re-exporta todas as settings e funções de cada módulo.
Organização por canal para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.discord import (
    CONTACT_EMBED_COLOR,
    ORDER_EMBED_COLOR,
    QUOTE_EMBED_COLOR,
    DiscordSettings,
    get_discord_settings,
)
from config.settings.email import (
    SENDGRID_API_URL,
    EmailSettings,
    get_email_settings,
)

# Ingress protection
from config.settings.ingress import (
    IngressSettings,
    get_ingress_settings,
)
from config.settings.webhooks import (
    SIGNATURE_HEADER,
    WebhookSettings,
    get_webhook_settings,
)

__all__ = [
    # Constants
    "CONTACT_EMBED_COLOR",
    "ORDER_EMBED_COLOR",
    "QUOTE_EMBED_COLOR",
    "SENDGRID_API_URL",
    "SIGNATURE_HEADER",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "EmailSettings",
    "Environment",
    "IngressSettings",
    "WebhookSettings",
    "get_base_settings",
    "get_discord_settings",
    "get_email_settings",
    "get_ingress_settings",
    "get_webhook_settings",
]
