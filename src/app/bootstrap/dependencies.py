"""Factories: criação das implementações concretas do runtime.

Este módulo é o único ponto onde settings viram configurações de canal
(tipos soma) e onde os adapters de api/ são conectados aos protocolos.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from api.connectors.discord import DiscordWebhookClient
from api.connectors.email import SendGridClient
from api.connectors.http_base import HttpClient, HttpClientConfig
from app.domain.channel_config import (
    AdminConfigured,
    ChatWebhookConfigured,
    EmailConfigured,
    FormChannels,
    SenderIdentity,
    Unconfigured,
)
from app.domain.submission import FormType
from app.infra.stores.memory_rate_limiter import MemoryRateLimiter
from app.services.dispatcher import NotificationDispatcher
from config.settings import (
    get_discord_settings,
    get_email_settings,
    get_ingress_settings,
    get_webhook_settings,
)

if TYPE_CHECKING:
    from app.domain.channel_config import AdminConfig, ChatChannelConfig, EmailChannelConfig
    from app.protocols.rate_limiter import RateLimiterProtocol
    from config.settings import (
        DiscordSettings,
        EmailSettings,
        IngressSettings,
        WebhookSettings,
    )

logger = logging.getLogger(__name__)


@dataclass
class FormRuntime:
    """Dependências compartilhadas por todas as requisições do processo.

    Criado uma vez no startup (lifespan) e injetado nos handlers via
    ``app.state.runtime``. Os rate limiters são o único estado mutável
    compartilhado entre requisições.
    """

    dispatcher: NotificationDispatcher
    channels: dict[FormType, FormChannels]
    rate_limiters: dict[FormType, RateLimiterProtocol]
    webhook_secrets: dict[FormType, str]
    max_body_bytes: int
    http_client: httpx.AsyncClient | None = field(default=None, repr=False)

    async def aclose(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()


# ──────────────────────────────────────────────────────────────────────────────
# Channel configuration
# ──────────────────────────────────────────────────────────────────────────────


def _chat(url: str, setting: str) -> ChatChannelConfig:
    return ChatWebhookConfigured(url=url) if url else Unconfigured(setting=setting)


def build_form_channels(
    discord: DiscordSettings,
    email: EmailSettings,
) -> dict[FormType, FormChannels]:
    """Resolve a configuração de canais de cada formulário."""
    email_config: EmailChannelConfig = (
        EmailConfigured(api_key=email.api_key)
        if email.api_key
        else Unconfigured(setting="SENDGRID_API_KEY")
    )
    admin_config: AdminConfig = (
        AdminConfigured(address=email.admin_email)
        if email.admin_email
        else Unconfigured(setting="ADMIN_EMAIL")
    )
    contact_sender = SenderIdentity(
        email=email.from_contact,
        name=email.from_name,
        alert_name=email.alert_from_name,
    )
    quotes_sender = SenderIdentity(
        email=email.from_quotes,
        name=email.from_name,
        alert_name=email.alert_from_name,
    )

    quotes_chat = _chat(discord.quotes_webhook_url, "DISCORD_WEBHOOK_QUOTES")
    return {
        FormType.CONTACT: FormChannels(
            primary=_chat(discord.contact_webhook_url, "DISCORD_WEBHOOK_CONTACT"),
            email=email_config,
            admin=admin_config,
            sender=contact_sender,
        ),
        FormType.QUOTE: FormChannels(
            primary=quotes_chat,
            email=email_config,
            admin=admin_config,
            sender=quotes_sender,
        ),
        FormType.ORDER_WEBHOOK: FormChannels(
            primary=_chat(discord.order_webhook_url, "DISCORD_WEBHOOK_URL_ORDER"),
            email=email_config,
            admin=admin_config,
            sender=quotes_sender,
        ),
        FormType.QUOTE_WEBHOOK: FormChannels(
            primary=quotes_chat,
            email=email_config,
            admin=admin_config,
            sender=quotes_sender,
        ),
    }


def create_rate_limiters(ingress: IngressSettings) -> dict[FormType, RateLimiterProtocol]:
    """Um limiter por endpoint, todos com a mesma janela."""
    return {
        form_type: MemoryRateLimiter(
            max_requests=ingress.rate_limit_max_requests,
            window_seconds=ingress.rate_limit_window_seconds,
        )
        for form_type in FormType
    }


def webhook_secrets(webhooks: WebhookSettings) -> dict[FormType, str]:
    return {
        FormType.ORDER_WEBHOOK: webhooks.order_secret,
        FormType.QUOTE_WEBHOOK: webhooks.quote_secret,
    }


# ──────────────────────────────────────────────────────────────────────────────
# Runtime factory
# ──────────────────────────────────────────────────────────────────────────────


def create_dispatcher(
    discord: DiscordSettings,
    email: EmailSettings,
    client: httpx.AsyncClient | None = None,
) -> NotificationDispatcher:
    """Conecta os adapters HTTP aos protocolos do dispatcher."""
    chat_http = HttpClient(
        HttpClientConfig(timeout_seconds=discord.request_timeout_seconds),
        client=client,
    )
    email_http = HttpClient(
        HttpClientConfig(timeout_seconds=email.request_timeout_seconds),
        client=client,
    )
    return NotificationDispatcher(
        chat_notifier=DiscordWebhookClient(chat_http),
        email_sender=SendGridClient(email_http, api_url=email.api_url),
    )


def create_runtime(client: httpx.AsyncClient | None = None) -> FormRuntime:
    """Monta o runtime a partir das settings de ambiente.

    Args:
        client: Pool HTTP compartilhado (fechado em ``FormRuntime.aclose``).
    """
    discord = get_discord_settings()
    email = get_email_settings()
    ingress = get_ingress_settings()

    channels = build_form_channels(discord, email)
    for form_type, form_channels in channels.items():
        if not form_channels.primary_configured:
            logger.warning(
                "primary_channel_unconfigured",
                extra={"form_type": form_type.value, "setting": form_channels.primary.setting},
            )

    return FormRuntime(
        dispatcher=create_dispatcher(discord, email, client=client),
        channels=channels,
        rate_limiters=create_rate_limiters(ingress),
        webhook_secrets=webhook_secrets(get_webhook_settings()),
        max_body_bytes=ingress.max_body_bytes,
        http_client=client,
    )
