"""Cliente do webhook Discord (canal primário)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpError
from api.payload_builders.discord import build_embed_payload
from app.domain.outcome import Channel, NotificationOutcome
from app.protocols.notification_channel import ChatNotifierProtocol

if TYPE_CHECKING:
    from app.protocols.models import ChatEmbed

logger = logging.getLogger(__name__)

# Corpo de resposta incluído no erro, truncado
_MAX_ERROR_BODY = 300


class DiscordWebhookClient(ChatNotifierProtocol):
    """Publica embeds em webhooks Discord.

    Sucesso = status 2xx. Status fora da faixa ou falha de transporte
    viram ``NotificationOutcome`` com status failed.
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def post_embed(self, url: str, embed: ChatEmbed) -> NotificationOutcome:
        try:
            response = await self._http.post(url, json=build_embed_payload(embed))
        except HttpError as exc:
            return NotificationOutcome.failed(Channel.PRIMARY, str(exc))

        if 200 <= response.status_code < 300:
            logger.debug("discord_delivered", extra={"status_code": response.status_code})
            return NotificationOutcome.delivered_with(Channel.PRIMARY, response.status_code)

        return NotificationOutcome.failed(
            Channel.PRIMARY,
            f"discord_status_{response.status_code}: {response.text[:_MAX_ERROR_BODY]}",
            status_code=response.status_code,
        )
