"""Cliente SendGrid v3 (mail send) para o canal de email."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpError
from api.payload_builders.email import build_mail_payload
from app.domain.outcome import NotificationOutcome
from app.protocols.notification_channel import EmailSenderProtocol
from config.settings import SENDGRID_API_URL

if TYPE_CHECKING:
    from app.domain.outcome import Channel
    from app.protocols.models import EmailMessage

logger = logging.getLogger(__name__)

_MAX_ERROR_BODY = 300


class SendGridClient(EmailSenderProtocol):
    """Envia emails HTML via SendGrid.

    Sucesso = status < 400 (a API responde 202 Accepted).
    """

    def __init__(self, http: HttpClient, api_url: str = SENDGRID_API_URL) -> None:
        self._http = http
        self._api_url = api_url

    async def send(
        self,
        api_key: str,
        message: EmailMessage,
        channel: Channel,
    ) -> NotificationOutcome:
        if not api_key or not api_key.strip():
            # Bootstrap só entrega EmailConfigured com credencial
            raise ValueError("api_key é obrigatório para envio de email")

        try:
            response = await self._http.post(
                self._api_url,
                json=build_mail_payload(message),
                headers={"Authorization": f"Bearer {api_key}"},
            )
        except HttpError as exc:
            return NotificationOutcome.failed(channel, str(exc))

        if response.status_code < 400:
            logger.debug("sendgrid_accepted", extra={"status_code": response.status_code})
            return NotificationOutcome.delivered_with(channel, response.status_code)

        return NotificationOutcome.failed(
            channel,
            f"sendgrid_status_{response.status_code}: {response.text[:_MAX_ERROR_BODY]}",
            status_code=response.status_code,
        )
