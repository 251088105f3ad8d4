"""Protocolos dos canais de notificação externos.

O dispatcher depende apenas destes contratos; os adapters concretos
(Discord, SendGrid) ficam em api/connectors. Nenhum método levanta
exceção por falha do serviço externo: o resultado é sempre um
``NotificationOutcome``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.outcome import Channel, NotificationOutcome
    from app.protocols.models import ChatEmbed, EmailMessage


class ChatNotifierProtocol(ABC):
    """Canal primário: webhook de chat que recebe embeds."""

    @abstractmethod
    async def post_embed(self, url: str, embed: ChatEmbed) -> NotificationOutcome:
        """Publica um embed no webhook configurado (uma tentativa)."""


class EmailSenderProtocol(ABC):
    """Canal de email transacional."""

    @abstractmethod
    async def send(
        self,
        api_key: str,
        message: EmailMessage,
        channel: Channel,
    ) -> NotificationOutcome:
        """Envia um email (uma tentativa).

        Args:
            api_key: Credencial Bearer do provedor
            message: Email já renderizado
            channel: Canal a registrar no resultado
        """
