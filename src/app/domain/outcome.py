"""Resultado explícito de cada tentativa de entrega."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Channel(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class DeliveryStatus(StrEnum):
    DELIVERED = "delivered"
    FAILED = "failed"
    # Canal não configurado: não houve tentativa
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class NotificationOutcome:
    """Uma tentativa (ou não-tentativa) de entrega em um canal.

    Attributes:
        channel: Canal primário (chat) ou secundário (email)
        status: Entregue, falhou ou pulado
        status_code: Status HTTP da resposta, quando houve resposta
        error: Motivo da falha ou do pulo
    """

    channel: Channel
    status: DeliveryStatus
    status_code: int | None = None
    error: str | None = None

    @property
    def delivered(self) -> bool:
        return self.status is DeliveryStatus.DELIVERED

    @classmethod
    def delivered_with(cls, channel: Channel, status_code: int) -> NotificationOutcome:
        return cls(channel=channel, status=DeliveryStatus.DELIVERED, status_code=status_code)

    @classmethod
    def failed(
        cls,
        channel: Channel,
        error: str,
        status_code: int | None = None,
    ) -> NotificationOutcome:
        return cls(
            channel=channel,
            status=DeliveryStatus.FAILED,
            status_code=status_code,
            error=error,
        )

    @classmethod
    def skipped(cls, channel: Channel, reason: str) -> NotificationOutcome:
        return cls(channel=channel, status=DeliveryStatus.SKIPPED, error=reason)


@dataclass(frozen=True, slots=True)
class DispatchReport:
    """Resumo da escada de fallback de uma submissão.

    ``secondary`` é None quando o formulário não tem canal secundário.
    """

    primary: NotificationOutcome
    secondary: NotificationOutcome | None
    admin_fallback_sent: bool
    recovery_logged: bool

    @property
    def any_delivered(self) -> bool:
        return self.primary.delivered or (
            self.secondary is not None and self.secondary.delivered
        )
