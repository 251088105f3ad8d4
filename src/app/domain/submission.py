"""Submissão sanitizada e resultado de validação.

``SubmissionRecord`` existe apenas durante o pipeline de uma requisição e
nunca é compartilhado entre requisições.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class FormType(StrEnum):
    """Tipos de formulário atendidos pelo serviço."""

    CONTACT = "contact"
    QUOTE = "quote"
    ORDER_WEBHOOK = "order_webhook"
    QUOTE_WEBHOOK = "quote_webhook"


def utc_timestamp(now: datetime | None = None) -> str:
    """Timestamp ISO-8601 em UTC com milissegundos e sufixo ``Z``."""
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class SubmissionRecord:
    """Campos sanitizados de uma submissão.

    Attributes:
        form_type: Tipo do formulário de origem
        fields: Campos sanitizados (mapping somente leitura)
        labels: Rótulos legíveis derivados dos códigos (ex: serviço/prazo)
        timestamp: Momento de recebimento (ISO-8601 UTC)
    """

    form_type: FormType
    fields: Mapping[str, Any]
    labels: Mapping[str, str] = field(default_factory=dict)
    timestamp: str = field(default_factory=utc_timestamp)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def get(self, name: str, default: Any = "") -> Any:
        return self.fields.get(name, default)

    def as_dict(self) -> dict[str, Any]:
        """Campos + timestamp, na forma registrada em log e no email de fallback."""
        return {**self.fields, "timestamp": self.timestamp}


@dataclass(frozen=True, slots=True)
class Valid:
    """Submissão aceita."""

    record: SubmissionRecord


@dataclass(frozen=True, slots=True)
class Invalid:
    """Submissão rejeitada antes de qualquer notificação."""

    reason: str
    fields: tuple[str, ...] = ()


ValidationResult = Valid | Invalid
