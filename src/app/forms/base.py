"""Descritor genérico de formulário.

Cada tipo de formulário declara apenas o que lhe é próprio (campos,
validação, embed, confirmação). A escada de entrega é única e vive em
app/services/dispatcher.py.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from app.protocols.models import EmbedField

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.submission import FormType, SubmissionRecord, ValidationResult
    from app.protocols.models import ChatEmbed, EmailAddress


@dataclass(frozen=True, slots=True)
class Confirmation:
    """Email de confirmação ao remetente (sem remetente: vem da config)."""

    to: EmailAddress
    subject: str
    html: str


def embed_field(name: str, value: Any, inline: bool = False) -> EmbedField:
    return EmbedField(name=name, value=str(value), inline=inline)


class FormDescriptor(ABC):
    """Contrato de um tipo de formulário.

    Atributos de classe:
        form_type: Identificador do formulário
        title: Nome legível usado no alerta de fallback
        required_fields: Obrigatórios checados no payload original
        signed: Exige assinatura HMAC (webhooks)
        relay_only: Sem canal secundário; destino primário ausente é fatal
        success_message: Mensagem devolvida ao chamador em caso de sucesso
    """

    form_type: ClassVar[FormType]
    title: ClassVar[str]
    required_fields: ClassVar[tuple[str, ...]]
    signed: ClassVar[bool] = False
    relay_only: ClassVar[bool] = False
    success_message: ClassVar[str]

    @abstractmethod
    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        """Checa obrigatórios/enums e produz a submissão sanitizada."""

    @abstractmethod
    def build_embed(self, record: SubmissionRecord) -> ChatEmbed:
        """Embed do canal primário."""

    def build_confirmation(self, record: SubmissionRecord) -> Confirmation | None:
        """Confirmação ao remetente; None para formulários sem canal secundário."""
        return None

    @abstractmethod
    def admin_subject(self, record: SubmissionRecord) -> str:
        """Assunto do alerta de fallback ao administrador."""

    @property
    def has_secondary(self) -> bool:
        return not self.relay_only
