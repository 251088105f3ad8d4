"""Contratos de mensagem trocados entre app/ e os adapters de canal.

Independentes de formato de fio: os payload builders em api/ serializam
para o JSON de cada provedor.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True, slots=True)
class ChatEmbed:
    """Mensagem estruturada do canal de chat.

    Attributes:
        title: Título do embed
        color: Cor como inteiro RGB
        fields: Campos na ordem de exibição
        timestamp: ISO-8601 da submissão
        footer: Texto do rodapé
    """

    title: str
    color: int
    fields: tuple[EmbedField, ...]
    timestamp: str
    footer: str


@dataclass(frozen=True, slots=True)
class EmailAddress:
    email: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """Email HTML com um destinatário."""

    to: EmailAddress
    sender: EmailAddress
    subject: str
    html: str
