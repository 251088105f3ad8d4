"""Configuração de canal como tipo soma.

O dispatcher recebe estes valores já resolvidos pelo bootstrap e nunca lê
variáveis de ambiente.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Unconfigured:
    """Canal sem destino/credencial.

    Attributes:
        setting: Nome da variável de ambiente ausente (para logs)
    """

    setting: str


@dataclass(frozen=True, slots=True)
class ChatWebhookConfigured:
    url: str


@dataclass(frozen=True, slots=True)
class EmailConfigured:
    api_key: str


@dataclass(frozen=True, slots=True)
class AdminConfigured:
    address: str


ChatChannelConfig = ChatWebhookConfigured | Unconfigured
EmailChannelConfig = EmailConfigured | Unconfigured
AdminConfig = AdminConfigured | Unconfigured


@dataclass(frozen=True, slots=True)
class SenderIdentity:
    """Remetente dos emails de um formulário.

    Attributes:
        email: Endereço remetente
        name: Nome exibido nas confirmações
        alert_name: Nome exibido nos alertas ao administrador
    """

    email: str
    name: str
    alert_name: str


@dataclass(frozen=True, slots=True)
class FormChannels:
    """Configuração completa de canais para um tipo de formulário."""

    primary: ChatChannelConfig
    email: EmailChannelConfig
    admin: AdminConfig
    sender: SenderIdentity

    @property
    def primary_configured(self) -> bool:
        return isinstance(self.primary, ChatWebhookConfigured)
