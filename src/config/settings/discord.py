"""Settings do canal primário (webhooks Discord).

Cada formulário tem sua própria URL de destino. Ausência de URL não é
erro: o dispatcher trata o canal como não configurado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Cor padrão dos embeds por formulário
CONTACT_EMBED_COLOR: int = 0x3B82F6  # azul
QUOTE_EMBED_COLOR: int = 0x9333EA  # roxo
ORDER_EMBED_COLOR: int = 0x7C3AED  # roxo escuro


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        contact_webhook_url: Destino do formulário de contato
        quotes_webhook_url: Destino de pedidos de orçamento
        order_webhook_url: Destino do webhook de pedidos
        request_timeout_seconds: Prazo máximo por POST
    """

    contact_webhook_url: str = ""
    quotes_webhook_url: str = ""
    order_webhook_url: str = ""

    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida formato das URLs configuradas (ausência é permitida)."""
        errors: list[str] = []

        for name, url in (
            ("DISCORD_WEBHOOK_CONTACT", self.contact_webhook_url),
            ("DISCORD_WEBHOOK_QUOTES", self.quotes_webhook_url),
            ("DISCORD_WEBHOOK_URL_ORDER", self.order_webhook_url),
        ):
            if url and not url.startswith(("https://", "http://")):
                errors.append(f"{name} deve ser uma URL http(s)")
            elif url and not url.isprintable():
                errors.append(f"{name} contém caracteres de controle")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors

    def missing(self) -> list[str]:
        """Lista destinos não configurados (aviso, não erro)."""
        return [
            name
            for name, url in (
                ("DISCORD_WEBHOOK_CONTACT", self.contact_webhook_url),
                ("DISCORD_WEBHOOK_QUOTES", self.quotes_webhook_url),
                ("DISCORD_WEBHOOK_URL_ORDER", self.order_webhook_url),
            )
            if not url
        ]


def _env_url(name: str) -> str:
    return os.getenv(name, "").strip()


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente (URLs sem espaços nas pontas)."""
    order_url = _env_url("DISCORD_WEBHOOK_URL_ORDER")
    return DiscordSettings(
        contact_webhook_url=_env_url("DISCORD_WEBHOOK_CONTACT"),
        # Orçamentos caem no canal de pedidos quando não há canal próprio
        quotes_webhook_url=_env_url("DISCORD_WEBHOOK_QUOTES") or order_url,
        order_webhook_url=order_url,
        request_timeout_seconds=float(
            os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
