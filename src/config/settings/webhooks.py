"""Settings dos endpoints de webhook assinados.

Secret vazio desliga a validação HMAC (modo dev). É um default arriscado:
em produção o validador de runtime alerta quando falta secret.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SIGNATURE_HEADER: str = "x-webhook-signature"


@dataclass(frozen=True)
class WebhookSettings:
    """Secrets HMAC por endpoint.

    Attributes:
        order_secret: Secret do webhook de pedidos
        quote_secret: Secret do webhook de orçamentos
    """

    order_secret: str = ""
    quote_secret: str = ""

    def validate(self) -> list[str]:
        """Valida formato dos secrets (ausência vira aviso, não erro)."""
        errors: list[str] = []

        for name, secret in (
            ("WEBHOOK_SECRET", self.order_secret),
            ("QUOTE_WEBHOOK_SECRET", self.quote_secret),
        ):
            if secret and (not secret.isprintable() or any(ch.isspace() for ch in secret)):
                errors.append(f"{name} não pode conter espaços ou caracteres de controle")

        return errors

    def missing(self) -> list[str]:
        """Lista secrets não configurados."""
        missing: list[str] = []
        if not self.order_secret:
            missing.append("WEBHOOK_SECRET")
        if not self.quote_secret:
            missing.append("QUOTE_WEBHOOK_SECRET")
        return missing


def _load_from_env() -> WebhookSettings:
    """Carrega WebhookSettings de variáveis de ambiente."""
    order_secret = os.getenv("WEBHOOK_SECRET", "").strip()
    return WebhookSettings(
        order_secret=order_secret,
        quote_secret=os.getenv("QUOTE_WEBHOOK_SECRET", "").strip() or order_secret,
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_from_env()
