"""Settings do canal secundário (SendGrid v3 mail send).

A mesma credencial serve à confirmação ao remetente e ao fallback para o
administrador.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SENDGRID_API_URL: str = "https://api.sendgrid.com/v3/mail/send"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do canal de email transacional.

    Attributes:
        api_key: Credencial Bearer do provedor
        admin_email: Destinatário dos alertas de fallback
        api_url: Endpoint de envio
        from_contact: Remetente das confirmações de contato
        from_quotes: Remetente das confirmações de orçamento e pedidos
        from_name: Nome exibido nas confirmações
        alert_from_name: Nome exibido nos alertas de fallback
        request_timeout_seconds: Prazo máximo por POST
    """

    api_key: str = ""
    admin_email: str = ""
    api_url: str = SENDGRID_API_URL

    from_contact: str = "hello@polypeopleprinting.com"
    from_quotes: str = "quotes@polypeopleprinting.com"
    from_name: str = "Poly People Printing"
    alert_from_name: str = "PPP System Alert"

    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações de email (credencial ausente é permitida)."""
        errors: list[str] = []

        if self.admin_email and "@" not in self.admin_email:
            errors.append("ADMIN_EMAIL inválido")

        if not self.api_url.startswith("https://"):
            errors.append("SENDGRID_API_URL deve usar https")

        if self.request_timeout_seconds <= 0:
            errors.append("SENDGRID_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    defaults = EmailSettings()
    return EmailSettings(
        api_key=os.getenv("SENDGRID_API_KEY", "").strip(),
        admin_email=os.getenv("ADMIN_EMAIL", "").strip(),
        api_url=os.getenv("SENDGRID_API_URL", SENDGRID_API_URL).strip(),
        from_contact=os.getenv("EMAIL_FROM_CONTACT", defaults.from_contact),
        from_quotes=os.getenv("EMAIL_FROM_QUOTES", defaults.from_quotes),
        from_name=os.getenv("EMAIL_FROM_NAME", defaults.from_name),
        alert_from_name=os.getenv("EMAIL_ALERT_FROM_NAME", defaults.alert_from_name),
        request_timeout_seconds=float(
            os.getenv("SENDGRID_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
