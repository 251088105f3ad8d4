"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging e valida settings.
A montagem das dependências por requisição está em
app/bootstrap/dependencies.py.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_email_settings,
    get_ingress_settings,
    get_webhook_settings,
)

# Nome do serviço para logs
SERVICE_NAME = "ppp_form_relay"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    settings = get_base_settings()

    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Valores malformados impedem o boot em `staging`/`production`.
    Canais ausentes nunca impedem: o dispatcher degrada por formulário.
    """
    base = get_base_settings()
    discord = get_discord_settings()
    email = get_email_settings()
    webhooks = get_webhook_settings()

    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"discord: {error}" for error in discord.validate())
    errors.extend(f"email: {error}" for error in email.validate())
    errors.extend(f"webhooks: {error}" for error in webhooks.validate())
    errors.extend(f"ingress: {error}" for error in get_ingress_settings().validate())

    gaps = [*discord.missing(), *webhooks.missing()]
    if not email.api_key:
        gaps.append("SENDGRID_API_KEY")
    if not email.admin_email:
        gaps.append("ADMIN_EMAIL")
    if gaps:
        logger.warning(
            "settings_channels_unconfigured",
            extra={"component": "bootstrap", "environment": base.environment, "missing": gaps},
        )
    if webhooks.missing():
        logger.warning(
            "webhook_signature_disabled",
            extra={"component": "bootstrap", "missing": webhooks.missing()},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
