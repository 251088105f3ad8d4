"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Formatação padronizada
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="ppp_form_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("primary_delivered", extra={"status_code": 204})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "ppp_form_relay"

# Marcador pesquisável nos logs da plataforma para recuperação manual
RECOVERY_MARKER = "SUBMISSION_RECOVERY"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    form_type: str | None = None,
) -> None:
    """Log observável de fallback acionado.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "admin_fallback").
        reason: Razão do fallback (ex: "primary_failed").
        form_type: Tipo de formulário da submissão.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if form_type:
        extra["form_type"] = form_type

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )


def log_submission_recovery(
    logger: logging.Logger,
    form_type: str,
    submission: Mapping[str, Any],
    labels: Mapping[str, str] | None = None,
) -> None:
    """Emite o registro de recuperação de uma submissão não entregue.

    Último recurso: é o único lugar onde a submissão completa aparece nos
    logs, para que possa ser recuperada manualmente.

    Args:
        logger: Logger instance.
        form_type: Tipo de formulário (ex: "quote").
        submission: Campos sanitizados da submissão, incluindo timestamp.
        labels: Rótulos legíveis adicionais (ex: serviço/prazo).
    """
    extra: dict[str, object] = {
        "recovery_marker": RECOVERY_MARKER,
        "form_type": form_type,
        "submission": dict(submission),
    }
    if labels:
        extra["labels"] = dict(labels)

    logger.error("submission_recovery", extra=extra)
