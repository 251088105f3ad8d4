"""Formatters de logging estruturado (JSON, um record por linha)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados via ``extra`` (ex: ``submission`` no registro de
    recuperação) são serializados junto aos obrigatórios.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "ERROR",
            "logger": "app.services.dispatcher",
            "message": "submission_recovery",
            "correlation_id": "abc-123",
            "service": "ppp_form_relay",
            "recovery_marker": "SUBMISSION_RECOVERY",
            "form_type": "contact"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
