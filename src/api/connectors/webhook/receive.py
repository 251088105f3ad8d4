"""Parse do corpo das submissões (sem PII nos erros)."""

from __future__ import annotations

import json
from typing import Any

from utils.errors import InvalidJsonError


def parse_json_object(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto como objeto JSON.

    Raises:
        InvalidJsonError: JSON inválido, aninhado demais ou valor que não é objeto
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise InvalidJsonError() from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("Request body must be a JSON object")

    return payload
