"""Regras de validação compartilhadas pelos formulários.

A checagem de obrigatórios olha o payload original (antes da
sanitização); a checagem de enum olha o valor bruto enviado.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from app.domain.submission import Invalid

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

FAQ_KEYWORDS: Final[tuple[str, ...]] = (
    # horários e prazos
    "hours",
    "open",
    "closed",
    "turnaround",
    "time",
    "how long",
    # envio
    "shipping",
    "ship",
    "delivery",
    "pickup",
    # arquivos
    "file format",
    "what format",
    "types of files",
    # quantidades
    "minimum order",
    "how many",
    "quantity",
    # preço
    "pricing",
    "how much",
    "cost",
    "price",
)


def is_missing(value: Any) -> bool:
    """Ausente, null ou string vazia."""
    return value is None or value == ""


def find_missing_fields(payload: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    """Lista, na ordem declarada, os obrigatórios ausentes no payload."""
    return [name for name in required if is_missing(payload.get(name))]


def missing_fields_error(missing: Sequence[str]) -> Invalid:
    return Invalid(
        reason=f"Missing required fields: {', '.join(missing)}",
        fields=tuple(missing),
    )


def check_choice(value: Any, allowed: Iterable[str], field: str) -> Invalid | None:
    """Rejeita valor fora do conjunto permitido, enumerando as opções."""
    options = tuple(allowed)
    if isinstance(value, str) and value in options:
        return None
    return Invalid(
        reason=f"Invalid {field}. Must be one of: {', '.join(options)}",
        fields=(field,),
    )


def detect_faq(message: str) -> bool:
    """Indica se a mensagem parece uma pergunta frequente.

    Só escolhe variação de template; nunca rejeita a submissão.
    """
    lowered = message.lower()
    return any(keyword in lowered for keyword in FAQ_KEYWORDS)
