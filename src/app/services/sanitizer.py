"""Sanitização de campos não confiáveis vindos dos formulários.

Funções puras e determinísticas (mesma entrada = mesma saída). Nenhuma
delas falha: entrada ausente ou inválida vira string vazia ou zero, e a
rejeição fica a cargo de app/services/validation.py.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Any, Final

MAX_STRING_LENGTH: Final[int] = 1000
MAX_EMAIL_LENGTH: Final[int] = 254
MAX_PHONE_LENGTH: Final[int] = 20

# Escapes aplicados caractere a caractere: "&" nunca é escapado duas vezes
_HTML_ESCAPES: Final[dict[str, str]] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

# Um único "@", domínio com pelo menos um ponto, sem espaços
_EMAIL_PATTERN: Final[Pattern[str]] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_DISALLOWED: Final[Pattern[str]] = re.compile(r"[^0-9+\-() ]")
_LEADING_INTEGER: Final[Pattern[str]] = re.compile(r"\s*([+-]?\d+)")


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sanitize_string(value: Any) -> str:
    """Normaliza texto livre para exibição segura em HTML e embeds.

    Remove espaços das bordas, limita a 1000 caracteres e escapa
    ``& < > " '``. O limite vale para o texto já escapado: um caractere
    cujo escape não cabe inteiro é descartado junto com o restante.

    Exemplos:
        >>> sanitize_string("  <b>Oi</b> ")
        '&lt;b&gt;Oi&lt;/b&gt;'

        >>> sanitize_string(None)
        ''
    """
    if not value:
        return ""

    text = _as_text(value).strip()[:MAX_STRING_LENGTH]

    pieces: list[str] = []
    length = 0
    for char in text:
        piece = _HTML_ESCAPES.get(char, char)
        if length + len(piece) > MAX_STRING_LENGTH:
            break
        pieces.append(piece)
        length += len(piece)

    return "".join(pieces)


def sanitize_email(value: Any) -> str:
    """Normaliza email; formato inválido vira string vazia.

    Exemplos:
        >>> sanitize_email("Foo@BAR.com  ")
        'foo@bar.com'

        >>> sanitize_email("not-an-email")
        ''
    """
    if value is None:
        return ""

    cleaned = _as_text(value).strip().lower()[:MAX_EMAIL_LENGTH]
    return cleaned if _EMAIL_PATTERN.fullmatch(cleaned) else ""


def sanitize_phone(value: Any) -> str:
    """Mantém apenas dígitos, ``+``, ``-``, parênteses e espaço (máx. 20)."""
    if not value:
        return ""

    return _PHONE_DISALLOWED.sub("", _as_text(value))[:MAX_PHONE_LENGTH]


def coerce_quantity(value: Any) -> int:
    """Converte quantidade para inteiro; valor não numérico vira 0.

    Aceita prefixo inteiro em strings (``"12 pcs"`` → 12) e trunca
    números decimais (``3.7`` → 3).
    """
    if isinstance(value, bool) or value is None:
        return 0

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)

    match = _LEADING_INTEGER.match(_as_text(value))
    if match is None:
        return 0
    return int(match.group(1))
