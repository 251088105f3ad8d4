"""Validação de assinatura HMAC-SHA256 para webhooks."""

from __future__ import annotations

import hashlib
import hmac


def compute_signature(payload: bytes, secret: bytes) -> str:
    """HMAC-SHA256 do corpo bruto, em hexadecimal minúsculo."""
    return hmac.new(secret, payload, hashlib.sha256).hexdigest()


def verify_signature(payload: bytes, signature: str, secret: bytes) -> bool:
    """Valida assinatura hex enviada pelo remetente do webhook.

    A comparação é em tempo constante. Valor malformado (não ASCII,
    tamanho errado) resulta em False, nunca em exceção.

    Args:
        payload: Corpo bruto da requisição (antes do parse)
        signature: Header X-Webhook-Signature
        secret: Secret do endpoint em bytes

    Returns:
        True se assinatura válida
    """
    try:
        provided = signature.strip().lower().encode("ascii")
    except (AttributeError, UnicodeEncodeError):
        return False

    expected = compute_signature(payload, secret).encode("ascii")
    return hmac.compare_digest(expected, provided)
