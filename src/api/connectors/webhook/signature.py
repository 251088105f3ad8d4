"""Verificação do header X-Webhook-Signature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.crypto import verify_signature
from config.settings import SIGNATURE_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação.

    Attributes:
        valid: Requisição pode seguir
        skipped: Secret não configurado (modo dev, sem verificação)
        error: ``missing_signature`` ou ``invalid_signature`` quando inválida
    """

    valid: bool
    skipped: bool = False
    error: str | None = None


def verify_webhook_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Valida o HMAC-SHA256 do corpo bruto contra o header.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        secret: Secret do endpoint; vazio desliga a verificação

    Returns:
        SignatureResult (ausente e malformado distinguidos só em ``error``)
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = headers.get(SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    if not verify_signature(raw_body, signature, secret.encode("utf-8")):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)
