"""Recepção de submissões: assinatura HMAC e parse do corpo."""

from .receive import parse_json_object
from .signature import SignatureResult, verify_webhook_signature

__all__ = [
    "SignatureResult",
    "parse_json_object",
    "verify_webhook_signature",
]
