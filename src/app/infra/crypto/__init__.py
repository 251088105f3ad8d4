"""Primitivas criptográficas usadas pelos webhooks assinados.

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
"""

from .signature import compute_signature, verify_signature

__all__ = [
    "compute_signature",
    "verify_signature",
]
