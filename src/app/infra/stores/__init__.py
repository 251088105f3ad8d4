"""Stores: estado em memória do processo.

Módulos disponíveis:
    - memory_rate_limiter: janela fixa por origem (único estado compartilhado)
"""

from __future__ import annotations

from app.infra.stores.memory_rate_limiter import MemoryRateLimiter, RateLimitEntry

__all__ = [
    "MemoryRateLimiter",
    "RateLimitEntry",
]
