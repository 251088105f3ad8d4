"""Settings de proteção de entrada (tamanho do corpo e rate limit).

Adaptado do padrão de flood detection: janela fixa por origem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class IngressSettings:
    """Limites aplicados antes de qualquer parse do corpo.

    Attributes:
        max_body_bytes: Tamanho máximo aceito do corpo bruto
        rate_limit_max_requests: Requisições admitidas por janela e origem
        rate_limit_window_seconds: Duração da janela fixa
    """

    max_body_bytes: int = 50_000
    rate_limit_max_requests: int = 10
    rate_limit_window_seconds: float = 60.0

    def validate(self) -> list[str]:
        """Valida limites de entrada.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.max_body_bytes < 1:
            errors.append("MAX_BODY_BYTES deve ser >= 1")

        if self.rate_limit_max_requests < 1:
            errors.append("RATE_LIMIT_MAX_REQUESTS deve ser >= 1")

        if self.rate_limit_window_seconds <= 0:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> IngressSettings:
    """Carrega IngressSettings de variáveis de ambiente."""
    return IngressSettings(
        max_body_bytes=int(os.getenv("MAX_BODY_BYTES", "50000")),
        rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "10")),
        rate_limit_window_seconds=float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60")),
    )


@lru_cache(maxsize=1)
def get_ingress_settings() -> IngressSettings:
    """Retorna instância cacheada de IngressSettings."""
    return _load_from_env()
