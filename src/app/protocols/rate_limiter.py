"""Protocolo do rate limiter por origem."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RateLimiterProtocol(ABC):
    """Contrato mínimo para limitação de requisições por origem.

    Método canônico:
    - check(source_key: str) -> bool
      Conta a requisição e retorna True se a origem excedeu o limite.
    """

    @abstractmethod
    def check(self, source_key: str) -> bool:
        """Conta a requisição na janela atual.

        Args:
            source_key: Identificador da origem (ex: IP derivado)

        Returns:
            True se limitada; False se admitida.
        """
