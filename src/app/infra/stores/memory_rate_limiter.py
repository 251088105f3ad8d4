"""Rate limiter em memória com janela fixa por origem.

Estado vive enquanto o processo viver; reinício do processo zera todas as
janelas. Chaves antigas não são removidas.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.rate_limiter import RateLimiterProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_WINDOW_SECONDS = 60.0
DEFAULT_MAX_REQUESTS = 10


@dataclass(slots=True)
class RateLimitEntry:
    """Contagem da janela atual de uma origem (count >= 1)."""

    window_start: float
    count: int


class MemoryRateLimiter(RateLimiterProtocol):
    """Janela fixa: até ``max_requests`` admitidas por ``window_seconds``.

    A janela reinicia na primeira requisição após ``window_seconds``
    decorridos desde o início da janela anterior. O read-modify-write por
    chave é protegido por lock para hosts multi-thread.
    """

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests deve ser >= 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds deve ser > 0")
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._entries: dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    def check(self, source_key: str) -> bool:
        """Conta a requisição e retorna True se a origem está limitada."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(source_key)
            if entry is None or now - entry.window_start > self._window_seconds:
                self._entries[source_key] = RateLimitEntry(window_start=now, count=1)
                return False

            entry.count += 1
            return entry.count > self._max_requests

    def entry(self, source_key: str) -> RateLimitEntry | None:
        """Cópia da entrada atual (inspeção em testes e diagnósticos)."""
        with self._lock:
            current = self._entries.get(source_key)
            if current is None:
                return None
            return RateLimitEntry(window_start=current.window_start, count=current.count)

    def __len__(self) -> int:
        return len(self._entries)
