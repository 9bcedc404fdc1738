"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios
e sem compartilhamento entre réplicas.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from app.protocols.models import WindowHit
from app.protocols.rate_limit_store import RateLimitStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Callable


class MemoryRateLimitStore(RateLimitStoreProtocol):
    """Contadores de janela fixa em memória — apenas para dev/test.

    Args:
        clock: Relógio monotônico em segundos (injetável em testes).
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._store: dict[str, tuple[int, float]] = {}  # key -> (count, window_end)

    def _cleanup_expired(self, now: float) -> None:
        """Remove janelas encerradas."""
        expired = [k for k, (_, window_end) in self._store.items() if window_end <= now]
        for k in expired:
            del self._store[k]

    async def increment(self, key: str, window_seconds: int) -> WindowHit:
        """Incrementa o contador da chave na janela corrente."""
        now = self._clock()
        self._cleanup_expired(now)
        count, window_end = self._store.get(key, (0, now + window_seconds))
        count += 1
        self._store[key] = (count, window_end)
        return WindowHit(count=count, reset_after_seconds=max(window_end - now, 0.0))

    async def reset(self, key: str) -> None:
        """Zera o contador da chave."""
        self._store.pop(key, None)

    def __len__(self) -> int:
        return len(self._store)
