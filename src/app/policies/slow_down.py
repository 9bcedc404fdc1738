"""Slow-down: atraso fixo para clientes insistentes.

Depois de `delay_after` requests na janela, cada request adicional é
atrasado em `delay_ms`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.rate_limit_store import RateLimitStoreProtocol


class SlowDownPolicy:
    """Política de atraso de janela fixa.

    Args:
        store: Backend dos contadores (separado do rate limit por prefixo).
        delay_after: Requests sem atraso por janela.
        delay_ms: Atraso por request excedente, em milissegundos.
        window_seconds: Duração da janela.
    """

    def __init__(
        self,
        store: RateLimitStoreProtocol,
        *,
        delay_after: int,
        delay_ms: int,
        window_seconds: int,
        key_prefix: str = "sd",
    ) -> None:
        self._store = store
        self._delay_after = delay_after
        self._delay_ms = delay_ms
        self._window_seconds = window_seconds
        self._key_prefix = key_prefix

    def delay_for(self, count: int) -> float:
        """Atraso em segundos para o n-ésimo request da janela."""
        if count <= self._delay_after or self._delay_ms <= 0:
            return 0.0
        return self._delay_ms / 1000

    async def hit(self, client_key: str) -> float:
        """Conta um request do cliente e retorna o atraso a aplicar (s)."""
        window = await self._store.increment(
            f"{self._key_prefix}:{client_key}", self._window_seconds
        )
        return self.delay_for(window.count)
