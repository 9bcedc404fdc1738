"""Rate limit de janela fixa por cliente.

Cada request que chega ao limiter conta, aceito ou não. Acima de
`max_requests` na janela, o request é rejeitado até a janela reiniciar.
Headers seguem o draft IETF RateLimit (sem X-RateLimit-* legados).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.rate_limit_store import RateLimitStoreProtocol


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    """Resultado de uma checagem de rate limit."""

    allowed: bool
    limit: int
    remaining: int
    reset_after_seconds: int
    window_seconds: int

    def headers(self) -> dict[str, str]:
        """Headers RateLimit-* para anexar à resposta."""
        headers = {
            "RateLimit-Policy": f"{self.limit};w={self.window_seconds}",
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(self.reset_after_seconds),
        }
        if not self.allowed:
            headers["Retry-After"] = str(self.reset_after_seconds)
        return headers


class FixedWindowRateLimiter:
    """Limiter de janela fixa sobre um RateLimitStoreProtocol.

    Args:
        store: Backend dos contadores (memória ou Redis).
        max_requests: Requests aceitos por chave na janela.
        window_seconds: Duração da janela.
        key_prefix: Namespace das chaves no store.
    """

    def __init__(
        self,
        store: RateLimitStoreProtocol,
        *,
        max_requests: int,
        window_seconds: int,
        key_prefix: str = "rl",
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests deve ser >= 1")
        if window_seconds < 1:
            raise ValueError("window_seconds deve ser >= 1")
        self._store = store
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._key_prefix = key_prefix

    @property
    def max_requests(self) -> int:
        return self._max_requests

    async def hit(self, client_key: str) -> RateLimitDecision:
        """Conta um request do cliente e decide se ele passa."""
        window = await self._store.increment(
            f"{self._key_prefix}:{client_key}", self._window_seconds
        )
        return RateLimitDecision(
            allowed=window.count <= self._max_requests,
            limit=self._max_requests,
            remaining=max(self._max_requests - window.count, 0),
            reset_after_seconds=math.ceil(window.reset_after_seconds),
            window_seconds=self._window_seconds,
        )

    async def reset(self, client_key: str) -> None:
        """Zera a contagem do cliente."""
        await self._store.reset(f"{self._key_prefix}:{client_key}")
