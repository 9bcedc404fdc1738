"""Redis Rate Limit Store — contadores de janela fixa compartilhados.

Usa INCR + PEXPIRE NX numa pipeline transacional: a primeira batida abre
a janela, as seguintes apenas incrementam. PTTL informa o tempo restante.

Contrato de Keys:
    Keys são prefixo + IP do cliente. Nunca logar a key completa.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import WindowHit
from app.protocols.rate_limit_store import RateLimitStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo para namespace de rate limit
RATE_LIMIT_PREFIX = "ratelimit:"


class RedisRateLimitStore(RateLimitStoreProtocol):
    """Store de rate limit usando Redis.

    Args:
        async_redis_client: Cliente Redis assíncrono
    """

    def __init__(self, async_redis_client: AsyncRedis[bytes]) -> None:
        self._redis = async_redis_client

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{RATE_LIMIT_PREFIX}{key}"

    async def increment(self, key: str, window_seconds: int) -> WindowHit:
        """Incrementa o contador e retorna o estado da janela.

        Raises:
            RedisConnectionError: Se o Redis falhar.
        """
        redis_key = self._key(key)
        window_ms = window_seconds * 1000
        try:
            pipeline = self._redis.pipeline(transaction=True)
            pipeline.incr(redis_key)
            pipeline.pexpire(redis_key, window_ms, nx=True)
            pipeline.pttl(redis_key)
            count, _, ttl_ms = await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao incrementar rate limit no Redis") from exc

        # PTTL < 0: chave sem expiração (não deveria ocorrer) ou já expirada
        if ttl_ms is None or ttl_ms < 0:
            ttl_ms = window_ms
        if int(count) == 1:
            logger.debug("rate_limit_window_opened", extra={"window_seconds": window_seconds})
        return WindowHit(count=int(count), reset_after_seconds=ttl_ms / 1000)

    async def reset(self, key: str) -> None:
        """Zera o contador da chave."""
        try:
            await self._redis.delete(self._key(key))
        except Exception as exc:
            raise RedisConnectionError("Falha ao remover rate limit no Redis") from exc
