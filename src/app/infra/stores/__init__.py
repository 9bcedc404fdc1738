"""Stores — implementações concretas dos contadores de rate limit.

Módulos disponíveis:
    - memory_stores: contadores em memória para desenvolvimento/testes
    - redis_rate_limit_store: contadores compartilhados em Redis
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryRateLimitStore
from app.infra.stores.redis_rate_limit_store import RedisRateLimitStore

__all__ = [
    "MemoryRateLimitStore",
    "RedisRateLimitStore",
]
