"""Testes do rate limit de janela fixa."""

from __future__ import annotations

import pytest

from app.infra.stores import MemoryRateLimitStore
from app.policies import FixedWindowRateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _limiter(clock: FakeClock, max_requests: int = 3, window_seconds: int = 900) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(
        MemoryRateLimitStore(clock=clock),
        max_requests=max_requests,
        window_seconds=window_seconds,
    )


@pytest.mark.asyncio
async def test_allows_up_to_max_then_rejects() -> None:
    limiter = _limiter(FakeClock())

    decisions = [await limiter.hit("10.0.0.1") for _ in range(4)]

    assert [d.allowed for d in decisions] == [True, True, True, False]
    assert [d.remaining for d in decisions] == [2, 1, 0, 0]


@pytest.mark.asyncio
async def test_clients_are_counted_separately() -> None:
    limiter = _limiter(FakeClock(), max_requests=1)

    assert (await limiter.hit("10.0.0.1")).allowed
    assert not (await limiter.hit("10.0.0.1")).allowed
    assert (await limiter.hit("10.0.0.2")).allowed


@pytest.mark.asyncio
async def test_window_expiry_resets_count() -> None:
    clock = FakeClock()
    limiter = _limiter(clock, max_requests=1, window_seconds=60)

    assert (await limiter.hit("ip")).allowed
    clock.now += 30
    blocked = await limiter.hit("ip")
    assert not blocked.allowed
    assert blocked.reset_after_seconds == 30

    clock.now += 30
    assert (await limiter.hit("ip")).allowed


@pytest.mark.asyncio
async def test_headers_follow_ratelimit_draft() -> None:
    limiter = _limiter(FakeClock(), max_requests=1, window_seconds=900)

    allowed = (await limiter.hit("ip")).headers()
    blocked = (await limiter.hit("ip")).headers()

    assert allowed == {
        "RateLimit-Policy": "1;w=900",
        "RateLimit-Limit": "1",
        "RateLimit-Remaining": "0",
        "RateLimit-Reset": "900",
    }
    assert blocked["Retry-After"] == "900"
    assert not any(name.startswith("X-RateLimit") for name in blocked)


@pytest.mark.asyncio
async def test_reset_clears_client_count() -> None:
    limiter = _limiter(FakeClock(), max_requests=1)
    await limiter.hit("ip")

    await limiter.reset("ip")

    assert (await limiter.hit("ip")).allowed


def test_invalid_configuration_rejected() -> None:
    with pytest.raises(ValueError, match="max_requests"):
        FixedWindowRateLimiter(MemoryRateLimitStore(), max_requests=0, window_seconds=10)
    with pytest.raises(ValueError, match="window_seconds"):
        FixedWindowRateLimiter(MemoryRateLimitStore(), max_requests=1, window_seconds=0)
