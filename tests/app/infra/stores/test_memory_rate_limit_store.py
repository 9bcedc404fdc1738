"""Testes do MemoryRateLimitStore."""

from __future__ import annotations

import pytest

from app.infra.stores import MemoryRateLimitStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_increment_counts_within_window() -> None:
    clock = FakeClock()
    store = MemoryRateLimitStore(clock=clock)

    first = await store.increment("k", 60)
    clock.now = 10
    second = await store.increment("k", 60)

    assert first.count == 1
    assert first.reset_after_seconds == 60
    assert second.count == 2
    assert second.reset_after_seconds == 50


@pytest.mark.asyncio
async def test_expired_windows_are_cleaned_up() -> None:
    clock = FakeClock()
    store = MemoryRateLimitStore(clock=clock)
    await store.increment("a", 10)
    await store.increment("b", 100)

    clock.now = 10
    hit = await store.increment("b", 100)

    assert len(store) == 1
    assert hit.count == 2


@pytest.mark.asyncio
async def test_reset_removes_key() -> None:
    store = MemoryRateLimitStore()
    await store.increment("k", 60)

    await store.reset("k")
    await store.reset("missing")

    assert len(store) == 0
