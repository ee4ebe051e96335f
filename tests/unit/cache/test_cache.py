"""Unit tests for MemoryCache and NullCache."""

from __future__ import annotations

import pytest

from mustache_resolver.cache import Cache, MemoryCache, NullCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class TestMemoryCache:
    """Tests for MemoryCache."""

    def test_set_and_get(self) -> None:
        cache = MemoryCache()
        cache.set("a", [1, 2])

        assert cache.get("a") == [1, 2]
        assert cache.has("a")
        assert cache.get("missing", "default") == "default"

    def test_entries_expire(self, clock: FakeClock) -> None:
        cache = MemoryCache(clock=clock)
        cache.set("a", 1, ttl=10)

        clock.now += 9
        assert cache.get("a") == 1
        clock.now += 1
        assert cache.get("a") is None
        assert len(cache) == 0

    def test_default_ttl(self, clock: FakeClock) -> None:
        cache = MemoryCache(default_ttl=5, clock=clock)
        cache.set("a", 1)

        clock.now += 5
        assert not cache.has("a")

    def test_no_ttl_never_expires(self, clock: FakeClock) -> None:
        cache = MemoryCache(clock=clock)
        cache.set("a", 1)

        clock.now += 10**9
        assert cache.has("a")

    def test_forget_and_flush(self) -> None:
        cache = MemoryCache()
        cache.set("a", 1)
        cache.set("b", 2)

        cache.forget("a")
        assert not cache.has("a")
        cache.flush()
        assert len(cache) == 0


class TestNullCache:
    def test_stores_nothing(self) -> None:
        cache = NullCache()
        cache.set("a", 1)

        assert cache.get("a") is None
        assert not cache.has("a")


@pytest.mark.parametrize("cache", [MemoryCache(), NullCache()])
def test_satisfies_protocol(cache: Cache) -> None:
    assert isinstance(cache, Cache)
