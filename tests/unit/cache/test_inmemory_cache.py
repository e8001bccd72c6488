"""Tests for InMemoryCache."""

from types import SimpleNamespace

import pytest

from cascade.cache import InMemoryCache, inmemory


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Controllable monotonic clock; mutate clock[0] to advance time."""
    now = [1000.0]
    monkeypatch.setattr(inmemory, "time", SimpleNamespace(monotonic=lambda: now[0]))
    return now


class TestInMemoryCache:
    """Tests for basic cache operations."""

    def test_get_missing_returns_none(self, cache: InMemoryCache) -> None:
        assert cache.get("missing") is None
        assert cache.has("missing") is False

    def test_set_and_get(self, cache: InMemoryCache) -> None:
        assert cache.set("k", {"a": 1}) is True
        assert cache.get("k") == {"a": 1}
        assert cache.has("k") is True

    def test_delete(self, cache: InMemoryCache) -> None:
        cache.set("k", 1)
        assert cache.delete("k") is True
        assert cache.delete("k") is False
        assert cache.get("k") is None

    def test_clear(self, cache: InMemoryCache) -> None:
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0


class TestExpiry:
    """Tests for TTL handling."""

    def test_entry_expires_after_ttl(self, cache: InMemoryCache, clock: list[float]) -> None:
        cache.set("k", "v", ttl=10)

        clock[0] += 9
        assert cache.get("k") == "v"

        clock[0] += 1
        assert cache.get("k") is None
        assert len(cache) == 0

    def test_zero_ttl_expires_immediately(self, cache: InMemoryCache, clock: list[float]) -> None:
        cache.set("k", "v", ttl=0)
        assert cache.get("k") is None

    def test_no_ttl_never_expires(self, cache: InMemoryCache, clock: list[float]) -> None:
        cache.set("k", "v")
        clock[0] += 10**9
        assert cache.has("k") is True
