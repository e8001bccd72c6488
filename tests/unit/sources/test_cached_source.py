"""Tests for CachedSource."""

from cascade.cache import InMemoryCache
from cascade.sources import CachedSource, NullSource
from cascade.sources.cached import default_cache_key
from tests.factories import ExplodingSource, RecordingSource


class TestCachedSourceHitMiss:
    """Tests for read-through caching."""

    def test_first_call_queries_inner_once(self, cache: InMemoryCache) -> None:
        inner = RecordingSource("db", {"theme": "dark"})
        source = CachedSource("db-cached", inner, cache)

        assert source.get("theme", {"tenant": 1}) == "dark"
        assert len(inner.calls) == 1

    def test_second_call_served_from_cache(self, cache: InMemoryCache) -> None:
        inner = RecordingSource("db", {"theme": "dark"})
        source = CachedSource("db-cached", inner, cache)

        source.get("theme", {"tenant": 1})
        assert source.get("theme", {"tenant": 1}) == "dark"
        assert len(inner.calls) == 1

    def test_absent_values_never_cached(self, cache: InMemoryCache) -> None:
        """Every miss re-queries the inner source."""
        inner = RecordingSource("db", {})
        source = CachedSource("db-cached", inner, cache)

        for _ in range(3):
            assert source.get("theme", {}) is None

        assert len(inner.calls) == 3
        assert len(cache) == 0

    def test_context_is_part_of_the_key(self, cache: InMemoryCache) -> None:
        inner = RecordingSource("db", {"theme": "dark"})
        source = CachedSource("db-cached", inner, cache)

        source.get("theme", {"tenant": 1})
        source.get("theme", {"tenant": 2})
        assert len(inner.calls) == 2

    def test_context_order_does_not_matter(self, cache: InMemoryCache) -> None:
        inner = RecordingSource("db", {"theme": "dark"})
        source = CachedSource("db-cached", inner, cache)

        source.get("theme", {"a": 1, "b": 2})
        source.get("theme", {"b": 2, "a": 1})
        assert len(inner.calls) == 1

    def test_value_stored_with_ttl(self) -> None:
        stored = []

        class SpyCache(InMemoryCache):
            def set(self, key, value, ttl=None):
                stored.append((key, value, ttl))
                return super().set(key, value, ttl)

        source = CachedSource("db-cached", RecordingSource("db", {"k": "v"}), SpyCache(), ttl=60)
        source.get("k", {})
        assert stored[0][1:] == ("v", 60)

    def test_no_expiry_ttl(self, cache: InMemoryCache) -> None:
        inner = RecordingSource("db", {"k": "v"})
        source = CachedSource("db-cached", inner, cache, ttl=None)
        source.get("k", {})
        source.get("k", {})
        assert len(inner.calls) == 1


class TestCachedSourceKeys:
    """Tests for cache key generation."""

    def test_custom_key_generator(self, cache: InMemoryCache) -> None:
        source = CachedSource(
            "db-cached",
            RecordingSource("db", {"theme": "dark"}),
            cache,
            key_generator=lambda key, context: f"custom:{context['tenant']}:{key}",
        )
        source.get("theme", {"tenant": 7})
        assert cache.get("custom:7:theme") == "dark"

    def test_default_key_is_deterministic(self) -> None:
        first = default_cache_key("cascade", "theme", {"tenant": 1, "region": "eu"})
        second = default_cache_key("cascade", "theme", {"region": "eu", "tenant": 1})
        assert first == second
        assert first.startswith("cascade:theme:")

    def test_default_key_varies_with_namespace(self) -> None:
        assert default_cache_key("a", "k", {}) != default_cache_key("b", "k", {})


class TestCachedSourceDelegation:
    """Tests for supports delegation and metadata."""

    def test_supports_delegates_to_inner(self, cache: InMemoryCache) -> None:
        assert CachedSource("x", ExplodingSource("inner"), cache).supports("k", {}) is False
        assert CachedSource("y", NullSource("inner"), cache).supports("k", {}) is True

    def test_metadata(self, cache: InMemoryCache) -> None:
        source = CachedSource("db-cached", NullSource("db"), cache, ttl=120)
        assert source.metadata == {
            "name": "db-cached",
            "type": "cache",
            "ttl": 120,
            "inner": "db",
            "has_key_generator": False,
        }
