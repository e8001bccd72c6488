"""Repository decorator caching definitions by resolver name."""

from collections.abc import Iterable

from cascade.cache.base import Cache
from cascade.definitions.repository import Definition, DefinitionRepository
from cascade.observability.logging import get_logger

logger = get_logger(__name__)


class CachedDefinitionRepository(DefinitionRepository):
    """Read-through cache in front of another repository.

    all() is never cached; it is normally called once at startup.
    """

    def __init__(
        self,
        inner: DefinitionRepository,
        cache: Cache,
        ttl: int | None = None,
        prefix: str = "cascade:resolvers:",
    ) -> None:
        self._inner = inner
        self._cache = cache
        self._ttl = ttl
        self._prefix = prefix

    def _cache_key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    def get(self, name: str) -> Definition:
        cached = self._cache.get(self._cache_key(name))
        if isinstance(cached, dict):
            return cached

        definition = self._inner.get(name)
        self._cache.set(self._cache_key(name), definition, self._ttl)
        return definition

    def has(self, name: str) -> bool:
        if self._cache.has(self._cache_key(name)):
            return True
        return self._inner.has(name)

    def all(self) -> dict[str, Definition]:
        return self._inner.all()

    def get_many(self, names: Iterable[str]) -> dict[str, Definition]:
        result: dict[str, Definition] = {}
        uncached: list[str] = []

        for name in names:
            cached = self._cache.get(self._cache_key(name))
            if isinstance(cached, dict):
                result[name] = cached
            else:
                uncached.append(name)

        if uncached:
            for name, definition in self._inner.get_many(uncached).items():
                self._cache.set(self._cache_key(name), definition, self._ttl)
                result[name] = definition

        return result

    def forget(self, name: str) -> bool:
        """Drop one cached definition."""
        return self._cache.delete(self._cache_key(name))

    def flush(self) -> bool:
        """Clear the cache.

        The Cache contract has no prefix delete, so this clears the whole
        cache; give definitions a dedicated cache instance.
        """
        logger.info("definition_cache_flushed", prefix=self._prefix)
        return self._cache.clear()
