"""Source decorator that caches the values of an inner source.

Only present values are cached. A miss from the inner source is returned
as-is and retried on the next call, so transient failures never become
permanent cached misses.
"""

import hashlib
import json
from collections.abc import Callable
from typing import Any

from cascade.cache.base import Cache
from cascade.observability.logging import get_logger
from cascade.observability.metrics import SOURCE_CACHE_HITS, SOURCE_CACHE_MISSES
from cascade.sources.base import Context, Source

logger = get_logger(__name__)

KeyGenerator = Callable[[str, Context], str]

DEFAULT_TTL_SECONDS = 300


def default_cache_key(namespace: str, key: str, context: Context) -> str:
    """Combine namespace, key and a digest of the serialized context."""
    serialized = json.dumps(dict(context), sort_keys=True, default=str)
    digest = hashlib.md5(f"{key}\x00{serialized}".encode()).hexdigest()
    return f"{namespace}:{key}:{digest}"


class CachedSource(Source):
    """Wraps an inner source with a read-through cache.

    supports() delegates to the inner source unchanged.
    """

    def __init__(
        self,
        name: str,
        inner: Source,
        cache: Cache,
        ttl: int | None = DEFAULT_TTL_SECONDS,
        key_generator: KeyGenerator | None = None,
        namespace: str = "cascade",
    ) -> None:
        """Initialize cached source.

        Args:
            name: Source name
            inner: Source whose values are cached
            cache: Cache handle shared with the application
            ttl: Seconds to keep a value, None for no expiry
            key_generator: Optional (key, context) -> cache key function
            namespace: Prefix for generated cache keys
        """
        super().__init__(name)
        self._inner = inner
        self._cache = cache
        self._ttl = ttl
        self._key_generator = key_generator
        self._namespace = namespace

    @property
    def inner(self) -> Source:
        return self._inner

    def cache_key(self, key: str, context: Context) -> str:
        if self._key_generator is not None:
            return self._key_generator(key, context)
        return default_cache_key(self._namespace, key, context)

    def supports(self, key: str, context: Context) -> bool:
        return self._inner.supports(key, context)

    def get(self, key: str, context: Context) -> Any:
        cache_key = self.cache_key(key, context)

        cached = self._cache.get(cache_key)
        if cached is not None:
            SOURCE_CACHE_HITS.labels(source=self.name).inc()
            logger.debug("source_cache_hit", source=self.name, cache_key=cache_key)
            return cached

        SOURCE_CACHE_MISSES.labels(source=self.name).inc()
        logger.debug("source_cache_miss", source=self.name, cache_key=cache_key)

        value = self._inner.get(key, context)
        if value is not None:
            self._cache.set(cache_key, value, self._ttl)
            logger.debug(
                "source_cache_store",
                source=self.name,
                cache_key=cache_key,
                ttl=self._ttl,
            )
        return value

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            **super().metadata,
            "type": "cache",
            "ttl": self._ttl,
            "inner": self._inner.name,
            "has_key_generator": self._key_generator is not None,
        }
