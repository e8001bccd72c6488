"""Redis implementation of Cache.

Values are stored JSON-encoded so cached configuration survives process
restarts and can be shared between workers.
"""

import json
from typing import Any

import redis

from cascade.cache.base import Cache
from cascade.observability.logging import get_logger

logger = get_logger(__name__)


class RedisCache(Cache):
    """Cache backed by a synchronous redis client.

    Keys are namespaced with key_prefix; clear() only removes keys under
    that prefix.
    """

    def __init__(self, client: redis.Redis, key_prefix: str = "cascade") -> None:
        """Initialize Redis cache.

        Args:
            client: Redis client instance
            key_prefix: Prefix applied to every key
        """
        self._redis = client
        self._prefix = key_prefix

    def _make_key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str) -> Any:
        data = self._redis.get(self._make_key(key))
        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode()
        return json.loads(data)

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        if ttl is not None and ttl <= 0:
            # Expires immediately; SETEX rejects non-positive TTLs
            self._redis.delete(self._make_key(key))
            return True

        data = json.dumps(value, default=str)
        if ttl is None:
            return bool(self._redis.set(self._make_key(key), data))
        return bool(self._redis.setex(self._make_key(key), ttl, data))

    def has(self, key: str) -> bool:
        return bool(self._redis.exists(self._make_key(key)))

    def delete(self, key: str) -> bool:
        return bool(self._redis.delete(self._make_key(key)))

    def clear(self) -> bool:
        keys = list(self._redis.scan_iter(match=f"{self._prefix}:*"))
        if keys:
            self._redis.delete(*keys)
        logger.debug("redis_cache_cleared", prefix=self._prefix, key_count=len(keys))
        return True
