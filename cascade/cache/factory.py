"""Cache factory for creating backend instances.

The redis connection string comes from the configuration or, when unset,
from the CASCADE_REDIS_URL / REDIS_URL environment variables.
"""

import os

from cascade.cache.base import Cache
from cascade.cache.inmemory import InMemoryCache
from cascade.config.models.cache import CacheConfig
from cascade.exceptions import ConfigurationError
from cascade.observability.logging import get_logger

logger = get_logger(__name__)


def create_cache(config: CacheConfig) -> Cache:
    """Create a Cache instance based on configuration.

    Raises:
        ConfigurationError: If the backend type is not supported
    """
    backend = config.backend

    if backend == "inmemory":
        logger.info("creating_cache", backend="inmemory")
        return InMemoryCache()

    elif backend == "redis":
        import redis

        from cascade.cache.redis import RedisCache

        url = (
            config.redis_url
            or os.environ.get("CASCADE_REDIS_URL")
            or os.environ.get("REDIS_URL", "redis://localhost:6379/0")
        )
        logger.info(
            "creating_cache",
            backend="redis",
            redis_url=url,
            prefix=config.key_prefix,
        )
        return RedisCache(redis.Redis.from_url(url), key_prefix=config.key_prefix)

    raise ConfigurationError(f"Unsupported cache backend: {backend}")
