"""Cache backends used by cached sources and definition repositories."""

from cascade.cache.base import Cache
from cascade.cache.factory import create_cache
from cascade.cache.inmemory import InMemoryCache

__all__ = ["Cache", "InMemoryCache", "create_cache"]
