"""Cache backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

CacheBackendType = Literal["inmemory", "redis"]


class CacheConfig(BaseModel):
    """Configuration for the cache handed to cached sources."""

    backend: CacheBackendType = Field(
        default="inmemory",
        description="Cache backend type",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (from env var)",
    )
    ttl_seconds: int | None = Field(
        default=300,
        gt=0,
        description="Default TTL for cached values, None for no expiry",
    )
    key_prefix: str = Field(
        default="cascade",
        min_length=1,
        description="Prefix for cache keys",
    )
