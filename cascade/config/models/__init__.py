"""Configuration section models."""

from cascade.config.models.cache import CacheConfig
from cascade.config.models.resolution import ResolutionConfig

__all__ = ["CacheConfig", "ResolutionConfig"]
