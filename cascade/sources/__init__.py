"""Value sources consulted during resolution."""

from cascade.sources.base import Context, Source
from cascade.sources.cached import CachedSource
from cascade.sources.callback import CallbackSource, context_lookup
from cascade.sources.chained import ChainedSource
from cascade.sources.null import NullSource
from cascade.sources.static import StaticMapSource

__all__ = [
    "CachedSource",
    "CallbackSource",
    "ChainedSource",
    "Context",
    "NullSource",
    "Source",
    "StaticMapSource",
    "context_lookup",
]
