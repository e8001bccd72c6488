"""Cascading value resolution.

Resolves a named value by querying an ordered set of sources until one
yields a non-None answer, then transforms it and reports what happened.
"""

from cascade.cascade import Cascade
from cascade.conductors import ResolutionConductor, SourceConductor
from cascade.context import HasCascadeContext, HasIdentity, derive_context
from cascade.events import (
    EventDispatcher,
    ResolutionFailed,
    SourceQueried,
    ValueResolved,
)
from cascade.exceptions import (
    CascadeError,
    NoResolversRegisteredError,
    ResolutionFailedError,
    ResolverNotFoundError,
)
from cascade.registry import ResolverRegistry
from cascade.resolver import Resolver
from cascade.result import Result
from cascade.sources import (
    CachedSource,
    CallbackSource,
    ChainedSource,
    NullSource,
    Source,
    StaticMapSource,
)

__all__ = [
    "CachedSource",
    "CallbackSource",
    "Cascade",
    "CascadeError",
    "ChainedSource",
    "EventDispatcher",
    "HasCascadeContext",
    "HasIdentity",
    "NoResolversRegisteredError",
    "NullSource",
    "ResolutionConductor",
    "ResolutionFailed",
    "ResolutionFailedError",
    "Resolver",
    "ResolverNotFoundError",
    "ResolverRegistry",
    "Result",
    "Source",
    "SourceConductor",
    "SourceQueried",
    "StaticMapSource",
    "ValueResolved",
    "derive_context",
]
