"""Fluent builder for one-off resolution chains.

    value = (
        cascade.from_({"timeout": 30})
        .fallback_to(database_source)
        .transform(lambda value, source: int(value))
        .get("timeout")
    )

A chain resolves on its own without being registered. as_() additionally
registers a snapshot of the chain as a named resolver.
"""

import hashlib
import json
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from cascade.cache.base import Cache
from cascade.engine import PrioritizedSource, Transformer, check_priority, value_or_default
from cascade.exceptions import ResolutionFailedError
from cascade.resolver import Resolver
from cascade.result import Result
from cascade.sources.base import Context, Source
from cascade.sources.cached import CachedSource, KeyGenerator
from cascade.sources.callback import context_lookup
from cascade.sources.static import StaticMapSource

if TYPE_CHECKING:
    from cascade.cascade import Cascade

SourceSpec = Source | Mapping[str, Any] | str

ANONYMOUS_NAME = "anonymous"

# Marks "use the cascade default" where None already means no expiry
_CASCADE_DEFAULT: Any = object()


def normalize_source(source: SourceSpec) -> Source:
    """Accept a Source, a mapping of values, or the name of a context lookup."""
    if isinstance(source, Source):
        return source
    if isinstance(source, Mapping):
        canonical = json.dumps(dict(source), sort_keys=True, default=str)
        digest = hashlib.md5(canonical.encode()).hexdigest()
        return StaticMapSource(name=f"static-{digest}", values=source)
    return context_lookup(source)


class SourceConductor:
    """Mutable builder accumulating sources, priorities and transformers."""

    def __init__(self, cascade: "Cascade") -> None:
        self._cascade = cascade
        # Insertion order; the resolver sorts by priority
        self._entries: list[PrioritizedSource] = []
        self._transformers: list[Transformer] = []
        self._name: str | None = None
        self._resolver: Resolver | None = None

    @classmethod
    def from_(cls, cascade: "Cascade", source: SourceSpec, priority: int = 0) -> "SourceConductor":
        return cls(cascade).add_source(source, priority)

    @property
    def name(self) -> str:
        return self._name or ANONYMOUS_NAME

    @property
    def sources(self) -> list[Source]:
        """Sources in query order."""
        return self._build().sources

    def add_source(self, source: SourceSpec, priority: int = 0) -> "SourceConductor":
        self._entries.append(
            PrioritizedSource(source=normalize_source(source), priority=check_priority(priority))
        )
        self._resolver = None
        return self

    def fallback_to(self, source: SourceSpec, priority: int | None = None) -> "SourceConductor":
        """Add a source queried after everything added so far.

        Without an explicit priority the source is placed one fallback step
        above the highest priority in the chain.
        """
        if priority is None:
            highest = max((entry.priority for entry in self._entries), default=0)
            priority = highest + self._cascade.fallback_priority_step
        return self.add_source(source, priority)

    def cache(
        self,
        cache: Cache,
        ttl: Any = _CASCADE_DEFAULT,
        key_generator: KeyGenerator | None = None,
    ) -> "SourceConductor":
        """Wrap the most recently added source in a CachedSource.

        Without a ttl the owning Cascade's default_ttl applies; pass None
        for no expiry.
        """
        if not self._entries:
            return self
        if ttl is _CASCADE_DEFAULT:
            ttl = self._cascade.default_ttl

        last = self._entries[-1]
        self._entries[-1] = PrioritizedSource(
            source=CachedSource(
                name=f"{last.source.name}-cached",
                inner=last.source,
                cache=cache,
                ttl=ttl,
                key_generator=key_generator,
            ),
            priority=last.priority,
        )
        self._resolver = None
        return self

    def transform(self, transformer: Transformer) -> "SourceConductor":
        self._transformers.append(transformer)
        self._resolver = None
        return self

    def as_(self, name: str) -> "SourceConductor":
        """Register the chain as built so far under name."""
        self._name = name
        self._resolver = None
        self._cascade.registry.register(self._build().copy())
        return self

    def resolve(self, key: str, context: Context | None = None) -> Result:
        return self._build().resolve(key, context, events=self._cascade.events)

    def get(
        self,
        key: str,
        context: Context | None = None,
        default: Any | Callable[[], Any] = None,
    ) -> Any:
        return value_or_default(self.resolve(key, context), default)

    def get_or_fail(self, key: str, context: Context | None = None) -> Any:
        result = self.resolve(key, context)
        if not result.found:
            raise ResolutionFailedError(key, result.attempted_sources)
        return result.value

    def get_many(self, keys: Iterable[str], context: Context | None = None) -> dict[str, Result]:
        return {key: self.resolve(key, context) for key in keys}

    def _build(self) -> Resolver:
        if self._resolver is None:
            resolver = Resolver(self.name)
            for entry in self._entries:
                resolver.add_source(entry.source, entry.priority)
            for transformer in self._transformers:
                resolver.transform(transformer)
            self._resolver = resolver
        return self._resolver
