"""Named resolver: an ordered source chain with transformers and default context."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from cascade.engine import (
    PrioritizedSource,
    Transformer,
    check_priority,
    resolve_chain,
    sort_sources,
    value_or_default,
)
from cascade.events import EventDispatcher
from cascade.exceptions import ResolutionFailedError
from cascade.result import Result
from cascade.sources.base import Context, Source, SupportsFn, ValueResolverFn
from cascade.sources.callback import CallbackSource
from cascade.sources.static import StaticMapSource


class Resolver:
    """A reusable resolution chain addressable by name.

    Sources are kept sorted by priority and re-sorted on every addition.
    Resolution never mutates the chain, so a resolver may be read from
    several threads while another thread adds sources.
    """

    def __init__(self, name: str, context: Mapping[str, Any] | None = None) -> None:
        self._name = name
        self._entries: tuple[PrioritizedSource, ...] = ()
        self._transformers: tuple[Transformer, ...] = ()
        self._context: dict[str, Any] = dict(context or {})

    @property
    def name(self) -> str:
        return self._name

    @property
    def entries(self) -> tuple[PrioritizedSource, ...]:
        return self._entries

    @property
    def sources(self) -> list[Source]:
        """Sources in query order."""
        return [entry.source for entry in self._entries]

    @property
    def transformers(self) -> tuple[Transformer, ...]:
        return self._transformers

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    # =========================================================================
    # BUILDER METHODS
    # =========================================================================

    def add_source(self, source: Source, priority: int = 0) -> "Resolver":
        """Add a source. Lower priorities are queried first."""
        entry = PrioritizedSource(source=source, priority=check_priority(priority))
        self._entries = sort_sources([*self._entries, entry])
        return self

    def from_callback(
        self,
        name: str,
        resolver: ValueResolverFn,
        supports: SupportsFn | None = None,
        priority: int = 0,
    ) -> "Resolver":
        return self.add_source(
            CallbackSource(name=name, resolver=resolver, supports=supports),
            priority=priority,
        )

    def from_mapping(
        self,
        name: str,
        values: Mapping[str, Any],
        priority: int = 0,
    ) -> "Resolver":
        return self.add_source(StaticMapSource(name=name, values=values), priority=priority)

    def transform(self, transformer: Transformer) -> "Resolver":
        """Append a transformer applied to every found value."""
        self._transformers = (*self._transformers, transformer)
        return self

    def with_context(self, context: Mapping[str, Any]) -> "Resolver":
        """Merge entries into the default context passed to sources."""
        self._context = {**self._context, **context}
        return self

    def copy(self, name: str | None = None) -> "Resolver":
        """Independent resolver with the same chain, optionally renamed."""
        clone = Resolver(name or self._name, self._context)
        clone._entries = self._entries
        clone._transformers = self._transformers
        return clone

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def resolve(
        self,
        key: str,
        context: Context | None = None,
        *,
        events: EventDispatcher | None = None,
        transformers: Iterable[Transformer] = (),
    ) -> Result:
        """Resolve key, returning the full Result.

        Args:
            key: Key to resolve
            context: Merged over the resolver's default context
            events: Dispatcher receiving resolution events
            transformers: Extra transformers run after the resolver's own
        """
        merged = {**self._context, **(context or {})}
        return resolve_chain(
            key,
            merged,
            self._entries,
            transformers=(*self._transformers, *transformers),
            events=events,
            resolver_name=self._name,
        )

    def get(
        self,
        key: str,
        context: Context | None = None,
        default: Any | Callable[[], Any] = None,
        *,
        events: EventDispatcher | None = None,
    ) -> Any:
        return value_or_default(self.resolve(key, context, events=events), default)

    def get_or_fail(
        self,
        key: str,
        context: Context | None = None,
        *,
        events: EventDispatcher | None = None,
    ) -> Any:
        result = self.resolve(key, context, events=events)
        if not result.found:
            raise ResolutionFailedError(key, result.attempted_sources)
        return result.value

    def get_many(
        self,
        keys: Iterable[str],
        context: Context | None = None,
        *,
        events: EventDispatcher | None = None,
    ) -> dict[str, Result]:
        return {key: self.resolve(key, context, events=events) for key in keys}

    def __repr__(self) -> str:
        return f"Resolver(name={self._name!r}, sources={[s.name for s in self.sources]!r})"
