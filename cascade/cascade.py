"""Cascade facade: named resolvers, fluent conductors and resolution events.

Usage:
    cascade = Cascade()
    cascade.define_resolver("config") \\
        .from_mapping("tenant", tenant_values, priority=0) \\
        .from_mapping("defaults", default_values, priority=10)

    sender = cascade.using("config").for_(tenant).get("mail.sender")

A Cascade owns its registry; applications typically build one at startup
and pass it to the components that resolve values.
"""

from typing import TYPE_CHECKING

from cascade.cache.base import Cache
from cascade.conductors.resolution import ResolutionConductor
from cascade.conductors.source import SourceConductor, SourceSpec
from cascade.definitions.builder import build_resolver
from cascade.definitions.repository import DefinitionRepository
from cascade.events import (
    EventDispatcher,
    ResolutionFailedListener,
    SourceQueriedListener,
    ValueResolvedListener,
)
from cascade.observability.logging import get_logger, setup_logging
from cascade.registry import ResolverRegistry
from cascade.resolver import Resolver
from cascade.result import Result
from cascade.sources.base import Context
from cascade.sources.cached import DEFAULT_TTL_SECONDS

if TYPE_CHECKING:
    from cascade.config.settings import Settings

logger = get_logger(__name__)

DEFAULT_FALLBACK_PRIORITY_STEP = 10


class Cascade:
    """Entry point owning a resolver registry and an event dispatcher."""

    def __init__(
        self,
        registry: ResolverRegistry | None = None,
        events: EventDispatcher | None = None,
        cache: Cache | None = None,
        fallback_priority_step: int = DEFAULT_FALLBACK_PRIORITY_STEP,
        default_ttl: int | None = DEFAULT_TTL_SECONDS,
    ) -> None:
        """Initialize the facade.

        Args:
            registry: Registry to use (a new one by default)
            events: Event dispatcher to use (a new one by default)
            cache: Cache handed to definition-built cached sources
            fallback_priority_step: Priority gap used by fallback_to()
            default_ttl: TTL for cached sources that do not set one, None for no expiry
        """
        self._registry = registry if registry is not None else ResolverRegistry()
        self._events = events if events is not None else EventDispatcher()
        self._cache = cache
        self._fallback_priority_step = fallback_priority_step
        self._default_ttl = default_ttl

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Cascade":
        """Build a Cascade wired from configuration.

        Also configures structlog from the logging fields of settings.
        """
        from cascade.cache.factory import create_cache

        setup_logging(
            level=settings.log_level,
            format=settings.log_format,
            redact_pii=settings.redact_pii,
        )

        resolution = settings.resolution
        return cls(
            registry=ResolverRegistry(
                suggestion_limit=resolution.suggestion_limit,
                suggestion_cutoff=resolution.suggestion_cutoff,
            ),
            cache=create_cache(settings.cache),
            fallback_priority_step=resolution.fallback_priority_step,
            default_ttl=settings.cache.ttl_seconds,
        )

    @property
    def registry(self) -> ResolverRegistry:
        return self._registry

    @property
    def events(self) -> EventDispatcher:
        return self._events

    @property
    def cache(self) -> Cache | None:
        return self._cache

    @property
    def fallback_priority_step(self) -> int:
        return self._fallback_priority_step

    @property
    def default_ttl(self) -> int | None:
        return self._default_ttl

    # =========================================================================
    # CHAINS AND RESOLVERS
    # =========================================================================

    def from_(self, source: SourceSpec, priority: int = 0) -> SourceConductor:
        """Start an anonymous chain."""
        return SourceConductor.from_(self, source, priority)

    def define_resolver(self, name: str) -> Resolver:
        """Register an empty resolver under name, replacing any existing one."""
        return self._registry.define(name)

    def has_resolver(self, name: str) -> bool:
        return self._registry.has(name)

    def get_resolver(self, name: str) -> Resolver:
        return self._registry.get(name)

    def using(self, name: str) -> ResolutionConductor:
        """Select a named resolver.

        Raises:
            ResolverNotFoundError: If name is not registered
        """
        self._registry.get(name)
        return ResolutionConductor(self, name)

    def resolve_using(self, name: str, key: str, context: Context | None = None) -> Result:
        return self._registry.get(name).resolve(key, context, events=self._events)

    def load_definitions(self, repository: DefinitionRepository) -> list[str]:
        """Build and register a resolver for every definition in repository."""
        names = []
        for name, definition in repository.all().items():
            self._registry.register(build_resolver(
                name, definition, cache=self._cache, default_ttl=self._default_ttl
            ))
            names.append(name)

        logger.info("resolver_definitions_registered", resolver_count=len(names))
        return names

    # =========================================================================
    # EVENTS
    # =========================================================================

    def on_source_queried(self, listener: SourceQueriedListener) -> "Cascade":
        self._events.on_source_queried(listener)
        return self

    def on_resolved(self, listener: ValueResolvedListener) -> "Cascade":
        self._events.on_resolved(listener)
        return self

    def on_failed(self, listener: ResolutionFailedListener) -> "Cascade":
        self._events.on_failed(listener)
        return self

    def __repr__(self) -> str:
        return f"Cascade(resolvers={self._registry.names()!r})"
