"""Process-wide store of named resolvers.

The registry is an ordinary object owned by the composing application
(normally through a Cascade instance). Registration and lookup are guarded
by a lock so it may be shared between threads.

Defining a resolver under a name that is already registered replaces the
previous resolver.
"""

import threading

import Levenshtein

from cascade.exceptions import NoResolversRegisteredError, ResolverNotFoundError
from cascade.observability.logging import get_logger
from cascade.resolver import Resolver

logger = get_logger(__name__)

DEFAULT_SUGGESTION_LIMIT = 3
DEFAULT_SUGGESTION_CUTOFF = 0.6


class ResolverRegistry:
    """Maps resolver names to Resolver instances."""

    def __init__(
        self,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
        suggestion_cutoff: float = DEFAULT_SUGGESTION_CUTOFF,
    ) -> None:
        """Initialize an empty registry.

        Args:
            suggestion_limit: Maximum names offered when a lookup misses
            suggestion_cutoff: Minimum similarity ratio (0-1) for a suggestion
        """
        self._resolvers: dict[str, Resolver] = {}
        self._lock = threading.RLock()
        self._suggestion_limit = suggestion_limit
        self._suggestion_cutoff = suggestion_cutoff

    def define(self, name: str) -> Resolver:
        """Create, register and return an empty resolver."""
        return self.register(Resolver(name))

    def register(self, resolver: Resolver) -> Resolver:
        with self._lock:
            replaced = resolver.name in self._resolvers
            self._resolvers[resolver.name] = resolver

        if replaced:
            logger.warning("resolver_replaced", resolver=resolver.name)
        else:
            logger.debug("resolver_defined", resolver=resolver.name)
        return resolver

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._resolvers

    def get(self, name: str) -> Resolver:
        """Look up a resolver.

        Raises:
            NoResolversRegisteredError: If nothing is registered
            ResolverNotFoundError: If name is unknown, with close names attached
        """
        with self._lock:
            resolver = self._resolvers.get(name)
            available = sorted(self._resolvers)

        if resolver is not None:
            return resolver
        if not available:
            raise NoResolversRegisteredError(name)
        raise ResolverNotFoundError(
            name,
            available=available,
            suggestions=self.suggestions(name, available),
        )

    def remove(self, name: str) -> bool:
        with self._lock:
            removed = self._resolvers.pop(name, None) is not None
        if removed:
            logger.debug("resolver_removed", resolver=name)
        return removed

    def names(self) -> list[str]:
        with self._lock:
            return list(self._resolvers)

    def suggestions(self, name: str, candidates: list[str] | None = None) -> list[str]:
        """Registered names closest to name, best match first."""
        if candidates is None:
            candidates = self.names()

        scored = []
        for candidate in candidates:
            score = Levenshtein.ratio(name.lower(), candidate.lower())
            if score >= self._suggestion_cutoff:
                scored.append((score, candidate))

        scored.sort(key=lambda item: (-item[0], item[1]))
        return [candidate for _, candidate in scored[: self._suggestion_limit]]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._resolvers)
