"""Source defined by plain functions."""

from collections.abc import Callable
from typing import Any

from cascade.sources.base import Context, Source, SupportsFn, ValueResolverFn


class CallbackSource(Source):
    """Delegates lookups to a resolver function.

    The optional support predicate defaults to always-true. The optional
    transformer only runs when the resolver returns a value.
    """

    def __init__(
        self,
        name: str,
        resolver: ValueResolverFn,
        supports: SupportsFn | None = None,
        transformer: Callable[[Any], Any] | None = None,
    ) -> None:
        super().__init__(name)
        self._resolver = resolver
        self._supports = supports
        self._transformer = transformer

    def supports(self, key: str, context: Context) -> bool:
        if self._supports is None:
            return True
        return bool(self._supports(key, context))

    def get(self, key: str, context: Context) -> Any:
        value = self._resolver(key, context)
        if value is not None and self._transformer is not None:
            return self._transformer(value)
        return value

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            **super().metadata,
            "type": "callback",
            "has_supports": self._supports is not None,
            "has_transformer": self._transformer is not None,
        }


def context_lookup(name: str) -> CallbackSource:
    """Source named `name` that answers a key from the context itself."""
    return CallbackSource(name=name, resolver=lambda key, context: context.get(key))
