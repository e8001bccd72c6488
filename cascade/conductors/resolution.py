"""Conductor resolving through a named resolver with bound context."""

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from cascade.context import derive_context
from cascade.engine import Transformer, value_or_default
from cascade.exceptions import ResolutionFailedError
from cascade.result import Result

if TYPE_CHECKING:
    from cascade.cascade import Cascade


class ResolutionConductor:
    """Immutable view over a named resolver.

    for_() and transform() return new conductors, so a base conductor can
    be shared and specialised per call site:

        tenant_config = cascade.using("config").for_(tenant)
        tenant_config.get("mail.sender", default="noreply@example.com")

    The resolver is looked up on every call, so re-registering the name is
    picked up immediately.
    """

    def __init__(
        self,
        cascade: "Cascade",
        resolver_name: str,
        context: Mapping[str, Any] | None = None,
        transformers: Iterable[Transformer] = (),
    ) -> None:
        self._cascade = cascade
        self._resolver_name = resolver_name
        self._context: dict[str, Any] = dict(context or {})
        self._transformers: tuple[Transformer, ...] = tuple(transformers)

    @property
    def resolver_name(self) -> str:
        return self._resolver_name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def for_(self, subject: object) -> "ResolutionConductor":
        """Bind context from a mapping or a subject object."""
        return ResolutionConductor(
            self._cascade,
            self._resolver_name,
            context={**self._context, **derive_context(subject)},
            transformers=self._transformers,
        )

    def transform(self, transformer: Transformer) -> "ResolutionConductor":
        return ResolutionConductor(
            self._cascade,
            self._resolver_name,
            context=self._context,
            transformers=(*self._transformers, transformer),
        )

    def resolve(self, key: str) -> Result:
        resolver = self._cascade.registry.get(self._resolver_name)
        return resolver.resolve(
            key,
            self._context,
            events=self._cascade.events,
            transformers=self._transformers,
        )

    def get(self, key: str, default: Any | Callable[[], Any] = None) -> Any:
        return value_or_default(self.resolve(key), default)

    def get_or_fail(self, key: str) -> Any:
        result = self.resolve(key)
        if not result.found:
            raise ResolutionFailedError(key, result.attempted_sources)
        return result.value

    def get_many(self, keys: Iterable[str]) -> dict[str, Result]:
        return {key: self.resolve(key) for key in keys}
