"""Composite source grouping a sub-chain under one name."""

from collections.abc import Sequence
from typing import Any

from cascade.sources.base import Context, Source


class ChainedSource(Source):
    """Queries child sources in order and returns the first value.

    Children that do not support a key are skipped without calling get().
    """

    def __init__(self, name: str, sources: Sequence[Source]) -> None:
        super().__init__(name)
        self._sources = tuple(sources)

    @property
    def sources(self) -> tuple[Source, ...]:
        return self._sources

    def supports(self, key: str, context: Context) -> bool:
        return any(source.supports(key, context) for source in self._sources)

    def get(self, key: str, context: Context) -> Any:
        for source in self._sources:
            if not source.supports(key, context):
                continue
            value = source.get(key, context)
            if value is not None:
                return value
        return None

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            **super().metadata,
            "type": "chained",
            "source_count": len(self._sources),
            "sources": [source.name for source in self._sources],
        }
