"""Priority ordering and the short-circuit resolution algorithm.

Sources are visited in ascending priority, ties in insertion order. The
first source that supports the key and returns a non-None value ends the
scan. Nothing raised by a source is caught here.
"""

import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from cascade.events import EventDispatcher, ResolutionFailed, SourceQueried, ValueResolved
from cascade.exceptions import InvalidSourcePriorityError
from cascade.observability.logging import get_logger
from cascade.observability.metrics import RESOLUTION_LATENCY, RESOLUTIONS, SOURCE_QUERIES
from cascade.result import Result
from cascade.sources.base import Source

logger = get_logger(__name__)

Transformer = Callable[[Any, Source], Any]


@dataclass(frozen=True)
class PrioritizedSource:
    """A source and its position in a chain. Lower priority is queried first."""

    source: Source
    priority: int = 0


def check_priority(priority: Any) -> int:
    """Return priority unchanged if it is a plain integer."""
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidSourcePriorityError(priority)
    return priority


def sort_sources(entries: Iterable[PrioritizedSource]) -> tuple[PrioritizedSource, ...]:
    # sorted() is stable, so equal priorities keep insertion order
    return tuple(sorted(entries, key=lambda entry: entry.priority))


def apply_transformers(value: Any, source: Source, transformers: Sequence[Transformer]) -> Any:
    for transformer in transformers:
        value = transformer(value, source)
    return value


def resolve_chain(
    key: str,
    context: Mapping[str, Any],
    entries: Sequence[PrioritizedSource],
    transformers: Sequence[Transformer] = (),
    events: EventDispatcher | None = None,
    resolver_name: str = "anonymous",
) -> Result:
    """Resolve key against already-sorted entries.

    Args:
        key: Key to resolve
        context: Context passed to every source
        entries: Sources sorted by priority
        transformers: Applied in order to a found value
        events: Dispatcher receiving resolution events
        resolver_name: Used for logging and metrics labels

    Returns:
        Result describing the first value found, or a miss
    """
    started = time.perf_counter()
    context = dict(context)
    attempted: list[str] = []

    for entry in entries:
        source = entry.source
        SOURCE_QUERIES.labels(source=source.name).inc()
        if events is not None:
            events.source_queried(
                SourceQueried(key=key, source_name=source.name, context=context)
            )

        if not source.supports(key, context):
            logger.debug("source_skipped", key=key, source=source.name, resolver=resolver_name)
            continue

        attempted.append(source.name)
        value = source.get(key, context)
        if value is None:
            continue

        value = apply_transformers(value, source, transformers)
        elapsed = time.perf_counter() - started
        RESOLUTIONS.labels(resolver=resolver_name, outcome="found").inc()
        RESOLUTION_LATENCY.labels(resolver=resolver_name).observe(elapsed)
        logger.debug(
            "value_resolved",
            key=key,
            source=source.name,
            resolver=resolver_name,
            duration_ms=round(elapsed * 1000, 3),
        )
        if events is not None:
            events.resolved(
                ValueResolved(
                    key=key,
                    value=value,
                    source_name=source.name,
                    duration_ms=elapsed * 1000,
                    context=context,
                )
            )
        return Result.hit(value, source, attempted)

    elapsed = time.perf_counter() - started
    RESOLUTIONS.labels(resolver=resolver_name, outcome="not_found").inc()
    RESOLUTION_LATENCY.labels(resolver=resolver_name).observe(elapsed)
    logger.debug(
        "resolution_failed",
        key=key,
        resolver=resolver_name,
        attempted_sources=attempted,
    )
    if events is not None:
        events.failed(
            ResolutionFailed(key=key, attempted_sources=tuple(attempted), context=context)
        )
    return Result.miss(attempted)


def value_or_default(result: Result, default: Any = None) -> Any:
    """The resolved value, else the default (called if it is a zero-arg producer)."""
    if result.found:
        return result.value
    if callable(default):
        return default()
    return default
