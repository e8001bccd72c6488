"""Resolution events and the synchronous dispatcher that delivers them.

Three event kinds are emitted while a key resolves:

- SourceQueried for every source visited, before its supports() check
- ValueResolved once, when a source yields a value
- ResolutionFailed once, when every source is exhausted

Listeners run in registration order inside the resolving call. A listener
that raises aborts that resolution; the exception is not caught here.
"""

import threading
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CascadeEvent(BaseModel):
    """Base class for resolution events."""

    model_config = ConfigDict(frozen=True)

    key: str
    context: dict[str, Any] = Field(default_factory=dict)


class SourceQueried(CascadeEvent):
    """A source was visited while resolving key."""

    source_name: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ValueResolved(CascadeEvent):
    """A key resolved to a value after transformers were applied."""

    value: Any
    source_name: str
    duration_ms: float = Field(ge=0)


class ResolutionFailed(CascadeEvent):
    """No source produced a value for key.

    attempted_sources lists the sources whose get() was called; sources
    skipped by supports() only appear in SourceQueried events.
    """

    attempted_sources: tuple[str, ...] = ()


SourceQueriedListener = Callable[[SourceQueried], Any]
ValueResolvedListener = Callable[[ValueResolved], Any]
ResolutionFailedListener = Callable[[ResolutionFailed], Any]


class EventDispatcher:
    """Holds listeners per event kind and invokes them synchronously."""

    def __init__(self) -> None:
        self._source_queried: list[SourceQueriedListener] = []
        self._resolved: list[ValueResolvedListener] = []
        self._failed: list[ResolutionFailedListener] = []
        self._lock = threading.Lock()

    def on_source_queried(self, listener: SourceQueriedListener) -> "EventDispatcher":
        with self._lock:
            self._source_queried.append(listener)
        return self

    def on_resolved(self, listener: ValueResolvedListener) -> "EventDispatcher":
        with self._lock:
            self._resolved.append(listener)
        return self

    def on_failed(self, listener: ResolutionFailedListener) -> "EventDispatcher":
        with self._lock:
            self._failed.append(listener)
        return self

    def source_queried(self, event: SourceQueried) -> None:
        for listener in self._snapshot(self._source_queried):
            listener(event)

    def resolved(self, event: ValueResolved) -> None:
        for listener in self._snapshot(self._resolved):
            listener(event)

    def failed(self, event: ResolutionFailed) -> None:
        for listener in self._snapshot(self._failed):
            listener(event)

    def _snapshot(self, listeners: list[Any]) -> list[Any]:
        with self._lock:
            return list(listeners)
