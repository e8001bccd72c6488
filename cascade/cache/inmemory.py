"""In-memory implementation of Cache."""

import threading
import time
from typing import Any

from cascade.cache.base import Cache


class InMemoryCache(Cache):
    """Dict-backed cache with lazy TTL expiry.

    Entries are evicted when read after their deadline. Intended for tests,
    development and single-process deployments.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            return self._live_value(key)

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        deadline = None if ttl is None else time.monotonic() + ttl
        with self._lock:
            self._entries[key] = (value, deadline)
        return True

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_value(key) is not None

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> bool:
        with self._lock:
            self._entries.clear()
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _live_value(self, key: str) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, deadline = entry
        if deadline is not None and time.monotonic() >= deadline:
            del self._entries[key]
            return None
        return value
