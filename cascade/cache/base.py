"""Cache abstract interface consumed by cached sources and repositories."""

from abc import ABC, abstractmethod
from typing import Any


class Cache(ABC):
    """Minimal key/value cache contract.

    get() returns None on a miss. A ttl of None means no expiry; a ttl of
    zero or less expires the entry immediately.
    Implementations shared between threads must be safe for concurrent use.
    """

    @abstractmethod
    def get(self, key: str) -> Any:
        """Get a cached value, or None on a miss."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store a value with an optional TTL in seconds."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Whether a live entry exists for key."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove an entry, returning whether it existed."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Remove every entry."""
        pass
