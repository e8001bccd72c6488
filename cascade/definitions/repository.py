"""DefinitionRepository abstract interface.

A definition is the declarative description of a named resolver, kept as a
plain mapping. Repositories only store and return definitions; turning one
into sources is done by cascade.definitions.builder.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

Definition = dict[str, Any]


class DefinitionRepository(ABC):
    """Abstract interface for resolver definition storage."""

    @abstractmethod
    def get(self, name: str) -> Definition:
        """Get a definition by resolver name.

        Raises:
            ResolverNotFoundError: If no definition exists for name
        """
        pass

    @abstractmethod
    def has(self, name: str) -> bool:
        """Whether a definition exists for name."""
        pass

    @abstractmethod
    def all(self) -> dict[str, Definition]:
        """Every definition keyed by resolver name."""
        pass

    def get_many(self, names: Iterable[str]) -> dict[str, Definition]:
        """Definitions for the given names, silently skipping unknown ones."""
        return {name: self.get(name) for name in names if self.has(name)}
