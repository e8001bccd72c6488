"""In-memory implementation of DefinitionRepository."""

from collections.abc import Mapping

from cascade.definitions.repository import Definition, DefinitionRepository
from cascade.exceptions import ResolverNotFoundError


class InMemoryDefinitionRepository(DefinitionRepository):
    """Dict-backed definitions, for tests and programmatic setups."""

    def __init__(self, definitions: Mapping[str, Definition] | None = None) -> None:
        self._definitions: dict[str, Definition] = dict(definitions or {})

    def get(self, name: str) -> Definition:
        if name not in self._definitions:
            raise ResolverNotFoundError(name, available=sorted(self._definitions))
        return self._definitions[name]

    def has(self, name: str) -> bool:
        return name in self._definitions

    def all(self) -> dict[str, Definition]:
        return dict(self._definitions)

    def save(self, name: str, definition: Definition) -> None:
        self._definitions[name] = definition

    def delete(self, name: str) -> bool:
        return self._definitions.pop(name, None) is not None
