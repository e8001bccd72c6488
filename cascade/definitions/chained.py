"""Repository consulting several repositories in order."""

from collections.abc import Iterable, Sequence

from cascade.definitions.repository import Definition, DefinitionRepository
from cascade.exceptions import EmptyChainedRepositoryError, ResolverNotFoundError


class ChainedDefinitionRepository(DefinitionRepository):
    """The first repository holding a name wins."""

    def __init__(self, repositories: Sequence[DefinitionRepository]) -> None:
        if not repositories:
            raise EmptyChainedRepositoryError()
        self._repositories = tuple(repositories)

    def get(self, name: str) -> Definition:
        for repository in self._repositories:
            if repository.has(name):
                return repository.get(name)
        raise ResolverNotFoundError(name)

    def has(self, name: str) -> bool:
        return any(repository.has(name) for repository in self._repositories)

    def all(self) -> dict[str, Definition]:
        definitions: dict[str, Definition] = {}
        # Earlier repositories override later ones
        for repository in reversed(self._repositories):
            definitions.update(repository.all())
        return definitions

    def get_many(self, names: Iterable[str]) -> dict[str, Definition]:
        result: dict[str, Definition] = {}
        remaining = list(names)
        for repository in self._repositories:
            if not remaining:
                break
            found = repository.get_many(remaining)
            result.update(found)
            remaining = [name for name in remaining if name not in found]
        return result
