"""Source abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from cascade.exceptions import InvalidSourceNameError

Context = Mapping[str, Any]
ValueResolverFn = Callable[[str, Context], Any]
SupportsFn = Callable[[str, Context], bool]


class Source(ABC):
    """A named provider of values for a (key, context) pair.

    Sources signal absence by returning None from get(). They hold no
    resolution state, so one instance may be shared by several chains.
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidSourceNameError(name)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def supports(self, key: str, context: Context) -> bool:  # noqa: ARG002
        """Whether this source can answer for the key at all."""
        return True

    @abstractmethod
    def get(self, key: str, context: Context) -> Any:
        """Return the value for key, or None when absent."""
        pass

    @property
    def metadata(self) -> dict[str, Any]:
        """Descriptive information used for diagnostics only."""
        return {"name": self._name, "type": type(self).__name__}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
