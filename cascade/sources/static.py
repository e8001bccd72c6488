"""Source backed by a fixed mapping."""

from collections.abc import Mapping
from typing import Any

from cascade.sources.base import Context, Source


class StaticMapSource(Source):
    """Direct lookup in a fixed key/value mapping.

    A key stored with a None value is indistinguishable from a missing key.
    """

    def __init__(self, name: str, values: Mapping[str, Any]) -> None:
        super().__init__(name)
        self._values = dict(values)

    def get(self, key: str, context: Context) -> Any:  # noqa: ARG002
        return self._values.get(key)

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            **super().metadata,
            "type": "static",
            "key_count": len(self._values),
            "keys": list(self._values),
        }
