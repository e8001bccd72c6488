"""Source that never yields a value."""

from typing import Any

from cascade.sources.base import Context, Source


class NullSource(Source):
    """Always supports, always absent.

    Useful as a disabled placeholder in a chain and for exercising fallback.
    """

    def get(self, key: str, context: Context) -> None:  # noqa: ARG002
        return None

    @property
    def metadata(self) -> dict[str, Any]:
        return {**super().metadata, "type": "null"}
