"""Resolution result model."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cascade.sources.base import Source


class Result(BaseModel):
    """Immutable outcome of one resolution attempt.

    found=True carries the value and the source that produced it;
    found=False carries neither.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    found: bool
    value: Any = None
    source: Source | None = Field(default=None, exclude=True)
    source_name: str | None = None
    attempted_sources: tuple[str, ...] = Field(
        default=(),
        description="Names of the sources that supported the key and were queried, in order",
    )
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_found_invariant(self) -> "Result":
        if self.found:
            if self.value is None or self.source_name is None:
                raise ValueError("a found result requires a value and a source name")
        elif self.value is not None or self.source_name is not None:
            raise ValueError("a not-found result carries no value or source")
        return self

    @classmethod
    def hit(
        cls,
        value: Any,
        source: Source,
        attempted: Sequence[str],
    ) -> "Result":
        return cls(
            found=True,
            value=value,
            source=source,
            source_name=source.name,
            attempted_sources=tuple(attempted),
            metadata=source.metadata,
        )

    @classmethod
    def miss(cls, attempted: Sequence[str]) -> "Result":
        return cls(found=False, attempted_sources=tuple(attempted))
