"""Resolution behaviour configuration models."""

from pydantic import BaseModel, Field


class ResolutionConfig(BaseModel):
    """Tuning for conductors and the resolver registry."""

    fallback_priority_step: int = Field(
        default=10,
        gt=0,
        description="Gap between an auto-prioritised fallback and the highest priority",
    )
    suggestion_limit: int = Field(
        default=3,
        ge=0,
        description="Maximum resolver names suggested on a lookup miss",
    )
    suggestion_cutoff: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Minimum similarity ratio for a suggested resolver name",
    )
