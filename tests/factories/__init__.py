"""Test factories for sources and subjects."""

from tests.factories.sources import (
    Anonymous,
    ExplodingSource,
    FaultySource,
    RecordingSource,
    Tenant,
    User,
    Workspace,
)

__all__ = [
    "Anonymous",
    "ExplodingSource",
    "FaultySource",
    "RecordingSource",
    "Tenant",
    "User",
    "Workspace",
]
