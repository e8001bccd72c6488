"""Derivation of a resolution context from arbitrary subject objects.

A subject contributes context through two optional capabilities:

- HasIdentity: an ``id`` attribute, injected as ``<lowercased type name>_id``
- HasCascadeContext: a ``to_cascade_context()`` method returning a mapping

Subjects with neither capability contribute nothing. Entries returned by
to_cascade_context() take precedence over the derived identity entry.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HasCascadeContext(Protocol):
    def to_cascade_context(self) -> Mapping[str, Any]: ...


@runtime_checkable
class HasIdentity(Protocol):
    id: Any


def identity_key(subject: object) -> str:
    return f"{type(subject).__name__.lower()}_id"


def derive_context(subject: object) -> dict[str, Any]:
    """Build a context mapping from a subject or pass a mapping through."""
    if isinstance(subject, Mapping):
        return dict(subject)

    context: dict[str, Any] = {}

    if isinstance(subject, HasIdentity):
        identity = subject.id
        if identity is not None:
            context[identity_key(subject)] = identity

    if isinstance(subject, HasCascadeContext):
        custom = subject.to_cascade_context()
        if isinstance(custom, Mapping):
            context.update(custom)

    return context
