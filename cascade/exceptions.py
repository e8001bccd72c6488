"""Exception hierarchy for cascade resolution.

Absence of a value is never an exception: sources return None and the
engine reports it through Result.found. The classes here cover the cases
where a caller opts into hard failure (ResolutionFailedError), registry
lookups, malformed sources and definition loading.
"""

from collections.abc import Sequence


class CascadeError(Exception):
    """Base exception for all cascade errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ResolutionFailedError(CascadeError):
    """Raised by get_or_fail when no source yields a value for a key."""

    def __init__(self, key: str, attempted_sources: Sequence[str]) -> None:
        self.key = key
        self.attempted_sources = list(attempted_sources)
        if self.attempted_sources:
            sources = ", ".join(self.attempted_sources)
            message = f"Failed to resolve '{key}'. Attempted sources: {sources}"
        else:
            message = f"Failed to resolve '{key}'. No sources available."
        super().__init__(message)


class RegistryError(CascadeError):
    """Base class for named resolver registry errors."""


class ResolverNotFoundError(RegistryError):
    """Raised when a named resolver is not registered."""

    def __init__(
        self,
        name: str,
        available: Sequence[str] = (),
        suggestions: Sequence[str] = (),
    ) -> None:
        self.name = name
        self.available = list(available)
        self.suggestions = list(suggestions)
        if self.suggestions:
            message = (
                f"Resolver '{name}' not found. "
                f"Did you mean: {', '.join(self.suggestions)}?"
            )
        elif self.available:
            message = (
                f"Resolver '{name}' not found. "
                f"Available resolvers: {', '.join(self.available)}"
            )
        else:
            message = f"Resolver '{name}' not found. Ensure the resolver is registered."
        super().__init__(message)


class NoResolversRegisteredError(ResolverNotFoundError):
    """Raised when a resolver is requested from an empty registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.message = (
            f"Resolver '{name}' not found. No resolvers are registered. "
            "Register at least one resolver before attempting resolution."
        )
        self.args = (self.message,)


class SourceError(CascadeError):
    """Base class for invalid source configuration."""


class InvalidSourceNameError(SourceError):
    """Raised when a source is given an empty or non-string name."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(
            f"Invalid source name {name!r}. Source names must be non-empty strings."
        )


class InvalidSourcePriorityError(SourceError):
    """Raised when a source priority is not an integer."""

    def __init__(self, priority: object) -> None:
        self.priority = priority
        super().__init__(
            f"Invalid source priority. Expected integer, got {type(priority).__name__}."
        )


class InvalidSourceTypeError(SourceError):
    """Raised when a definition names an unknown source type."""

    def __init__(self, source_type: str, valid_types: Sequence[str]) -> None:
        self.source_type = source_type
        self.valid_types = list(valid_types)
        super().__init__(
            f"Invalid source type '{source_type}'. "
            f"Valid types are: {', '.join(self.valid_types)}"
        )


class MissingSourceConfigurationError(SourceError):
    """Raised when a source definition lacks a required key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Source configuration is missing required key: '{key}'")


class DuplicateSourceNameError(SourceError):
    """Raised when a definition declares two sources with the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Source with name '{name}' is already registered.")


class DefinitionError(CascadeError):
    """Base class for resolver definition loading errors."""


class InvalidDefinitionError(DefinitionError):
    """Raised when a resolver definition is not a mapping."""

    def __init__(self, name: str, reason: str = "expected a mapping") -> None:
        self.name = name
        super().__init__(f"Invalid definition for resolver '{name}': {reason}")


class DefinitionFileError(DefinitionError):
    """Raised when a definition file is missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class EmptyChainedRepositoryError(DefinitionError):
    """Raised when a chained repository is built without repositories."""

    def __init__(self) -> None:
        super().__init__("ChainedDefinitionRepository requires at least one repository")


class ConfigurationError(CascadeError):
    """Raised when settings values are invalid."""
