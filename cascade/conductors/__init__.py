"""Fluent entry points for building and using resolution chains."""

from cascade.conductors.resolution import ResolutionConductor
from cascade.conductors.source import SourceConductor, normalize_source

__all__ = ["ResolutionConductor", "SourceConductor", "normalize_source"]
