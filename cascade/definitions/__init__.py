"""Resolver definitions: storage and translation into resolvers."""

from cascade.definitions.builder import SOURCE_TYPES, build_resolver, build_source
from cascade.definitions.cached import CachedDefinitionRepository
from cascade.definitions.chained import ChainedDefinitionRepository
from cascade.definitions.files import JsonDefinitionRepository, TomlDefinitionRepository
from cascade.definitions.inmemory import InMemoryDefinitionRepository
from cascade.definitions.repository import Definition, DefinitionRepository

__all__ = [
    "SOURCE_TYPES",
    "CachedDefinitionRepository",
    "ChainedDefinitionRepository",
    "Definition",
    "DefinitionRepository",
    "InMemoryDefinitionRepository",
    "JsonDefinitionRepository",
    "TomlDefinitionRepository",
    "build_resolver",
    "build_source",
]
