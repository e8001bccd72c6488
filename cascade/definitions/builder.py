"""Translate resolver definitions into Resolver instances.

Definition shape::

    {
        "context": {"region": "eu"},
        "sources": [
            {"name": "overrides", "type": "context", "priority": 0},
            {"name": "tenant", "type": "static", "priority": 10,
             "values": {"mail.sender": "ops@example.com"}, "cache": {"ttl": 60}},
            {"name": "defaults", "type": "chained", "priority": 20,
             "sources": [{"name": "base", "type": "static", "values": {...}}]},
        ],
    }

A source definition's "cache" table is honoured only when a cache is
passed to build_resolver.
"""

from collections.abc import Mapping
from typing import Any

from cascade.cache.base import Cache
from cascade.definitions.repository import Definition
from cascade.exceptions import (
    DuplicateSourceNameError,
    InvalidDefinitionError,
    InvalidSourceTypeError,
    MissingSourceConfigurationError,
)
from cascade.resolver import Resolver
from cascade.sources.base import Source
from cascade.sources.cached import DEFAULT_TTL_SECONDS, CachedSource
from cascade.sources.callback import context_lookup
from cascade.sources.chained import ChainedSource
from cascade.sources.null import NullSource
from cascade.sources.static import StaticMapSource

SOURCE_TYPES = ("static", "null", "chained", "context")


def _require(config: Mapping[str, Any], key: str) -> Any:
    if key not in config:
        raise MissingSourceConfigurationError(key)
    return config[key]


def build_source(
    config: Mapping[str, Any],
    cache: Cache | None = None,
    default_ttl: int | None = DEFAULT_TTL_SECONDS,
) -> Source:
    """Build one source (recursively for chained sources).

    A "cache" table without a "ttl" entry uses default_ttl.
    """
    if not isinstance(config, Mapping):
        raise InvalidDefinitionError(str(config), "source definitions must be mappings")

    name = _require(config, "name")
    source_type = _require(config, "type")

    source: Source
    if source_type == "static":
        values = _require(config, "values")
        if not isinstance(values, Mapping):
            raise InvalidDefinitionError(name, "'values' must be a mapping")
        source = StaticMapSource(name=name, values=values)
    elif source_type == "null":
        source = NullSource(name)
    elif source_type == "context":
        source = context_lookup(name)
    elif source_type == "chained":
        children = _require(config, "sources")
        source = ChainedSource(
            name, [build_source(child, cache, default_ttl) for child in children]
        )
    else:
        raise InvalidSourceTypeError(str(source_type), SOURCE_TYPES)

    cache_config = config.get("cache")
    if cache is not None and isinstance(cache_config, Mapping):
        source = CachedSource(
            name=f"{name}-cached",
            inner=source,
            cache=cache,
            ttl=cache_config.get("ttl", default_ttl),
        )
    return source


def build_resolver(
    name: str,
    definition: Definition,
    cache: Cache | None = None,
    default_ttl: int | None = DEFAULT_TTL_SECONDS,
) -> Resolver:
    """Build a named Resolver from a definition mapping.

    Raises:
        InvalidDefinitionError: If the definition is not a mapping of the expected shape
        SourceError: If a source definition is incomplete, duplicated or of unknown type
    """
    if not isinstance(definition, Mapping):
        raise InvalidDefinitionError(name)

    sources = definition.get("sources", [])
    if not isinstance(sources, list):
        raise InvalidDefinitionError(name, "'sources' must be a list")

    context = definition.get("context", {})
    if not isinstance(context, Mapping):
        raise InvalidDefinitionError(name, "'context' must be a mapping")

    resolver = Resolver(name, context=context)
    seen: set[str] = set()
    for config in sources:
        source = build_source(config, cache, default_ttl)
        source_name = config["name"]
        if source_name in seen:
            raise DuplicateSourceNameError(source_name)
        seen.add(source_name)
        resolver.add_source(source, priority=config.get("priority", 0))
    return resolver
