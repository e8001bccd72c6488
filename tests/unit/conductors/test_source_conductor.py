"""Tests for the anonymous chain builder."""

import pytest

from cascade import Cascade
from cascade.cache import InMemoryCache
from cascade.conductors import SourceConductor, normalize_source
from cascade.exceptions import InvalidSourcePriorityError, ResolutionFailedError
from cascade.sources import CachedSource, NullSource, StaticMapSource
from tests.factories import RecordingSource


class TestNormalizeSource:
    """Tests for normalize_source."""

    def test_source_passes_through(self) -> None:
        source = NullSource("n")
        assert normalize_source(source) is source

    def test_mapping_becomes_static_source(self) -> None:
        source = normalize_source({"timeout": 30})
        assert isinstance(source, StaticMapSource)
        assert source.name.startswith("static-")
        assert source.get("timeout", {}) == 30

    def test_equal_mappings_share_a_name(self) -> None:
        first = normalize_source({"a": 1, "b": 2})
        second = normalize_source({"b": 2, "a": 1})
        assert first.name == second.name

    def test_string_becomes_context_lookup(self) -> None:
        source = normalize_source("overrides")
        assert source.name == "overrides"
        assert source.get("region", {"region": "eu"}) == "eu"
        assert source.get("region", {}) is None


class TestChainBuilding:
    """Tests for source ordering within a chain."""

    def test_fallback_queried_after_primary(self, cascade: Cascade) -> None:
        primary = RecordingSource("primary", {"key": "p"})
        fallback = RecordingSource("fallback", {"key": "f", "other": "o"})
        conductor = cascade.from_(primary).fallback_to(fallback)

        assert conductor.get("key") == "p"
        assert fallback.calls == []
        assert conductor.get("other") == "o"

    def test_fallback_priority_steps_above_highest(self, cascade: Cascade) -> None:
        conductor = (
            cascade.from_(NullSource("a"), priority=50)
            .fallback_to(NullSource("b"))
            .add_source(NullSource("c"), priority=55)
        )
        assert [s.name for s in conductor.sources] == ["a", "c", "b"]

    def test_explicit_fallback_priority(self, cascade: Cascade) -> None:
        conductor = cascade.from_(NullSource("a"), priority=10).fallback_to(
            NullSource("b"), priority=5
        )
        assert [s.name for s in conductor.sources] == ["b", "a"]

    def test_fallback_step_from_cascade(self) -> None:
        cascade = Cascade(fallback_priority_step=1)
        conductor = (
            cascade.from_(NullSource("a"))
            .fallback_to(NullSource("b"))
            .add_source(NullSource("c"), priority=2)
        )
        assert [s.name for s in conductor.sources] == ["a", "b", "c"]

    def test_rejects_non_integer_priority(self, cascade: Cascade) -> None:
        with pytest.raises(InvalidSourcePriorityError):
            cascade.from_(NullSource("a"), priority="high")

    def test_mixed_source_specs(self, cascade: Cascade) -> None:
        conductor = cascade.from_("overrides").fallback_to({"region": "us"})
        assert conductor.get("region", {"region": "eu"}) == "eu"
        assert conductor.get("region") == "us"

    def test_sources_added_after_resolution_are_used(self, cascade: Cascade) -> None:
        conductor = cascade.from_(NullSource("a"))
        assert conductor.get("k") is None
        conductor.fallback_to({"k": 1})
        assert conductor.get("k") == 1


class TestRetrieval:
    """Tests for get/get_or_fail/get_many."""

    def test_default_value(self, cascade: Cascade) -> None:
        assert cascade.from_(NullSource("a")).get("k", default=5) == 5

    def test_callable_default_only_invoked_on_miss(self, cascade: Cascade) -> None:
        calls = []

        def default() -> str:
            calls.append(1)
            return "computed"

        conductor = cascade.from_({"k": "v"})
        assert conductor.get("k", default=default) == "v"
        assert calls == []
        assert conductor.get("missing", default=default) == "computed"
        assert calls == [1]

    def test_get_or_fail_lists_attempted_sources(self, cascade: Cascade) -> None:
        conductor = cascade.from_(NullSource("a")).fallback_to(NullSource("b"))
        with pytest.raises(ResolutionFailedError) as exc_info:
            conductor.get_or_fail("k")
        assert exc_info.value.attempted_sources == ["a", "b"]
        assert "a, b" in str(exc_info.value)

    def test_get_many(self, cascade: Cascade) -> None:
        results = cascade.from_({"a": 1}).get_many(["a", "b"])
        assert results["a"].value == 1
        assert results["b"].found is False

    def test_transform_applies_to_found_values(self, cascade: Cascade) -> None:
        conductor = cascade.from_({"timeout": "30"}).transform(lambda value, source: int(value))
        assert conductor.get("timeout") == 30
        assert conductor.get("missing", default="x") == "x"

    def test_transform_receives_producing_source(self, cascade: Cascade) -> None:
        conductor = (
            cascade.from_(NullSource("a"))
            .fallback_to(StaticMapSource("b", {"k": "v"}))
            .transform(lambda value, source: f"{source.name}:{value}")
        )
        assert conductor.get("k") == "b:v"


class TestCaching:
    """Tests for cache()."""

    def test_wraps_last_source(self, cascade: Cascade, cache: InMemoryCache) -> None:
        conductor = cascade.from_(NullSource("a")).fallback_to(
            RecordingSource("db", {"k": "v"})
        ).cache(cache, ttl=60)

        last = conductor.sources[-1]
        assert isinstance(last, CachedSource)
        assert last.name == "db-cached"
        assert conductor.sources[0].name == "a"

    def test_cached_value_served_without_querying_inner(
        self, cascade: Cascade, cache: InMemoryCache
    ) -> None:
        db = RecordingSource("db", {"k": "v"})
        conductor = cascade.from_(db).cache(cache)

        assert conductor.get("k") == "v"
        assert conductor.get("k") == "v"
        assert len(db.calls) == 1

    def test_cache_on_empty_chain_is_noop(self, cascade: Cascade, cache: InMemoryCache) -> None:
        conductor = SourceConductor(cascade).cache(cache)
        assert conductor.sources == []


class TestNaming:
    """Tests for as_() registration."""

    def test_anonymous_chain_not_registered(self, cascade: Cascade) -> None:
        conductor = cascade.from_({"k": 1})
        conductor.get("k")
        assert cascade.registry.names() == []
        assert conductor.name == "anonymous"

    def test_as_registers_named_resolver(self, cascade: Cascade) -> None:
        cascade.from_({"k": 1}).fallback_to(NullSource("n")).as_("settings")

        assert cascade.has_resolver("settings")
        assert cascade.using("settings").get("k") == 1
        assert cascade.get_resolver("settings").name == "settings"

    def test_registered_snapshot_unaffected_by_later_changes(self, cascade: Cascade) -> None:
        conductor = cascade.from_(NullSource("a")).as_("snapshot")
        conductor.fallback_to({"k": 1})

        assert conductor.get("k") == 1
        assert cascade.using("snapshot").get("k") is None
