"""Tests for extsearch.api module."""

from __future__ import annotations

import pytest

from extsearch import (
    Comparison,
    ConfigurationError,
    ExtensionSearch,
    Filter,
    PatternCompilationError,
    Query,
    SearchConfig,
    SortClause,
    SortOrder,
    filter_extensions,
    search,
    search_in_collection,
)
from extsearch.api import unique_in_order


def ids(window):
    return [e.id.id for e in window]


class TestUniqueInOrder:
    """Tests for unique_in_order function."""

    def test_keeps_first_occurrence(self, ext):
        a, b, c = ext("a"), ext("b"), ext("c")
        assert unique_in_order([a, b, ext("a"), c]) == [a, b, c]

    def test_unhashable_elements(self):
        assert unique_in_order([[1], [2], [1]]) == [[1], [2]]


class TestFilterExtensions:
    """Tests for filter_extensions function."""

    def test_empty_pattern_returns_copy(self, catalog):
        result = filter_extensions("", [Filter("category", "none", Comparison.EQUAL)], catalog)
        assert result == catalog
        assert result is not catalog

    def test_keeps_input_order(self, catalog):
        result = filter_extensions("org.example", [], catalog)
        assert result == catalog

    def test_force_unique(self, ext):
        a, b, c = ext("a"), ext("b"), ext("c")
        result = filter_extensions(".", [], [a, b, ext("a"), c], force_unique=True)
        assert [e.id.id for e in result] == ["a", "b", "c"]

    def test_duplicates_kept_without_force_unique(self, ext):
        result = filter_extensions(".", [], [ext("a"), ext("a")])
        assert len(result) == 2


class TestSearch:
    """Tests for search function."""

    def test_pattern_scenario(self, foo_and_baz):
        window = search(Query(pattern="foo", offset=0, limit=10), foo_and_baz)
        assert window.total_size == 1
        assert window.offset == 0
        assert ids(window) == ["foo.bar"]

    def test_empty_pattern_skips_filters(self, foo_and_baz):
        query = Query(pattern="").add_filter("category", "tool", Comparison.EQUAL)
        window = search(query, foo_and_baz)
        assert ids(window) == ["foo.bar", "baz.qux"]

    def test_filters_apply_with_pattern(self, foo_and_baz):
        query = Query(pattern=".").add_filter("category", "tool", Comparison.EQUAL)
        assert ids(search(query, foo_and_baz)) == ["baz.qux"]

    def test_empty_pattern_is_identity(self, catalog):
        window = search(Query(), catalog)
        assert list(window) == catalog

    def test_offset_past_end(self, ext):
        extensions = [ext(f"e{i}") for i in range(5)]
        window = search(Query(offset=10, limit=5), extensions)
        assert window.total_size == 5
        assert window.offset == 10
        assert window.items == ()

    def test_sort_and_paginate(self, catalog):
        query = Query(pattern="org", offset=1, limit=1).add_sort("name", SortOrder.DESC)
        window = search(query, catalog)
        assert window.total_size == 3
        assert ids(window) == ["org.example:office-importer"]

    def test_input_not_mutated(self, catalog):
        original = list(catalog)
        search(Query(sort_clauses=[SortClause("name", SortOrder.DESC)]), catalog)
        assert catalog == original

    def test_accepts_any_iterable(self, catalog):
        window = search(Query(pattern="macro"), (e for e in catalog))
        assert ids(window) == ["org.example:chart-macro"]

    def test_force_unique(self, ext):
        a = ext("a", name="Alpha")
        window = search(Query(pattern="a"), [a, ext("a", name="Alpha")], force_unique=True)
        assert window.total_size == 1

    def test_malformed_pattern(self, catalog):
        with pytest.raises(PatternCompilationError) as exc_info:
            search(Query(pattern="[abc"), catalog)
        assert exc_info.value.pattern == "[abc"

    def test_feature_search(self, catalog):
        assert ids(search(Query(pattern="legacy-office"), catalog)) == [
            "org.example:office-importer"
        ]


class TestSearchInCollection:
    """Tests for search_in_collection function."""

    def test_basic(self, catalog):
        window = search_in_collection("macro", 0, 10, catalog)
        assert ids(window) == ["org.example:chart-macro"]

    def test_limit(self, catalog):
        window = search_in_collection("", 0, 2, catalog)
        assert window.total_size == 3
        assert len(window) == 2


class TestExtensionSearch:
    """Tests for ExtensionSearch class."""

    def test_snapshot(self, catalog):
        engine = ExtensionSearch(catalog)
        catalog.clear()
        assert len(engine) == 3
        assert engine.search().total_size == 3

    def test_default_sort(self, catalog):
        config = SearchConfig(default_sort=[SortClause("name")])
        engine = ExtensionSearch(catalog, config)
        assert [e.name for e in engine.search()] == ["Chart Macro", "Office Importer", "Tag Cloud"]

    def test_explicit_sort_overrides_default(self, catalog):
        config = SearchConfig(default_sort=[SortClause("name")])
        engine = ExtensionSearch(catalog, config)
        window = engine.search(sort_clauses=[SortClause("name", SortOrder.DESC)])
        assert window.items[0].name == "Tag Cloud"

    def test_default_sort_does_not_modify_query(self, catalog):
        config = SearchConfig(default_sort=[SortClause("name")])
        query = Query()
        ExtensionSearch(catalog, config).run(query)
        assert query.sort_clauses == []

    def test_default_limit(self, catalog):
        engine = ExtensionSearch(catalog, SearchConfig(default_limit=2))
        assert len(engine.search()) == 2
        assert len(engine.search(limit=-1)) == 3

    def test_filters(self, catalog):
        engine = ExtensionSearch(catalog)
        window = engine.search(
            pattern="o", filters=[Filter("category", "macro", Comparison.EQUAL)]
        )
        assert ids(window) == ["org.example:chart-macro", "org.example:tag-cloud"]

    def test_force_unique_from_config(self, ext):
        engine = ExtensionSearch([ext("a"), ext("a")], SearchConfig(force_unique=True))
        assert engine.search(pattern="a").total_size == 1

    def test_quiet_run_matches_logged_run(self, catalog):
        query = Query(pattern="o", limit=2).add_sort("id")
        quiet = ExtensionSearch(catalog, SearchConfig(log_queries=False)).run(query)
        logged = ExtensionSearch(catalog).run(query)
        assert quiet == logged

    def test_get(self, catalog):
        engine = ExtensionSearch(catalog)
        assert engine.get("org.example:tag-cloud").name == "Tag Cloud"
        assert engine.get("org.example:tag-cloud", "0.9") is not None
        assert engine.get("org.example:tag-cloud", "2.0") is None
        assert engine.get("missing") is None

    def test_invalid_config(self, catalog):
        with pytest.raises(ConfigurationError):
            ExtensionSearch(catalog, SearchConfig(default_limit="ten"))
