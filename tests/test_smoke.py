from extsearch import (
    Comparison,
    ExtensionId,
    ExtensionRecord,
    ExtensionSearch,
    OutputFormat,
    Query,
    SortOrder,
    format_result,
    paginate,
    search,
)


def _extensions():
    return [
        ExtensionRecord(ExtensionId("foo.bar", "1.0"), name="Foo Extension", category="application"),
        ExtensionRecord(ExtensionId("baz.qux", "1.0"), name="Baz Tool", category="tool"),
    ]


def test_smoke_search():
    window = search(Query(pattern="foo", offset=0, limit=10), _extensions())
    assert window.total_size == 1
    assert window.offset == 0
    assert [e.id.id for e in window] == ["foo.bar"]


def test_smoke_pattern_gates_filters():
    query = Query(pattern="").add_filter("category", "tool", Comparison.EQUAL)
    window = search(query, _extensions())
    assert window.total_size == 2


def test_smoke_paginate_past_end():
    window = paginate(10, 5, list(range(5)))
    assert (window.total_size, window.offset, window.items) == (5, 10, ())


def test_smoke_engine_and_format():
    engine = ExtensionSearch(_extensions())
    window = engine.run(Query().add_sort("name", SortOrder.ASC))
    assert [e.name for e in window] == ["Baz Tool", "Foo Extension"]
    assert "baz.qux/1.0 - Baz Tool" in format_result(window, OutputFormat.TEXT)
