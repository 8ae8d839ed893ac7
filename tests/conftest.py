"""
Shared test fixtures and utilities for extsearch tests.

This module provides a small catalog of extension records used across the
test suite, plus a helper to build records tersely.
"""

from __future__ import annotations

from typing import Any

import pytest

from extsearch import (
    ExtensionAuthor,
    ExtensionId,
    ExtensionLicense,
    ExtensionRecord,
    ExtensionScm,
)


def make_extension(ext_id: str, version: str | None = "1.0", **kwargs: Any) -> ExtensionRecord:
    """Build an ExtensionRecord, converting list arguments to tuples."""
    for key in ("features", "authors", "licenses"):
        if key in kwargs:
            kwargs[key] = tuple(kwargs[key])
    return ExtensionRecord(id=ExtensionId(ext_id, version), **kwargs)


@pytest.fixture
def foo_and_baz() -> list[ExtensionRecord]:
    return [
        make_extension("foo.bar", name="Foo Extension", category="application"),
        make_extension("baz.qux", name="Baz Tool", category="tool"),
    ]


@pytest.fixture
def catalog() -> list[ExtensionRecord]:
    """Extensions with the full set of attributes populated."""
    return [
        make_extension(
            "org.example:office-importer",
            "2.1",
            name="Office Importer",
            summary="Import office documents",
            description="Converts Word and Excel files\ninto wiki pages.",
            features=["office-importer", "legacy-office"],
            authors=[ExtensionAuthor("Jane Roe", "https://example.org/jane")],
            category="application",
            licenses=[ExtensionLicense("LGPL 2.1")],
            type="jar",
            website="https://example.org/office",
            scm=ExtensionScm("https://git.example.org/office"),
            properties={"namespace": "wiki", "stars": 12},
        ),
        make_extension(
            "org.example:chart-macro",
            "1.4",
            name="Chart Macro",
            summary="Render charts",
            description="Draws bar and pie charts from tables.",
            features=["charts"],
            authors=[ExtensionAuthor("John Doe"), ExtensionAuthor("Jane Roe")],
            category="macro",
            licenses=[ExtensionLicense("Apache 2.0")],
            type="xar",
            properties={"namespace": "farm"},
        ),
        make_extension(
            "org.example:tag-cloud",
            "0.9",
            name="Tag Cloud",
            summary="Display tags",
            description="Shows the most used tags.",
            category="macro",
            type="xar",
        ),
    ]


@pytest.fixture
def ext():
    """Factory fixture building extension records."""
    return make_extension
