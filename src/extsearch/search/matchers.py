"""
Record matching for extsearch.

This module decides whether one extension satisfies a compiled free-text
pattern and a list of structured filters. All string comparisons are
case-insensitive.

Functions:
    get_value: Resolve a logical field name to an extension attribute
    matches: Free-text pattern then filters, the entry point used by search
    matches_filter: Evaluate a single filter against an extension
    matches_value: Evaluate a single filter against a resolved value
    matches_any: Test a pattern against several candidate values
    matches_element: Test a pattern against one candidate value

Matching Rules:
    - The free-text pattern is tried on id, description, summary, name and
      every feature; one hit is enough. A missing pattern matches everything.
    - Filters are only evaluated when the pattern matched, and all of them
      must pass.
    - A filter on a field the extension does not have passes.
    - A filter whose value is not a string passes.

Example:
    >>> from extsearch.search.patterns import compile_search_pattern
    >>> pattern = compile_search_pattern("office")
    >>> filters = [Filter("category", "application", Comparison.EQUAL)]
    >>> matches(pattern, filters, extension)
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from typing import Any

import regex as regex_mod

from ..core.types import Comparison, Extension, Filter
from .patterns import create_pattern_matcher, pattern_matches

# Separator used for the string form of multi-valued attributes
MULTI_VALUE_SEPARATOR = ", "

_FIELD_ACCESSORS = {
    "id": lambda e: e.id.id,
    "version": lambda e: e.id.version,
    "feature": lambda e: e.features,
    "features": lambda e: e.features,
    "summary": lambda e: e.summary,
    "description": lambda e: e.description,
    "author": lambda e: e.authors,
    "authors": lambda e: e.authors,
    "category": lambda e: e.category,
    "license": lambda e: e.licenses,
    "licenses": lambda e: e.licenses,
    "name": lambda e: e.name,
    "type": lambda e: e.type,
    "website": lambda e: e.website,
    "scm": lambda e: e.scm,
}


def get_value(extension: Extension, field: str) -> Any | None:
    """
    Extract the value of an extension field.

    Well-known field names are matched case-insensitively; any other name is
    looked up as a named property.

    Returns:
        The field value, or None if the extension has no such field
    """
    accessor = _FIELD_ACCESSORS.get(field.lower())
    if accessor is not None:
        return accessor(extension)
    # Unknown field, probably a property
    return extension.get_property(field)


def is_multi_valued(value: Any) -> bool:
    return isinstance(value, (list, tuple, Set))


def to_text(value: Any) -> str:
    """String form of a field value; collections join their elements."""
    if is_multi_valued(value):
        return MULTI_VALUE_SEPARATOR.join(str(element) for element in value)
    return str(value)


def matches_element(pattern: regex_mod.Pattern, element: Any) -> bool:
    if element is None:
        return False
    return pattern_matches(pattern, to_text(element))


def matches_any(pattern: regex_mod.Pattern, *elements: Any) -> bool:
    return any(matches_element(pattern, element) for element in elements)


def matches_value(query_filter: Filter, value: Any) -> bool:
    """
    Check a resolved field value against a filter.

    Non-string filter values always pass.
    """
    text = query_filter.text_value
    if text is None:
        return True

    if query_filter.comparison == Comparison.MATCH:
        pattern = create_pattern_matcher(text)
        if pattern is None:
            return True
        if matches_element(pattern, value):
            return True
        return is_multi_valued(value) and matches_any(pattern, *value)

    if query_filter.comparison == Comparison.EQUAL:
        return value is not None and text.lower() == to_text(value).lower()

    return False


def matches_filter(query_filter: Filter, extension: Extension) -> bool:
    value = get_value(extension, query_filter.field)
    if value is None:
        # Field absent on this extension: accepted, even though rejecting it
        # would be equally defensible.
        return True
    return matches_value(query_filter, value)


def matches_text(pattern: regex_mod.Pattern | None, extension: Extension) -> bool:
    """Whether the free-text pattern hits id, description, summary, name or a feature."""
    if pattern is None:
        return True
    return matches_any(
        pattern,
        extension.id.id,
        extension.description,
        extension.summary,
        extension.name,
        *extension.features,
    )


def matches(
    pattern: regex_mod.Pattern | None, filters: Iterable[Filter], extension: Extension
) -> bool:
    """Match an extension in a case insensitive way."""
    if not matches_text(pattern, extension):
        return False
    return all(matches_filter(f, extension) for f in filters)
