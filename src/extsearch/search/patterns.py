"""
Pattern compilation for extsearch.

Two kinds of patterns are built here, both wrapped in
:data:`SEARCH_PATTERN_AFFIX` and applied with full-match semantics to the
lower-cased candidate text, which amounts to case-insensitive containment:

- filter patterns, where the user text is escaped first so compilation can
  never fail (:func:`create_pattern_matcher`)
- the free-text search pattern, which is itself a regular expression and is
  embedded as-is (:func:`compile_search_pattern`)

An empty or blank text yields ``None`` for both, meaning "match everything".
"""

from __future__ import annotations

from functools import lru_cache

import regex as regex_mod

from ..utils.error_handling import PatternCompilationError

# Prefix and suffix wrapped around every search pattern
SEARCH_PATTERN_AFFIX = ".*"

# Multi-line descriptions are searched as a whole
_PATTERN_FLAGS = regex_mod.DOTALL


@lru_cache(maxsize=128)
def _get_compiled_regex(pattern: str) -> regex_mod.Pattern:
    return regex_mod.compile(pattern, flags=_PATTERN_FLAGS)


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def create_pattern_matcher(text: str | None) -> regex_mod.Pattern | None:
    """Return a pattern searching for *text* literally inside a string, or None if blank."""
    if is_blank(text):
        return None
    return _get_compiled_regex(
        SEARCH_PATTERN_AFFIX + regex_mod.escape(text.lower()) + SEARCH_PATTERN_AFFIX
    )


def compile_search_pattern(text: str | None) -> regex_mod.Pattern | None:
    """
    Compile the free-text search pattern.

    Args:
        text: Regular expression searched anywhere in the candidate

    Returns:
        The compiled pattern, or None when *text* is empty or blank

    Raises:
        PatternCompilationError: If *text* is not a valid regular expression
    """
    if is_blank(text):
        return None
    try:
        return _get_compiled_regex(SEARCH_PATTERN_AFFIX + text.lower() + SEARCH_PATTERN_AFFIX)
    except regex_mod.error as e:
        raise PatternCompilationError(text, str(e)) from e


def pattern_matches(pattern: regex_mod.Pattern, text: str) -> bool:
    return pattern.fullmatch(text.lower()) is not None
