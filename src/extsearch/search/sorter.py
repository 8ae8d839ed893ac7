"""
Multi-key sorting of extensions.

Sort clauses are applied in order: the first clause decides unless it ties,
in which case the next one is consulted, and so on. Records that tie on
every clause keep their input order since ``list.sort`` is stable.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from ..core.types import Extension, SortClause, SortOrder
from .matchers import get_value, to_text


def compare_values(value1: Any, value2: Any) -> int:
    """
    Three-way comparison of two field values.

    None sorts before any other value. Values of the same orderable type use
    their natural ordering; anything else is compared by string form.
    """
    if value1 is None:
        return 0 if value2 is None else -1
    if value2 is None:
        return 1

    try:
        if value1 < value2:
            return -1
        if value2 < value1:
            return 1
        return 0
    except TypeError:
        text1, text2 = to_text(value1), to_text(value2)
        return (text1 > text2) - (text1 < text2)


class SortClauseComparator:
    """Compare two extensions according to a list of sort clauses."""

    def __init__(self, sort_clauses: Iterable[SortClause]) -> None:
        self.sort_clauses = list(sort_clauses)

    def compare_clause(self, e1: Extension, e2: Extension, clause: SortClause) -> int:
        result = compare_values(get_value(e1, clause.field), get_value(e2, clause.field))
        return -result if clause.order == SortOrder.DESC else result

    def __call__(self, e1: Extension, e2: Extension) -> int:
        for clause in self.sort_clauses:
            result = self.compare_clause(e1, e2, clause)
            if result != 0:
                return result
        return 0


def sort_extensions(extensions: list[Any], sort_clauses: Iterable[SortClause]) -> None:
    """Sort the passed list in place based on the passed sort clauses."""
    comparator = SortClauseComparator(sort_clauses)
    if not comparator.sort_clauses:
        return
    extensions.sort(key=cmp_to_key(comparator))
