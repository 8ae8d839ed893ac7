"""
Main API for extsearch.

This module composes the search pipeline: free-text matching and filtering,
optional duplicate removal, multi-key sorting, and pagination.

Functions:
    search: Run a Query against a collection of extensions
    search_in_collection: Shortcut taking a pattern, an offset and a limit
    filter_extensions: Matching stage of the pipeline
    unique_in_order: Drop value-equal duplicates, keeping first occurrences

Classes:
    ExtensionSearch: Holds a snapshot of extensions and a SearchConfig

Example:
    >>> from extsearch import ExtensionSearch, Query, SortOrder
    >>>
    >>> engine = ExtensionSearch(extensions)
    >>> window = engine.run(Query(pattern="macro", limit=10).add_sort("name", SortOrder.ASC))
    >>> for extension in window:
    ...     print(extension.id, extension.name)

Notes:
    When the pattern is empty the whole collection is returned and the
    query filters are not applied.
"""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Iterable
from typing import Any

from .core.config import SearchConfig
from .core.types import Extension, Filter, Query, ResultWindow, SortClause
from .search.matchers import matches
from .search.pagination import paginate
from .search.patterns import compile_search_pattern, is_blank
from .search.sorter import sort_extensions
from .utils.error_handling import PatternCompilationError
from .utils.logging_config import get_logger


def unique_in_order(elements: list[Any]) -> list[Any]:
    """Remove duplicates (by value) while preserving first-seen order."""
    result: list[Any] = []
    seen: set[Any] = set()
    for element in elements:
        try:
            if element in seen:
                continue
            seen.add(element)
        except TypeError:
            # Unhashable, fall back to an equality scan
            if element in result:
                continue
        result.append(element)
    return result


def filter_extensions(
    pattern: str,
    filters: Iterable[Filter],
    extensions: Iterable[Extension],
    force_unique: bool = False,
) -> list[Extension]:
    """
    Return the extensions matching *pattern* and *filters*, in input order.

    An empty or blank pattern returns every extension and ignores *filters*.

    Raises:
        PatternCompilationError: If *pattern* is not a valid regular expression
    """
    if is_blank(pattern):
        return list(extensions)

    pattern_matcher = compile_search_pattern(pattern)
    filters = list(filters)

    result = [e for e in extensions if matches(pattern_matcher, filters, e)]

    if force_unique and len(result) > 1:
        result = unique_in_order(result)

    return result


def search(
    query: Query, extensions: Iterable[Extension], force_unique: bool = False
) -> ResultWindow:
    """
    Search a collection of extensions.

    Args:
        query: Pattern, filters, sort clauses, offset and limit
        extensions: Extensions to search in; never modified
        force_unique: Make sure returned extensions are unique

    Returns:
        The requested page of matching extensions

    Raises:
        PatternCompilationError: If the query pattern is not a valid regular expression
    """
    logger = get_logger()
    t0 = time.perf_counter()

    if not isinstance(extensions, (list, tuple)):
        extensions = list(extensions)
    logger.log_search_start(
        query.pattern, len(query.filters), len(query.sort_clauses), len(extensions)
    )

    try:
        result = filter_extensions(query.pattern, query.filters, extensions, force_unique)
    except PatternCompilationError as e:
        logger.log_pattern_error(e.pattern, e.reason)
        raise

    sort_extensions(result, query.sort_clauses)

    window = paginate(query.offset, query.limit, result)

    logger.log_search_complete(
        query.pattern, window.total_size, len(window), (time.perf_counter() - t0) * 1000.0
    )
    return window


def search_in_collection(
    pattern: str,
    offset: int,
    limit: int,
    extensions: Iterable[Extension],
    force_unique: bool = False,
) -> ResultWindow:
    """Search *extensions* for *pattern* without filters or sorting."""
    query = Query(pattern=pattern, offset=offset, limit=limit)
    return search(query, extensions, force_unique)


class ExtensionSearch:
    """
    Search engine over a snapshot of extensions.

    The collection is copied at construction so later changes made by the
    caller do not affect running searches.
    """

    def __init__(
        self, extensions: Iterable[Extension], config: SearchConfig | None = None
    ) -> None:
        self.cfg = config or SearchConfig()
        self.cfg.validate()
        self.extensions: tuple[Extension, ...] = tuple(extensions)

    def __len__(self) -> int:
        return len(self.extensions)

    def run(self, query: Query) -> ResultWindow:
        if not query.sort_clauses and self.cfg.default_sort:
            query = dataclasses.replace(query, sort_clauses=list(self.cfg.default_sort))
        if not self.cfg.log_queries:
            return self._run_quiet(query)
        return search(query, self.extensions, self.cfg.force_unique)

    def _run_quiet(self, query: Query) -> ResultWindow:
        result = filter_extensions(
            query.pattern, query.filters, self.extensions, self.cfg.force_unique
        )
        sort_extensions(result, query.sort_clauses)
        return paginate(query.offset, query.limit, result)

    # Convenience api
    def search(
        self,
        pattern: str = "",
        offset: int = 0,
        limit: int | None = None,
        filters: list[Filter] | None = None,
        sort_clauses: list[SortClause] | None = None,
    ) -> ResultWindow:
        q = Query(
            pattern=pattern,
            filters=list(filters or []),
            sort_clauses=list(sort_clauses or []),
            offset=offset,
            limit=limit if limit is not None else self.cfg.default_limit,
        )
        return self.run(q)

    def get(self, extension_id: str, version: str | None = None) -> Extension | None:
        """Return the first extension with the given id (and version, if given)."""
        for extension in self.extensions:
            if extension.id.id != extension_id:
                continue
            if version is None or extension.id.version == version:
                return extension
        return None
