"""
Configuration module for extsearch.

This module defines the SearchConfig class holding the defaults an
:class:`~extsearch.api.ExtensionSearch` applies to the queries it runs.

Example:
    >>> from extsearch.core.config import SearchConfig
    >>> from extsearch.core.types import SortClause, SortOrder
    >>>
    >>> config = SearchConfig(
    ...     force_unique=True,
    ...     default_limit=50,
    ...     default_sort=[SortClause("name", SortOrder.ASC)],
    ... )
    >>> config.validate()
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.error_handling import ConfigurationError
from .types import SortClause, SortOrder


@dataclass(slots=True)
class SearchConfig:
    # Behavior
    force_unique: bool = False  # drop value-equal duplicates from results
    default_limit: int = -1  # negative = unbounded

    # Ordering applied when a query has no sort clause
    default_sort: list[SortClause] = field(default_factory=list)

    # Diagnostics
    log_queries: bool = True

    def validate(self) -> None:
        """Validate configuration values and raise ConfigurationError if invalid."""
        errors: list[str] = []

        if isinstance(self.default_limit, bool) or not isinstance(self.default_limit, int):
            errors.append(f"default_limit must be an integer, got {self.default_limit!r}")

        for clause in self.default_sort:
            if not isinstance(clause, SortClause):
                errors.append(f"default_sort entries must be SortClause, got {clause!r}")
                continue
            if not clause.field:
                errors.append("default_sort entries must name a field")
            if not isinstance(clause.order, SortOrder):
                errors.append(f"invalid sort order {clause.order!r} for field '{clause.field}'")

        if errors:
            raise ConfigurationError(
                "Invalid search configuration: " + "; ".join(errors),
                context={"errors": errors},
            )
