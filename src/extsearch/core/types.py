"""
Core type definitions for extsearch.

This module contains the record contract the engine searches over, the query
specification built by callers, and the paginated result envelope returned
by every search.

Key Types:
    Extension: Protocol every searchable record must implement
    ExtensionRecord: Immutable, value-comparable implementation of Extension
    Comparison: Filter comparison kinds (MATCH, EQUAL)
    SortOrder: Sort directions (ASC, DESC)
    Filter: A (field, comparison, value) constraint
    SortClause: One level of a multi-key ordering
    Query: Free-text pattern plus filters, sort clauses, offset and limit
    ResultWindow: Total size, requested offset and the bounded item slice

Example:
    Building a query:
        >>> from extsearch.core.types import Comparison, Query, SortOrder
        >>>
        >>> query = Query(pattern="office", limit=20)
        >>> query.add_filter("category", "application", Comparison.EQUAL)
        >>> query.add_sort("name", SortOrder.ASC)

    Working with results:
        >>> window = search(query, extensions)
        >>> print(f"{len(window)} of {window.total_size} starting at {window.offset}")
        >>> for extension in window:
        ...     print(extension.id)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class Comparison(str, Enum):
    """How a filter value is compared with a record field."""

    MATCH = "match"
    EQUAL = "equal"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    TABLE = "table"


@dataclass(frozen=True, slots=True)
class ExtensionId:
    """Identifier and version pair of an extension."""

    id: str
    version: str | None = None

    def __str__(self) -> str:
        return self.id if self.version is None else f"{self.id}/{self.version}"


@dataclass(frozen=True, slots=True)
class ExtensionAuthor:
    name: str
    url: str | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ExtensionLicense:
    name: str
    content: str | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ExtensionScm:
    """Source control locator (browsable URL plus optional connections)."""

    url: str
    connection: str | None = None
    developer_connection: str | None = None

    def __str__(self) -> str:
        return self.url


@runtime_checkable
class Extension(Protocol):
    """
    Capability set the engine expects from a searchable record.

    Any object exposing these attributes can be searched, filtered and sorted.
    Named properties outside the well-known attributes are reached through
    :meth:`get_property`, which returns ``None`` for unknown keys.
    """

    @property
    def id(self) -> ExtensionId: ...

    @property
    def name(self) -> str | None: ...

    @property
    def description(self) -> str | None: ...

    @property
    def summary(self) -> str | None: ...

    @property
    def features(self) -> tuple[str, ...]: ...

    @property
    def authors(self) -> tuple[ExtensionAuthor, ...]: ...

    @property
    def category(self) -> str | None: ...

    @property
    def licenses(self) -> tuple[ExtensionLicense, ...]: ...

    @property
    def type(self) -> str | None: ...

    @property
    def website(self) -> str | None: ...

    @property
    def scm(self) -> ExtensionScm | None: ...

    def get_property(self, name: str) -> Any | None: ...


@dataclass(frozen=True, slots=True)
class ExtensionRecord:
    """
    Immutable extension descriptor implementing :class:`Extension`.

    Records compare by value. ``properties`` takes part in equality but not in
    hashing, so records stay hashable while carrying an arbitrary mapping.

    Example:
        >>> record = ExtensionRecord(
        ...     id=ExtensionId("org.example:office", "2.1"),
        ...     name="Office Importer",
        ...     features=("office-importer",),
        ...     authors=(ExtensionAuthor("Jane Roe"),),
        ...     properties={"namespace": "wiki"},
        ... )
        >>> record.get_property("namespace")
        'wiki'
    """

    id: ExtensionId
    name: str | None = None
    description: str | None = None
    summary: str | None = None
    features: tuple[str, ...] = ()
    authors: tuple[ExtensionAuthor, ...] = ()
    category: str | None = None
    licenses: tuple[ExtensionLicense, ...] = ()
    type: str | None = None
    website: str | None = None
    scm: ExtensionScm | None = None
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def get_property(self, name: str) -> Any | None:
        return self.properties.get(name)


@dataclass(slots=True)
class Filter:
    """
    Structured constraint on a single record field.

    Only string values take part in comparisons; any other value makes the
    filter pass. :attr:`text_value` exposes that distinction.
    """

    field: str
    value: Any
    comparison: Comparison = Comparison.MATCH

    @property
    def text_value(self) -> str | None:
        """The filter value if it is a string, otherwise ``None``."""
        return self.value if isinstance(self.value, str) else None


@dataclass(slots=True)
class SortClause:
    field: str
    order: SortOrder = SortOrder.ASC


@dataclass(slots=True)
class Query:
    r"""
    Search query specification.

    Attributes:
        pattern: Free-text regular expression searched in id, description,
            summary, name and features. Empty means "everything", in which
            case filters are not applied.
        filters: Field constraints, all of which must pass
        sort_clauses: Ordered sort keys, first one wins
        offset: Index of the first returned record (negative is read as 0)
        limit: Maximum number of returned records; negative means unbounded
            and 0 returns no record
    """

    pattern: str = ""
    filters: list[Filter] = field(default_factory=list)
    sort_clauses: list[SortClause] = field(default_factory=list)
    offset: int = 0
    limit: int = -1

    def add_filter(
        self, field: str, value: Any, comparison: Comparison = Comparison.MATCH
    ) -> Query:
        self.filters.append(Filter(field=field, value=value, comparison=comparison))
        return self

    def add_sort(self, field: str, order: SortOrder = SortOrder.ASC) -> Query:
        self.sort_clauses.append(SortClause(field=field, order=order))
        return self


@dataclass(frozen=True, slots=True)
class ResultWindow:
    """
    One page of search results.

    Attributes:
        total_size: Number of results before pagination
        offset: The offset that was requested, as given (not clamped)
        items: The records of this page
    """

    total_size: int
    offset: int
    items: tuple[Any, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_size": self.total_size,
            "offset": self.offset,
            "items": [_extension_to_dict(item) for item in self.items],
        }


def _extension_to_dict(extension: Any) -> dict[str, Any]:
    return {
        "id": extension.id.id,
        "version": extension.id.version,
        "name": extension.name,
        "summary": extension.summary,
        "description": extension.description,
        "features": list(extension.features),
        "authors": [str(author) for author in extension.authors],
        "category": extension.category,
        "licenses": [str(lic) for lic in extension.licenses],
        "type": extension.type,
        "website": extension.website,
        "scm": str(extension.scm) if extension.scm is not None else None,
    }
