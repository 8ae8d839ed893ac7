"""
extsearch: In-memory query engine for extension descriptors.

Filters, matches, orders and paginates a collection of extension records
against a query made of a free-text pattern, structured field filters and
sort clauses.

Main Classes:
    ExtensionSearch: Search engine over a snapshot of extensions
    SearchConfig: Engine defaults (uniqueness, default limit and sort)
    Query: Pattern, filters, sort clauses, offset and limit
    ResultWindow: Total size, requested offset and the page of results
    ExtensionRecord: Ready-made implementation of the Extension contract

Example Usage:
    >>> from extsearch import Comparison, ExtensionId, ExtensionRecord, Query, search
    >>> extensions = [
    ...     ExtensionRecord(ExtensionId("foo.bar", "1.0"), name="Foo Extension"),
    ...     ExtensionRecord(ExtensionId("baz.qux", "1.0"), name="Baz Tool"),
    ... ]
    >>> window = search(Query(pattern="foo", limit=10), extensions)
    >>> window.total_size
    1
"""

from .api import ExtensionSearch, filter_extensions, search, search_in_collection
from .core.config import SearchConfig
from .core.types import (
    Comparison,
    Extension,
    ExtensionAuthor,
    ExtensionId,
    ExtensionLicense,
    ExtensionRecord,
    ExtensionScm,
    Filter,
    OutputFormat,
    Query,
    ResultWindow,
    SortClause,
    SortOrder,
)
from .search.pagination import paginate
from .utils.error_handling import (
    ConfigurationError,
    PatternCompilationError,
    SearchError,
)
from .utils.formatter import format_result
from .utils.logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "In-memory query engine for extension descriptors"

# Public API
__all__ = [
    # Main entry points
    "ExtensionSearch",
    "SearchConfig",
    "search",
    "search_in_collection",
    "filter_extensions",
    "paginate",
    "format_result",
    # Data types
    "Comparison",
    "Extension",
    "ExtensionAuthor",
    "ExtensionId",
    "ExtensionLicense",
    "ExtensionRecord",
    "ExtensionScm",
    "Filter",
    "OutputFormat",
    "Query",
    "ResultWindow",
    "SortClause",
    "SortOrder",
    # Logging
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "PatternCompilationError",
    "ConfigurationError",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
