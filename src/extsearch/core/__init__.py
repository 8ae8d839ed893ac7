"""
Core functionality for extsearch.

- types: Record contract, query specification and result window
- config: Engine defaults and validation
"""

from .config import SearchConfig
from .types import (
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

__all__ = [
    "SearchConfig",
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
]
