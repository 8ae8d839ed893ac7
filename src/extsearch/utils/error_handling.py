"""
Error handling for extsearch.

Searching is forgiving by design: unknown fields, non-string filter values,
empty collections and out-of-range offsets are all regular inputs. The only
failure surfaced to callers is a free-text pattern that is not a valid
regular expression, plus invalid engine configuration.

Error Categories:
    - PATTERN: Free-text pattern could not be compiled
    - CONFIGURATION: Invalid engine configuration
    - VALIDATION: Invalid query input
    - UNKNOWN: Anything else

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    SearchError: Base exception class for extsearch errors
    PatternCompilationError: Raised for a malformed free-text pattern
    ConfigurationError: Raised by SearchConfig.validate()

Example:
    >>> from extsearch.utils.error_handling import PatternCompilationError
    >>>
    >>> try:
    ...     window = search(Query(pattern="(unclosed"), extensions)
    ... except PatternCompilationError as e:
    ...     print(f"Bad pattern {e.pattern!r}: {e.message}")
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    PATTERN = "pattern"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class PatternCompilationError(SearchError):
    """The free-text search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str, context: dict[str, Any] | None = None) -> None:
        merged_context: dict[str, Any] = {}
        if context:
            merged_context.update(context)
        merged_context["pattern"] = pattern

        super().__init__(
            f"Invalid search pattern '{pattern}': {reason}",
            category=ErrorCategory.PATTERN,
            severity=ErrorSeverity.MEDIUM,
            suggestions=[
                "Escape regular expression metacharacters such as ( [ * +",
                "Use a filter with MATCH comparison for literal substring search",
            ],
            context=merged_context,
        )
        self.pattern: str = pattern
        self.reason: str = reason


class ConfigurationError(SearchError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Verify all configured values",
                "Use default configuration",
            ],
            context=context,
        )
