"""
Utility modules: error types, logging setup and result formatting.
"""

from .error_handling import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    PatternCompilationError,
    SearchError,
)
from .formatter import format_result, render_table_console
from .logging_config import configure_logging, disable_logging, enable_debug_logging, get_logger

__all__ = [
    # Error handling
    "ConfigurationError",
    "ErrorCategory",
    "ErrorSeverity",
    "PatternCompilationError",
    "SearchError",
    # Formatting
    "format_result",
    "render_table_console",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
