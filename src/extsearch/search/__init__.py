"""
Matching, ordering and pagination stages of the search pipeline.

- patterns: Free-text and filter pattern compilation
- matchers: Field lookup and record matching
- sorter: Stable multi-key sorting
- pagination: Offset/limit windowing
"""

from .matchers import get_value, matches, matches_filter
from .pagination import paginate
from .patterns import SEARCH_PATTERN_AFFIX, compile_search_pattern, create_pattern_matcher
from .sorter import SortClauseComparator, sort_extensions

__all__ = [
    # Pattern compilation
    "SEARCH_PATTERN_AFFIX",
    "compile_search_pattern",
    "create_pattern_matcher",
    # Matching
    "get_value",
    "matches",
    "matches_filter",
    # Ordering and pagination
    "SortClauseComparator",
    "sort_extensions",
    "paginate",
]
