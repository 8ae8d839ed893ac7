"""Offset/limit windowing of result lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..core.types import ResultWindow


def paginate(offset: int, limit: int, elements: Iterable[Any]) -> ResultWindow:
    """
    Extract one page of *elements*.

    Args:
        offset: Index of the first element to return; a negative offset is
            read as 0 but reported unchanged in the result
        limit: Maximum number of elements to return; 0 returns nothing and a
            negative value means no limit
        elements: The elements to page through, materialised once if they are
            not a sequence

    Returns:
        A ResultWindow with the total number of elements, the requested offset
        and the selected elements
    """
    if not isinstance(elements, Sequence):
        elements = list(elements)
    total_size = len(elements)

    if limit == 0 or offset >= total_size:
        return ResultWindow(total_size=total_size, offset=offset, items=())

    from_index = max(offset, 0)
    if limit > 0:
        to_index = min(from_index + limit, total_size)
    else:
        to_index = total_size

    return ResultWindow(
        total_size=total_size, offset=offset, items=tuple(elements[from_index:to_index])
    )
