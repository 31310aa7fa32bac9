"""
Pagination component - Stateless page window arithmetic.

Callers own the current page; these functions only clamp and slice.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from .models import PageWindow, PaginationError

T = TypeVar("T")


def next_page(current_page: int, last_page: int) -> int:
    """Advance one page, never past the last page."""
    return min(current_page + 1, last_page)


def prev_page(current_page: int) -> int:
    """Go back one page, never before page 1."""
    return max(current_page - 1, 1)


def compute_page_window(total: int, per_page: int, current_page: int = 1) -> PageWindow:
    """
    Compute the page window for a result set.

    Args:
        total: Number of items in the full result set
        per_page: Page size (>= 1)
        current_page: Requested page, clamped into [1, last_page]

    Returns:
        PageWindow

    Raises:
        PaginationError: if per_page < 1 or total < 0
    """
    if per_page < 1:
        raise PaginationError(f"per_page must be at least 1, got {per_page}")
    if total < 0:
        raise PaginationError(f"total cannot be negative, got {total}")

    last_page = max(1, math.ceil(total / per_page))
    page = min(max(current_page, 1), last_page)

    if total == 0:
        from_item = to_item = 0
    else:
        from_item = (page - 1) * per_page + 1
        to_item = min(page * per_page, total)

    return PageWindow(
        current_page=page,
        last_page=last_page,
        per_page=per_page,
        total=total,
        from_item=from_item,
        to_item=to_item,
    )


def paginate(items: Sequence[T], per_page: int, current_page: int = 1) -> tuple[list[T], PageWindow]:
    """Slice one page out of items and return it with its window."""
    window = compute_page_window(len(items), per_page, current_page)
    if window.total == 0:
        return [], window
    return list(items[window.from_item - 1 : window.to_item]), window
