"""
Pagination component models.
"""

from __future__ import annotations

from dataclasses import dataclass


class PaginationError(ValueError):
    """Invalid pagination arguments."""


@dataclass(frozen=True)
class PageWindow:
    """
    Position of one page within a result set.

    from_item / to_item are 1-based and inclusive; both are 0 for an empty
    result set.
    """

    current_page: int
    last_page: int
    per_page: int
    total: int
    from_item: int
    to_item: int

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.last_page

    @property
    def should_display(self) -> bool:
        """Page controls are hidden when everything fits on one page."""
        return self.last_page > 1

    @property
    def label(self) -> str:
        return f"Showing {self.from_item} to {self.to_item} of {self.total} items"

    @property
    def page_label(self) -> str:
        return f"Page {self.current_page} of {self.last_page}"
