"""
Pagination component - Page window for list views.
"""

from .component import compute_page_window, next_page, paginate, prev_page
from .models import PageWindow, PaginationError

__all__ = [
    "compute_page_window",
    "next_page",
    "paginate",
    "prev_page",
    "PageWindow",
    "PaginationError",
]
