"""
Pagination
In-memory page slicing and the page links shown under the catalogue.
"""

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar, Union

T = TypeVar("T")

ELLIPSIS = "..."


@dataclass
class Page(Generic[T]):
    """One page of results."""

    items: List[T]
    page: int
    per_page: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.per_page) if self.total else 0

    @property
    def start_item(self) -> int:
        """1-based index of the first item on this page (0 if empty)."""
        if not self.items:
            return 0
        return (self.page - 1) * self.per_page + 1

    @property
    def end_item(self) -> int:
        if not self.items:
            return 0
        return min(self.page * self.per_page, self.total)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(items: Sequence[T], page: int = 1, per_page: int = 20) -> Page[T]:
    """
    Slice a sequence into a page.

    Args:
        items: Full result list
        page: 1-indexed page number (values below 1 are treated as 1)
        per_page: Items per page

    Returns:
        Page with the requested slice and totals
    """
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")

    page = max(page, 1)
    offset = (page - 1) * per_page
    return Page(items=list(items[offset : offset + per_page]), page=page, per_page=per_page, total=len(items))


def page_window(current: int, total_pages: int, delta: int = 1) -> List[Union[int, str]]:
    """
    Page numbers to show in the pagination control.

    Always includes the first and last page, plus `delta` pages either side
    of the current one; gaps are marked with "...". A current page outside
    1..total_pages is clamped into that range.

    Example:
        page_window(5, 10) -> [1, "...", 4, 5, 6, "...", 10]
    """
    if total_pages < 1:
        return []

    current = min(max(current, 1), total_pages)

    window = list(range(max(2, current - delta), min(total_pages - 1, current + delta) + 1))

    pages: List[Union[int, str]] = [1]
    if current - delta > 2:
        pages.append(ELLIPSIS)
    pages.extend(window)

    if current + delta < total_pages - 1:
        pages.extend([ELLIPSIS, total_pages])
    elif total_pages > 1:
        pages.append(total_pages)

    return pages
