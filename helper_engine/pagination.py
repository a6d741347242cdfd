"""Pagination engine: fixed-size pages and the page-button window."""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from .config import PAGE_SIZE, PAGE_WINDOW

T = TypeVar("T")


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def get_page(data: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> List[T]:
    """Slice out page `page` (1-based). Out-of-range pages give an empty list."""
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(data[start:start + page_size])


def page_window(current: int, pages: int, width: int = PAGE_WINDOW) -> List[int]:
    """Page numbers to show as buttons, centered on `current` where possible.

    Near the start the first `width` pages are shown; near the end the last
    `width` pages are shown.
    """
    half = width // 2
    start = max(1, current - half)
    end = min(pages, current + half)
    if current <= half + 1:
        end = min(width, pages)
    if current >= pages - half:
        start = max(1, pages - width + 1)
    return list(range(start, end + 1))


def page_info(current: int, pages: int) -> str:
    return f"Page {current} of {pages}"


def has_prev(current: int) -> bool:
    return current > 1


def has_next(current: int, pages: int) -> bool:
    return pages > 0 and current < pages
