from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def normalize(page: int | None, page_size: int | None) -> tuple[int, int]:
    """Resolve optional paging input to a concrete (page, page_size).

    Missing or non-positive values fall back to the defaults; page sizes
    above MAX_PAGE_SIZE are clamped rather than rejected.
    """
    p = page if page is not None and page > 0 else DEFAULT_PAGE
    s = page_size if page_size is not None and page_size > 0 else DEFAULT_PAGE_SIZE
    return p, min(s, MAX_PAGE_SIZE)


def total_pages(total: int, page_size: int) -> int:
    if total <= 0:
        return 1
    return math.ceil(total / page_size)


def slice_page(items: Sequence[T], page: int, page_size: int) -> list[T]:
    offset = (page - 1) * page_size
    if offset >= len(items):
        return []
    return list(items[offset : offset + page_size])
