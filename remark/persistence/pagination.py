"""Pagination over in-memory collections."""

import math
from collections.abc import Callable, Sequence
from typing import Any, Optional, TypeVar

from remark.domain.value import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_ORDER,
    PaginatedResult,
    PaginationMeta,
    PaginationOptions,
    SortOrder,
)

T = TypeVar("T")


def paginate(
    items: Sequence[T],
    options: PaginationOptions,
    sort_key: Optional[Callable[[T], Any]] = None,
) -> PaginatedResult[T]:
    """Sort and slice a collection into one page.

    Items are sorted by sort_key when given, otherwise their order is kept.
    The sort is stable in both directions, so items with equal keys stay in
    their original relative order. A page past the end is empty, not an error.

    Args:
        items: Already-filtered collection
        options: Page, page size and sort direction (0 means default)
        sort_key: Extracts a naturally ordered key (datetime, number, str)

    Returns:
        The requested page and its metadata
    """
    page = options.page or DEFAULT_PAGE
    limit = options.limit or DEFAULT_LIMIT
    sort_order = options.sort_order or DEFAULT_SORT_ORDER

    if sort_key is not None:
        ordered = sorted(
            items, key=sort_key, reverse=sort_order == SortOrder.DESC
        )
    else:
        ordered = list(items)

    total = len(ordered)
    total_pages = math.ceil(total / limit)
    offset = (page - 1) * limit

    return PaginatedResult(
        data=ordered[offset : offset + limit],
        meta=PaginationMeta(
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        ),
    )
