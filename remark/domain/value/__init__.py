"""Domain value objects for Remark."""

from remark.domain.value.identifiers import (
    CommentId,
    EventId,
    NotificationId,
    UserId,
)
from remark.domain.value.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_ORDER,
    MAX_LIMIT,
    PaginatedResult,
    PaginationMeta,
    PaginationOptions,
)
from remark.domain.value.types import EventType, SortField, SortOrder

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "NotificationId",
    "EventId",
    # Types
    "EventType",
    "SortField",
    "SortOrder",
    # Pagination
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
    "DEFAULT_SORT_ORDER",
    "MAX_LIMIT",
    "PaginationOptions",
    "PaginationMeta",
    "PaginatedResult",
]
