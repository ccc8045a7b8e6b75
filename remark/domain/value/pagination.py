"""Pagination value objects.

A request names a page, a page size and an ordering; a result carries one
page of items plus the metadata a client needs to walk the rest.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from remark.domain.value.common import ValueObject
from remark.domain.value.types import SortField, SortOrder

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = SortField.CREATED_AT
DEFAULT_SORT_ORDER = SortOrder.DESC

T = TypeVar("T")


class PaginationOptions(ValueObject):
    """Which page to return and how to order the collection.

    A page or limit of 0 is accepted and falls back to the default.
    """

    page: int = Field(default=DEFAULT_PAGE, ge=0)
    limit: int = Field(default=DEFAULT_LIMIT, ge=0, le=MAX_LIMIT)
    sort_by: SortField = DEFAULT_SORT_FIELD
    sort_order: SortOrder = DEFAULT_SORT_ORDER


class PaginationMeta(ValueObject):
    """Metadata describing one page of a listing."""

    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class PaginatedResult(BaseModel, Generic[T]):
    """One page of items plus its metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: list[T]
    meta: PaginationMeta
