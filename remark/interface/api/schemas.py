"""Request and response schemas shared by the API routes."""

from typing import Annotated, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field, StringConstraints

from remark.domain.model.comment import CONTENT_MAX_LENGTH
from remark.domain.value import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    PaginationMeta,
    PaginationOptions,
    SortField,
    SortOrder,
)

T = TypeVar("T")

CommentContent = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=CONTENT_MAX_LENGTH),
]


class PaginationQuery(BaseModel):
    """Query parameters of paginated listings."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    def to_options(self) -> PaginationOptions:
        """Convert to domain pagination options."""
        return PaginationOptions(
            page=self.page,
            limit=self.limit,
            sort_by=self.sort_by,
            sort_order=self.sort_order,
        )


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: CommentContent
    author_id: UUID
    parent_id: UUID | None = None  # Parent comment ID for replies


class CreateReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    content: CommentContent
    author_id: UUID


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: CommentContent


class DataResponse(BaseModel, Generic[T]):
    """Single resource response."""

    success: bool = True
    data: T


class PageResponse(BaseModel, Generic[T]):
    """Paginated listing response."""

    success: bool = True
    data: list[T]
    meta: PaginationMeta


class MessageResponse(BaseModel):
    """Response carrying only a message."""

    success: bool = True
    message: str
