"""Comment routes."""

from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from remark.domain.model.comment import Comment
from remark.domain.service import CommentService
from remark.domain.value import CommentId, UserId
from remark.interface.api.schemas import (
    CreateCommentAPIRequest,
    CreateReplyAPIRequest,
    DataResponse,
    MessageResponse,
    PageResponse,
    PaginationQuery,
    UpdateCommentAPIRequest,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("", response_model=PageResponse[Comment])
async def list_comments(
    pagination: Annotated[PaginationQuery, Query()],
    comment_service: FromDishka[CommentService],
) -> PageResponse[Comment]:
    """List root comments (replies are listed per comment)."""
    result = await comment_service.find_all(pagination.to_options())
    return PageResponse(data=result.data, meta=result.meta)


@router.get("/{comment_id}", response_model=DataResponse[Comment])
async def get_comment(
    comment_id: UUID,
    comment_service: FromDishka[CommentService],
) -> DataResponse[Comment]:
    """Get a comment by ID."""
    comment = await comment_service.find_by_id(CommentId(comment_id))
    return DataResponse(data=comment)


@router.get("/{comment_id}/replies", response_model=PageResponse[Comment])
async def list_replies(
    comment_id: UUID,
    pagination: Annotated[PaginationQuery, Query()],
    comment_service: FromDishka[CommentService],
) -> PageResponse[Comment]:
    """List direct replies to a comment."""
    result = await comment_service.find_replies(
        CommentId(comment_id), pagination.to_options()
    )
    return PageResponse(data=result.data, meta=result.meta)


@router.post(
    "/{comment_id}/replies",
    response_model=DataResponse[Comment],
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: UUID,
    request: CreateReplyAPIRequest,
    comment_service: FromDishka[CommentService],
) -> DataResponse[Comment]:
    """Reply to a comment. The parent's author is notified."""
    reply = await comment_service.create_reply(
        parent_id=CommentId(comment_id),
        content=request.content,
        author_id=UserId(request.author_id),
    )
    return DataResponse(data=reply)


@router.post(
    "",
    response_model=DataResponse[Comment],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    comment_service: FromDishka[CommentService],
) -> DataResponse[Comment]:
    """Create a root comment, or a reply when parent_id is given."""
    comment = await comment_service.create(
        content=request.content,
        author_id=UserId(request.author_id),
        parent_id=CommentId(request.parent_id) if request.parent_id else None,
    )
    return DataResponse(data=comment)


@router.put("/{comment_id}", response_model=DataResponse[Comment])
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    comment_service: FromDishka[CommentService],
) -> DataResponse[Comment]:
    """Replace a comment's content."""
    comment = await comment_service.update(CommentId(comment_id), request.content)
    return DataResponse(data=comment)


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: UUID,
    comment_service: FromDishka[CommentService],
) -> MessageResponse:
    """Delete a comment and all of its replies."""
    await comment_service.delete(CommentId(comment_id))
    return MessageResponse(message="Comment deleted successfully")
