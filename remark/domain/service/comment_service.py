"""Comment domain service."""

from typing import Optional

import logfire

from remark.domain.error import NotFoundError
from remark.domain.event import EventBus
from remark.domain.model.comment import Comment
from remark.domain.model.event import (
    CommentCreatedPayload,
    CommentDeletedPayload,
    CommentRepliedPayload,
    CommentUpdatedPayload,
    DomainEvent,
)
from remark.domain.repository import CommentRepository
from remark.domain.value import (
    CommentId,
    EventType,
    PaginatedResult,
    PaginationOptions,
    UserId,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Enforces that parents exist, cascades deletes through reply trees and
    publishes one domain event after every successful mutation.
    """

    def __init__(
        self, comment_repository: CommentRepository, event_bus: EventBus
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            event_bus: Bus that receives comment domain events
        """
        self.comment_repository = comment_repository
        self.event_bus = event_bus

    async def find_all(self, options: PaginationOptions) -> PaginatedResult[Comment]:
        """List root comments.

        Args:
            options: Page, page size and ordering

        Returns:
            One page of root comments
        """
        with logfire.span(
            "comment_service.find_all", page=options.page, limit=options.limit
        ):
            return await self.comment_repository.find_all(options)

    async def find_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.find_by_id", comment_id=str(comment_id)):
            return await self._require(comment_id)

    async def find_replies(
        self, parent_id: CommentId, options: PaginationOptions
    ) -> PaginatedResult[Comment]:
        """List direct replies to a comment.

        Args:
            parent_id: Parent comment ID
            options: Page, page size and ordering

        Returns:
            One page of replies

        Raises:
            NotFoundError: If the parent comment doesn't exist
        """
        with logfire.span("comment_service.find_replies", parent_id=str(parent_id)):
            await self._require(parent_id)
            return await self.comment_repository.find_replies(parent_id, options)

    async def create(
        self,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment, optionally under an existing parent.

        Args:
            content: Comment text
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            Created comment

        Raises:
            NotFoundError: If parent_id is given and doesn't exist
        """
        with logfire.span(
            "comment_service.create",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id is not None:
                await self._require(parent_id)

            comment = await self.comment_repository.create(
                content=content, author_id=author_id, parent_id=parent_id
            )
            logfire.info("Comment created", comment_id=str(comment.id))

            self.event_bus.emit(
                DomainEvent(
                    type=EventType.COMMENT_CREATED,
                    payload=CommentCreatedPayload(
                        comment_id=comment.id,
                        content=comment.content,
                        author_id=comment.author_id,
                        parent_id=comment.parent_id,
                    ),
                )
            )
            return comment

    async def create_reply(
        self, parent_id: CommentId, content: str, author_id: UserId
    ) -> Comment:
        """Reply to a comment and notify the parent's author.

        Args:
            parent_id: Comment being replied to
            content: Reply text
            author_id: Reply author user ID

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent comment doesn't exist
        """
        with logfire.span(
            "comment_service.create_reply",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            parent = await self._require(parent_id)

            reply = await self.comment_repository.create(
                content=content, author_id=author_id, parent_id=parent_id
            )
            logfire.info(
                "Reply created", comment_id=str(reply.id), parent_id=str(parent_id)
            )

            self.event_bus.emit(
                DomainEvent(
                    type=EventType.COMMENT_REPLIED,
                    payload=CommentRepliedPayload(
                        comment_id=reply.id,
                        parent_id=parent_id,
                        parent_author_id=parent.author_id,
                        reply_author_id=reply.author_id,
                        content=reply.content,
                    ),
                )
            )
            return reply

    async def update(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.update", comment_id=str(comment_id)):
            existing = await self._require(comment_id)

            updated = await self.comment_repository.update(comment_id, content)
            if updated is None:
                logfire.warn("Comment vanished during update", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment updated", comment_id=str(comment_id))
            self.event_bus.emit(
                DomainEvent(
                    type=EventType.COMMENT_UPDATED,
                    payload=CommentUpdatedPayload(
                        comment_id=updated.id,
                        old_content=existing.content,
                        new_content=updated.content,
                        author_id=updated.author_id,
                    ),
                )
            )
            return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment together with its whole reply tree.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.delete", comment_id=str(comment_id)):
            comment = await self._require(comment_id)

            replies_removed = await self.comment_repository.delete_replies(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                replies_removed=replies_removed,
            )

            self.event_bus.emit(
                DomainEvent(
                    type=EventType.COMMENT_DELETED,
                    payload=CommentDeletedPayload(
                        comment_id=comment_id, author_id=comment.author_id
                    ),
                )
            )

    async def _require(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment
