"""In-memory comment repository."""

from collections.abc import Callable
from datetime import datetime
from typing import Optional
from uuid import uuid4

from remark.domain.model.comment import Comment
from remark.domain.repository.comment import CommentRepository
from remark.domain.value import (
    CommentId,
    PaginatedResult,
    PaginationOptions,
    SortField,
    UserId,
)
from remark.persistence.pagination import paginate


def _sort_key(options: PaginationOptions) -> Callable[[Comment], datetime]:
    if options.sort_by == SortField.UPDATED_AT:
        return lambda c: c.updated_at
    return lambda c: c.created_at


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository.

    Comments are immutable, so the stored objects can be handed out directly.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._clock = clock

    async def find_all(self, options: PaginationOptions) -> PaginatedResult[Comment]:
        """Find root comments."""
        comments = [c for c in self._comments.values() if c.is_root]
        return paginate(comments, options, _sort_key(options))

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_replies(
        self, parent_id: CommentId, options: PaginationOptions
    ) -> PaginatedResult[Comment]:
        """Find direct replies to a comment."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        return paginate(comments, options, _sort_key(options))

    async def create(
        self,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create and store a new comment."""
        now = self._clock()
        comment = Comment(
            id=CommentId(uuid4()),
            content=content,
            author_id=author_id,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
        )
        self._comments[comment.id] = comment
        return comment

    async def update(self, comment_id: CommentId, content: str) -> Optional[Comment]:
        """Replace the content of a comment."""
        existing = self._comments.get(comment_id)
        if existing is None:
            return None

        updated = existing.model_copy(
            update={"content": content, "updated_at": self._clock()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete the whole reply tree below a comment."""
        removed = 0
        pending = [parent_id]
        while pending:
            current = pending.pop()
            children = [c.id for c in self._comments.values() if c.parent_id == current]
            for child_id in children:
                del self._comments[child_id]
            removed += len(children)
            pending.extend(children)
        return removed
