"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from remark.domain.model.comment import Comment
from remark.domain.value import CommentId, PaginatedResult, PaginationOptions, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer. Lookups signal absence
    with None or False and never raise for a missing comment.
    """

    @abstractmethod
    async def find_all(self, options: PaginationOptions) -> PaginatedResult[Comment]:
        """Find root comments (comments without a parent).

        Args:
            options: Page, page size and ordering

        Returns:
            One page of root comments
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, options: PaginationOptions
    ) -> PaginatedResult[Comment]:
        """Find direct replies to a comment.

        Does not check that the parent exists.

        Args:
            parent_id: The parent comment ID
            options: Page, page size and ordering

        Returns:
            One page of replies
        """
        pass

    @abstractmethod
    async def create(
        self,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create and store a new comment.

        Does not check that the parent exists.

        Args:
            content: Comment text
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for root comments)

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update(self, comment_id: CommentId, content: str) -> Optional[Comment]:
        """Replace the content of a comment.

        Args:
            comment_id: The comment ID
            content: New text content

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment, leaving its replies in place.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was removed
        """
        pass

    @abstractmethod
    async def delete_replies(self, parent_id: CommentId) -> int:
        """Delete every reply below a comment, at any depth.

        The parent itself is left in place.

        Args:
            parent_id: The comment whose reply tree should be removed

        Returns:
            Number of comments removed
        """
        pass
