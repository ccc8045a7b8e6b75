"""Comment entity.

Comments form reply threads: a comment without a parent is a root comment,
every other comment is a reply to the comment named by parent_id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, UserId

CONTENT_MAX_LENGTH = 5000


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through parent_id alone: None for a root comment,
    otherwise the id of the comment being replied to. created_at and
    updated_at are equal until the content is first edited.
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    author_id: UserId
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None
