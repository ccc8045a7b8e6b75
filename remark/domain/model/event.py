"""Domain events for the comment domain.

Events are immutable records of a state change. They are delivered to the
handlers registered on the event bus and never stored.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar
from uuid import uuid4

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import CommentId, EventId, EventType, UserId


class CommentCreatedPayload(DomainModel):
    """Payload of a comment.created event."""

    comment_id: CommentId
    content: str
    author_id: UserId
    parent_id: Optional[CommentId] = None


class CommentUpdatedPayload(DomainModel):
    """Payload of a comment.updated event."""

    comment_id: CommentId
    old_content: str
    new_content: str
    author_id: UserId


class CommentDeletedPayload(DomainModel):
    """Payload of a comment.deleted event."""

    comment_id: CommentId
    author_id: UserId


class CommentRepliedPayload(DomainModel):
    """Payload of a comment.replied event.

    parent_author_id is the user to notify; reply_author_id wrote the reply.
    """

    comment_id: CommentId
    parent_id: CommentId
    parent_author_id: UserId
    reply_author_id: UserId
    content: str


P = TypeVar("P")


class DomainEvent(DomainModel, Generic[P]):
    """Envelope shared by all domain events."""

    type: EventType
    payload: P
    id: EventId = Field(default_factory=lambda: EventId(uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    metadata: Optional[dict[str, Any]] = None

    def __str__(self) -> str:
        return f"DomainEvent({self.type.value}, id={str(self.id)[:8]})"
