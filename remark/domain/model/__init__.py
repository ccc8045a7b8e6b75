"""Domain models for Remark."""

from remark.domain.model.comment import Comment
from remark.domain.model.event import (
    CommentCreatedPayload,
    CommentDeletedPayload,
    CommentRepliedPayload,
    CommentUpdatedPayload,
    DomainEvent,
)
from remark.domain.model.notification import CreateNotification, Notification

__all__ = [
    "Comment",
    "Notification",
    "CreateNotification",
    "DomainEvent",
    "CommentCreatedPayload",
    "CommentUpdatedPayload",
    "CommentDeletedPayload",
    "CommentRepliedPayload",
]
