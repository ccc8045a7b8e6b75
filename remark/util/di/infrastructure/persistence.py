"""Persistence infrastructure providers."""

from dishka import Scope, provide

from remark.domain.repository import CommentRepository, NotificationRepository
from remark.persistence.repository import (
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
)
from remark.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """In-memory persistence provider.

    Repositories live as long as the container, so a fresh container starts
    from an empty store.
    """

    scope = Scope.APP

    @provide
    def get_comment_repository(self) -> CommentRepository:
        """Provide Comment repository."""
        return InMemoryCommentRepository()

    @provide
    def get_notification_repository(self) -> NotificationRepository:
        """Provide Notification repository."""
        return InMemoryNotificationRepository()
