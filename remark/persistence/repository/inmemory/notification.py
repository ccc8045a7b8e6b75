"""In-memory notification repository."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from remark.domain.model.notification import Notification
from remark.domain.repository.notification import NotificationRepository
from remark.domain.value import (
    EventType,
    NotificationId,
    PaginatedResult,
    PaginationOptions,
    UserId,
)
from remark.persistence.pagination import paginate


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository.

    Notifications carry a mutable metadata dict, so every record leaving the
    repository is a deep copy.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._notifications: dict[NotificationId, Notification] = {}
        self._clock = clock

    async def find_all(
        self, recipient_id: UserId, options: PaginationOptions
    ) -> PaginatedResult[Notification]:
        """Find a recipient's notifications ordered by creation time."""
        notifications = [
            n.model_copy(deep=True)
            for n in self._notifications.values()
            if n.recipient_id == recipient_id
        ]
        return paginate(notifications, options, lambda n: n.created_at)

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        notification = self._notifications.get(notification_id)
        return notification.model_copy(deep=True) if notification else None

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.read
        )

    async def create(
        self,
        type: EventType,
        title: str,
        message: str,
        recipient_id: UserId,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Notification:
        """Create and store a new unread notification."""
        notification = Notification(
            id=NotificationId(uuid4()),
            type=type,
            title=title,
            message=message,
            recipient_id=recipient_id,
            read=False,
            read_at=None,
            metadata=metadata,
            created_at=self._clock(),
        )
        # Nested metadata values must not stay shared with the caller
        self._notifications[notification.id] = notification.model_copy(deep=True)
        return notification.model_copy(deep=True)

    async def mark_as_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Mark a notification as read, refreshing read_at."""
        existing = self._notifications.get(notification_id)
        if existing is None:
            return None

        updated = existing.model_copy(update={"read": True, "read_at": self._clock()})
        self._notifications[notification_id] = updated
        return updated.model_copy(deep=True)

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark a recipient's unread notifications as read."""
        now = self._clock()
        count = 0
        for notification_id, notification in list(self._notifications.items()):
            if notification.recipient_id == recipient_id and not notification.read:
                self._notifications[notification_id] = notification.model_copy(
                    update={"read": True, "read_at": now}
                )
                count += 1
        return count

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification."""
        return self._notifications.pop(notification_id, None) is not None
