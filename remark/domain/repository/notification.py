"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from remark.domain.model.notification import Notification
from remark.domain.value import (
    EventType,
    NotificationId,
    PaginatedResult,
    PaginationOptions,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Notifications are scoped by recipient. Lookups signal absence with None
    or False and never raise for a missing notification.
    """

    @abstractmethod
    async def find_all(
        self, recipient_id: UserId, options: PaginationOptions
    ) -> PaginatedResult[Notification]:
        """Find a recipient's notifications ordered by creation time.

        Args:
            recipient_id: The recipient's user ID
            options: Page, page size and sort direction

        Returns:
            One page of notifications
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        pass

    @abstractmethod
    async def create(
        self,
        type: EventType,
        title: str,
        message: str,
        recipient_id: UserId,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Notification:
        """Create and store a new unread notification."""
        pass

    @abstractmethod
    async def mark_as_read(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Mark a notification as read.

        The read timestamp is refreshed even if it was already read.

        Returns:
            The updated notification, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read.

        Returns:
            Number of notifications that changed
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Returns:
            True if a notification was removed
        """
        pass
