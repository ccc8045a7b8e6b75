"""Notification domain service."""

import logfire

from remark.domain.error import NotFoundError
from remark.domain.event import EventBus
from remark.domain.model.event import (
    CommentCreatedPayload,
    CommentDeletedPayload,
    CommentRepliedPayload,
    CommentUpdatedPayload,
    DomainEvent,
)
from remark.domain.model.notification import CreateNotification, Notification
from remark.domain.repository import NotificationRepository
from remark.domain.value import (
    EventType,
    NotificationId,
    PaginatedResult,
    PaginationOptions,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for notifications.

    Subscribes to comment events on construction and turns each one into a
    notification for the affected user. Must be constructed once per bus,
    otherwise every event produces one notification per instance.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        event_bus: EventBus,
    ) -> None:
        """Initialize notification service and subscribe to comment events.

        Args:
            notification_repository: Notification repository
            event_bus: Bus publishing comment domain events
        """
        self.notification_repository = notification_repository
        self.event_bus = event_bus
        self._subscribe()

    def _subscribe(self) -> None:
        self.event_bus.on(EventType.COMMENT_CREATED, self._on_comment_created)
        self.event_bus.on(EventType.COMMENT_UPDATED, self._on_comment_updated)
        self.event_bus.on(EventType.COMMENT_DELETED, self._on_comment_deleted)
        self.event_bus.on(EventType.COMMENT_REPLIED, self._on_comment_replied)
        logfire.info("NotificationService subscribed to comment events")

    async def _on_comment_created(
        self, event: DomainEvent[CommentCreatedPayload]
    ) -> None:
        logfire.debug("Handling comment.created", event_id=str(event.id))
        await self.create(
            CreateNotification(
                type=event.type,
                title="Comment Created",
                message="Your comment was created successfully",
                recipient_id=event.payload.author_id,
                metadata={"comment_id": str(event.payload.comment_id)},
            )
        )

    async def _on_comment_updated(
        self, event: DomainEvent[CommentUpdatedPayload]
    ) -> None:
        logfire.debug("Handling comment.updated", event_id=str(event.id))
        await self.create(
            CreateNotification(
                type=event.type,
                title="Comment Updated",
                message="Your comment was updated successfully",
                recipient_id=event.payload.author_id,
                metadata={"comment_id": str(event.payload.comment_id)},
            )
        )

    async def _on_comment_deleted(
        self, event: DomainEvent[CommentDeletedPayload]
    ) -> None:
        logfire.debug("Handling comment.deleted", event_id=str(event.id))
        await self.create(
            CreateNotification(
                type=event.type,
                title="Comment Deleted",
                message="Your comment was deleted",
                recipient_id=event.payload.author_id,
                metadata={"comment_id": str(event.payload.comment_id)},
            )
        )

    async def _on_comment_replied(
        self, event: DomainEvent[CommentRepliedPayload]
    ) -> None:
        logfire.debug("Handling comment.replied", event_id=str(event.id))
        # The parent's author is notified, not the author of the reply
        await self.create(
            CreateNotification(
                type=event.type,
                title="New Reply",
                message="Someone replied to your comment",
                recipient_id=event.payload.parent_author_id,
                metadata={
                    "comment_id": str(event.payload.comment_id),
                    "parent_id": str(event.payload.parent_id),
                    "reply_author_id": str(event.payload.reply_author_id),
                },
            )
        )

    async def find_all(
        self, recipient_id: UserId, options: PaginationOptions
    ) -> PaginatedResult[Notification]:
        """List a recipient's notifications, newest first by default."""
        with logfire.span(
            "notification_service.find_all", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.find_all(recipient_id, options)

    async def find_by_id(self, notification_id: NotificationId) -> Notification:
        """Get a notification by ID.

        Raises:
            NotFoundError: If the notification doesn't exist
        """
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        return notification

    async def get_unread_count(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        return await self.notification_repository.count_unread(recipient_id)

    async def create(self, request: CreateNotification) -> Notification:
        """Create a notification.

        Args:
            request: Validated notification data

        Returns:
            Created notification
        """
        with logfire.span(
            "notification_service.create",
            type=request.type.value,
            recipient_id=str(request.recipient_id),
        ):
            notification = await self.notification_repository.create(
                type=request.type,
                title=request.title,
                message=request.message,
                recipient_id=request.recipient_id,
                metadata=request.metadata,
            )
            logfire.info(
                "Notification created",
                notification_id=str(notification.id),
                type=notification.type.value,
            )
            return notification

    async def mark_as_read(self, notification_id: NotificationId) -> Notification:
        """Mark a notification as read.

        Raises:
            NotFoundError: If the notification doesn't exist
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=str(notification_id),
        ):
            notification = await self.notification_repository.mark_as_read(
                notification_id
            )
            if notification is None:
                raise NotFoundError("Notification", str(notification_id))
            return notification

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark all of a recipient's unread notifications as read.

        Returns:
            Number of notifications marked
        """
        with logfire.span(
            "notification_service.mark_all_as_read", recipient_id=str(recipient_id)
        ):
            count = await self.notification_repository.mark_all_as_read(recipient_id)
            logfire.info(
                "Notifications marked as read",
                recipient_id=str(recipient_id),
                count=count,
            )
            return count

    async def delete(self, notification_id: NotificationId) -> None:
        """Delete a notification.

        Raises:
            NotFoundError: If the notification doesn't exist
        """
        with logfire.span(
            "notification_service.delete", notification_id=str(notification_id)
        ):
            await self.find_by_id(notification_id)
            await self.notification_repository.delete(notification_id)
