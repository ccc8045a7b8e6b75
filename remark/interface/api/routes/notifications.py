"""Notification routes."""

from typing import Annotated
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from remark.domain.model.notification import Notification
from remark.domain.service import NotificationService
from remark.domain.value import NotificationId, UserId
from remark.interface.api.schemas import (
    DataResponse,
    MessageResponse,
    PageResponse,
    PaginationQuery,
)

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class UnreadCount(BaseModel):
    """Unread notification count."""

    unread_count: int


class MarkedCount(BaseModel):
    """Number of notifications marked as read."""

    marked_count: int


@router.get("/user/{recipient_id}", response_model=PageResponse[Notification])
async def list_notifications(
    recipient_id: UUID,
    pagination: Annotated[PaginationQuery, Query()],
    notification_service: FromDishka[NotificationService],
) -> PageResponse[Notification]:
    """List a user's notifications."""
    result = await notification_service.find_all(
        UserId(recipient_id), pagination.to_options()
    )
    return PageResponse(data=result.data, meta=result.meta)


@router.get(
    "/user/{recipient_id}/unread-count", response_model=DataResponse[UnreadCount]
)
async def get_unread_count(
    recipient_id: UUID,
    notification_service: FromDishka[NotificationService],
) -> DataResponse[UnreadCount]:
    """Count a user's unread notifications."""
    count = await notification_service.get_unread_count(UserId(recipient_id))
    return DataResponse(data=UnreadCount(unread_count=count))


@router.patch("/user/{recipient_id}/read-all", response_model=DataResponse[MarkedCount])
async def mark_all_as_read(
    recipient_id: UUID,
    notification_service: FromDishka[NotificationService],
) -> DataResponse[MarkedCount]:
    """Mark all of a user's notifications as read."""
    count = await notification_service.mark_all_as_read(UserId(recipient_id))
    return DataResponse(data=MarkedCount(marked_count=count))


@router.get("/{notification_id}", response_model=DataResponse[Notification])
async def get_notification(
    notification_id: UUID,
    notification_service: FromDishka[NotificationService],
) -> DataResponse[Notification]:
    """Get a notification by ID."""
    notification = await notification_service.find_by_id(
        NotificationId(notification_id)
    )
    return DataResponse(data=notification)


@router.patch("/{notification_id}/read", response_model=DataResponse[Notification])
async def mark_as_read(
    notification_id: UUID,
    notification_service: FromDishka[NotificationService],
) -> DataResponse[Notification]:
    """Mark a notification as read."""
    notification = await notification_service.mark_as_read(
        NotificationId(notification_id)
    )
    return DataResponse(data=notification)


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: UUID,
    notification_service: FromDishka[NotificationService],
) -> MessageResponse:
    """Delete a notification."""
    await notification_service.delete(NotificationId(notification_id))
    return MessageResponse(message="Notification deleted successfully")
