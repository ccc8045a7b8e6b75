"""Notification entity."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from remark.domain.model.common import DomainModel
from remark.domain.value import EventType, NotificationId, UserId


class Notification(DomainModel):
    """A message addressed to one recipient.

    read_at is set exactly when read is True.
    """

    id: NotificationId
    type: EventType
    title: str
    message: str
    recipient_id: UserId
    read: bool = False
    read_at: Optional[datetime] = None
    metadata: Optional[dict[str, Any]] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_read_state(self) -> "Notification":
        """Keep the read flag and the read timestamp consistent."""
        if self.read != (self.read_at is not None):
            raise ValueError("read_at must be set if and only if read is True")
        return self


class CreateNotification(DomainModel):
    """Validated request to create a notification."""

    type: EventType
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=1000)
    recipient_id: UserId
    metadata: Optional[dict[str, Any]] = None
