"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .notification_service import NotificationService

__all__ = [
    "CommentService",
    "NotificationService",
    "Service",
]
