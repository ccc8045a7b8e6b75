"""In-memory repository implementations."""

from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
]
