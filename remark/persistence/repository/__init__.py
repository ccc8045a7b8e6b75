"""Repository implementations.

All state is process-lifetime memory; a restart clears everything.
"""

from remark.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
)

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
]
