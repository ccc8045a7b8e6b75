"""Domain enumerations for Remark."""

from enum import Enum


class EventType(str, Enum):
    """Type of a comment domain event.

    Notifications reuse the tag of the event that produced them.
    """

    COMMENT_CREATED = "comment.created"
    COMMENT_UPDATED = "comment.updated"
    COMMENT_DELETED = "comment.deleted"
    COMMENT_REPLIED = "comment.replied"


class SortField(str, Enum):
    """Timestamp a comment listing can be ordered by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    """Direction of a sorted listing."""

    ASC = "asc"
    DESC = "desc"
