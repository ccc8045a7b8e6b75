"""Domain layer DI providers."""

from dishka import Scope, provide

from remark.domain.event import EventBus
from remark.domain.repository import CommentRepository, NotificationRepository
from remark.domain.service import CommentService, NotificationService
from remark.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are APP-scoped: they share the process-wide repositories and
    bus, and NotificationService must subscribe to the bus exactly once.
    """

    scope = Scope.APP

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, event_bus: EventBus
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, event_bus=event_bus)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository, event_bus: EventBus
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository, event_bus=event_bus
        )
