"""Event bus interface.

The comment service publishes domain events here and the notification
service subscribes to them. Publishers don't know who is listening and
subscribers don't know who is publishing.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Union
from uuid import UUID, uuid4

from remark.domain.model.event import DomainEvent
from remark.domain.value import EventType

# A handler may be a plain function or a coroutine function
EventHandler = Callable[[DomainEvent[Any]], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class Subscription:
    """A handler registered for one event type.

    The id is a stable token that identifies the registration independently
    of the handler object.
    """

    event_type: EventType
    handler: EventHandler
    id: UUID = field(default_factory=uuid4)


class EventBus(ABC):
    """Publish/subscribe contract for domain events."""

    @abstractmethod
    def on(self, event_type: EventType, handler: EventHandler) -> Subscription:
        """Register a handler for an event type.

        Registering the same handler twice for the same type does not
        duplicate delivery; the existing subscription is returned.
        """
        pass

    @abstractmethod
    def off(self, event_type: EventType, handler: EventHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        pass

    @abstractmethod
    def emit(self, event: DomainEvent[Any]) -> None:
        """Deliver an event to every handler registered for its type.

        Returns without waiting for asynchronous handlers to finish. Handler
        failures never propagate to the caller.
        """
        pass
