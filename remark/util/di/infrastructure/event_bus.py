"""Event bus infrastructure providers."""

from dishka import Scope, provide

from remark.adapter.event import InMemoryEventBus
from remark.domain.event import EventBus
from remark.util.di.base import ProviderBase


class EventBusProvider(ProviderBase):
    """Event bus component base."""

    __mock_component__ = "event_bus"


class ProdEventBusProvider(EventBusProvider):
    """Production event bus provider using the in-process bus."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_in_memory_event_bus(self) -> InMemoryEventBus:
        """Provide the process-wide event bus."""
        return InMemoryEventBus()

    @provide
    def get_event_bus(self, bus: InMemoryEventBus) -> EventBus:
        """Expose the bus through its domain interface."""
        return bus
