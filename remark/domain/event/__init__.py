"""Domain event bus contract."""

from remark.domain.event.bus import EventBus, EventHandler, Subscription

__all__ = [
    "EventBus",
    "EventHandler",
    "Subscription",
]
