"""Mock providers for testing."""

from .event_bus import MockEventBusProvider, RecordingEventBus
from .container import build_test_container

__all__ = [
    "MockEventBusProvider",
    "RecordingEventBus",
    "build_test_container",
]
