"""Infrastructure providers."""

# Import bases
from .event_bus import EventBusProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .event_bus import ProdEventBusProvider  # noqa: F401

__all__ = [
    "EventBusProvider",
    "PersistenceProvider",
    "ProdEventBusProvider",
]
