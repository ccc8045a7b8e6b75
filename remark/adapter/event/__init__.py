"""Event bus adapters."""

from .inmemory import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
