"""In-memory event bus.

A pub/sub registry that lets the comment service publish domain events and
the notification service react to them. In a real system this would be
replaced by a message broker.

Delivery rules:
- Handlers run in registration order for each emission
- Coroutine handlers are started as asyncio tasks and not awaited, so only
  invocation order is guaranteed, not completion order
- No persistence, no retries: at-most-once per handler registered at emit time
- A failing handler is logged and never affects the emitter or other handlers
"""

import asyncio
import inspect
from collections.abc import Awaitable
from functools import partial
from typing import Any
from uuid import UUID

import logfire

from remark.domain.event import EventBus, EventHandler, Subscription
from remark.domain.model.event import DomainEvent
from remark.domain.value import EventType


async def _complete(awaitable: Awaitable[Any]) -> None:
    await awaitable


class InMemoryEventBus(EventBus):
    """Single-process event bus on top of the running asyncio loop.

    Example usage:
        bus = InMemoryEventBus()

        async def on_created(event):
            ...

        bus.on(EventType.COMMENT_CREATED, on_created)
        bus.emit(DomainEvent(type=EventType.COMMENT_CREATED, payload=...))
    """

    def __init__(self) -> None:
        # event type -> subscriptions keyed by token, in registration order
        self._subscriptions: dict[EventType, dict[UUID, Subscription]] = {}
        # Strong references to running handler tasks
        self._pending: set[asyncio.Task[None]] = set()

    def on(self, event_type: EventType, handler: EventHandler) -> Subscription:
        """Register a handler for an event type."""
        subscriptions = self._subscriptions.setdefault(event_type, {})
        for subscription in subscriptions.values():
            if subscription.handler == handler:
                return subscription

        subscription = Subscription(event_type=event_type, handler=handler)
        subscriptions[subscription.id] = subscription
        logfire.debug(
            "Handler subscribed",
            event_type=event_type.value,
            subscription_id=str(subscription.id),
        )
        return subscription

    def off(self, event_type: EventType, handler: EventHandler) -> None:
        """Remove a handler from an event type."""
        subscriptions = self._subscriptions.get(event_type, {})
        for subscription_id, subscription in subscriptions.items():
            if subscription.handler == handler:
                del subscriptions[subscription_id]
                logfire.debug(
                    "Handler unsubscribed",
                    event_type=event_type.value,
                    subscription_id=str(subscription_id),
                )
                return

    def remove(self, subscription: Subscription) -> None:
        """Remove a subscription by its token."""
        self._subscriptions.get(subscription.event_type, {}).pop(
            subscription.id, None
        )

    def emit(self, event: DomainEvent[Any]) -> None:
        """Start every handler registered for the event's type."""
        # Snapshot so handlers registered during dispatch miss this event
        subscriptions = list(self._subscriptions.get(event.type, {}).values())
        if not subscriptions:
            logfire.debug("No handlers for event", event_type=event.type.value)
            return

        logfire.debug(
            "Emitting event",
            event_id=str(event.id),
            event_type=event.type.value,
            handlers=len(subscriptions),
        )
        for subscription in subscriptions:
            self._dispatch(subscription, event)

    def subscriber_count(self, event_type: EventType) -> int:
        """Number of handlers registered for an event type."""
        return len(self._subscriptions.get(event_type, {}))

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscriptions.clear()

    async def drain(self) -> None:
        """Wait until every handler task started so far has finished."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def _dispatch(self, subscription: Subscription, event: DomainEvent[Any]) -> None:
        try:
            result = subscription.handler(event)
        except Exception as e:
            self._report_failure(event, e)
            return

        if inspect.isawaitable(result):
            self._schedule(result, event)

    def _schedule(self, awaitable: Awaitable[Any], event: DomainEvent[Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Called outside the event loop: finish the handler in place
            try:
                asyncio.run(_complete(awaitable))
            except Exception as e:
                self._report_failure(event, e)
            return

        task = loop.create_task(_complete(awaitable))
        self._pending.add(task)
        task.add_done_callback(partial(self._on_task_done, event))

    def _on_task_done(self, event: DomainEvent[Any], task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._report_failure(event, error)

    @staticmethod
    def _report_failure(event: DomainEvent[Any], error: BaseException) -> None:
        logfire.error(
            "Event handler failed",
            event_id=str(event.id),
            event_type=event.type.value,
            error=str(error),
            error_type=type(error).__name__,
            _exc_info=error,
        )
