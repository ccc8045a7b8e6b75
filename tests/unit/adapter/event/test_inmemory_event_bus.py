"""Unit tests for InMemoryEventBus."""

import asyncio
from uuid import uuid4

import pytest

from remark.adapter.event import InMemoryEventBus
from remark.domain.model.event import CommentDeletedPayload, DomainEvent
from remark.domain.value import CommentId, EventType, UserId


def make_event(event_type: EventType = EventType.COMMENT_DELETED) -> DomainEvent:
    return DomainEvent(
        type=event_type,
        payload=CommentDeletedPayload(
            comment_id=CommentId(uuid4()), author_id=UserId(uuid4())
        ),
    )


class Recorder:
    """Collects calls from sync handlers."""

    def __init__(self, label: str, calls: list[str]):
        self.label = label
        self.calls = calls

    def __call__(self, event: DomainEvent) -> None:
        self.calls.append(self.label)


class TestSubscriptions:
    """Tests for registering and removing handlers."""

    def test_handlers_run_in_registration_order(self):
        """Sync handlers are invoked in the order they were registered."""
        # Arrange
        bus = InMemoryEventBus()
        calls: list[str] = []
        for label in ("first", "second", "third"):
            bus.on(EventType.COMMENT_DELETED, Recorder(label, calls))

        # Act
        bus.emit(make_event())

        # Assert
        assert calls == ["first", "second", "third"]

    def test_same_handler_registered_twice_runs_once(self):
        """Registering an identical handler returns the existing subscription."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        handler = Recorder("only", calls)

        first = bus.on(EventType.COMMENT_DELETED, handler)
        second = bus.on(EventType.COMMENT_DELETED, handler)
        bus.emit(make_event())

        assert first == second
        assert calls == ["only"]
        assert bus.subscriber_count(EventType.COMMENT_DELETED) == 1

    def test_bound_methods_of_one_instance_deduplicate(self):
        """Bound methods compare equal, so an instance subscribes once."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        recorder = Recorder("bound", calls)

        bus.on(EventType.COMMENT_DELETED, recorder.__call__)
        bus.on(EventType.COMMENT_DELETED, recorder.__call__)
        bus.emit(make_event())

        assert calls == ["bound"]

    def test_handlers_only_receive_their_event_type(self):
        """A handler for one type is not called for another."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        bus.on(EventType.COMMENT_CREATED, Recorder("created", calls))

        bus.emit(make_event(EventType.COMMENT_DELETED))

        assert calls == []

    def test_off_removes_handler(self):
        """A removed handler no longer receives events."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        handler = Recorder("gone", calls)
        bus.on(EventType.COMMENT_DELETED, handler)

        bus.off(EventType.COMMENT_DELETED, handler)
        bus.emit(make_event())

        assert calls == []
        assert bus.subscriber_count(EventType.COMMENT_DELETED) == 0

    def test_off_unknown_handler_is_noop(self):
        """Removing a handler that was never registered does nothing."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        bus.on(EventType.COMMENT_DELETED, Recorder("kept", calls))

        bus.off(EventType.COMMENT_DELETED, Recorder("stranger", calls))
        bus.off(EventType.COMMENT_UPDATED, Recorder("stranger", calls))
        bus.emit(make_event())

        assert calls == ["kept"]

    def test_remove_by_subscription_token(self):
        """A subscription can be removed with the token returned by on."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        subscription = bus.on(EventType.COMMENT_DELETED, Recorder("token", calls))

        bus.remove(subscription)
        bus.emit(make_event())

        assert calls == []

    def test_emit_without_subscribers_is_noop(self):
        """Emitting an event nobody listens to does not raise."""
        bus = InMemoryEventBus()

        bus.emit(make_event())

    def test_clear_removes_everything(self):
        """clear drops all subscriptions for all types."""
        bus = InMemoryEventBus()
        calls: list[str] = []
        bus.on(EventType.COMMENT_DELETED, Recorder("a", calls))
        bus.on(EventType.COMMENT_CREATED, Recorder("b", calls))

        bus.clear()

        assert bus.subscriber_count(EventType.COMMENT_DELETED) == 0
        assert bus.subscriber_count(EventType.COMMENT_CREATED) == 0


class TestFailureIsolation:
    """Tests that a failing handler affects nobody else."""

    def test_failing_sync_handler_does_not_stop_others(self):
        """Later handlers still run and emit does not raise."""
        # Arrange
        bus = InMemoryEventBus()
        calls: list[str] = []

        def broken(event: DomainEvent) -> None:
            raise RuntimeError("boom")

        bus.on(EventType.COMMENT_DELETED, broken)
        bus.on(EventType.COMMENT_DELETED, Recorder("after", calls))

        # Act
        bus.emit(make_event())

        # Assert
        assert calls == ["after"]

    @pytest.mark.asyncio
    async def test_failing_async_handler_does_not_stop_others(self):
        """An async handler that raises is logged and others complete."""
        bus = InMemoryEventBus()
        calls: list[str] = []

        async def broken(event: DomainEvent) -> None:
            raise RuntimeError("boom")

        async def healthy(event: DomainEvent) -> None:
            calls.append("healthy")

        bus.on(EventType.COMMENT_DELETED, broken)
        bus.on(EventType.COMMENT_DELETED, healthy)

        bus.emit(make_event())
        await bus.drain()

        assert calls == ["healthy"]


class TestAsyncDelivery:
    """Tests for coroutine handlers."""

    @pytest.mark.asyncio
    async def test_emit_returns_before_async_handler_completes(self):
        """emit only starts coroutine handlers; drain waits for them."""
        # Arrange
        bus = InMemoryEventBus()
        release = asyncio.Event()
        finished: list[str] = []

        async def slow(event: DomainEvent) -> None:
            await release.wait()
            finished.append("slow")

        bus.on(EventType.COMMENT_DELETED, slow)

        # Act
        bus.emit(make_event())

        # Assert
        assert finished == []
        release.set()
        await bus.drain()
        assert finished == ["slow"]

    @pytest.mark.asyncio
    async def test_async_handlers_receive_the_event(self):
        """Coroutine handlers get the emitted event object."""
        bus = InMemoryEventBus()
        received: list[DomainEvent] = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        bus.on(EventType.COMMENT_DELETED, handler)
        event = make_event()

        bus.emit(event)
        await bus.drain()

        assert received == [event]

    def test_async_handler_without_running_loop_completes_inline(self):
        """Outside an event loop, coroutine handlers run to completion in emit."""
        bus = InMemoryEventBus()
        received: list[str] = []

        async def handler(event: DomainEvent) -> None:
            received.append("done")

        bus.on(EventType.COMMENT_DELETED, handler)

        bus.emit(make_event())

        assert received == ["done"]

    @pytest.mark.asyncio
    async def test_drain_with_nothing_pending(self):
        """drain returns immediately when no handler is running."""
        bus = InMemoryEventBus()

        await bus.drain()
