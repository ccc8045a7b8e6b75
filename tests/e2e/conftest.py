"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from remark.adapter.event import InMemoryEventBus
from remark.interface.api.app import create_app
from tests.di import build_test_container


class ApiClient(TestClient):
    """Test client that can wait for event handlers inside the app's loop."""

    def __init__(self, app, container):
        super().__init__(app)
        self.container = container

    def drain_events(self) -> None:
        """Block until every notification handler started so far has run."""

        async def _drain() -> None:
            event_bus = await self.container.get(InMemoryEventBus)
            await event_bus.drain()

        self.portal.call(_drain)


@pytest.fixture
def client():
    """Create test client with a fresh test container.

    Entering the client runs the app lifespan, which wires the notification
    subscribers.
    """
    container = build_test_container()
    app_instance = create_app(container)
    with ApiClient(app_instance, container) as test_client:
        yield test_client
