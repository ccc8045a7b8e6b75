"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from remark.adapter.event import InMemoryEventBus
from remark.config import Settings
from remark.domain.service import NotificationService
from remark.interface.api.errors import register_exception_handlers
from remark.interface.api.routes import comments, health, notifications
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire event subscribers on startup, finish pending handlers on shutdown."""
    container: AsyncContainer = app.state.dishka_container

    # Subscribers must be registered before the first comment event is emitted
    await container.get(NotificationService)
    logfire.info("Application started")

    yield

    event_bus = await container.get(InMemoryEventBus)
    await event_bus.drain()
    await container.close()
    logfire.info("Application stopped")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()

    app_instance = FastAPI(
        title=settings.api.title,
        description="Threaded comments with event-driven notifications",
        version=settings.api.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_exception_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router, prefix=settings.api.prefix)
    app_instance.include_router(notifications.router, prefix=settings.api.prefix)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
