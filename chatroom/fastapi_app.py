"""
FastAPI Application Factory.
Creates and configures the chat room application with all routers, middleware, and DI.

Endpoints:
- participants, status (heartbeat), messages, metrics
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from chatroom.application.services.eviction_sweeper import EvictionSweeper
from chatroom.config.logging_config import setup_logging, correlation_id_var
from chatroom.config.settings import Config
from chatroom.presentation.api import (
    participants_router,
    messages_router,
    status_router,
    metrics_router,
)
from chatroom.presentation.errors import register_exception_handlers
from chatroom.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: start the eviction sweeper (unless disabled)
    - Shutdown: stop the sweeper, then close the DI container (closes Redis)
    """
    container: AsyncContainer = app.state.dishka_container
    sweeper: Optional[EvictionSweeper] = None

    if app.state.sweeper_enabled:
        sweeper = await container.get(EvictionSweeper)
        sweeper.start()
    logger.info("Chat room started. DI container initialized.")

    yield

    # Sweeper first: an in-flight sweep still needs the store
    if sweeper is not None:
        await sweeper.stop()
    await container.close()
    logger.info("Chat room shutdown. DI container closed.")


def create_fastapi_app(
    container: Optional[AsyncContainer] = None,
    sweeper_enabled: Optional[bool] = None,
) -> FastAPI:
    """
    Application factory for creating the FastAPI app.

    Args:
        container: DI container to use; a container backed by the configured
            Redis is created when omitted
        sweeper_enabled: Overrides Config.SWEEPER_ENABLED

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    if container is None:
        container = create_container()

    app = FastAPI(
        title="Chat Room API",
        description="Presence-tracked chat room backend",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.sweeper_enabled = (
        Config.SWEEPER_ENABLED if sweeper_enabled is None else sweeper_enabled
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Chat room server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(participants_router)  # POST/GET /participants
    app.include_router(status_router)  # POST /status
    app.include_router(messages_router)  # /messages
    app.include_router(metrics_router)  # GET /metrics

    return app


# Create the app instance
app = create_fastapi_app()
