"""Application lifespan management for startup and shutdown events."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from birdlog.system.structlog_configurator import configure_structlog
from birdlog.web.core.container import Container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup and release the shared HTTP client on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control back to the application for normal operation.
    """
    container: Container = app.container  # type: ignore[attr-defined]

    config = container.config()
    configure_structlog(config)

    logger.info("Starting species lookup service for %s", config.site_name)

    try:
        yield
    finally:
        logger.info("Shutting down species lookup service...")
        await container.http_client().aclose()
        logger.info("HTTP client closed")
