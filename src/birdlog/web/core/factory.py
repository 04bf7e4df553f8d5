"""Application factory for creating FastAPI application with dependency injection."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from birdlog import __version__
from birdlog.web.core.container import Container
from birdlog.web.core.lifespan import lifespan
from birdlog.web.routers import lookup_api_routes


def create_app(container: Container | None = None) -> FastAPI:
    """Create FastAPI application with dependency injection.

    Args:
        container: Pre-configured container, e.g. with providers overridden
            in tests. A new one is created when omitted.

    Returns:
        FastAPI: The configured application instance.
    """
    container = container or Container()

    app = FastAPI(
        lifespan=lifespan,
        title="birdlog API",
        description="Species name and media lookup for the bird logbook",
        version=__version__,
    )

    # The logbook front end is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # nosemgrep
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    container.wire(modules=["birdlog.web.routers.lookup_api_routes"])
    app.container = container  # type: ignore[attr-defined]

    app.include_router(lookup_api_routes.router)

    return app
