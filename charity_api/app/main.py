"""
Main entrypoint for the Charity Funding API.

This module assembles the FastAPI application, sets up logging, CORS
and (optionally) static file serving, and includes the API router under
``/api``.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn charity_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import resolve_path, settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .core.storage import get_data_path

logger = logging.getLogger(__name__)


def _log_endpoints(app: FastAPI) -> None:
    logger.info("Organizations data file: %s", get_data_path())
    logger.info("Available endpoints:")
    for route in app.routes:
        if isinstance(route, APIRoute) and route.path.startswith("/api"):
            logger.info("- %s %s", ",".join(sorted(route.methods)), route.path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create the store database and apply migrations before serving.
    init_db()
    _log_endpoints(app)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests to a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    # Mounted last so that API routes take precedence over files.
    if settings.static_dir:
        app.mount("/", StaticFiles(directory=resolve_path(settings.static_dir), html=True), name="static")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
