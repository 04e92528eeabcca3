"""Entry point for the Charity Funding API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``); see ``charity_api/app/core/config.py`` for the other
supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from charity_api.app.core.config import settings
from charity_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Charity API server running on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
