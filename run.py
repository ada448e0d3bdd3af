"""Entry point for the Resource Store API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``).

Usage:
    PORT=8080 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from resource_store_api.app.core.config import settings
from resource_store_api.app.main import app

logger = logging.getLogger("run")


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Server running on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
