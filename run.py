"""Entry point for the Newsroom API server.

This script serves the FastAPI application with Uvicorn.  Host and
port come from the ``HOST`` and ``PORT`` environment variables (see
``newsroom_api.app.core.config``); set ``SEED_DATA=true`` to start with
sample journalists, categories and articles.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from newsroom_api.app.core.config import settings
from newsroom_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
