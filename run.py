"""Entry point for the Article Portal API.

Starts the FastAPI application under uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables and the MongoDB
connection string from ``MONGO_URL`` (see
``article_portal_api/app/core/config.py`` for the full list).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from article_portal_api.app.core.config import settings
from article_portal_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
