"""
Main entrypoint for the Article Portal API.

This module assembles the FastAPI application: logging, CORS, the
versioned routers, the MongoDB lifecycle hooks and the handler that
turns driver errors into plain‑text ``500`` responses.  Run it with
uvicorn, e.g.::

    uvicorn article_portal_api.app.main:app --reload

or through ``run.py``, which reads the port from ``PORT``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from .core.config import settings
from .core.logging_config import setup_logging
from .core.db import close_db, init_db
from .api.v1.router import router as v1_router


logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: PyMongoError) -> PlainTextResponse:
    """Answer ``500`` with the raw driver message as the body."""
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    # The browser frontend is served from another origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Version 1 is mounted at the root; see ``api/v1/__init__.py``.
    app.include_router(v1_router)

    app.add_exception_handler(PyMongoError, store_error_handler)

    @app.on_event("startup")
    def startup_event() -> None:
        init_db()

    @app.on_event("shutdown")
    def shutdown_event() -> None:
        close_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
