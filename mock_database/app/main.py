"""
Main entrypoint for the Mock Database Server.

This module assembles the FastAPI application, sets up logging,
attaches the seed store and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn, e.g.::

    uvicorn mock_database.app.main:app --port 3306
"""

import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import ENDPOINTS, router as v1_router
from .core.config import settings
from .core.db import SeedStore, init_store
from .core.errors import NotFoundError
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_app(store: Optional[SeedStore] = None, rng: Optional[random.Random] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[SeedStore]
        Seed data to serve.  Defaults to the built-in users and
        products.
    rng : Optional[random.Random]
        Random source for ``/info``'s ``connection_count``.  Defaults
        to a fresh unseeded generator.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging goes first so that everything below may log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else init_store()
    app.state.rng = rng if rng is not None else random.Random()

    app.include_router(v1_router)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Mock Database Server running on port %s", settings.port)
        logger.info("Available endpoints:")
        for route, description in ENDPOINTS:
            logger.info("  %s - %s", route, description)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
