"""
Main entrypoint for the Pokédex GraphQL API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served with uvicorn or another ASGI server::

    uvicorn pokedex_api.app.main:app --port 4000

The catalog store is created when the application starts (from the
seed file named by ``SEED_PATH`` or the bundled one) and discarded when
it shuts down.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import CatalogStore, init_store

logger = logging.getLogger(__name__)


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[CatalogStore]
        Store to serve.  When omitted, one is built from seed data at
        startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.store = store if store is not None else init_store()
        yield
        logger.info("Shutting down, discarding %r", app.state.store)
        app.state.store = None

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
