"""Entry point for the Pokédex GraphQL API.

Serves the FastAPI application with uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``4000``); see ``pokedex_api.app.core.config`` for the
other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pokedex_api.app.core.config import settings
from pokedex_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Running a GraphQL API server at %s:%s/graphql", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
