"""Entry point for the Mock Database Server.

Starts the FastAPI application under Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3306``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from mock_database.app.core.config import settings
from mock_database.app.core.logging_config import setup_logging
from mock_database.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
