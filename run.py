"""Entry point for the User Directory web application.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``user_directory/app/core/config.py``
for the other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_directory.app.core.config import get_data_path, settings
from user_directory.app.main import app

logger = logging.getLogger("user_directory")


def log_banner() -> None:
    """Log where the application can be reached and what it offers."""
    base_url = f"http://localhost:{settings.port}"
    logger.info("Server listening on %s:%s", settings.host, settings.port)
    logger.info("Home page: %s/", base_url)
    logger.info("Creation form: %s/formulaire", base_url)
    logger.info("REST API: %s/api/users", base_url)
    logger.info("Available features: list, create, edit and delete users; 404 page")
    logger.info("Data persisted in %s", get_data_path())


async def main() -> None:
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    log_banner()
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
