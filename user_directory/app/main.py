"""
Main entrypoint for the User Directory application.

This module assembles the FastAPI application: it sets up logging,
registers the exception handlers, mounts the static assets and
includes the API and page routers.  ``create_app`` builds the app,
which is then instantiated at module import time as ``app`` so it can
be served directly::

    uvicorn user_directory.app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import STATIC_DIR, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    register_exception_handlers(app)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.include_router(router)

    return app


app = create_app()
