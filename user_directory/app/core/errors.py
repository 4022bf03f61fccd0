"""
Error taxonomy and FastAPI exception handlers.

Domain code raises the exceptions defined here; the handlers
registered by ``register_exception_handlers`` turn them into JSON
responses of the form ``{"message": ...}``.  Validation problems map
to 400, missing records to 404, duplicate emails to 409 and every
persistence or unexpected failure to 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import VIEWS_DIR, settings

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class AppError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """No user matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """The email is already used by another user."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class PersistenceError(InternalError):
    """The data file could not be read or written."""


class CreationError(InternalError):
    pass


class UpdateError(InternalError):
    pass


def error_payload(exc: Exception) -> dict:
    """Body for a 500 response; the detail is only exposed in development."""
    return {
        "message": INTERNAL_ERROR_MESSAGE,
        "error": str(exc) if settings.debug else "Internal error",
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content=error_payload(exc))
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report bad requests as 400 instead of 422.

    An id that is not a number can never match a user, so path errors
    are reported as a missing user.
    """
    errors = exc.errors()
    logger.debug("Rejected request %s %s: %s", request.method, request.url.path, errors)
    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "User not found"})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid request"})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        if request.url.path.startswith("/api/"):
            return JSONResponse(status_code=exc.status_code, content={"message": "Not found"})
        return FileResponse(VIEWS_DIR / "not-found.html", status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_payload(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
