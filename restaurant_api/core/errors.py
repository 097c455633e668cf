"""
Error Taxonomy and HTTP Error Boundary

Services raise the domain errors below; ``setup_exception_handlers`` turns
them into JSON responses. Anything else is logged and surfaced as a
non-specific 500.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from restaurant_api.core.config import Settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto a specific HTTP status."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def error(self) -> str:
        return type(self).__name__


class ValidationError(AppError):
    """Malformed, missing or invalid input."""
    status_code = 400


class ConflictError(AppError):
    """A uniqueness check failed."""
    status_code = 400


class NotFound(AppError):
    """The referenced entity does not exist."""
    status_code = 404


class UnhandledStoreError(AppError):
    """The data store failed (connectivity, internal fault)."""
    status_code = 500


def error_body(error: str, detail: Optional[str]) -> dict:
    return {"success": False, "error": error, "detail": detail}


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register the JSON error boundary on ``app``."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{exc.error} on {request.method} {request.url.path}: {exc.detail}")
            detail = exc.detail if settings.debug else "An unexpected error occurred"
            return JSONResponse(
                status_code=exc.status_code,
                content=error_body("Internal Server Error", detail),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.error, exc.detail),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
        return JSONResponse(
            status_code=400,
            content=error_body(ValidationError.__name__, "; ".join(messages)),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content=error_body(
                "Internal Server Error",
                str(exc) if settings.debug else "An unexpected error occurred",
            ),
        )
