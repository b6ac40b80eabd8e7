"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from errorpages.domain.pages.errors import (
    ErrorPageNotFoundError,
    ErrorPagesDomainError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500

NOT_FOUND_BODY = "404 page not found\n"


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ErrorPageNotFoundError)
    async def handle_error_page_not_found(
        _request: Request, exc: ErrorPageNotFoundError
    ) -> PlainTextResponse:
        """Both the exact and the class-level page are missing."""
        logger.error(
            "No error page available (%s, %s)", exc.filename, exc.fallback_filename
        )
        return PlainTextResponse(
            NOT_FOUND_BODY,
            status_code=HTTP_404,
            headers={"X-Content-Type-Options": "nosniff"},
        )

    @app.exception_handler(ErrorPagesDomainError)
    async def handle_error_pages_domain(
        _request: Request, exc: ErrorPagesDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled error pages domain errors."""
        logger.error("Unhandled error pages domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
