"""Centralized exception handlers for the FastAPI application.

Generated list endpoints already turn store failures into HTTP 500
responses carrying the failure detail; the catch-all here covers
anything else that escapes a route.

Usage in main.py:
    from src.restlist.api.exception_handlers import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def _unhandled_exception_handler(
    request: Request, _exc: Exception
) -> JSONResponse:
    """Catch-all handler for unexpected exceptions.

    Logs the full traceback server-side but returns only a generic
    message to the client -- never expose internal error details.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all centralized exception handlers on the FastAPI app.

    Call this once during application startup.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    logger.info("Registered centralized exception handlers")
