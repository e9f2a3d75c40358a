"""
FastAPI exception handlers.

Converts module exceptions that escape a route into JSON error responses.
Store failures and unexpected errors are logged with their traceback and
answered with a generic 500; the underlying message is included outside
production.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import ExternalServiceError, MonitorError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno"


def _internal_error(exc: Exception) -> JSONResponse:
    body = ErrorResponse(error=INTERNAL_ERROR_MESSAGE, code="INTERNAL_ERROR")
    if not get_settings().is_production:
        body.detail = str(exc)
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


async def monitor_error_handler(request: Request, exc: MonitorError) -> JSONResponse:
    """Map a module exception to its status code."""
    if isinstance(exc, ExternalServiceError) or exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc,
        )
        return _internal_error(exc)

    body = ErrorResponse(error=exc.message, detail=exc.message, code=exc.code)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything that is not a module exception."""
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _internal_error(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers to an application."""
    app.add_exception_handler(MonitorError, monitor_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
