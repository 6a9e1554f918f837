"""
Centralized error handlers for FastAPI.

Registers one handler for every exception type the normalizer
recognizes. The handler negotiates the request locale, normalizes the
exception and answers with a JSON list of
``{"userMessage", "developerMessage"}`` entries.
Exceptions of any other type are left to the framework's defaults.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.shared.errors.normalizer import HANDLED_EXCEPTIONS, normalize
from app.shared.i18n.locale import request_locale

logger = logging.getLogger(__name__)


async def handle_normalized_error(request: Request, exc: Exception) -> Response:
    """Answer a recognized exception with the normalized error body.

    HTTP exceptions the normalizer does not claim get FastAPI's default
    ``{"detail": ...}`` response.
    """
    locale = request_locale(request)
    normalized = normalize(exc, request.app.state.message_source, locale)
    if normalized is None:
        if isinstance(exc, StarletteHTTPException):
            return await http_exception_handler(request, exc)
        raise exc

    logger.warning(
        "Request failed: kind=%s status=%d method=%s path=%s",
        normalized.kind.value,
        normalized.status_code,
        request.method,
        request.url.path,
    )
    return JSONResponse(
        status_code=normalized.status_code,
        content=normalized.to_content(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the normalized error handler on the FastAPI application.

    Args:
        app: The FastAPI application instance. Its ``state`` must carry
            ``settings`` and ``message_source``.
    """
    for exc_type in HANDLED_EXCEPTIONS:
        app.add_exception_handler(exc_type, handle_normalized_error)
