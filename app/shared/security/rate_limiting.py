"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
endpoint. Each application gets its own Limiter built from settings.
Rejections use the same error-entry body as every other API error.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.shared.errors.normalizer import ErrorEntry
from app.shared.i18n.locale import request_locale

logger = logging.getLogger(__name__)

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a Limiter applying the configured default limit.

    Args:
        settings: Application settings.

    Returns:
        A Limiter with in-memory storage.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors with a localized error entry.

    Synchronous because SlowAPIMiddleware calls the registered handler
    without awaiting it.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    logger.warning("Rate limit exceeded: path=%s limit=%s", request.url.path, exc.detail)
    entry = ErrorEntry(
        user_message=request.app.state.message_source.get_message(
            "rate.limit.exceeded", locale=request_locale(request)
        ),
        developer_message=f"Rate limit exceeded: {exc.detail}",
    )
    return JSONResponse(status_code=HTTP_429, content=[entry.to_dict()])
