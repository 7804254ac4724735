"""
Common decorators and helpers for the HTTP route handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger
from starlette.responses import Response

from image_api.core.models.errors import ImageServiceError, StorageError
from image_api.core.utils.constants import SERVICE_NAME
from image_api.core.utils.response import ResponseBuilder

logger = Logger(service=SERVICE_NAME, UTC=True)

RouteHandler = Callable[..., Awaitable[Response]]


def _log_error(
    message: str,
    *,
    handler_name: str,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra: dict[str, Any] = {
        "handler": handler_name,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if isinstance(exc, ImageServiceError):
        log_extra["error_code"] = exc.error_code
        log_extra["details"] = exc.details

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        # For warnings, manually add traceback
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def api_handler(func: RouteHandler) -> RouteHandler:
    """
    Decorator for route handlers.

    Provides:
    - Centralized exception handling and error responses
    - Structured logging with error codes

    Every failure becomes a 500 response with an ``{"error": ...}`` body.

    Example:
        @router.get("/image")
        @api_handler
        async def list_images(storage: StorageDep) -> Response:
            ...
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Response:
        try:
            return await func(*args, **kwargs)

        # Storage failures are server side
        except StorageError as exc:
            _log_error(
                "Storage error in handler",
                handler_name=func.__name__,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(exc.message)

        # Validation and mapping failures
        except ImageServiceError as exc:
            _log_error(
                "Request failed in handler",
                handler_name=func.__name__,
                exc=exc,
            )
            return ResponseBuilder.error(exc.message)

        # Catch-all for unexpected errors
        except Exception as exc:
            _log_error(
                "Unexpected error in handler",
                handler_name=func.__name__,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(str(exc))

    return wrapper
