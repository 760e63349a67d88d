from collections.abc import Awaitable, Callable
from logging import Logger
from uuid import uuid4

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from bloglist.utils.helpers import host

# Attributes that shape the response rather than its body
_RESERVED_ATTRS = ("status_code", "detail", "headers")


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def log_and_sanitize_error(
    logger: Logger,
    error: Exception,
    context: str,
) -> tuple[str, str]:
    """
    Log full error details server-side and return a sanitized message for the client.

    Args:
        logger: Logger to record the failure on
        error: The exception that occurred
        context: Description of what failed (e.g., "Request to /api/blogs")

    Returns:
        Tuple of (sanitized_message, error_id) for the client response
    """
    # Short id to correlate the client response with the server log entry
    error_id = str(uuid4())[:8]

    logger.error(
        f"{context} failed [{error_id}]: {type(error).__name__}: {error}",
        exc_info=error,
    )

    return f"{context} failed. Please try again later. (Error ID: {error_id})", error_id


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Client errors are logged as warnings and echoed back; server errors are
    logged with their traceback and answered with a sanitized message.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")
        headers = getattr(exc, "headers", None)

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            detail, _ = log_and_sanitize_error(logger, exc, f"Request to {request.url.path}")
            return ORJSONResponse(content={"detail": detail}, status_code=status_code)

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        # Build response content with detail and any additional exception attributes
        content = {"detail": detail}
        content.update(
            {
                k: v
                for k, v in exc.__dict__.items()
                if k not in _RESERVED_ATTRS and not k.startswith("_")
            },
        )

        return ORJSONResponse(content=content, status_code=status_code, headers=headers)

    return handler
