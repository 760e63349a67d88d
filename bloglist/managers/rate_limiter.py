"""Rate limiter configuration using slowapi."""

from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from bloglist.configs import LimiterConfig, file_logger
from bloglist.utils.helpers import host

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Get unique identifier for rate limiting.

    Uses API key from header if available, otherwise falls back to IP address.

    Args:
        request: FastAPI request object.

    Returns:
        Unique identifier string.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        return f"apikey:{api_key}"

    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Answer rate limit violations with a JSON 429 response.

    Args:
        request: The incoming request.
        exc: The RateLimitExceeded exception.

    Returns:
        ORJSONResponse with status 429.
    """
    detail = exc.detail if isinstance(exc, RateLimitExceeded) else "Rate limit exceeded"
    logger.warning(f"Rate limit exceeded for ip: {host(request)} at {request.url.path}: {detail}")
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": f"Rate limit exceeded: {detail}"},
    )
