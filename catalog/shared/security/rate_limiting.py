"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on every routed
endpoint. The limit runs as an application-wide dependency, so an
exceeded limit is raised inside the routing layer and answered by the
registered exception handler like any other error.
Protects against denial-of-service and resource abuse.
"""

from typing import Awaitable, Callable

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from catalog.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Build the per-client limiter from application settings."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def build_rate_limit_dependency(
    limiter: Limiter, settings: Settings
) -> Callable[[Request], Awaitable[None]]:
    """Return a dependency that counts each request against the default limit.

    Args:
        limiter: The application's limiter.
        settings: Application settings carrying the limit string.

    Returns:
        An async callable suitable for ``Depends``.
    """

    @limiter.limit(settings.rate_limit_default)
    async def enforce_rate_limit(request: Request) -> None:
        return None

    return enforce_rate_limit


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
