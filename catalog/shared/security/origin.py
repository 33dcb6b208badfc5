"""
Cross-origin access policy.

Requests to the API are accepted only when their Origin header is
exactly the configured frontend origin. Anything else, including a
missing Origin, is rejected before routing. CORS response headers for
accepted requests are added by Starlette's CORSMiddleware.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

CORS_ERROR_MESSAGE = "Error de CORS"


def is_origin_allowed(origin: str | None, allowed_origin: str) -> bool:
    """Return True only for an exact match with the allowed origin."""
    return origin is not None and origin == allowed_origin


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """Reject requests under a guarded prefix from any other origin."""

    def __init__(self, app: ASGIApp, allowed_origin: str, guarded_prefix: str) -> None:
        super().__init__(app)
        self._allowed_origin = allowed_origin
        self._guarded_prefix = guarded_prefix

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path.startswith(self._guarded_prefix):
            origin = request.headers.get("origin")
            if not is_origin_allowed(origin, self._allowed_origin):
                logger.warning("Rejected origin %r for %s", origin, request.url.path)
                return JSONResponse(status_code=403, content={"error": CORS_ERROR_MESSAGE})
        return await call_next(request)
