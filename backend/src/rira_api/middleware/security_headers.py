"""Security response headers."""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from rira_api.config import get_settings

# Always overwritten
STATIC_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# Kept when a route already set them
DEFAULT_HEADERS = {
    "Cache-Control": "no-store, max-age=0",
    "Vary": "Accept, Origin",
}

HSTS_VALUE = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to every response; HSTS only outside debug."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Response],
    ) -> Response:
        response = await call_next(request)
        response.headers.update(STATIC_HEADERS)
        for name, value in DEFAULT_HEADERS.items():
            response.headers.setdefault(name, value)
        if not get_settings().debug:
            response.headers["Strict-Transport-Security"] = HSTS_VALUE
        return response
