"""Middleware package."""

from rira_api.middleware.request_id_middleware import RequestIDMiddleware
from rira_api.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
