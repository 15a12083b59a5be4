"""Security package."""

from rira_api.security.rate_limit import (
    API_DEFAULT_LIMIT,
    WRITE_OPERATION_LIMIT,
    get_real_client_ip,
    limiter,
)

__all__ = [
    "API_DEFAULT_LIMIT",
    "WRITE_OPERATION_LIMIT",
    "get_real_client_ip",
    "limiter",
]
