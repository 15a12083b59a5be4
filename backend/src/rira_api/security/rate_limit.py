"""Rate limiting for the HTTP endpoints.

Limits are keyed by client IP. Forwarding headers are honoured only when the
direct peer is a trusted proxy.
"""

from ipaddress import ip_address, ip_network
from typing import Sequence

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from rira_api.config import get_settings

# Loopback and private ranges trusted when nothing is configured in development
DEVELOPMENT_PROXIES = ("127.0.0.1", "::1", "10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16")

FORWARDING_HEADERS = ("X-Forwarded-For", "X-Real-IP")


def _trusted_proxies() -> Sequence[str]:
    settings = get_settings()
    if settings.trusted_proxies_list:
        return settings.trusted_proxies_list
    if settings.environment == "development":
        return DEVELOPMENT_PROXIES
    return ()


def _is_trusted_proxy(peer_ip: str, trusted: Sequence[str]) -> bool:
    """Check a peer address against single IPs and CIDR ranges alike."""
    try:
        addr = ip_address(peer_ip)
        return any(addr in ip_network(entry, strict=False) for entry in trusted)
    except ValueError:
        return False


def _first_valid_ip(value: str) -> str | None:
    candidate = value.split(",", 1)[0].strip()
    try:
        return str(ip_address(candidate))
    except ValueError:
        return None


def get_real_client_ip(request: Request) -> str:
    """Resolve the client IP used as the rate limit key.

    Args:
        request: The incoming request

    Returns:
        Left-most forwarded address from a trusted proxy, else the peer address
    """
    peer_ip = get_remote_address(request)
    if not _is_trusted_proxy(peer_ip, _trusted_proxies()):
        return peer_ip

    for header in FORWARDING_HEADERS:
        value = request.headers.get(header)
        client_ip = _first_valid_ip(value) if value else None
        if client_ip:
            return client_ip
    return peer_ip


_settings = get_settings()

API_DEFAULT_LIMIT = f"{_settings.rate_limit_default}/minute"
WRITE_OPERATION_LIMIT = f"{_settings.rate_limit_write}/minute"

# In-memory storage; a single process serves the API
limiter = Limiter(
    key_func=get_real_client_ip,
    default_limits=[API_DEFAULT_LIMIT],
    enabled=_settings.rate_limit_enabled,
)
