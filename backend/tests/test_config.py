"""Tests for settings validation and the rate limit key function."""

import pytest
from pydantic import ValidationError
from starlette.requests import Request

from rira_api.config import Settings
from rira_api.security.rate_limit import get_real_client_ip
from rira_api.utils.secure_logging import sanitize_exception_message


class TestSettings:
    """Settings model validation."""

    def test_debug_is_forbidden_in_production(self):
        with pytest.raises(ValidationError):
            Settings(environment="production", debug=True, database_url="postgresql://u:p@db/rira")

    def test_sqlite_is_forbidden_in_production(self):
        with pytest.raises(ValidationError):
            Settings(environment="production", database_url="sqlite+aiosqlite:///./rira.db")

    def test_unsupported_scheme_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(database_url="mysql://u:p@db/rira")

    def test_postgres_url_uses_asyncpg(self):
        settings = Settings(database_url="postgres://u:p@db/rira?sslmode=require")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db/rira?ssl=require"
        assert settings.is_sqlite is False

    def test_list_settings(self):
        settings = Settings(cors_origins="http://a.test, https://b.test,", trusted_proxies="10.0.0.1")

        assert settings.cors_origins_list == ["http://a.test", "https://b.test"]
        assert settings.trusted_proxies_list == ["10.0.0.1"]


def _request(client_ip: str, headers: dict[str, str] | None = None) -> Request:
    raw_headers = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "client": (client_ip, 51000), "headers": raw_headers})


class TestClientIp:
    """Rate limit key function."""

    def test_forwarded_header_from_trusted_proxy(self):
        request = _request("127.0.0.1", {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})

        assert get_real_client_ip(request) == "203.0.113.7"

    def test_forwarded_header_from_untrusted_peer_is_ignored(self):
        request = _request("198.51.100.2", {"X-Forwarded-For": "203.0.113.7"})

        assert get_real_client_ip(request) == "198.51.100.2"

    def test_invalid_forwarded_value_falls_back(self):
        request = _request("127.0.0.1", {"X-Forwarded-For": "not-an-ip"})

        assert get_real_client_ip(request) == "127.0.0.1"


class TestSanitizeExceptionMessage:
    """Exception text shown in failure envelopes."""

    def test_connection_strings_and_emails_are_masked(self):
        error = RuntimeError("cannot reach postgresql+asyncpg://admin:pw@db:5432/rira for ali@example.com")

        message = sanitize_exception_message(error)

        assert "admin:pw" not in message
        assert "[URL]" in message
        assert "[EMAIL]" in message

    def test_only_first_line_is_kept(self):
        error = RuntimeError("UNIQUE constraint failed: employees.email\n[SQL: INSERT INTO employees ...]")

        assert sanitize_exception_message(error) == "UNIQUE constraint failed: employees.email"
