"""Application settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Database URL schemes the engine factory knows how to drive
SUPPORTED_DATABASE_SCHEMES = (
    "postgresql://",
    "postgres://",
    "postgresql+asyncpg://",
    "sqlite+aiosqlite://",
)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Settings read from environment variables and an optional ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Rira API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    database_url: str = Field(
        default="sqlite+aiosqlite:///./rira.db",
        description="PostgreSQL or SQLite (aiosqlite) connection URL.",
    )
    database_pool_size: int = 5
    database_max_overflow: int = 10
    # Development shortcut; deployments run the Alembic migrations
    auto_create_tables: bool = False

    # Comma-separated lists
    cors_origins: str = "http://localhost:3000"
    trusted_proxies: str = ""

    # Requests per minute per client IP
    rate_limit_enabled: bool = True
    rate_limit_default: int = 100
    rate_limit_write: int = 30

    @model_validator(mode="after")
    def check_deployment_rules(self) -> "Settings":
        """Reject combinations that must never reach production."""
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG cannot be enabled in production: it exposes API docs "
                "and exception types in error responses."
            )
        if not self.database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
            raise ValueError("DATABASE_URL must be a PostgreSQL URL or a 'sqlite+aiosqlite://' URL")
        if self.environment == "production" and self.is_sqlite:
            raise ValueError("SQLite cannot be used in production")
        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """Database URL with an async driver.

        Plain PostgreSQL URLs are switched to asyncpg, whose SSL option is
        ``ssl`` rather than ``sslmode``.
        """
        url = self.database_url
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            url = "postgresql+asyncpg://" + url[len("postgresql://"):]
            url = url.replace("sslmode=", "ssl=")
        return url

    @property
    def cors_origins_list(self) -> list[str]:
        """Allowed CORS origins."""
        return _split_csv(self.cors_origins)

    @property
    def trusted_proxies_list(self) -> list[str]:
        """Trusted proxy IPs and CIDR ranges."""
        return _split_csv(self.trusted_proxies)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
