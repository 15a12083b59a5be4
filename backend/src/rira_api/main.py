"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from rira_api import __version__
from rira_api.config import Settings, get_settings
from rira_api.exceptions import RiraAPIError
from rira_api.middleware.error_handler import (
    fault_barrier_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    validation_exception_handler,
)
from rira_api.middleware.request_id_middleware import RequestIDMiddleware
from rira_api.middleware.security_headers import SecurityHeadersMiddleware
from rira_api.routers import employees, tasks
from rira_api.security.rate_limit import limiter
from rira_api.utils.request_id import REQUEST_ID_HEADER
from rira_api.utils.secure_logging import configure_logging

logger = logging.getLogger(__name__)

# Exceptions routed through the fault barrier besides the catch-all
BARRIER_EXCEPTIONS = (RiraAPIError, ValueError, TypeError, LookupError, PermissionError)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging, optionally create tables, dispose the engine on exit."""
    from rira_api.database import engine, init_db

    configure_logging()
    config = get_settings()
    if config.auto_create_tables:
        await init_db()

    logger.info(f"{config.app_name} {__version__} started ({config.environment})")
    yield

    await engine.dispose()
    logger.info(f"{config.app_name} stopped")


def _allowed_origins(config: Settings) -> list[str]:
    """Explicit http(s) origins; a wildcard is refused because credentials are allowed."""
    origins = config.cors_origins_list
    if "*" in origins:
        raise ValueError(
            "CORS_ORIGINS cannot contain '*' when credentials are allowed. "
            "List explicit origins instead."
        )
    return [origin for origin in origins if origin.startswith(("http://", "https://"))]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_settings()

    app = FastAPI(
        title=config.app_name,
        version=__version__,
        description="Employee and Task Management API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    for exc_type in BARRIER_EXCEPTIONS:
        app.add_exception_handler(exc_type, fault_barrier_handler)
    app.add_exception_handler(Exception, fault_barrier_handler)

    # Last added runs first on requests: CORS, request id, security headers
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(config),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Requested-With", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.include_router(employees.router, prefix="/api/employees", tags=["Employees"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "healthy"}

    return app


app = create_app()
