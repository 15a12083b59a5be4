"""Shared fixtures: in-memory SQLite database and an ASGI test client."""

import os

# Settings are cached on first use, so configure them before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from collections.abc import AsyncGenerator

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from rira_api.database import get_db, init_db
from rira_api.main import create_app
from rira_api.security.rate_limit import limiter


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(bind=test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as db_session:
        yield db_session


@pytest.fixture
def app(session_maker: async_sessionmaker[AsyncSession]):
    """Application wired to the test database, rate limiting off."""
    limiter.enabled = False
    application = create_app()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as db_session:
            yield db_session

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    # Exceptions must reach the fault barrier instead of the test
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest.fixture
def employee_payload() -> dict:
    """A valid create-employee body in wire format."""
    return {
        "firstName": "Soroush",
        "lastName": "Maghrebi",
        "gender": 1,
        "mobileNumber": "09120000000",
        "birthDate": "1370/05/21",
        "educationLevel": 5,
        "fieldOfStudy": "Software Engineering",
        "position": "Lead Developer",
        "email": "parkand@github.com",
        "description": "Core developer",
    }
