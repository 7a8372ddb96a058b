"""Pytest configuration and fixtures for guardian-gate.

HTTP tests run create_app() against the in-memory credential store with a
recording notifier, so no database or mail account is needed. Repository
integration tests use db_session, which skips unless TEST_DATABASE_URL
points at a migrated Postgres database.
"""

import os

# Must be set before guardian_gate settings are first loaded.
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_BACKEND"] = "memory"
os.environ["EMAIL_BACKEND"] = "log"
os.environ["ENVIRONMENT"] = "development"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from guardian_gate.api.dependencies import get_email_notifier
from guardian_gate.core.config import get_settings
from guardian_gate.main import create_app
from tests.support.notifier import RecordingNotifier

get_settings.cache_clear()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def app(notifier: RecordingNotifier) -> FastAPI:
    """Fresh app (and fresh in-memory store) per test, with email captured."""
    application = create_app()
    application.dependency_overrides[get_email_notifier] = lambda: notifier
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncSession:
    """Session on TEST_DATABASE_URL for repository tests.

    Skips when TEST_DATABASE_URL is not set. Tables must exist (alembic
    upgrade head). Rows created by a test are deleted by the test itself.
    """
    url = os.environ.get("TEST_DATABASE_URL")
    if not url:
        pytest.skip(
            "Postgres not configured: set TEST_DATABASE_URL "
            "(postgresql+asyncpg://...), then run: alembic upgrade head"
        )
    engine = create_async_engine(url)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
