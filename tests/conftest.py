import os

# Settings are read at import time; point them at test values first.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("API_KEY_PEPPER", "test-pepper")

import httpx
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Import Base + all models so metadata is complete
from storage_api.models import Base  # noqa: F401
from storage_api.main import app
from storage_api.core.db import get_db

from fixtures_seed import seed_world  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    # One in-memory database per test; StaticPool keeps every session on the same connection.
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    session_factory = async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)
    async with session_factory() as session:
        yield session


def _client_for(application, db_session):
    async def _override_get_db():
        yield db_session

    application.dependency_overrides[get_db] = _override_get_db
    transport = httpx.ASGITransport(app=application)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client(db_session: AsyncSession):
    """
    HTTP client that uses the test DB session via dependency override.
    """
    async with _client_for(app, db_session) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_for(db_session: AsyncSession):
    """Factory for clients bound to a separately built app (e.g. production mode)."""
    built = []

    def _make(application):
        built.append(application)
        return _client_for(application, db_session)

    yield _make

    for application in built:
        application.dependency_overrides.clear()
