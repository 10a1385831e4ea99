"""Service test fixtures: async DB, mocked pixel transport and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - Pixel HTTP calls go to httpx.MockTransport and are recorded in pixel_requests
    - The experiment cohort is on for route tests unless a test overrides settings
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from fireproof_login.config import Settings, get_settings
from fireproof_login.db.base import Base
from fireproof_login.infrastructure.database import DatabaseSessionManager, get_db
import fireproof_login.infrastructure.database as db_module
import fireproof_login.models  # noqa: F401
from fireproof_login.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def pixel_requests():
    return []


@pytest.fixture
def pixel_status():
    """Mutable {"code": int} returned by the mock pixel endpoint."""
    return {"code": 200}


@pytest.fixture
async def http_client(pixel_requests, pixel_status):
    def _handler(request: httpx.Request) -> httpx.Response:
        pixel_requests.append(request)
        return httpx.Response(pixel_status["code"])

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as c:
        yield c


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        login_detection_experiment_enabled=True,
        pixel_base_url="https://pixels.test/t/",
        pixel_flush_batch_size=2,
    )


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_manager, test_session_factory, http_client, test_settings):
    """FastAPI test client with DB, settings and HTTP client overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.state.http_client = http_client

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
