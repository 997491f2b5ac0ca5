"""
Tuiter Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite) with all
       tables created, an AppContext bound to it, and optionally an httpx
       AsyncClient talking to a FastAPI app built from that context.

Fixture Hierarchy (all function-scoped):
    settings ─┐
    engine ───┴── context ──┬── test_client
                            └── strict_client (STRICT_NOT_FOUND=true)
    failing_session_factory: session whose queries raise OperationalError
"""

import os

# Settings are read from the environment when tuiter.main is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tuiter.config import Settings
from tuiter.context import AppContext
from tuiter.database import create_tables


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def settings():
    return Settings(_env_file=None, database_url="sqlite+aiosqlite://", log_level="WARNING")


@pytest_asyncio.fixture
async def engine():
    """
    In-memory SQLite engine with the Tuiter schema.

    StaticPool keeps a single connection, so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def context(settings, engine):
    return AppContext(settings, engine=engine)


@pytest.fixture
def failing_session_factory():
    """
    A session factory whose sessions fail every query.

    Usage:
        dao = TuitDao(failing_session_factory)
        with pytest.raises(DatabaseError):
            await dao.find_all()
    """
    error = OperationalError("SELECT 1", {}, Exception("connection lost"))
    session = AsyncMock()
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False
    session.add = MagicMock()
    session.execute = AsyncMock(side_effect=error)
    session.get = AsyncMock(side_effect=error)
    session.flush = AsyncMock(side_effect=error)
    return MagicMock(return_value=session)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client Fixtures
# ══════════════════════════════════════════════════════════════════════════

async def _client_for(context):
    from tuiter.main import create_app

    app = create_app(context)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(context):
    """
    HTTPX AsyncClient routed directly into the FastAPI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/tuits")
            assert response.status_code == 200
    """
    async with await _client_for(context) as client:
        yield client


@pytest_asyncio.fixture
async def strict_client(engine):
    """Client for an app that answers 404 for unknown ids."""
    strict = Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite://",
        log_level="WARNING",
        strict_not_found=True,
    )
    async with await _client_for(AppContext(strict, engine=engine)) as client:
        yield client


@pytest.fixture
def tuit_payload():
    from tuiter.schemas.tuit import TuitCreate

    return TuitCreate(text="hello")
