"""
Tuiter Backend — Database Session Management
==============================================

What:  Async SQLAlchemy engine construction, session factory, declarative base
       and the transactional session scope used by every DAO.
How:   The application context builds one engine and one session factory at
       startup; each DAO call opens its own session through session_scope(),
       which commits on success and rolls back on error.

Connection Pooling:
    Server databases get a sized pool (pool_size / max_overflow / pre-ping /
    hourly recycle). SQLite keeps the driver's default pool, since SQLite
    pools do not accept sizing arguments.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from tuiter.config import Settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which Alembic and
    create_tables() both read.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    What:  Creates the async engine for the configured database.
    How:   Pool sizing only applies to non-SQLite URLs.
    """
    url = settings.sqlalchemy_url
    kwargs: Dict[str, Any] = {
        # SQL echo only in DEBUG
        "echo": settings.log_level == "DEBUG",
    }
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(url, **kwargs)


# ── Session Factory ───────────────────────────────────────────────────────
def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Creates the factory every DAO opens sessions from.

    expire_on_commit=False keeps loaded attributes readable after commit,
    which is when DAOs convert ORM rows into response schemas.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Scope ─────────────────────────────────────────────────────────
@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Provides one transactional session.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller (the DAO performs its query)
        3. On success: commits the transaction
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)

    Example:
        async with session_scope(factory) as session:
            session.add(Tuit(owner_id="u1", text="hello"))
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(engine: AsyncEngine) -> None:
    """
    What:  Creates any missing tables from the model metadata.
    When:  Startup with CREATE_TABLES=true, and in tests.
    """
    # Models must be imported so their tables are registered on Base.metadata
    import tuiter.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
