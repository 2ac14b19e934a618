"""
ContosoPets API — Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       FastAPI session dependency.
How:   One async engine per process; one AsyncSession per request. The session
       dependency commits on success and rolls back on error.
Who:   Used by the store dependency (contoso_pets.dependencies) and by the
       application lifespan.

Connection Pooling:
    Server databases (PostgreSQL via asyncpg) get a sized pool:
        pool_size / max_overflow from settings, pool_pre_ping, pool_recycle=3600.
    SQLite (aiosqlite) uses SQLAlchemy's default pool, except in-memory
    databases, which need a StaticPool so every session sees the same data.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from contoso_pets.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine with pool options suited to the database backend.

    Args:
        database_url: Async SQLAlchemy URL (postgresql+asyncpg, sqlite+aiosqlite).
        echo: Log every SQL statement (enabled when log_level is DEBUG).
    """
    kwargs: Dict[str, Any] = {"echo": echo}

    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if make_url(database_url).database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )

    return create_async_engine(database_url, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `bind`.

    expire_on_commit=False keeps attribute access working after commit,
    which the routes rely on when serializing a just-saved product.
    """
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url, echo=settings.log_level == "DEBUG")
async_session_factory = build_session_factory(engine)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which `create_tables`
    uses at startup.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the request (the store performs queries on it)
        3. On success: commits anything still pending
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns the connection to the pool)

    Raises:
        Any database exceptions propagate to the global error handlers.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(bind: AsyncEngine = engine) -> None:
    """
    Create any missing tables for registered models.

    When:  At startup when settings.db_create_tables is true.
    Note:  create_all only adds missing tables; it never alters existing ones.
    """
    # Models must be imported so their tables are registered on Base.metadata
    from contoso_pets.models import product  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
