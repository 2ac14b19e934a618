"""
ContosoPets API — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── db_engine: In-memory SQLite engine with the products table
    ├── session_factory: Session factory; the database is seeded with
    │                    Product1..Product5, price = 0.99 + i
    ├── db_session: One AsyncSession on the seeded database
    ├── product_store / product_service: Store and service over db_session
    ├── mock_db_session: AsyncMock session for failure-path tests
    └── test_client: HTTPX AsyncClient routed to the app, wired to the
                     seeded database through a dependency override
"""

import os

# Settings are read at import time, so the environment is set first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

from decimal import Decimal  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from contoso_pets.database import (  # noqa: E402
    Base,
    build_engine,
    build_session_factory,
    get_db_session,
)
from contoso_pets.models.product import Product  # noqa: E402
from contoso_pets.services.product_service import ProductService  # noqa: E402
from contoso_pets.stores.sqlalchemy_store import SqlAlchemyProductStore  # noqa: E402

SEED_COUNT = 5


def seed_price(i: int) -> Decimal:
    return Decimal("0.99") + i


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """A private in-memory database per test, so tests never share rows."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    """
    Session factory over a database seeded with products 1..5.

    Each product is committed on its own so insertion times are distinct.
    """
    factory = build_session_factory(db_engine)
    async with factory() as session:
        for i in range(1, SEED_COUNT + 1):
            session.add(Product(id=i, name=f"Product{i}", price=seed_price(i)))
            await session.commit()
    return factory


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def product_store(db_session):
    return SqlAlchemyProductStore(db_session)


@pytest.fixture
def product_service(product_store):
    return ProductService(product_store)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.get.side_effect = OperationalError(...)
        await SqlAlchemyProductStore(mock_db_session).find(1)
    """
    session = AsyncMock()
    session.get = AsyncMock()
    session.execute = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    How:   ASGITransport routes requests straight into the app. The session
           dependency is overridden so requests hit the seeded database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/products")
            assert response.status_code == 200
    """
    from contoso_pets.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
