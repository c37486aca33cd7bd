"""Shared fixtures: in-memory database, sessions and model factories."""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from petmall.catalog.models import Product, Store
from petmall.infrastructure.database import Base
from petmall.wishlist.models import User

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite engine with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the test database."""
    async with session_factory() as session:
        yield session


# ============================================================================
# Factories
# ============================================================================


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Build unsaved products with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Product:
        counter["n"] += 1
        n = counter["n"]
        values: dict[str, Any] = {
            "animal_category": 1,
            "product_category": 1,
            "name": f"테스트 상품 {n}",
            "price": 10000 + n,
            "description": f"설명 {n}",
            "stock": 10,
            "wish_count": 0,
            "purchase_count": 0,
            "created_at": BASE_TIME - timedelta(days=n),
        }
        values.update(overrides)
        return Product(**values)

    return _make


@pytest_asyncio.fixture
async def store(session: AsyncSession) -> Store:
    """A saved store."""
    store = Store(name="멍냥상회")
    session.add(store)
    await session.commit()
    return store


@pytest_asyncio.fixture
async def user(session: AsyncSession) -> User:
    """A saved user."""
    user = User(email="owner@petmall.dev", nickname="owner")
    session.add(user)
    await session.commit()
    return user
