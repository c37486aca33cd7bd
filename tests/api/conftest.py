"""Shared fixtures for API tests."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from petmall.catalog.models import Product
from petmall.infrastructure.database import get_session
from petmall.main import app
from petmall.wishlist.models import User


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client backed by the in-memory database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seed_products(
    session_factory: async_sessionmaker[AsyncSession],
    make_product: Callable[..., Product],
) -> Callable[..., Any]:
    """Insert products and return their IDs."""

    async def _seed(*overrides: dict[str, Any]) -> list[int]:
        async with session_factory() as session:
            products = [make_product(**o) for o in overrides]
            session.add_all(products)
            await session.commit()
            return [p.id for p in products]

    return _seed


@pytest_asyncio.fixture
async def user_id(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """ID of a saved user."""
    async with session_factory() as session:
        user = User(email="shopper@petmall.dev", nickname="shopper")
        session.add(user)
        await session.commit()
        return user.id
