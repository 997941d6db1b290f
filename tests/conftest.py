"""Shared fixtures: a fresh in-memory SQLite database per test and an HTTP client bound to it."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import get_db
from app.main import app
from app.models import Base


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def event_payload():
    """Build a valid event body for the given category and subcategory ids."""

    def build(category_id, subcategory_id, **overrides):
        payload = {
            "name": "Harbour Jazz Night",
            "date": 1732000000000,
            "venue": "Harbour Hall",
            "imageUrl": "https://cdn.harbourhall.com/posters/jazz.png",
            "categoryId": str(category_id),
            "subcategoryId": str(subcategory_id),
            "contactPhone": "+6421555123",
            "contactEmail": "bookings@harbourhall.com",
        }
        payload.update(overrides)
        return payload

    return build
