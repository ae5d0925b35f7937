"""
Pytest fixtures for test database, client, and store.

Each test gets a fresh in-memory SQLite database (aiosqlite, StaticPool so
every session shares the one connection). The HTTP client overrides get_db
with a per-request session, the same lifecycle production uses.
"""

import os

# Must be set before libbook settings are first read
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"

from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from libbook.main import app
from libbook.db.base import Base
from libbook.db.session import get_db
from libbook.db.store import RecordStore
import libbook.models  # noqa: F401 - register tables on Base.metadata

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh database with all tables for one test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def store(db_session: AsyncSession) -> RecordStore:
    return RecordStore(db_session)


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests each get their own test session."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seat_s1(client: AsyncClient) -> dict:
    """A single Standard seat created through the layout endpoint."""
    seat = {"id": "s1", "label": "S1", "type": "Standard", "x": 1, "y": 1, "rotation": 0}
    response = await client.post("/api/seats", json=[seat])
    assert response.status_code == 200
    return seat


@pytest_asyncio.fixture
async def student(client: AsyncClient) -> dict:
    user = {
        "id": "u-100",
        "name": "Ada Student",
        "email": "ada@student.edu",
        "password": "pw",
        "role": "STUDENT",
        "studentId": "CS2024100",
        "department": "Computer Science",
        "yearSection": "2-B",
        "mobile": "5550000000",
    }
    response = await client.post("/api/users", json=user)
    assert response.status_code == 200
    return user


@pytest_asyncio.fixture
async def booking_payload():
    """Factory for a valid booking body on seat s1; keyword overrides win."""

    def build(**overrides) -> dict:
        payload = {
            "seatId": "s1",
            "userId": "u-100",
            "userName": "Ada Student",
            "date": "2024-05-01",
            "startTime": "10:00",
            "endTime": "11:00",
        }
        payload.update(overrides)
        return payload

    return build
