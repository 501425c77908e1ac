"""
tests.conftest

Shared fixtures: a fresh in-memory SQLite database per test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from parcel_tracker.db.init_db import init_db
from parcel_tracker.db.repositories.parcels import ParcelStore
from parcel_tracker.db.session import create_sessionmaker
from parcel_tracker.domain import Parcel, ParcelStatus, utc_now_rfc3339

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    # StaticPool keeps a single connection so the in-memory database outlives each session.
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(eng)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_sessionmaker(engine)() as s:
        yield s


@pytest_asyncio.fixture
async def store(session: AsyncSession) -> ParcelStore:
    return ParcelStore(session)


@pytest.fixture
def make_parcel():
    # Defaults mirror a freshly registered parcel for client 1000.
    def _make(**overrides) -> Parcel:
        fields = {
            "client": 1000,
            "status": ParcelStatus.registered,
            "address": "test",
            "created_at": utc_now_rfc3339(),
        }
        fields.update(overrides)
        return Parcel(**fields)

    return _make
