"""
parcel_tracker.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from settings.
- Create the async sessionmaker with the defaults the store relies on.
- Provide a session scope helper for callers that wire the store themselves.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from parcel_tracker.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: the store commits after every statement and must not
    # trigger lazy refreshes afterwards.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    Open a session for the duration of the block and close it afterwards.

        async with session_scope(factory) as session:
            store = ParcelStore(session)
    """

    async with session_factory() as session:
        yield session


# --- Module Notes -----------------------------------------------------------
# ParcelStore.add flushes explicitly to read the assigned number before committing;
# with autoflush=False no other query pushes a pending row out earlier, so a failed
# insert always surfaces from `add` itself and is rolled back there.
# One session per task: AsyncSession must not be shared between concurrent tasks.
