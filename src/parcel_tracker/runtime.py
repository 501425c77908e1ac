"""
parcel_tracker.runtime

Process-level setup for code that uses the tracker.

Responsibilities:
- Configure logging from settings.
- Create the engine and session factory once, and dispose them on exit.
- Create tables automatically in dev/test; prod expects the schema to exist.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from parcel_tracker.db.init_db import init_db
from parcel_tracker.db.repositories.parcels import ParcelStore
from parcel_tracker.db.session import create_engine, create_sessionmaker, session_scope
from parcel_tracker.observability.logging import configure_logging, get_logger
from parcel_tracker.settings import Settings, get_settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Tracker:
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]

    @asynccontextmanager
    async def store(self) -> AsyncIterator[ParcelStore]:
        """A `ParcelStore` on a fresh session, closed when the block exits."""
        async with session_scope(self.sessionmaker) as session:
            yield ParcelStore(session)


@asynccontextmanager
async def open_tracker(settings: Settings | None = None) -> AsyncIterator[Tracker]:
    """
    Usage:

        async with open_tracker() as tracker:
            async with tracker.store() as store:
                number = await store.add(parcel)
    """

    settings = settings or get_settings()
    configure_logging(settings)

    engine = create_engine(settings)
    try:
        if settings.env in ("dev", "test"):
            await init_db(engine)
        log.info("tracker_opened", env=settings.env)
        yield Tracker(engine=engine, sessionmaker=create_sessionmaker(engine))
    finally:
        await engine.dispose()
        log.info("tracker_closed")


# --- Module Notes -----------------------------------------------------------
# Call `open_tracker` once per process; each task that touches the database
# should take its own `tracker.store()`, since an AsyncSession is single-task.
