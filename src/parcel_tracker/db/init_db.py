"""
parcel_tracker.db.init_db

Table bootstrap for local use and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from parcel_tracker.db import models  # noqa: F401  # registers ParcelRow on Base.metadata
from parcel_tracker.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create the `parcel` table if it does not exist. Existing tables are left as-is;
    there is no migration step.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
