"""
parcel_tracker.db.repositories.parcels

Data access for parcels.

Responsibilities:
- Insert, read, update (address, status) and delete single `parcel` rows.
- List every parcel belonging to one client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from parcel_tracker.db.models import ParcelRow
from parcel_tracker.domain import Parcel
from parcel_tracker.errors import ParcelNotFoundError
from parcel_tracker.observability.logging import get_logger

log = get_logger(__name__)


class ParcelStore:
    """
    Every method runs one statement inside its own transaction and ends that
    transaction before returning, so calls are independent of each other.
    Engine errors (`SQLAlchemyError`) propagate unchanged after the transaction
    is rolled back; the only error raised here is `ParcelNotFoundError` from `get`.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        # Rolling back on failure keeps the session usable for the next call.
        try:
            yield self._session
            await self._session.commit()
        except SQLAlchemyError:
            await self._session.rollback()
            raise

    async def add(self, parcel: Parcel) -> int:
        """Insert `parcel` and return the number the engine assigned to it."""
        async with self._transaction() as session:
            row = ParcelRow.from_parcel(parcel)
            session.add(row)
            await session.flush()
            number = row.number
        log.debug("parcel_added", number=number, client=parcel.client)
        return number

    async def get(self, number: int) -> Parcel:
        # populate_existing: rows already in the identity map are overwritten with
        # what the database holds now.
        stmt = (
            select(ParcelRow)
            .where(ParcelRow.number == number)
            .execution_options(populate_existing=True)
        )
        async with self._transaction() as session:
            row = (await session.execute(stmt)).scalar_one_or_none()
            parcel = row.to_parcel() if row is not None else None
        if parcel is None:
            raise ParcelNotFoundError(number)
        return parcel

    async def set_address(self, number: int, address: str) -> None:
        stmt = update(ParcelRow).where(ParcelRow.number == number).values(address=address)
        async with self._transaction() as session:
            await session.execute(stmt)
        log.debug("parcel_address_set", number=number)

    async def set_status(self, number: int, status: str) -> None:
        stmt = update(ParcelRow).where(ParcelRow.number == number).values(status=str(status))
        async with self._transaction() as session:
            await session.execute(stmt)
        log.debug("parcel_status_set", number=number, status=str(status))

    async def delete(self, number: int) -> None:
        """Remove the row; a number with no row is not an error."""
        async with self._transaction() as session:
            await session.execute(delete(ParcelRow).where(ParcelRow.number == number))
        log.debug("parcel_deleted", number=number)

    async def get_by_client(self, client: int) -> list[Parcel]:
        stmt = (
            select(ParcelRow)
            .where(ParcelRow.client == client)
            .order_by(ParcelRow.number)
            .execution_options(populate_existing=True)
        )
        async with self._transaction() as session:
            rows = (await session.execute(stmt)).scalars().all()
            parcels = [row.to_parcel() for row in rows]
        return parcels


# --- Module Notes -----------------------------------------------------------
# Reads commit too, so a read-only caller never leaves a connection idle inside
# an open transaction. Updates and deletes are bulk statements keyed on the
# primary key; a missing number matches zero rows.
