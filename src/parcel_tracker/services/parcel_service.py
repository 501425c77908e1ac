"""
parcel_tracker.services.parcel_service

Parcel lifecycle service.

Responsibilities:
- Register new parcels with the initial status and a creation timestamp.
- Advance status along registered -> sent -> delivered.
- Allow address changes and deletion only while a parcel is still registered.
"""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.ext.asyncio import AsyncSession

from parcel_tracker.db.repositories.parcels import ParcelStore
from parcel_tracker.domain import Parcel, ParcelStatus, utc_now_rfc3339
from parcel_tracker.errors import ParcelStateError
from parcel_tracker.observability.logging import get_logger

log = get_logger(__name__)

_NEXT_STATUS: dict[str, ParcelStatus] = {
    ParcelStatus.registered: ParcelStatus.sent,
    ParcelStatus.sent: ParcelStatus.delivered,
}


class ParcelService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._parcels = ParcelStore(session)

    async def register(self, *, client: int, address: str) -> Parcel:
        parcel = Parcel(
            client=client,
            status=ParcelStatus.registered,
            address=address,
            created_at=utc_now_rfc3339(),
        )
        number = await self._parcels.add(parcel)
        log.info("parcel_registered", number=number, client=client)
        return replace(parcel, number=number)

    async def client_parcels(self, client: int) -> list[Parcel]:
        return await self._parcels.get_by_client(client)

    async def next_status(self, number: int) -> str:
        parcel = await self._parcels.get(number)
        nxt = _NEXT_STATUS.get(parcel.status)
        if nxt is None:
            # Delivered parcels and statuses written outside this service have no successor.
            raise ParcelStateError(number, parcel.status, "advance")
        await self._parcels.set_status(number, nxt)
        log.info("parcel_status_advanced", number=number, previous=parcel.status, status=str(nxt))
        return str(nxt)

    async def change_address(self, number: int, address: str) -> None:
        await self._require_registered(number, "change address of")
        await self._parcels.set_address(number, address)
        log.info("parcel_address_changed", number=number)

    async def delete(self, number: int) -> None:
        await self._require_registered(number, "delete")
        await self._parcels.delete(number)
        log.info("parcel_deleted", number=number)

    async def _require_registered(self, number: int, action: str) -> None:
        parcel = await self._parcels.get(number)
        if parcel.status != ParcelStatus.registered:
            raise ParcelStateError(number, parcel.status, action)


# --- Module Notes -----------------------------------------------------------
# The status check and the write are two statements; a concurrent writer can
# change the status in between. The store offers no cross-statement transaction.
