"""
tests.test_parcel_service

Lifecycle rules enforced by `ParcelService`.
"""

from __future__ import annotations

import re

import pytest
import pytest_asyncio

from parcel_tracker.domain import ParcelStatus
from parcel_tracker.errors import ParcelNotFoundError, ParcelStateError
from parcel_tracker.services.parcel_service import ParcelService


@pytest_asyncio.fixture
async def service(session) -> ParcelService:
    return ParcelService(session=session)


@pytest.mark.asyncio
async def test_register_stores_registered_parcel(service, store) -> None:
    parcel = await service.register(client=5, address="Main st. 1")

    assert parcel.number > 0
    assert parcel.status == ParcelStatus.registered
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", parcel.created_at)
    assert await store.get(parcel.number) == parcel


@pytest.mark.asyncio
async def test_client_parcels(service) -> None:
    a = await service.register(client=9, address="a")
    b = await service.register(client=9, address="b")
    await service.register(client=10, address="c")

    assert {p.number for p in await service.client_parcels(9)} == {a.number, b.number}


@pytest.mark.asyncio
async def test_next_status_walks_lifecycle(service, store) -> None:
    parcel = await service.register(client=1, address="x")

    assert await service.next_status(parcel.number) == "sent"
    assert await service.next_status(parcel.number) == "delivered"
    assert (await store.get(parcel.number)).status == ParcelStatus.delivered

    with pytest.raises(ParcelStateError) as exc_info:
        await service.next_status(parcel.number)
    assert exc_info.value.status == "delivered"


@pytest.mark.asyncio
async def test_next_status_rejects_unknown_status(service, store) -> None:
    parcel = await service.register(client=1, address="x")
    await store.set_status(parcel.number, "lost in transit")

    with pytest.raises(ParcelStateError):
        await service.next_status(parcel.number)


@pytest.mark.asyncio
async def test_change_address_while_registered(service, store) -> None:
    parcel = await service.register(client=1, address="old")

    await service.change_address(parcel.number, "new")

    assert (await store.get(parcel.number)).address == "new"


@pytest.mark.asyncio
async def test_change_address_after_sent_is_rejected(service, store) -> None:
    parcel = await service.register(client=1, address="old")
    await service.next_status(parcel.number)

    with pytest.raises(ParcelStateError):
        await service.change_address(parcel.number, "new")
    assert (await store.get(parcel.number)).address == "old"


@pytest.mark.asyncio
async def test_delete_while_registered(service, store) -> None:
    parcel = await service.register(client=1, address="x")

    await service.delete(parcel.number)

    with pytest.raises(ParcelNotFoundError):
        await store.get(parcel.number)


@pytest.mark.asyncio
async def test_delete_after_sent_is_rejected(service, store) -> None:
    parcel = await service.register(client=1, address="x")
    await service.next_status(parcel.number)

    with pytest.raises(ParcelStateError):
        await service.delete(parcel.number)
    assert (await store.get(parcel.number)).number == parcel.number


@pytest.mark.asyncio
async def test_missing_parcel_raises_not_found(service) -> None:
    with pytest.raises(ParcelNotFoundError):
        await service.next_status(404)
    with pytest.raises(ParcelNotFoundError):
        await service.delete(404)
