"""
parcel_tracker.domain

Parcel domain types.

Responsibilities:
- Define the `Parcel` value handed to and returned from the store.
- Define the known parcel statuses and the timestamp format used for `created_at`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone

RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"


class ParcelStatus(enum.StrEnum):
    registered = "registered"
    sent = "sent"
    delivered = "delivered"


def utc_now_rfc3339() -> str:
    return datetime.now(timezone.utc).strftime(RFC3339_UTC)


@dataclass(frozen=True, slots=True)
class Parcel:
    """
    One shipment record.

    `number` is assigned by the store; a parcel that has not been added yet
    carries 0. `status` is free-form: `ParcelStatus` lists the values the
    service understands, but the store accepts any string.
    """

    client: int
    status: str
    address: str
    created_at: str
    number: int = 0


# --- Module Notes -----------------------------------------------------------
# `created_at` stays a string end to end so what the caller wrote is exactly
# what `get` returns; no timezone round-trip through the driver.
