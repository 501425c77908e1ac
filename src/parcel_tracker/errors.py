"""
parcel_tracker.errors

Package exceptions.

Storage and connectivity failures are not wrapped: they surface as the
`sqlalchemy.exc.SQLAlchemyError` raised by the engine.
"""

from __future__ import annotations


class ParcelError(Exception):
    """Base class for errors raised by this package."""


class ParcelNotFoundError(ParcelError, LookupError):
    """No row matches the requested parcel number."""

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"parcel {number} not found")


class ParcelStateError(ParcelError):
    """The parcel's current status does not allow the requested action."""

    def __init__(self, number: int, status: str, action: str) -> None:
        self.number = number
        self.status = status
        self.action = action
        super().__init__(f"cannot {action} parcel {number} in status {status!r}")
