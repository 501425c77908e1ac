"""
parcel_tracker.db.models

Persistence schema.

Responsibilities:
- Map the `parcel` table: one row per shipment record.
- Convert rows to and from the `Parcel` domain value.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from parcel_tracker.db.base import Base
from parcel_tracker.domain import Parcel


class ParcelRow(Base):
    __tablename__ = "parcel"
    # AUTOINCREMENT keeps SQLite from reusing the number of a deleted row.
    __table_args__ = {"sqlite_autoincrement": True}

    number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(64), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    # RFC3339 text, stored as written by the caller.
    created_at: Mapped[str] = mapped_column(String(32), nullable=False)

    @classmethod
    def from_parcel(cls, parcel: Parcel) -> ParcelRow:
        # `number` is left unset so the engine assigns it.
        return cls(
            client=parcel.client,
            status=str(parcel.status),
            address=parcel.address,
            created_at=parcel.created_at,
        )

    def to_parcel(self) -> Parcel:
        return Parcel(
            number=self.number,
            client=self.client,
            status=self.status,
            address=self.address,
            created_at=self.created_at,
        )

    def __repr__(self) -> str:
        return f"<ParcelRow(number={self.number}, client={self.client}, status={self.status!r})>"
