"""
parcel_tracker.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM table mapping, engine/session setup, and the parcel store.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only SQL-level concerns live here; lifecycle rules belong in `parcel_tracker.services`.
