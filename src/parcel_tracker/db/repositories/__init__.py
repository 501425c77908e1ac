"""
parcel_tracker.db.repositories

Repository package.

Responsibilities:
- Group data-access classes for the persistence layer.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories translate calls into SQL and nothing else; status rules live in services.
