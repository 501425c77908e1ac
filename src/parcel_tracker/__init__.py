"""
parcel_tracker

Top-level package for the parcel tracking persistence layer.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Import the store from `parcel_tracker.db.repositories.parcels`; nothing is
# re-exported here so importing the package never touches SQLAlchemy.
