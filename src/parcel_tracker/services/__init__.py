"""
parcel_tracker.services

Service-layer package.

Responsibilities:
- Enforce parcel lifecycle rules on top of the store.
"""

# Package marker.
