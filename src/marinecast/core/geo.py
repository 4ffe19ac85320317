from __future__ import annotations
from math import asin, cos, radians, sin, sqrt
from typing import Protocol

"""
Geospatial helpers.

Everything in the engine measures distance through `haversine_km`, so the
boundary check, spot offsets and route lengths all agree on one Earth model.
We keep this tiny instead of pulling in a GIS dependency.
"""

EARTH_RADIUS_KM = 6371.0
KM_TO_NM = 0.539957


class HasLatLng(Protocol):
    """Anything carrying `lat`/`lng` in decimal degrees (e.g. `domain.models.GeoPoint`)."""

    @property
    def lat(self) -> float: ...

    @property
    def lng(self) -> float: ...


def haversine_km(a: HasLatLng, b: HasLatLng) -> float:
    """Compute great-circle distance in kilometers between two points."""
    lat1 = radians(a.lat)
    lng1 = radians(a.lng)
    lat2 = radians(b.lat)
    lng2 = radians(b.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    # Rounding can push h just above 1 for antipodal points.
    return 2 * EARTH_RADIUS_KM * asin(min(1.0, sqrt(h)))


def km_to_nm(km: float) -> float:
    """Convert kilometers to nautical miles."""
    return km * KM_TO_NM
