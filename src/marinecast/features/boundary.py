"""
Territorial-waters classifier.

A point counts as international waters when it lies more than 12 nautical miles
from the nearest coastline anchor.

Known approximation: the distance is measured to the nearest *anchor point*,
not to the coastline polyline between anchors. A point hugging the coast midway
between two anchors far apart (e.g. Rameswaram and Kanyakumari) can come out as
international waters. Callers relying on this for anything legal must not.
"""

from __future__ import annotations

import logging
from typing import Sequence

from marinecast.catalog.reference import COASTLINE_ANCHORS
from marinecast.core.geo import haversine_km, km_to_nm
from marinecast.domain.models import BoundaryStatus, CoastlineAnchor, GeoPoint

logger = logging.getLogger(__name__)

TERRITORIAL_LIMIT_NM = 12.0


def nearest_anchor(
    lat: float, lng: float, anchors: Sequence[CoastlineAnchor] = COASTLINE_ANCHORS
) -> tuple[CoastlineAnchor, float]:
    """Return the closest anchor and its distance in km."""
    point = GeoPoint(lat=lat, lng=lng)
    return min(((a, haversine_km(point, a.point)) for a in anchors), key=lambda pair: pair[1])


def classify_waters(
    lat: float,
    lng: float,
    *,
    limit_nm: float = TERRITORIAL_LIMIT_NM,
    anchors: Sequence[CoastlineAnchor] = COASTLINE_ANCHORS,
) -> BoundaryStatus:
    """Classify a point and report which anchor it was measured against."""
    anchor, distance_km = nearest_anchor(lat, lng, anchors)
    distance_nm = km_to_nm(distance_km)
    status = BoundaryStatus(
        international_waters=distance_nm > limit_nm,
        nearest_anchor=anchor.name,
        distance_km=distance_km,
        distance_nm=distance_nm,
        limit_nm=limit_nm,
    )
    logger.debug("boundary lat=%s lng=%s nearest=%s nm=%.2f", lat, lng, anchor.name, distance_nm)
    return status


def is_international_waters(lat: float, lng: float) -> bool:
    """True iff the point is beyond the 12 nm limit from every coastline anchor."""
    return classify_waters(lat, lng).international_waters
