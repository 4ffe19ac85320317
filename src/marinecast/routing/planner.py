"""
Trip planner (caller side of the route optimizer).

The optimizer only knows coordinates and its default boat. This module does the
work a request layer needs around it:
- resolve harbor ids / spot ids / raw points into coordinates, rejecting unknown ids
- look up the current at the trip midpoint and feed it to the optimizer
- rescale the estimate for the caller's own cruising speed and fuel burn
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence, Union

from marinecast.catalog.loader import get_harbor
from marinecast.config.settings import Settings, get_settings
from marinecast.core.random_source import RandomSource
from marinecast.domain.models import FishingSpot, GeoPoint, TripPlan
from marinecast.features.conditions import compute_conditions
from marinecast.routing.optimizer import calculate_route

logger = logging.getLogger(__name__)

LocationRef = Union[str, GeoPoint]


class UnknownLocationError(ValueError):
    """Raised when a harbor/spot id does not resolve to coordinates."""

    def __init__(self, ref: str):
        super().__init__(f"Unknown harbor or fishing spot id: '{ref}'")
        self.ref = ref


def resolve_location(
    ref: LocationRef, *, spots: Sequence[FishingSpot] = (), harbors_path: str | None = None
) -> GeoPoint:
    """Turn a harbor id, spot id or point into coordinates."""
    if isinstance(ref, GeoPoint):
        return ref
    for spot in spots:
        if spot.id == ref:
            return spot.location
    harbor = get_harbor(ref, path=harbors_path)
    if harbor is not None:
        return harbor.coordinates
    raise UnknownLocationError(ref)


def midpoint(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    return GeoPoint(lat=(a.lat + b.lat) / 2, lng=(a.lng + b.lng) / 2)


def plan_trip(
    start: LocationRef,
    end: LocationRef,
    *,
    rng: RandomSource,
    timestamp: datetime,
    boat_speed_kmh: float | None = None,
    fuel_rate_lph: float | None = None,
    spots: Sequence[FishingSpot] = (),
    settings: Settings | None = None,
) -> TripPlan:
    """Plan a trip and rescale the estimate for one boat.

    Raises:
        UnknownLocationError: If `start` or `end` is an id that resolves to nothing.
        ValueError: If the boat speed or fuel rate is not positive.
    """
    settings = settings or get_settings()
    cfg = settings.route

    # Resolve both ends before touching the optimizer so bad ids fail fast.
    start_pt = resolve_location(start, spots=spots, harbors_path=settings.catalog.harbors_path)
    end_pt = resolve_location(end, spots=spots, harbors_path=settings.catalog.harbors_path)

    speed = cfg.average_speed_kmh if boat_speed_kmh is None else float(boat_speed_kmh)
    fuel_rate = cfg.fuel_rate_lph if fuel_rate_lph is None else float(fuel_rate_lph)
    if speed <= 0:
        raise ValueError("boat_speed_kmh must be positive")
    if fuel_rate <= 0:
        raise ValueError("fuel_rate_lph must be positive")

    mid = midpoint(start_pt, end_pt)
    conditions = compute_conditions(mid.lat, mid.lng, timestamp, rng=rng, timezone=settings.app.timezone)

    route = calculate_route(
        start_pt,
        end_pt,
        conditions.current_speed,
        conditions.current_direction,
        average_speed_kmh=cfg.average_speed_kmh,
        fuel_rate_lph=cfg.fuel_rate_lph,
    )

    speed_factor = speed / cfg.average_speed_kmh
    fuel_factor = fuel_rate / cfg.fuel_rate_lph
    adjusted_time = route.estimated_time_hours / speed_factor
    adjusted_fuel = route.estimated_fuel_liters * fuel_factor / speed_factor

    logger.info(
        "trip planned distance_km=%.2f time_h=%.2f fuel_l=%.2f",
        route.total_distance_km,
        adjusted_time,
        adjusted_fuel,
    )

    return TripPlan(
        route=route,
        conditions=conditions,
        boat_speed_kmh=speed,
        fuel_rate_lph=fuel_rate,
        adjusted_time_hours=adjusted_time,
        adjusted_fuel_liters=adjusted_fuel,
    )
