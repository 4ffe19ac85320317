"""Route synthesis: a gently curved waypoint path plus distance/time/fuel estimates."""
from __future__ import annotations

import logging
from math import pi, sin

from marinecast.core.geo import haversine_km
from marinecast.domain.models import GeoPoint, Route

logger = logging.getLogger(__name__)

SEGMENTS = 5  # six waypoints including start and end

DEFAULT_CURVE_FACTOR = 0.1
MAX_CURVE_FACTOR = 0.3

# Small fishing boat: roughly 10-15 km/h burning 10-15 L/h.
AVERAGE_SPEED_KMH = 12.0
FUEL_RATE_LPH = 12.0


def curve_factor(current_speed_knots: float | None) -> float:
    """Stronger currents bow the path further off the straight line."""
    if current_speed_knots is None:
        return DEFAULT_CURVE_FACTOR
    return min(MAX_CURVE_FACTOR, current_speed_knots / 10)


def _waypoints(start: GeoPoint, end: GeoPoint, factor: float) -> list[GeoPoint]:
    dlat = end.lat - start.lat
    dlng = end.lng - start.lng

    points: list[GeoPoint] = []
    for i in range(SEGMENTS + 1):
        fraction = i / SEGMENTS
        lat = start.lat + dlat * fraction
        lng = start.lng + dlng * fraction

        # Perpendicular to the start->end vector, zero at both ends.
        offset = sin(fraction * pi) * factor
        points.append(GeoPoint(lat=lat - dlng * offset, lng=lng + dlat * offset))

    # Endpoints are the inputs themselves, not interpolated values.
    points[0] = start
    points[-1] = end
    return points


def path_length_km(points: list[GeoPoint]) -> float:
    """Sum of great-circle segment lengths along `points`."""
    return sum(haversine_km(a, b) for a, b in zip(points, points[1:]))


def calculate_route(
    start: GeoPoint,
    end: GeoPoint,
    current_speed_knots: float | None = None,
    current_direction: str | None = None,
    *,
    average_speed_kmh: float = AVERAGE_SPEED_KMH,
    fuel_rate_lph: float = FUEL_RATE_LPH,
) -> Route:
    """Build a curved route from `start` to `end`.

    `current_direction` is accepted for API compatibility but does not affect
    the curve yet; only the current's speed does.
    """
    points = _waypoints(start, end, curve_factor(current_speed_knots))
    total_km = path_length_km(points)

    time_hours = total_km / average_speed_kmh if average_speed_kmh > 0 else 0.0
    fuel_liters = time_hours * fuel_rate_lph

    logger.debug(
        "route %s -> %s current=%s/%s total_km=%.2f",
        (start.lat, start.lng),
        (end.lat, end.lng),
        current_speed_knots,
        current_direction,
        total_km,
    )

    return Route(
        waypoints=points,
        total_distance_km=total_km,
        direct_distance_km=haversine_km(start, end),
        estimated_time_hours=time_hours,
        estimated_fuel_liters=max(0.0, fuel_liters),
    )
