"""
API routes.

Endpoints:
- GET `/api/marine-data`: simulated conditions at a point.
- GET `/api/fishing-spots`: procedurally generated spots around a point.
- GET `/api/international-waters`: territorial-waters check for a point.
- GET `/api/route-optimization`: curved route between two points.
- GET `/api/harbors`: the harbor lookup table.
- GET `/api/trip-plan`: harbor-to-harbor (or custom) trip rescaled for a boat.

Query parameter names follow the dashboard's camelCase (`startLat`, `boatSpeed`).
Validation errors map to 400; anything unexpected is logged and mapped to 500.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException, Query

from marinecast.catalog.loader import load_harbors
from marinecast.config.settings import get_settings
from marinecast.core.random_source import RandomSource, build_rng
from marinecast.core.time import now_local, parse_timestamp
from marinecast.domain.models import (
    BoundaryStatus,
    FishingSpot,
    GeoPoint,
    Harbor,
    MarineConditions,
    Route,
    TripPlan,
)
from marinecast.features.boundary import classify_waters
from marinecast.features.conditions import compute_conditions
from marinecast.features.spots import generate_spots
from marinecast.routing.optimizer import calculate_route
from marinecast.routing.planner import LocationRef, midpoint, plan_trip

logger = logging.getLogger(__name__)

router = APIRouter()

CUSTOM_LOCATION = "custom"


def _rng() -> RandomSource:
    """Build the per-request random source (seeded when configured)."""
    return build_rng(get_settings().app.random_seed)


def _timestamp(at: str | None) -> datetime:
    tz = get_settings().app.timezone
    if not at:
        return now_local(tz)
    try:
        return parse_timestamp(at, tz)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid timestamp: {at}") from e


def _require_point(lat: float | None, lng: float | None, message: str) -> GeoPoint:
    if lat is None or lng is None:
        raise HTTPException(status_code=400, detail=message)
    try:
        return GeoPoint(lat=lat, lng=lng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/api/marine-data", response_model=MarineConditions)
def get_marine_data(
    lat: float | None = None,
    lng: float | None = None,
    at: str | None = Query(default=None, description="ISO datetime; defaults to now"),
) -> MarineConditions:
    """Return simulated marine conditions for a point."""
    point = _require_point(lat, lng, "Latitude and longitude are required")
    timestamp = _timestamp(at)
    try:
        return compute_conditions(
            point.lat, point.lng, timestamp, rng=_rng(), timezone=get_settings().app.timezone
        )
    except Exception as e:
        logger.exception("Error computing marine data")
        raise HTTPException(status_code=500, detail="Failed to fetch marine data") from e


@router.get("/api/fishing-spots", response_model=list[FishingSpot])
def get_fishing_spots(
    lat: float | None = None,
    lng: float | None = None,
    radius: float | None = Query(default=None, gt=0, description="km"),
) -> list[FishingSpot]:
    """Return generated fishing spots around a point."""
    point = _require_point(lat, lng, "Latitude and longitude are required")
    settings = get_settings()
    radius_km = radius if radius is not None else settings.spots.default_radius_km
    try:
        return generate_spots(
            point.lat,
            point.lng,
            radius_km,
            rng=_rng(),
            timezone=settings.app.timezone,
        )
    except Exception as e:
        logger.exception("Error generating fishing spots")
        raise HTTPException(status_code=500, detail="Failed to fetch fishing spots") from e


@router.get("/api/international-waters", response_model=BoundaryStatus)
def get_international_waters(lat: float | None = None, lng: float | None = None) -> BoundaryStatus:
    """Classify a point as territorial or international waters."""
    point = _require_point(lat, lng, "Latitude and longitude are required")
    try:
        return classify_waters(point.lat, point.lng, limit_nm=get_settings().boundary.territorial_limit_nm)
    except Exception as e:
        logger.exception("Error checking international waters")
        raise HTTPException(status_code=500, detail="Failed to check international waters") from e


@router.get("/api/route-optimization", response_model=Route)
def get_route_optimization(
    start_lat: float | None = Query(default=None, alias="startLat"),
    start_lng: float | None = Query(default=None, alias="startLng"),
    end_lat: float | None = Query(default=None, alias="endLat"),
    end_lng: float | None = Query(default=None, alias="endLng"),
) -> Route:
    """Return a curved route between two points, shaped by the midpoint current."""
    message = "Start and end coordinates are required"
    start = _require_point(start_lat, start_lng, message)
    end = _require_point(end_lat, end_lng, message)
    settings = get_settings()
    try:
        mid = midpoint(start, end)
        conditions = compute_conditions(
            mid.lat, mid.lng, now_local(settings.app.timezone), rng=_rng(), timezone=settings.app.timezone
        )
        return calculate_route(
            start,
            end,
            conditions.current_speed,
            conditions.current_direction,
            average_speed_kmh=settings.route.average_speed_kmh,
            fuel_rate_lph=settings.route.fuel_rate_lph,
        )
    except Exception as e:
        logger.exception("Error calculating optimal route")
        raise HTTPException(status_code=500, detail="Failed to calculate optimal route") from e


@router.get("/api/harbors", response_model=list[Harbor])
def get_harbors() -> list[Harbor]:
    """Return the harbor lookup table."""
    try:
        return list(load_harbors(get_settings().catalog.harbors_path))
    except Exception as e:
        logger.exception("Error loading harbors")
        raise HTTPException(status_code=500, detail="Failed to fetch harbors") from e


def _location_ref(ref: str, lat: float | None, lng: float | None, label: str) -> LocationRef:
    if ref == CUSTOM_LOCATION:
        return _require_point(lat, lng, f"Custom {label} requires coordinates")
    return ref


@router.get("/api/trip-plan", response_model=TripPlan)
def get_trip_plan(
    start: str = Query(..., description="Harbor id, or 'custom' with startLat/startLng"),
    end: str = Query(..., description="Harbor id, or 'custom' with endLat/endLng"),
    start_lat: float | None = Query(default=None, alias="startLat"),
    start_lng: float | None = Query(default=None, alias="startLng"),
    end_lat: float | None = Query(default=None, alias="endLat"),
    end_lng: float | None = Query(default=None, alias="endLng"),
    boat_speed: float | None = Query(default=None, alias="boatSpeed", description="km/h"),
    fuel_rate: float | None = Query(default=None, alias="fuelRate", description="L/h"),
    at: str | None = None,
) -> TripPlan:
    """Plan a trip between harbors (or custom points) for one boat."""
    start_ref = _location_ref(start, start_lat, start_lng, "start")
    end_ref = _location_ref(end, end_lat, end_lng, "destination")
    timestamp = _timestamp(at)
    try:
        return plan_trip(
            start_ref,
            end_ref,
            rng=_rng(),
            timestamp=timestamp,
            boat_speed_kmh=boat_speed,
            fuel_rate_lph=fuel_rate,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.exception("Error planning trip")
        raise HTTPException(status_code=500, detail="Failed to plan trip") from e
