"""
Domain models (Pydantic).

These types are the contract between the engine and its request layers:
- inputs (`GeoPoint`)
- reference data (`CoastlineAnchor`, `Harbor`)
- simulator outputs (`MarineConditions`, `FishingSpot`, `Route`, `BoundaryStatus`)
- the caller-side trip estimate (`TripPlan`)

Every output is built once per request and never mutated afterwards, so the
models are frozen where nothing downstream needs `model_copy(update=...)`.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

CompassPoint = Literal["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
TideState = Literal["rising", "high", "falling", "low"]


class GeoPoint(BaseModel):
    """A geographic point in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class CoastlineAnchor(BaseModel):
    """A named reference point on the coast used by the territorial-waters check."""

    model_config = ConfigDict(frozen=True)

    name: str
    point: GeoPoint


class Harbor(BaseModel):
    """A departure/arrival harbor callers can pick instead of raw coordinates."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinates: GeoPoint


class MarineConditions(BaseModel):
    """Simulated marine conditions for one location and time."""

    lat: float
    lng: float
    observed_at: datetime

    temperature: float
    wind_speed: float = Field(..., ge=0, description="km/h")
    wind_direction: CompassPoint
    wave_height: float = Field(..., description="meters")
    tide_state: TideState
    tide_label: str
    visibility: float = Field(..., description="km")
    pressure: float = Field(..., description="hPa")
    uv_index: int = Field(..., ge=0, le=10)
    current_speed: float | None = Field(default=None, description="knots")
    current_direction: CompassPoint | None = None
    fishing_index: int = Field(..., ge=0, le=10)


class FishingSpot(BaseModel):
    """A procedurally generated fishing spot."""

    id: str
    name: str
    lat: float
    lng: float
    species: list[str] = Field(..., min_length=1, max_length=3)
    best_time_of_day: str
    best_seasons: list[str] = Field(..., min_length=1, max_length=3)
    current_rating: int = Field(..., ge=1, le=10)
    # Rating before the overfishing penalty. Set by the generator, left out of JSON,
    # so a spot re-read from a payload has None here.
    base_rating: int | None = Field(default=None, ge=1, le=10, exclude=True)
    last_reported: date
    overfished: bool = False
    restricted: bool = False
    restriction_reason: str | None = None

    @model_validator(mode="after")
    def _validate_consistency(self) -> "FishingSpot":
        if len(set(self.species)) != len(self.species):
            raise ValueError("species must not contain duplicates")
        if len(set(self.best_seasons)) != len(self.best_seasons):
            raise ValueError("best_seasons must not contain duplicates")
        if self.restricted != (self.restriction_reason is not None):
            raise ValueError("restriction_reason must be set iff the spot is restricted")
        if self.base_rating is not None:
            expected = max(1, self.base_rating - 4) if self.overfished else self.base_rating
            if self.current_rating != expected:
                raise ValueError("current_rating does not match base_rating and overfished flag")
        return self

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class Route(BaseModel):
    """A curved multi-waypoint path with distance/time/fuel estimates."""

    waypoints: list[GeoPoint] = Field(..., min_length=2)
    total_distance_km: float = Field(..., ge=0)
    direct_distance_km: float = Field(..., ge=0)
    estimated_time_hours: float = Field(..., ge=0)
    estimated_fuel_liters: float = Field(..., ge=0)


class BoundaryStatus(BaseModel):
    """Territorial-waters classification plus the anchor it was measured against."""

    international_waters: bool
    nearest_anchor: str
    distance_km: float
    distance_nm: float
    limit_nm: float


class TripPlan(BaseModel):
    """A route estimate rescaled for one boat's cruising speed and fuel burn."""

    route: Route
    conditions: MarineConditions
    boat_speed_kmh: float = Field(..., gt=0)
    fuel_rate_lph: float = Field(..., gt=0)
    adjusted_time_hours: float = Field(..., ge=0)
    adjusted_fuel_liters: float = Field(..., ge=0)
