# src/marinecast/features/spots.py
"""
Procedural fishing-spot generator.

Spots are scattered around a center point inside a square of +/- `radius_km`.
The offset uses a flat `DEGREES_PER_KM` conversion on both axes. It does not
widen longitude with latitude, so away from the equator spots cover slightly less
ground east-west than north-south.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Sequence, TypeVar

from marinecast.catalog.reference import (
    BEST_TIMES_OF_DAY,
    LOCATION_PREFIXES,
    LOCATION_SUFFIXES,
    RESTRICTION_REASONS,
    SEASONS,
    SPECIES_CATALOG,
)
from marinecast.core.random_source import RandomSource
from marinecast.core.time import DEFAULT_TIMEZONE, today_local
from marinecast.domain.models import FishingSpot

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RADIUS_KM = 20.0
# 0.01 degrees is roughly 1 km.
DEGREES_PER_KM = 0.01

MIN_SPOTS = 5
MAX_EXTRA_SPOTS = 3
MAX_PICKS = 3

OVERFISHED_PROBABILITY = 0.10
RESTRICTED_PROBABILITY = 0.05

BASE_RATING_MIN = 5
BASE_RATING_SPREAD = 5
OVERFISHED_PENALTY = 4


def _sample_unique(rng: RandomSource, pool: Sequence[T]) -> list[T]:
    """Draw 1..MAX_PICKS items with replacement and keep first occurrences."""
    picks: list[T] = []
    for _ in range(1 + rng.randint(0, MAX_PICKS - 1)):
        item = rng.choice(pool)
        if item not in picks:
            picks.append(item)
    return picks


def current_rating(base_rating: int, overfished: bool) -> int:
    """Apply the overfishing penalty, never dropping below 1."""
    if overfished:
        return max(1, base_rating - OVERFISHED_PENALTY)
    return base_rating


def _spot_name(rng: RandomSource, lead_species: str) -> str:
    prefix = rng.choice(LOCATION_PREFIXES)
    suffix = rng.choice(LOCATION_SUFFIXES)
    return f"{prefix} {lead_species.split(' ')[0]} {suffix}"


def generate_spots(
    lat: float,
    lng: float,
    radius_km: float = DEFAULT_RADIUS_KM,
    *,
    rng: RandomSource,
    today: date | None = None,
    timezone: str = DEFAULT_TIMEZONE,
) -> list[FishingSpot]:
    """Generate 5..8 fishing spots around (`lat`, `lng`).

    `today` anchors `last_reported`; it defaults to the current date in `timezone`.
    """
    today = today or today_local(timezone)
    count = MIN_SPOTS + rng.randint(0, MAX_EXTRA_SPOTS)

    spots: list[FishingSpot] = []
    for i in range(count):
        lat_offset = rng.uniform(-1, 1) * radius_km * DEGREES_PER_KM
        lng_offset = rng.uniform(-1, 1) * radius_km * DEGREES_PER_KM

        species = _sample_unique(rng, SPECIES_CATALOG)
        overfished = rng.random() < OVERFISHED_PROBABILITY
        restricted = rng.random() < RESTRICTED_PROBABILITY

        name = _spot_name(rng, species[0])
        best_time = rng.choice(BEST_TIMES_OF_DAY)
        seasons = _sample_unique(rng, SEASONS)

        base_rating = BASE_RATING_MIN + rng.randint(0, BASE_RATING_SPREAD)
        days_ago = rng.randint(0, 29)

        spots.append(
            FishingSpot(
                id=f"spot-{i}",
                name=name,
                lat=lat + lat_offset,
                lng=lng + lng_offset,
                species=species,
                best_time_of_day=best_time,
                best_seasons=seasons,
                current_rating=current_rating(base_rating, overfished),
                base_rating=base_rating,
                last_reported=today - timedelta(days=days_ago),
                overfished=overfished,
                restricted=restricted,
                restriction_reason=rng.choice(RESTRICTION_REASONS) if restricted else None,
            )
        )

    logger.debug("generated %d spots around lat=%s lng=%s radius_km=%s", len(spots), lat, lng, radius_km)
    return spots
