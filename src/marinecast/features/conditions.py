# src/marinecast/features/conditions.py
"""
Marine conditions simulator.

Produces a full conditions snapshot for a location and timestamp. The shape of
each value is deterministic (season, time of day, proximity to the coast); a
small amount of noise from the injected random source keeps neighbouring
requests from looking identical.

The fishing index is an explainable sum of four small components:
- time of day: dawn/dusk feeding windows score best
- tide: a rising tide scores best, high tide next
- wind: moderate wind beats both calm and strong
- waves: calmer seas score higher
"""

from __future__ import annotations

import logging
from datetime import datetime

from marinecast.catalog.reference import COMPASS_POINTS, REFERENCE_COAST_LNG
from marinecast.core.random_source import RandomSource
from marinecast.core.time import DEFAULT_TIMEZONE, attach_timezone
from marinecast.domain.models import MarineConditions, TideState
from marinecast.scoring.composite import clamp_index

logger = logging.getLogger(__name__)

SUMMER_MONTHS = range(4, 10)  # April..September
DAYTIME_HOURS = range(6, 19)  # hours 6..18
COASTAL_LNG_BAND = 0.5
COASTAL_FACTOR = 0.7

FISHING_INDEX_BASE = 4

# hour % 12 -> (state, label), in 3-hour windows.
_TIDE_WINDOWS: tuple[tuple[int, TideState, str], ...] = (
    (3, "rising", "incoming"),
    (6, "high", "high tide"),
    (9, "falling", "outgoing"),
    (12, "low", "low tide"),
)


def is_summer(month: int) -> bool:
    return month in SUMMER_MONTHS


def is_daytime(hour: int) -> bool:
    return hour in DAYTIME_HOURS


def tide_for_hour(hour: int) -> tuple[TideState, str]:
    """Map an hour of day onto the simplified semi-diurnal tide cycle."""
    tide_hour = hour % 12
    for upper, state, label in _TIDE_WINDOWS:
        if tide_hour < upper:
            return state, label
    raise AssertionError("unreachable: hour % 12 is always < 12")


def time_quality(hour: int) -> int:
    return 2 if hour < 9 or hour > 16 else 0


def tide_quality(state: TideState) -> int:
    if state == "rising":
        return 2
    if state == "high":
        return 1
    return 0


def wind_quality(wind_speed: float) -> int:
    if 5 < wind_speed < 20:
        return 2
    if wind_speed < 30:
        return 1
    return 0


def wave_quality(wave_height: float) -> int:
    if wave_height < 1.5:
        return 2
    if wave_height < 2.5:
        return 1
    return 0


def fishing_index(*, hour: int, tide_state: TideState, wind_speed: float, wave_height: float) -> int:
    """Score fishing conditions on the 0..10 dashboard scale."""
    raw = (
        FISHING_INDEX_BASE
        + time_quality(hour)
        + tide_quality(tide_state)
        + wind_quality(wind_speed)
        + wave_quality(wave_height)
    )
    return clamp_index(raw)


def compute_conditions(
    lat: float,
    lng: float,
    timestamp: datetime,
    *,
    rng: RandomSource,
    timezone: str = DEFAULT_TIMEZONE,
) -> MarineConditions:
    """Simulate marine conditions at (`lat`, `lng`) for `timestamp`.

    Naive timestamps are read in `timezone`; aware ones keep their own offset,
    so `hour` is always the local hour the caller meant.
    """
    timestamp = attach_timezone(timestamp, timezone)
    hour = timestamp.hour
    summer = is_summer(timestamp.month)
    daytime = is_daytime(hour)

    base_temp = 28 if summer else 24
    temp_variation = 4 if daytime else -2
    coastal_factor = COASTAL_FACTOR if abs(lng - REFERENCE_COAST_LNG) < COASTAL_LNG_BAND else 1.0

    temperature = base_temp + temp_variation * coastal_factor + rng.uniform(-1, 1)
    wind_speed = max(0.0, (10 if summer else 15) + rng.uniform(-5, 5))
    wave_height = (0.8 if summer else 1.5) + rng.uniform(-0.4, 0.4)

    tide_state, tide_label = tide_for_hour(hour)
    index = fishing_index(hour=hour, tide_state=tide_state, wind_speed=wind_speed, wave_height=wave_height)

    wind_direction = rng.choice(COMPASS_POINTS)
    if daytime:
        visibility = 10 + rng.uniform(-2.5, 2.5)
    else:
        visibility = 5 + rng.uniform(-1.5, 1.5)
    pressure = 1010 + rng.uniform(-5, 5)
    uv_index = rng.randint(1, 10) if daytime else 0
    current_speed = 0.5 + rng.uniform(0, 1)
    current_direction = rng.choice(COMPASS_POINTS)

    logger.debug(
        "conditions lat=%s lng=%s hour=%s summer=%s fishing_index=%s", lat, lng, hour, summer, index
    )

    return MarineConditions(
        lat=lat,
        lng=lng,
        observed_at=timestamp,
        temperature=temperature,
        wind_speed=wind_speed,
        wind_direction=wind_direction,
        wave_height=wave_height,
        tide_state=tide_state,
        tide_label=tide_label,
        visibility=visibility,
        pressure=pressure,
        uv_index=uv_index,
        current_speed=current_speed,
        current_direction=current_direction,
        fishing_index=index,
    )
