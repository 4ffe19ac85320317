import random
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from marinecast.catalog.loader import get_harbor, load_harbors
from marinecast.config.settings import get_settings
from marinecast.domain.models import GeoPoint
from marinecast.features.spots import generate_spots
from marinecast.routing.planner import UnknownLocationError, plan_trip, resolve_location

TS = datetime(2026, 10, 19, 5, 30, tzinfo=ZoneInfo("Asia/Kolkata"))


def test_harbor_table_is_loaded_once_and_complete():
    harbors = load_harbors()
    assert load_harbors() is harbors
    assert [h.id for h in harbors] == [
        "nagapattinam_port",
        "rameswaram_port",
        "cuddalore_port",
        "tuticorin_port",
        "chennai_port",
    ]
    assert get_harbor("chennai_port").coordinates == GeoPoint(lat=13.0827, lng=80.2707)
    assert get_harbor("atlantis") is None


def test_resolve_location_accepts_points_harbors_and_spots():
    p = GeoPoint(lat=10.0, lng=80.0)
    assert resolve_location(p) is p
    assert resolve_location("rameswaram_port") == GeoPoint(lat=9.2882, lng=79.3129)

    spots = generate_spots(10.0, 80.0, rng=random.Random(3))
    assert resolve_location("spot-1", spots=spots) == GeoPoint(lat=spots[1].lat, lng=spots[1].lng)


def test_unknown_location_is_rejected_before_routing():
    with pytest.raises(UnknownLocationError, match="atlantis"):
        plan_trip("nagapattinam_port", "atlantis", rng=random.Random(1), timestamp=TS)


def test_unknown_location_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_location("spot-99", spots=[])


def test_default_boat_matches_raw_estimate():
    plan = plan_trip("nagapattinam_port", "rameswaram_port", rng=random.Random(7), timestamp=TS)

    assert plan.boat_speed_kmh == 12
    assert plan.fuel_rate_lph == 12
    assert plan.adjusted_time_hours == pytest.approx(plan.route.estimated_time_hours)
    assert plan.adjusted_fuel_liters == pytest.approx(plan.route.estimated_fuel_liters)
    assert plan.route.waypoints[0] == get_harbor("nagapattinam_port").coordinates
    assert plan.route.waypoints[-1] == get_harbor("rameswaram_port").coordinates


def test_midpoint_current_shapes_the_route():
    plan = plan_trip("nagapattinam_port", "rameswaram_port", rng=random.Random(7), timestamp=TS)
    mid = plan.conditions
    assert mid.lat == pytest.approx((10.7654 + 9.2882) / 2)
    assert mid.lng == pytest.approx((79.8421 + 79.3129) / 2)
    assert mid.current_speed is not None


def test_faster_boat_and_lower_burn_rescale_the_estimate():
    base = plan_trip("chennai_port", "cuddalore_port", rng=random.Random(11), timestamp=TS)
    fast = plan_trip(
        "chennai_port",
        "cuddalore_port",
        rng=random.Random(11),
        timestamp=TS,
        boat_speed_kmh=24,
        fuel_rate_lph=6,
    )

    assert fast.route == base.route
    assert fast.adjusted_time_hours == pytest.approx(base.route.estimated_time_hours / 2)
    # Fuel: x (6/12) for burn rate, / (24/12) for the shorter trip.
    assert fast.adjusted_fuel_liters == pytest.approx(base.route.estimated_fuel_liters / 4)


@pytest.mark.parametrize("kwargs", [{"boat_speed_kmh": 0}, {"fuel_rate_lph": -1}])
def test_non_positive_boat_parameters_are_rejected(kwargs):
    with pytest.raises(ValueError, match="must be positive"):
        plan_trip(
            "chennai_port",
            "cuddalore_port",
            rng=random.Random(1),
            timestamp=TS,
            settings=get_settings(),
            **kwargs,
        )


def test_same_start_and_end_plans_an_empty_trip():
    plan = plan_trip("tuticorin_port", "tuticorin_port", rng=random.Random(5), timestamp=TS)
    assert plan.route.total_distance_km == 0
    assert plan.adjusted_time_hours == 0
    assert plan.adjusted_fuel_liters == 0
