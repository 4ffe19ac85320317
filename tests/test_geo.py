import math

import pytest

from marinecast.core.geo import EARTH_RADIUS_KM, haversine_km, km_to_nm
from marinecast.domain.models import GeoPoint

PAIRS = [
    (GeoPoint(lat=13.05, lng=80.25), GeoPoint(lat=8.08, lng=77.55)),
    (GeoPoint(lat=10.7654, lng=79.8421), GeoPoint(lat=9.2882, lng=79.3129)),
    (GeoPoint(lat=-33.9, lng=151.2), GeoPoint(lat=51.5, lng=-0.12)),
    (GeoPoint(lat=89.9, lng=-179.9), GeoPoint(lat=-89.9, lng=179.9)),
]


@pytest.mark.parametrize("a,b", PAIRS)
def test_haversine_is_symmetric(a, b):
    assert haversine_km(a, b) == pytest.approx(haversine_km(b, a), rel=1e-12)


@pytest.mark.parametrize("a,_", PAIRS)
def test_haversine_is_zero_for_identical_points(a, _):
    assert haversine_km(a, a) == 0.0


def test_haversine_one_degree_of_latitude():
    d = haversine_km(GeoPoint(lat=0, lng=0), GeoPoint(lat=1, lng=0))
    assert d == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)


def test_haversine_antipodal_points_do_not_raise():
    d = haversine_km(GeoPoint(lat=0, lng=0), GeoPoint(lat=0, lng=180))
    assert d == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_km_to_nm():
    assert km_to_nm(22.2) == pytest.approx(11.987, abs=1e-3)
