import pytest

from marinecast.catalog.reference import COASTLINE_ANCHORS
from marinecast.features.boundary import classify_waters, is_international_waters, nearest_anchor


def test_exact_anchor_is_territorial():
    assert is_international_waters(13.05, 80.25) is False


@pytest.mark.parametrize("anchor", COASTLINE_ANCHORS, ids=lambda a: a.name)
def test_every_anchor_is_territorial(anchor):
    assert is_international_waters(anchor.point.lat, anchor.point.lng) is False


def test_far_from_every_anchor_is_international():
    assert is_international_waters(0.0, 0.0) is True


def test_just_inside_and_outside_the_limit():
    # ~0.1 degree of latitude east of Chennai is ~11 km (~6 nm): territorial.
    assert is_international_waters(13.05, 80.35) is False
    # ~0.5 degree offshore is ~54 km (~29 nm): international.
    assert is_international_waters(13.05, 80.75) is True


def test_classify_reports_nearest_anchor_and_distances():
    status = classify_waters(10.80, 79.90)
    assert status.nearest_anchor == "Nagapattinam"
    assert status.distance_nm == pytest.approx(status.distance_km * 0.539957)
    assert status.limit_nm == 12
    assert status.international_waters is False


def test_nearest_anchor_distance_is_zero_on_anchor():
    anchor, km = nearest_anchor(9.28, 79.31)
    assert anchor.name == "Rameswaram"
    assert km == 0.0


def test_coastal_point_between_distant_anchors_reads_as_international():
    # Tuticorin sits on the coast, but ~54 nm from the nearest anchor (Kanyakumari).
    # The check measures to anchors, not to the coastline between them.
    assert is_international_waters(8.7642, 78.1348) is True


def test_limit_is_configurable():
    assert classify_waters(8.7642, 78.1348, limit_nm=100).international_waters is False
