import random
from datetime import date, timedelta

import pytest

from marinecast.catalog.reference import (
    BEST_TIMES_OF_DAY,
    LOCATION_PREFIXES,
    LOCATION_SUFFIXES,
    RESTRICTION_REASONS,
    SEASONS,
    SPECIES_CATALOG,
)
import marinecast.features.spots as spots_module
from marinecast.features.spots import DEGREES_PER_KM, current_rating, generate_spots

TODAY = date(2026, 10, 19)


class EdgeRng:
    """Deterministic source pinned to one end of every range."""

    def __init__(self, *, low: bool, random_value: float):
        self.low = low
        self.random_value = random_value

    def random(self):
        return self.random_value

    def uniform(self, a, b):
        return a if self.low else b

    def randint(self, a, b):
        return a if self.low else b

    def choice(self, seq):
        return seq[0] if self.low else seq[-1]


@pytest.mark.parametrize("seed", range(40))
def test_generated_spots_respect_invariants(seed):
    spots = generate_spots(10.7654, 79.8421, 20, rng=random.Random(seed), today=TODAY)

    assert 5 <= len(spots) <= 8
    assert [s.id for s in spots] == [f"spot-{i}" for i in range(len(spots))]
    for s in spots:
        assert 1 <= len(s.species) <= 3
        assert len(set(s.species)) == len(s.species)
        assert set(s.species) <= set(SPECIES_CATALOG)

        assert 1 <= len(s.best_seasons) <= 3
        assert len(set(s.best_seasons)) == len(s.best_seasons)
        assert set(s.best_seasons) <= set(SEASONS)
        assert s.best_time_of_day in BEST_TIMES_OF_DAY

        assert abs(s.lat - 10.7654) <= 20 * DEGREES_PER_KM
        assert abs(s.lng - 79.8421) <= 20 * DEGREES_PER_KM

        assert 1 <= s.current_rating <= 10
        if s.overfished:
            assert s.current_rating <= max(1, s.base_rating - 4)
            assert s.current_rating >= 1
        else:
            assert s.current_rating == s.base_rating

        assert TODAY - timedelta(days=29) <= s.last_reported <= TODAY
        assert (s.restriction_reason is not None) == s.restricted
        if s.restricted:
            assert s.restriction_reason in RESTRICTION_REASONS


@pytest.mark.parametrize("seed", range(10))
def test_spot_name_uses_first_word_of_lead_species(seed):
    for s in generate_spots(9.0, 79.0, rng=random.Random(seed), today=TODAY):
        prefix, word, suffix = s.name.split(" ")
        assert prefix in LOCATION_PREFIXES
        assert suffix in LOCATION_SUFFIXES
        assert word == s.species[0].split(" ")[0]


def test_low_edge_draws_fewest_spots_all_flagged():
    spots = generate_spots(10.0, 80.0, 20, rng=EdgeRng(low=True, random_value=0.0), today=TODAY)

    assert len(spots) == 5
    s = spots[0]
    assert s.lat == pytest.approx(10.0 - 0.2)
    assert s.lng == pytest.approx(80.0 - 0.2)
    assert s.species == [SPECIES_CATALOG[0]]
    assert s.name == "North Seer Point"
    assert s.overfished and s.restricted
    assert s.restriction_reason == RESTRICTION_REASONS[0]
    # Base 5 minus the penalty floors at 1.
    assert s.base_rating == 5
    assert s.current_rating == 1
    assert s.last_reported == TODAY


def test_high_edge_draws_most_spots_none_flagged():
    spots = generate_spots(10.0, 80.0, 20, rng=EdgeRng(low=False, random_value=0.99), today=TODAY)

    assert len(spots) == 8
    s = spots[-1]
    # Three draws of the same species collapse into one.
    assert s.species == [SPECIES_CATALOG[-1]]
    assert s.best_seasons == [SEASONS[-1]]
    assert not s.overfished and not s.restricted
    assert s.restriction_reason is None
    assert s.current_rating == 10
    assert s.last_reported == TODAY - timedelta(days=29)


def test_current_rating_penalty():
    assert current_rating(10, overfished=True) == 6
    assert current_rating(5, overfished=True) == 1
    assert current_rating(7, overfished=False) == 7


def test_base_rating_is_not_serialized():
    spot = generate_spots(10.0, 80.0, rng=random.Random(1), today=TODAY)[0]
    payload = spot.model_dump(mode="json")
    assert "base_rating" not in payload
    assert payload["last_reported"] == spot.last_reported.isoformat()


def test_radius_scales_offsets():
    spots = generate_spots(10.0, 80.0, 5, rng=EdgeRng(low=False, random_value=0.5), today=TODAY)
    assert spots[0].lat == pytest.approx(10.0 + 5 * DEGREES_PER_KM)
    assert spots[0].lng == pytest.approx(80.0 + 5 * DEGREES_PER_KM)


@pytest.mark.parametrize(
    "draw,overfished,restricted",
    [
        (0.04, True, True),
        (0.05, True, False),
        (0.07, True, False),
        (0.10, False, False),
        (0.12, False, False),
    ],
)
def test_flag_probabilities(draw, overfished, restricted):
    spots = generate_spots(10.0, 80.0, rng=EdgeRng(low=True, random_value=draw), today=TODAY)
    assert all(s.overfished is overfished for s in spots)
    assert all(s.restricted is restricted for s in spots)


def test_default_today_is_local_to_timezone(monkeypatch):
    seen = []

    def fake_today(timezone):
        seen.append(timezone)
        return TODAY

    monkeypatch.setattr(spots_module, "today_local", fake_today)
    spots = generate_spots(10.0, 80.0, rng=EdgeRng(low=True, random_value=0.5), timezone="Pacific/Kiritimati")

    assert seen == ["Pacific/Kiritimati"]
    assert spots[0].last_reported == TODAY
