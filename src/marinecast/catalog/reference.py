"""
Fixed reference tables.

These are module-level tuples built once at import time and never mutated.
The coastline anchors approximate the Tamil Nadu coast; the word lists and
species catalog feed the procedural spot generator.
"""

from __future__ import annotations

from marinecast.domain.models import CoastlineAnchor, GeoPoint

COASTLINE_ANCHORS: tuple[CoastlineAnchor, ...] = (
    CoastlineAnchor(name="Chennai", point=GeoPoint(lat=13.05, lng=80.25)),
    CoastlineAnchor(name="Mahabalipuram", point=GeoPoint(lat=12.62, lng=80.18)),
    CoastlineAnchor(name="Pondicherry", point=GeoPoint(lat=11.93, lng=79.83)),
    CoastlineAnchor(name="Cuddalore", point=GeoPoint(lat=11.42, lng=79.70)),
    CoastlineAnchor(name="Nagapattinam", point=GeoPoint(lat=10.77, lng=79.84)),
    CoastlineAnchor(name="Vedaranyam", point=GeoPoint(lat=10.39, lng=79.85)),
    CoastlineAnchor(name="Rameswaram", point=GeoPoint(lat=9.28, lng=79.31)),
    CoastlineAnchor(name="Kanyakumari", point=GeoPoint(lat=8.08, lng=77.55)),
)

# Longitude the coastal temperature damping is keyed on.
REFERENCE_COAST_LNG = 80.0

COMPASS_POINTS: tuple[str, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

SPECIES_CATALOG: tuple[str, ...] = (
    "Seer Fish (Vanjaram)",
    "Indian Mackerel (Kanangeluthi)",
    "Tuna (Choora)",
    "Sardine (Mathi)",
    "Pomfret (Vavval)",
    "Red Snapper (Sankara)",
    "Barracuda (Sheela)",
    "Kingfish (Neimeen)",
    "Anchovy (Nethili)",
    "Shark (Sura)",
    "Crab (Nandu)",
    "Prawn (Eral)",
)

LOCATION_PREFIXES: tuple[str, ...] = ("North", "South", "East", "West", "Deep", "Shallow", "Rocky", "Sandy")
LOCATION_SUFFIXES: tuple[str, ...] = ("Point", "Reef", "Bank", "Shoal", "Ridge", "Channel", "Bay")

BEST_TIMES_OF_DAY: tuple[str, ...] = ("Early Morning", "Morning", "Noon", "Afternoon", "Evening", "Night")
SEASONS: tuple[str, ...] = ("Spring", "Summer", "Monsoon", "Winter")

RESTRICTION_REASONS: tuple[str, ...] = (
    "Marine sanctuary",
    "Naval exercise area",
    "International waters",
    "Coral reef protection",
)
