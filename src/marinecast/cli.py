"""
MarineCast CLI entrypoint.

This CLI is intended for quick local demos and debugging without the dashboard.
It calls the same engine functions as the HTTP API; `--seed` makes the
simulated output reproducible.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from pydantic import BaseModel

from marinecast.catalog.loader import load_harbors
from marinecast.config.settings import get_settings
from marinecast.core.logging import configure_logging
from marinecast.core.random_source import build_rng
from marinecast.core.time import now_local, parse_timestamp
from marinecast.domain.models import GeoPoint
from marinecast.features.boundary import classify_waters
from marinecast.features.conditions import compute_conditions
from marinecast.features.spots import generate_spots
from marinecast.routing.planner import plan_trip
from marinecast.scoring.explain import conditions_summary, route_summary, spot_summary


def _print_json(obj: Any) -> None:
    if isinstance(obj, BaseModel):
        payload = obj.model_dump(mode="json")
    else:
        payload = [o.model_dump(mode="json") for o in obj]
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _rng(args: argparse.Namespace):
    seed = args.seed if args.seed is not None else get_settings().app.random_seed
    return build_rng(seed)


def _timestamp(args: argparse.Namespace):
    tz = get_settings().app.timezone
    return parse_timestamp(args.at, tz) if args.at else now_local(tz)


def _parse_location(value: str) -> GeoPoint | str:
    """`LAT,LNG` becomes a point; anything else is treated as a harbor id."""
    if "," in value:
        lat, lng = value.split(",", 1)
        return GeoPoint(lat=float(lat), lng=float(lng))
    return value


def _cmd_conditions(args: argparse.Namespace) -> int:
    settings = get_settings()
    c = compute_conditions(args.lat, args.lng, _timestamp(args), rng=_rng(args), timezone=settings.app.timezone)
    if args.json:
        _print_json(c)
        return 0
    print(f"Conditions at ({c.lat}, {c.lng}) {c.observed_at.isoformat()}")
    print(f"  {conditions_summary(c)}")
    return 0


def _cmd_spots(args: argparse.Namespace) -> int:
    settings = get_settings()
    radius = args.radius if args.radius is not None else settings.spots.default_radius_km
    spots = generate_spots(
        args.lat, args.lng, radius, rng=_rng(args), timezone=settings.app.timezone
    )
    if args.json:
        _print_json(spots)
        return 0
    for i, spot in enumerate(spots, start=1):
        print(f"{i:>2}. {spot_summary(spot)}")
    return 0


def _cmd_boundary(args: argparse.Namespace) -> int:
    status = classify_waters(args.lat, args.lng, limit_nm=get_settings().boundary.territorial_limit_nm)
    if args.json:
        _print_json(status)
        return 0
    zone = "international" if status.international_waters else "territorial"
    print(f"{zone} waters: {status.distance_nm:.2f} nm from {status.nearest_anchor} (limit {status.limit_nm} nm)")
    return 0


def _cmd_route(args: argparse.Namespace) -> int:
    plan = plan_trip(
        _parse_location(args.start),
        _parse_location(args.end),
        rng=_rng(args),
        timestamp=_timestamp(args),
        boat_speed_kmh=args.boat_speed,
        fuel_rate_lph=args.fuel_rate,
    )
    if args.json:
        _print_json(plan)
        return 0
    print(route_summary(plan.route))
    print(
        f"Boat at {plan.boat_speed_kmh:g} km/h, {plan.fuel_rate_lph:g} L/h:"
        f" {plan.adjusted_time_hours:.2f}h, {plan.adjusted_fuel_liters:.2f}L"
    )
    for i, p in enumerate(plan.route.waypoints):
        print(f"  {i}. {p.lat:.5f}, {p.lng:.5f}")
    return 0


def _cmd_harbors(args: argparse.Namespace) -> int:
    harbors = load_harbors(get_settings().catalog.harbors_path)
    if args.json:
        _print_json(harbors)
        return 0
    for h in harbors:
        print(f"{h.id:<20} {h.name} ({h.coordinates.lat}, {h.coordinates.lng})")
    return 0


def _add_point_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", required=True, type=float)
    p.add_argument("--lng", required=True, type=float)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the MarineCast CLI."""
    parser = argparse.ArgumentParser(prog="marinecast")
    parser.add_argument("--seed", type=int, default=None, help="Seed the simulators for reproducible output")
    parser.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    cond = sub.add_parser("conditions", help="Simulate marine conditions at a point.")
    _add_point_args(cond)
    cond.add_argument("--at", default=None, help="ISO datetime (e.g. 2026-04-12T05:30+05:30); defaults to now")
    cond.set_defaults(func=_cmd_conditions)

    spots = sub.add_parser("spots", help="Generate fishing spots around a point.")
    _add_point_args(spots)
    spots.add_argument("--radius", type=float, default=None, help="km")
    spots.set_defaults(func=_cmd_spots)

    boundary = sub.add_parser("boundary", help="Territorial vs international waters check.")
    _add_point_args(boundary)
    boundary.set_defaults(func=_cmd_boundary)

    route = sub.add_parser("route", help="Plan a route between harbors or LAT,LNG points.")
    route.add_argument("--start", required=True, help="Harbor id or LAT,LNG")
    route.add_argument("--end", required=True, help="Harbor id or LAT,LNG")
    route.add_argument("--boat-speed", dest="boat_speed", type=float, default=None, help="km/h")
    route.add_argument("--fuel-rate", dest="fuel_rate", type=float, default=None, help="L/h")
    route.add_argument("--at", default=None, help="ISO datetime for the midpoint current; defaults to now")
    route.set_defaults(func=_cmd_route)

    harbors = sub.add_parser("harbors", help="List known harbors.")
    harbors.set_defaults(func=_cmd_harbors)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m marinecast.cli`."""
    configure_logging(get_settings())
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args))
    except ValueError as e:
        parser.exit(2, f"marinecast: error: {e}\n")


if __name__ == "__main__":
    raise SystemExit(main())
