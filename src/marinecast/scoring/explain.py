"""
Small explainability formatting helpers.

Used by the CLI to print compact summaries of simulator output.
"""

from __future__ import annotations

from marinecast.domain.models import FishingSpot, MarineConditions, Route


def conditions_summary(c: MarineConditions) -> str:
    """Render a compact single-line summary of a conditions snapshot."""
    parts = [
        f"fishing={c.fishing_index}/10",
        f"temp={c.temperature:.1f}C",
        f"wind={c.wind_speed:.1f}km/h {c.wind_direction}",
        f"waves={c.wave_height:.2f}m",
        f"tide={c.tide_state} ({c.tide_label})",
        f"uv={c.uv_index}",
    ]
    return " | ".join(parts)


def spot_summary(spot: FishingSpot) -> str:
    """Render a compact single-line summary of a fishing spot."""
    flags = []
    if spot.overfished:
        flags.append("overfished")
    if spot.restricted:
        flags.append(f"restricted: {spot.restriction_reason}")
    text = f"{spot.name} ({spot.lat:.4f}, {spot.lng:.4f}) rating={spot.current_rating}/10 species={', '.join(spot.species)}"
    if flags:
        text += f" [{'; '.join(flags)}]"
    return text


def route_summary(route: Route) -> str:
    return (
        f"distance={route.total_distance_km:.2f}km (direct {route.direct_distance_km:.2f}km)"
        f" | time={route.estimated_time_hours:.2f}h | fuel={route.estimated_fuel_liters:.2f}L"
    )
