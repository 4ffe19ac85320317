"""
Shared scoring utilities.

Small helpers used by the condition and spot scorers:
- `clamp`: keep a value within a closed range
- `clamp_index`: integer 0..10 scores as shown on the dashboard
"""

from __future__ import annotations

INDEX_MIN = 0
INDEX_MAX = 10


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp a number into the [lo, hi] range."""
    return max(lo, min(hi, x))


def clamp_index(x: int) -> int:
    """Clamp an integer score into the 0..10 index range."""
    return int(clamp(x, INDEX_MIN, INDEX_MAX))
