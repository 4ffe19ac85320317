"""
Injectable randomness.

Simulators never touch the `random` module's global state. Callers pass in a
`RandomSource`; `random.Random` already satisfies the protocol, and tests can
hand in a seeded instance or a scripted stub.
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def build_rng(seed: int | None = None) -> random.Random:
    """Return a fresh generator, seeded when `seed` is given."""
    return random.Random(seed)
