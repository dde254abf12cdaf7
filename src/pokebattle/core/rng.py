"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random used for dice rolls."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def roll_die(self, sides: int = 6) -> int:
        """Return a face value between 1 and ``sides``."""
        if sides < 1:
            raise ValueError("A die needs at least one side.")
        return self._random.randint(1, sides)
