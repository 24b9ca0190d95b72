"""Seeded integer random stream shared by every stochastic decision."""

from __future__ import annotations

from random import Random


class RandomStream:
    """Uniform integer draws from one seeded generator.

    One instance is created per simulation and threaded to the grid
    initializer, grazer constructors and grazer behavior, so a run is fully
    reproducible from its seed.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = Random(seed)

    def next_int(self, bound: int) -> int:
        """Return an integer drawn uniformly from [0, bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be > 0, got {bound}")
        return self._rng.randrange(bound)

    def next_int_between(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from [low, high)."""
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        return self._rng.randrange(low, high)

    def __repr__(self) -> str:
        return f"RandomStream(seed={self.seed})"
