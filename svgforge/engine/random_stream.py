"""Seeded random stream — reproducible values in [0, 1) from an integer seed.

value = frac(sin(seed) * 10000), seed += 1 per draw. Reproducibility is the
contract, not statistical quality.
"""

from __future__ import annotations

import math


class SeededRandom:
    """Deterministic stream owned by a single composition run."""

    def __init__(self, seed: int) -> None:
        self.initial_seed = int(seed)
        self._seed = int(seed)

    def next(self) -> float:
        x = math.sin(self._seed) * 10000
        self._seed += 1
        return x - math.floor(x)

    # Alias so the stream can stand in for random.Random in callers that only need random().
    random = next

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def index(self, n: int) -> int:
        """Uniform index in [0, n). One draw."""
        return min(int(self.next() * n), n - 1)

    def chance(self, p: float) -> bool:
        return self.next() < p

    @property
    def draws(self) -> int:
        return self._seed - self.initial_seed
