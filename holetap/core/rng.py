from __future__ import annotations
import math
import random
from typing import Optional


class RandomSource:
    """
    Every random draw the round makes goes through here, so a seed (or a
    scripted subclass in tests) makes spawning reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def uniform(self, lo: float, hi: float) -> float:
        # half-open [lo, hi), unlike random.uniform
        return lo + (hi - lo) * self.random()

    def chance(self, p: float) -> bool:
        return self.random() < p

    def angle(self) -> float:
        return self.random() * math.tau
