from __future__ import annotations
from typing import List, Sequence

from holetap.core.config import RoundConfig
from holetap.core.holes import Hole, HoleType
from holetap.core.rng import RandomSource

INTENSITY_RAMP = 1.2               # extra spawn pressure reached at the end of a round


def intensity_for(progress: float) -> float:
    """Difficulty multiplier: 1.0 at the start of a round, 2.2 at the end."""
    progress = max(0.0, min(1.0, progress))
    return 1.0 + progress * INTENSITY_RAMP


class SpawnScheduler:
    """
    Decides, every tick and independently for each idle hole, whether a
    target pops up. Spawn chance rises and lifetimes shrink with intensity.
    """

    def __init__(self, cfg: RoundConfig, rng: RandomSource):
        self.cfg = cfg
        self.rng = rng

    def spawn_probability(self, intensity: float) -> float:
        return min(1.0, self.cfg.base_spawn_rate * intensity)

    def step(self, holes: Sequence[Hole], now: float, progress: float) -> List[int]:
        intensity = intensity_for(progress)
        p_spawn = self.spawn_probability(intensity)
        spawned: List[int] = []

        for i, hole in enumerate(holes):
            if not hole.can_spawn(now):
                continue
            if not self.rng.chance(p_spawn):
                continue

            is_bonus = self.rng.chance(self.cfg.bonus_chance)
            hole_type = HoleType.BONUS if is_bonus else HoleType.PRIMARY
            lo, hi = self.cfg.bonus_lifetime_ms if is_bonus else self.cfg.primary_lifetime_ms
            lifetime = self.rng.uniform(lo, hi) / intensity
            cooldown = self.rng.uniform(*self.cfg.cooldown_ms) / intensity

            hole.activate(now, hole_type, lifetime_ms=lifetime, cooldown_ms=cooldown)
            spawned.append(i)

        return spawned
