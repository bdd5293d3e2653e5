from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class HoleType(Enum):
    NONE = 0
    PRIMARY = 1
    BONUS = 2


# 3x2 + 1 bottom, normalized to the board
GRID: Tuple[Tuple[float, float], ...] = (
    (0.2, 0.25), (0.5, 0.25), (0.8, 0.25),
    (0.2, 0.55), (0.5, 0.55), (0.8, 0.55),
    (0.5, 0.83),
)


@dataclass
class Hole:
    x: float
    y: float
    type: HoleType = HoleType.NONE
    active_until: float = 0.0
    cooldown_until: float = 0.0
    cooldown_ms: float = 0.0        # drawn at spawn, applied when the hole clears
    popped_at: float = 0.0
    recently_hit_until: float = 0.0

    @property
    def active(self) -> bool:
        return self.type is not HoleType.NONE

    def can_spawn(self, now: float) -> bool:
        return not self.active and now >= self.cooldown_until

    def activate(self, now: float, hole_type: HoleType, lifetime_ms: float, cooldown_ms: float) -> None:
        if hole_type is HoleType.NONE:
            raise ValueError("cannot activate a hole with HoleType.NONE")
        if lifetime_ms <= 0:
            raise ValueError("lifetime_ms must be positive")
        self.type = hole_type
        self.popped_at = now
        self.active_until = now + lifetime_ms
        self.cooldown_ms = cooldown_ms

    def clear(self, now: float, hit_flash_ms: Optional[float] = None) -> None:
        """Deactivate now and start the cooldown; pass hit_flash_ms on a hit."""
        self.type = HoleType.NONE
        self.active_until = 0.0
        self.cooldown_until = now + self.cooldown_ms
        if hit_flash_ms is not None:
            self.recently_hit_until = now + hit_flash_ms

    def expire(self, now: float) -> bool:
        if self.active and now > self.active_until:
            self.clear(now)
            return True
        return False

    def recently_hit(self, now: float) -> bool:
        return now < self.recently_hit_until

    def reset(self) -> None:
        self.type = HoleType.NONE
        self.active_until = 0.0
        self.cooldown_until = 0.0
        self.cooldown_ms = 0.0
        self.popped_at = 0.0
        self.recently_hit_until = 0.0


def make_holes(grid=GRID) -> List[Hole]:
    return [Hole(x=x, y=y) for (x, y) in grid]
