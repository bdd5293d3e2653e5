from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from holetap.core.holes import Hole

HOLE_SIZE_FRACTION = 0.18          # hole sprite size relative to the short screen side
POP_SIZE_FRACTION = 0.92           # target sprite size relative to the hole
HIT_OFFSET_FRACTION = 0.18         # hit circle sits this far above the hole centre
HIT_RADIUS_FRACTION = 0.55
BURST_OFFSET_FRACTION = 0.25       # particles start a little above the hole


@dataclass(frozen=True)
class BoardLayout:
    """Maps normalized hole positions to screen pixels."""
    width: int
    height: int

    @property
    def hole_size(self) -> float:
        return min(self.width, self.height) * HOLE_SIZE_FRACTION

    @property
    def pop_size(self) -> float:
        return self.hole_size * POP_SIZE_FRACTION

    @property
    def hit_radius(self) -> float:
        return self.hole_size * HIT_RADIUS_FRACTION

    def hole_center(self, hole: Hole) -> Tuple[float, float]:
        return hole.x * self.width, hole.y * self.height

    def hit_center(self, hole: Hole) -> Tuple[float, float]:
        cx, cy = self.hole_center(hole)
        return cx, cy - self.hole_size * HIT_OFFSET_FRACTION

    def burst_origin(self, hole: Hole) -> Tuple[float, float]:
        cx, cy = self.hole_center(hole)
        return cx, cy - self.hole_size * BURST_OFFSET_FRACTION

    def contains(self, hole: Hole, x: float, y: float) -> bool:
        hx, hy = self.hit_center(hole)
        dx = x - hx
        dy = y - hy
        r = self.hit_radius
        return dx * dx + dy * dy <= r * r
