from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List

from holetap.core.rng import RandomSource

FRAME_MS = 1000.0 / 60.0           # motion constants are tuned per 60 Hz frame
GRAVITY = 0.12                     # px per frame^2
UPWARD_BIAS = 0.25                 # share of speed pushed upwards at spawn
HIT_RADIUS = 5.0
BONUS_RADIUS = 7.0
SHRINK = 0.4                       # radius lost by the end of a particle's life


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    age: float
    lifetime: float
    kind: str = "hit"

    @property
    def t(self) -> float:
        return min(1.0, self.age / self.lifetime) if self.lifetime > 0 else 1.0

    @property
    def alpha(self) -> float:
        return 1.0 - self.t

    @property
    def draw_radius(self) -> float:
        return self.radius * (1.0 - self.t * SHRINK)

    @property
    def dead(self) -> bool:
        return self.age >= self.lifetime


class ParticleField:
    """Cosmetic bursts on hits. Nothing in gameplay reads these."""

    def __init__(self, rng: RandomSource):
        self.rng = rng
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def clear(self) -> None:
        self.particles.clear()

    def burst(self, x: float, y: float, count: int, power: float, lifetime_ms: float, kind: str = "hit") -> None:
        base_r = BONUS_RADIUS if kind == "bonus" else HIT_RADIUS
        for _ in range(count):
            a = self.rng.angle()
            sp = power * self.rng.uniform(0.4, 1.0)
            self.particles.append(Particle(
                x=x, y=y,
                vx=math.cos(a) * sp,
                vy=math.sin(a) * sp - sp * UPWARD_BIAS,
                radius=base_r * self.rng.uniform(0.6, 1.4),
                age=0.0,
                lifetime=lifetime_ms,
                kind=kind,
            ))

    def update(self, dt_ms: float) -> None:
        steps = dt_ms / FRAME_MS
        alive = []
        for p in self.particles:
            p.age += dt_ms
            if p.dead:
                continue
            p.vy += GRAVITY * steps
            p.x += p.vx * steps
            p.y += p.vy * steps
            alive.append(p)
        self.particles = alive
