from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from holetap.core.clock import RoundClock, clamp_delta
from holetap.core.config import RoundConfig
from holetap.core.events import FeedbackEvent, FeedbackKind, FeedbackSink
from holetap.core.hits import HitResolver
from holetap.core.holes import GRID, Hole, HoleType, make_holes
from holetap.core.layout import BoardLayout
from holetap.core.particles import Particle, ParticleField
from holetap.core.rng import RandomSource
from holetap.core.scheduler import SpawnScheduler, intensity_for
from holetap.core.scoring import ScoreBoard
from holetap.core.storage import BestScore, MemoryBestScore

log = logging.getLogger(__name__)


class RoundState(Enum):
    Idle = 1
    Running = 2
    Ended = 3


@dataclass(frozen=True)
class RoundSnapshot:
    """Read-only view of one frame for the drawing layer."""
    state: RoundState
    now: float
    time_remaining_ms: float
    seconds_left: int
    score: int
    best: int
    multiplier: int
    multiplier_remaining_ms: float
    intensity: float
    holes: Tuple[Hole, ...]
    particles: Tuple[Particle, ...]

    @property
    def running(self) -> bool:
        return self.state is RoundState.Running


class GameSession:
    """
    Owns everything about a round: the holes, clock, score, particles and
    the best score. Drive it with start(), tap() and tick(); each returns the
    feedback events it produced, which are also pushed to every sink.

    `now` is session time in ms: the sum of all (clamped) tick deltas since
    start(). Nothing here reads a wall clock.
    """

    def __init__(
        self,
        cfg: Optional[RoundConfig] = None,
        screen_size: Tuple[int, int] = (1280, 720),
        rng: Optional[RandomSource] = None,
        store: Optional[BestScore] = None,
        sinks: Iterable[FeedbackSink] = (),
        grid=GRID,
    ):
        self.cfg = cfg or RoundConfig()
        self.rng = rng or RandomSource()
        self.store = store if store is not None else MemoryBestScore()
        self.sinks: List[FeedbackSink] = list(sinks)

        self.layout = BoardLayout(*screen_size)
        self.holes: List[Hole] = make_holes(grid)
        self.clock = RoundClock(self.cfg.duration_ms)
        self.scoreboard = ScoreBoard()
        self.scheduler = SpawnScheduler(self.cfg, self.rng)
        self.resolver = HitResolver(self.layout)
        self.particles = ParticleField(self.rng)

        self.state: RoundState = RoundState.Idle
        self.now: float = 0.0
        self.best: int = self.store.load_best()

    # ------------- properties -------------
    @property
    def running(self) -> bool:
        return self.state is RoundState.Running

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def multiplier(self) -> int:
        return self.scoreboard.multiplier

    @property
    def intensity(self) -> float:
        return intensity_for(self.clock.progress)

    # ------------- helpers -------------
    def _emit(self, events: List[FeedbackEvent], event: FeedbackEvent) -> None:
        events.append(event)
        for sink in self.sinks:
            try:
                sink.notify(event)
            except Exception:
                # presentation problems must not touch round state
                log.exception("Feedback sink %r failed on %s", sink, event.kind.value)

    def _finish(self, events: List[FeedbackEvent]) -> None:
        self.state = RoundState.Ended
        score = self.scoreboard.score
        new_best = score > self.best
        if new_best:
            self.best = score
            self.store.save_best(score)
            log.info("New best score: %d", score)
        log.info("Round over: score=%d best=%d", score, self.best)
        self._emit(events, FeedbackEvent(
            FeedbackKind.END, at_ms=self.now, score=score, best=self.best, new_best=new_best))

    # ------------- commands -------------
    def start(self) -> List[FeedbackEvent]:
        events: List[FeedbackEvent] = []
        self.now = 0.0
        self.clock.reset()
        self.scoreboard.reset()
        self.particles.clear()
        for hole in self.holes:
            hole.reset()
        self.state = RoundState.Running
        log.info("Round started (%.0f ms)", self.cfg.duration_ms)
        self._emit(events, FeedbackEvent(FeedbackKind.START, at_ms=self.now, best=self.best))
        return events

    def tap(self, x: float, y: float) -> List[FeedbackEvent]:
        """Resolve a pointer-down at screen position (x, y)."""
        events: List[FeedbackEvent] = []
        if not self.running:
            return events

        self.scoreboard.update(self.now)
        idx = self.resolver.resolve(self.holes, x, y)
        if idx is None:
            log.debug("Miss at (%.0f, %.0f)", x, y)
            self._emit(events, FeedbackEvent(FeedbackKind.MISS, at_ms=self.now, pos=(x, y)))
            return events

        cfg = self.cfg
        hole = self.holes[idx]
        bx, by = self.layout.burst_origin(hole)
        if hole.type is HoleType.BONUS:
            self.scoreboard.set_multiplier(cfg.bonus_duration_ms, self.now)
            self.particles.burst(bx, by, cfg.bonus_particles, cfg.bonus_particle_power,
                                 cfg.bonus_particle_life_ms, kind="bonus")
            kind, points = FeedbackKind.BONUS, 0
        else:
            points = self.scoreboard.add_score(cfg.primary_points)
            self.particles.burst(bx, by, cfg.hit_particles, cfg.hit_particle_power,
                                 cfg.hit_particle_life_ms, kind="hit")
            kind = FeedbackKind.HIT

        hole.clear(self.now, hit_flash_ms=cfg.hit_flash_ms)
        log.debug("%s on hole %d (+%d, score %d)", kind.value, idx, points, self.scoreboard.score)
        self._emit(events, FeedbackEvent(
            kind, at_ms=self.now, hole=idx, pos=(x, y), points=points, score=self.scoreboard.score))
        return events

    def tick(self, dt_ms: float) -> List[FeedbackEvent]:
        """Advance one frame. Returns the events emitted during it."""
        events: List[FeedbackEvent] = []
        dt = clamp_delta(dt_ms)

        if not self.running:
            self.particles.update(dt)
            return events

        self.now += dt
        if self.clock.advance(dt):
            self._finish(events)
            self.particles.update(dt)
            return events

        self.scoreboard.update(self.now)
        for hole in self.holes:
            hole.expire(self.now)
        self.scheduler.step(self.holes, self.now, self.clock.progress)
        self.particles.update(dt)
        return events

    # ------------- render sink -------------
    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            state=self.state,
            now=self.now,
            time_remaining_ms=self.clock.remaining_ms,
            seconds_left=self.clock.seconds_left,
            score=self.scoreboard.score,
            best=self.best,
            multiplier=self.scoreboard.multiplier,
            multiplier_remaining_ms=self.scoreboard.multiplier_remaining_ms(self.now),
            intensity=self.intensity,
            holes=tuple(replace(h) for h in self.holes),
            particles=tuple(replace(p) for p in self.particles.particles),
        )
