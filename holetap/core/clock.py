from __future__ import annotations
import math


def clamp_delta(dt_ms: float) -> float:
    """Negative, NaN and infinite frame deltas count as no time at all."""
    try:
        dt = float(dt_ms)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0:
        return 0.0
    return dt


class RoundClock:
    """Countdown for a fixed-length round. No pause/resume."""

    def __init__(self, duration_ms: float):
        self.duration_ms = float(duration_ms)
        self.remaining_ms = self.duration_ms
        self._ended = False

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def progress(self) -> float:
        return 1.0 - (self.remaining_ms / self.duration_ms)

    @property
    def seconds_left(self) -> int:
        return int(math.ceil(self.remaining_ms / 1000.0))

    def reset(self) -> None:
        self.remaining_ms = self.duration_ms
        self._ended = False

    def advance(self, dt_ms: float) -> bool:
        """
        Consume dt_ms of round time. Returns True only on the call where the
        clock first runs out; later calls are no-ops returning False.
        """
        if self._ended:
            return False
        self.remaining_ms = max(0.0, self.remaining_ms - clamp_delta(dt_ms))
        if self.remaining_ms <= 0.0:
            self._ended = True
            return True
        return False
