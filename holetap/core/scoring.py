from __future__ import annotations

# a bonus hit always doubles; the board is only ever at x1 or x2
BONUS_MULTIPLIER = 2


class ScoreBoard:
    """Score plus the timed multiplier window earned from bonus targets."""

    def __init__(self):
        self.score: int = 0
        self.multiplier: int = 1
        self.multiplier_expires_at: float = 0.0

    def reset(self) -> None:
        self.score = 0
        self.multiplier = 1
        self.multiplier_expires_at = 0.0

    def add_score(self, base: int) -> int:
        total = int(base) * self.multiplier
        self.score += total
        return total

    def set_multiplier(self, duration_ms: float, now: float) -> None:
        # a new window replaces the running one, it never extends it
        self.multiplier = BONUS_MULTIPLIER
        self.multiplier_expires_at = now + duration_ms

    def update(self, now: float) -> bool:
        """Drop back to x1 once the window is over. Returns True when it reverts."""
        if self.multiplier != 1 and now > self.multiplier_expires_at:
            self.multiplier = 1
            return True
        return False

    def multiplier_remaining_ms(self, now: float) -> float:
        if self.multiplier == 1:
            return 0.0
        return max(0.0, self.multiplier_expires_at - now)
