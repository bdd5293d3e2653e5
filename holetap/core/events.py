from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple


class FeedbackKind(Enum):
    HIT = "hit"
    BONUS = "bonus"
    MISS = "miss"
    START = "start"
    END = "end"


@dataclass(frozen=True)
class FeedbackEvent:
    kind: FeedbackKind
    at_ms: float
    # hole index and screen position for hit/bonus/miss
    hole: Optional[int] = None
    pos: Optional[Tuple[float, float]] = None
    # points added by a hit; final score and best for end
    points: int = 0
    score: int = 0
    best: int = 0
    new_best: bool = False


class FeedbackSink(Protocol):
    """Presentation-side listener (sound, HUD flashes, ...)."""

    def notify(self, event: FeedbackEvent) -> None:
        ...
