from .config import RoundConfig
from .events import FeedbackEvent, FeedbackKind, FeedbackSink
from .holes import GRID, Hole, HoleType
from .layout import BoardLayout
from .rng import RandomSource
from .scoring import BONUS_MULTIPLIER, ScoreBoard
from .session import GameSession, RoundSnapshot, RoundState
from .storage import BestScoreStore, MemoryBestScore

__all__ = [
    "RoundConfig", "FeedbackEvent", "FeedbackKind", "FeedbackSink",
    "GRID", "Hole", "HoleType", "BoardLayout", "RandomSource",
    "BONUS_MULTIPLIER", "ScoreBoard",
    "GameSession", "RoundSnapshot", "RoundState",
    "BestScoreStore", "MemoryBestScore",
]
