from .game_base import Game
from .frame_data import FrameData, PointerDown
from .config import EngineConfig

__all__ = ["Game", "FrameData", "PointerDown", "EngineConfig"]
