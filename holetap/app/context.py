from __future__ import annotations
from dataclasses import dataclass
import pygame
from pathlib import Path
from typing import Optional, Tuple
from holetap.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    game_root: Optional[Path] = None
