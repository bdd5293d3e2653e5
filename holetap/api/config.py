from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    input_mode: str = "mouse"              # "mouse" or "laser"
    cam_index: int = 0
    calibration: Optional[Path] = None     # .npz homography for laser input
    mirror: bool = False
    seed: Optional[int] = None
    mute: bool = False
    best_file: Optional[Path] = None
