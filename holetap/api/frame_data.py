from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float
    source: str = "mouse"   # "mouse", "touch" or "laser"


@dataclass
class FrameData:
    timestamp: float
    # pointer-downs since the previous frame, already in logical screen coords
    pointers: List[PointerDown] = field(default_factory=list)
