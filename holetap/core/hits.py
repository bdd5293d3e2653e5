from __future__ import annotations
from typing import Optional, Sequence

from holetap.core.holes import Hole
from holetap.core.layout import BoardLayout


class HitResolver:
    def __init__(self, layout: BoardLayout):
        self.layout = layout

    def resolve(self, holes: Sequence[Hole], x: float, y: float) -> Optional[int]:
        """
        Index of the first active hole (in grid order) whose hit circle
        contains (x, y), or None for a miss.
        """
        for i, hole in enumerate(holes):
            if hole.active and self.layout.contains(hole, x, y):
                return i
        return None
