from __future__ import annotations
import pygame
from typing import List, Tuple

from holetap.api.frame_data import PointerDown


class MousePointer:
    """
    Turns mouse clicks and touch presses into PointerDown records.
    - Only the press counts; releases and motion are ignored.
    - Touch coordinates arrive normalized and are scaled to the screen.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, screen_size: Tuple[int, int], mirror: bool = False, buttons=(1,)):
        self.screen_size = screen_size
        self.mirror = mirror
        self.buttons = tuple(buttons)
        self._pending: List[PointerDown] = []

    def _to_logical(self, x: float, y: float) -> Tuple[float, float]:
        w, _ = self.screen_size
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event) -> bool:
        """Queue a pointer-down if this event is one. Returns True if consumed."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            # pygame mirrors touches as mouse events too; keep only one of them
            if getattr(event, "touch", False):
                return True
            if event.button not in self.buttons:
                return False
            lx, ly = self._to_logical(*event.pos)
            self._pending.append(PointerDown(lx, ly, "mouse"))
            return True

        if event.type == pygame.FINGERDOWN:
            w, h = self.screen_size
            lx, ly = self._to_logical(event.x * w, event.y * h)
            self._pending.append(PointerDown(lx, ly, "touch"))
            return True

        return False

    def poll(self) -> List[PointerDown]:
        out, self._pending = self._pending, []
        return out

    def close(self) -> None:
        self._pending.clear()
