from __future__ import annotations
from typing import TYPE_CHECKING

import pygame

from .frame_data import FrameData

if TYPE_CHECKING:
    from holetap.app.context import Context


class Game:
    """
    What the platform loop calls on a game module's get_game() object.
    Pointer input arrives already mapped to screen pixels in FrameData.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once, with the parsed manifest.yaml."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Called every frame; dt_ms is milliseconds since the last one."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Raw pygame events (keyboard, window) that are not pointer input."""
        ...

    def on_unload(self) -> None:
        ...
