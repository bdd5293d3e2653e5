from __future__ import annotations
import math
import time
from typing import List, Optional, Tuple

import numpy as np

from holetap.api.frame_data import PointerDown
from holetap.calib.homography import frame_scale_homography, map_point
from holetap.detect.spot_tracker import SpotTracker
from holetap.video.camera import Camera

# Debounce: a held dot only fires again once it moved this far, and never
# faster than the cooldown
TRIGGER_MOVE_THRESHOLD = 8         # px, screen space
TRIGGER_COOLDOWN_SEC = 0.06


class LaserTrigger:
    """
    Turns a continuous stream of dot positions into discrete presses:
    fires when a dot appears, or when a held dot jumps to a new spot.
    """

    def __init__(self, move_threshold: float = TRIGGER_MOVE_THRESHOLD,
                 cooldown_sec: float = TRIGGER_COOLDOWN_SEC):
        self.move_threshold = move_threshold
        self.cooldown_sec = cooldown_sec
        self._last_pos: Optional[Tuple[float, float]] = None
        self._last_fire = -math.inf

    def update(self, pos: Optional[Tuple[float, float]], now: float) -> bool:
        if pos is None:
            self._last_pos = None
            return False

        if self._last_pos is None:
            moved = True
        else:
            dx = pos[0] - self._last_pos[0]
            dy = pos[1] - self._last_pos[1]
            moved = math.hypot(dx, dy) >= self.move_threshold

        if moved and (now - self._last_fire) >= self.cooldown_sec:
            self._last_fire = now
            self._last_pos = pos
            return True
        return False


class LaserPointer:
    """
    Pointer source backed by a webcam watching the projected screen.
    Call poll() once per frame.
    """

    def __init__(self, camera: Camera, screen_size: Tuple[int, int], H: Optional[np.ndarray] = None,
                 mirror: bool = False, tracker: Optional[SpotTracker] = None,
                 trigger: Optional[LaserTrigger] = None):
        self.camera = camera
        self.screen_size = screen_size
        self.H = H
        self.mirror = mirror
        self.tracker = tracker or SpotTracker()
        self.trigger = trigger or LaserTrigger()

    def to_screen(self, cam_xy: Tuple[float, float], frame_size: Tuple[int, int]) -> Optional[Tuple[float, float]]:
        if self.H is None:
            # no calibration yet: assume the camera frames exactly the screen
            self.H = frame_scale_homography(frame_size, self.screen_size)
        x, y = map_point(self.H, cam_xy)
        w, h = self.screen_size
        if not (0 <= x < w and 0 <= y < h):
            return None
        # post-H mirror so logical input matches mirrored presentation
        if self.mirror:
            x = (w - 1) - x
        return x, y

    def poll(self) -> List[PointerDown]:
        ok, frame = self.camera.read()
        if not ok or frame is None:
            return []
        spots = self.tracker.detect(frame)
        pos = None
        if spots:
            fh, fw = frame.shape[:2]
            pos = self.to_screen(spots[0][:2], (fw, fh))
        if self.trigger.update(pos, time.monotonic()):
            return [PointerDown(pos[0], pos[1], "laser")]
        return []

    def close(self) -> None:
        self.camera.close()


def open_laser_pointer(cam_index: int, screen_size: Tuple[int, int], H: Optional[np.ndarray],
                       mirror: bool = False) -> Optional[LaserPointer]:
    """Returns None (after logging) when the camera cannot be opened."""
    cam = Camera(index=cam_index, target_size=(1280, 720), fps=60)
    if not cam.open():
        return None
    return LaserPointer(cam, screen_size, H=H, mirror=mirror)
