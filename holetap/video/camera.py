from __future__ import annotations
import logging
import sys
from typing import Optional, Tuple

import cv2
import numpy as np

log = logging.getLogger(__name__)


class Camera:
    """
    The webcam watching the projected screen. The requested size and fps are
    hints; drivers may pick something else, see frame_size after open().
    """

    def __init__(self, index: int, target_size: Tuple[int, int] = (1280, 720), fps: int = 60):
        self.index = index
        self.target_size = target_size
        self.fps = fps
        self.cap: Optional[cv2.VideoCapture] = None

    @property
    def is_open(self) -> bool:
        return self.cap is not None

    @property
    def frame_size(self) -> Tuple[int, int]:
        if self.cap is None:
            return self.target_size
        w = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH)) or self.target_size[0]
        h = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT)) or self.target_size[1]
        return w, h

    def open(self) -> bool:
        # DirectShow opens much faster than MSMF on Windows
        backend = cv2.CAP_DSHOW if sys.platform.startswith("win") else cv2.CAP_ANY
        cap = cv2.VideoCapture(self.index, backend)
        if not cap.isOpened():
            cap.release()
            log.error("Could not open camera %d", self.index)
            return False
        w, h = self.target_size
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, w)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, h)
        cap.set(cv2.CAP_PROP_FPS, self.fps)
        self.cap = cap
        log.info("Camera %d opened at %dx%d", self.index, *self.frame_size)
        return True

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        if self.cap is None:
            return False, None
        ok, frame = self.cap.read()
        if not ok:
            log.debug("Camera %d dropped a frame", self.index)
            return False, None
        return True, frame

    def close(self) -> None:
        if self.cap is not None:
            self.cap.release()
            self.cap = None
