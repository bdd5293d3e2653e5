from __future__ import annotations
import logging
import zipfile
from pathlib import Path
import cv2
import numpy as np
from typing import Optional, Tuple

log = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parents[2] / "runtime" / "cache" / "homographies" / "default.npz"


class HomographyStore:
    """
    Camera->screen calibration saved as an .npz with a 3x3 `H` array.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else DEFAULT_PATH

    def load(self) -> Optional[np.ndarray]:
        """Returns H, or None when there is no usable calibration."""
        if not self.path.exists():
            return None
        try:
            with np.load(self.path, allow_pickle=False) as data:
                H = np.asarray(data["H"], dtype=np.float64)
        except (OSError, KeyError, ValueError, zipfile.BadZipFile) as exc:
            log.warning("Ignoring calibration %s: %s", self.path, exc)
            return None
        if H.shape != (3, 3):
            log.warning("Ignoring calibration %s: H has shape %s", self.path, H.shape)
            return None
        return H


def frame_scale_homography(frame_size: Tuple[int, int], screen_size: Tuple[int, int]) -> np.ndarray:
    """Uncalibrated fallback: stretch the whole camera frame over the screen."""
    fw, fh = frame_size
    sw, sh = screen_size
    return np.array([
        [sw / float(fw), 0.0, 0.0],
        [0.0, sh / float(fh), 0.0],
        [0.0, 0.0, 1.0],
    ], dtype=np.float64)


def map_point(H: np.ndarray, xy: Tuple[float, float]) -> Tuple[float, float]:
    pt = np.array([[[xy[0], xy[1]]]], dtype=np.float32)  # shape (1,1,2)
    mapped = cv2.perspectiveTransform(pt, H)[0][0]
    return float(mapped[0]), float(mapped[1])
