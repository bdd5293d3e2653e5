from __future__ import annotations
from typing import List, Tuple
import cv2
import numpy as np


# Red laser HSV thresholds (works for many cheap red lasers; adjust as needed)
# Note: red wraps around the hue wheel, so we use two ranges and OR them.
RED_RANGES = [
    ((0, 120, 180), (8, 255, 255)),
    ((170, 120, 180), (180, 255, 255)),
]

MIN_BLOB_AREA = 8
KERNEL = cv2.getStructuringElement(cv2.MORPH_ELLIPSE, (3, 3))


class SpotTracker:
    """Finds bright red laser spots in a BGR camera frame."""

    def __init__(self, ranges=RED_RANGES, min_area: float = MIN_BLOB_AREA):
        self.ranges = ranges
        self.min_area = min_area

    def mask(self, frame_bgr: np.ndarray) -> np.ndarray:
        hsv = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2HSV)
        mask = np.zeros(hsv.shape[:2], dtype=np.uint8)
        for lo, hi in self.ranges:
            mask = cv2.bitwise_or(mask, cv2.inRange(hsv, lo, hi))
        # Clean up noise a little
        mask = cv2.GaussianBlur(mask, (5, 5), 0)
        return cv2.morphologyEx(mask, cv2.MORPH_OPEN, KERNEL, iterations=1)

    def detect(self, frame_bgr: np.ndarray) -> List[Tuple[float, float, float]]:
        """
        Returns camera-space spots as (x, y, area), largest first.
        """
        cnts, _ = cv2.findContours(self.mask(frame_bgr), cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        spots: List[Tuple[float, float, float]] = []
        for c in cnts:
            area = cv2.contourArea(c)
            if area < self.min_area:
                continue
            M = cv2.moments(c)
            if M["m00"] <= 0:
                continue
            spots.append((M["m10"] / M["m00"], M["m01"] / M["m00"], float(area)))
        spots.sort(key=lambda s: s[2], reverse=True)
        return spots
