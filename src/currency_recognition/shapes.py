"""Coarse shape cues: a high-contrast rectangle (note) and a metallic ring (coin).

Neither test performs real object detection. They only decide whether the
frame plausibly contains a note-like or coin-like region and return a box
estimate for it. False positives and negatives are expected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import ClassifierSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    width: int
    height: int

    def clip(self, frame_width: int, frame_height: int) -> "BoundingBox":
        x1 = min(max(0, self.x), frame_width)
        y1 = min(max(0, self.y), frame_height)
        x2 = min(max(0, self.x + self.width), frame_width)
        y2 = min(max(0, self.y + self.height), frame_height)
        return BoundingBox(x=x1, y=y1, width=x2 - x1, height=y2 - y1)

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def edge_density(gray: np.ndarray, step: int, edge_threshold: float) -> float:
    """Fraction of adjacent pairs on the subsampled grid whose brightness jumps above the threshold."""
    grid = gray[::step, ::step]
    horizontal = np.abs(np.diff(grid, axis=1)) > edge_threshold
    vertical = np.abs(np.diff(grid, axis=0)) > edge_threshold
    total = horizontal.size + vertical.size
    if total == 0:
        return 0.0
    return float(np.count_nonzero(horizontal) + np.count_nonzero(vertical)) / total


def ring_points(width: int, height: int, radius: int, angle_step: int) -> Tuple[np.ndarray, np.ndarray]:
    """Integer (xs, ys) of points on a ring around the frame center, clamped to the frame."""
    cx, cy = width // 2, height // 2
    angles = np.deg2rad(np.arange(0, 360, angle_step, dtype=np.float64))
    xs = np.clip(np.rint(cx + radius * np.cos(angles)).astype(int), 0, width - 1)
    ys = np.clip(np.rint(cy + radius * np.sin(angles)).astype(int), 0, height - 1)
    return xs, ys


def detect_rectangle(gray: np.ndarray, settings: ClassifierSettings) -> Optional[BoundingBox]:
    height, width = gray.shape[:2]
    if width == 0 or height == 0:
        return None

    density = edge_density(gray, settings.edge_sample_step, settings.edge_threshold)
    logger.debug("Edge density %.4f (threshold %.4f)", density, settings.edge_density_threshold)
    if density <= settings.edge_density_threshold:
        return None

    box_width = max(1, int(width * settings.note_box_width_ratio))
    box_height = max(1, int(height * settings.note_box_height_ratio))
    box = BoundingBox(
        x=(width - box_width) // 2,
        y=(height - box_height) // 2,
        width=box_width,
        height=box_height,
    )
    return box.clip(width, height)


def detect_circle(gray: np.ndarray, settings: ClassifierSettings) -> Optional[BoundingBox]:
    height, width = gray.shape[:2]
    radius = int(min(width, height) * settings.ring_radius_ratio)
    if radius < 1:
        return None

    xs, ys = ring_points(width, height, radius, settings.ring_angle_step)
    values = gray[ys, xs]
    hits = int(np.count_nonzero((values >= settings.metallic_min) & (values <= settings.metallic_max)))
    logger.debug("Metallic ring hits %d/%d (minimum %d)", hits, values.size, settings.ring_min_hits)
    if hits < settings.ring_min_hits:
        return None

    cx, cy = width // 2, height // 2
    box = BoundingBox(x=cx - radius, y=cy - radius, width=2 * radius, height=2 * radius)
    return box.clip(width, height)
