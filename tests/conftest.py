from __future__ import annotations

import cv2
import numpy as np
import pytest

from currency_recognition import Frame

WIDTH, HEIGHT = 200, 120
BLACK = (0, 0, 0)
TWENTY_GREEN = (120, 160, 100)
NICKEL = (160, 160, 160)


def solid_pixels(color: tuple[int, int, int], width: int = WIDTH, height: int = HEIGHT, alpha: int = 255) -> np.ndarray:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :, :3] = color
    pixels[:, :, 3] = alpha
    return pixels


def paint_stripes(pixels: np.ndarray, color: tuple[int, int, int] = BLACK, width: int = 8, period: int = 40) -> np.ndarray:
    """Vertical stripes, like print detail on a note, to trip the edge-density test."""
    for x in range(period // 2, pixels.shape[1], period):
        pixels[:, x : x + width, :3] = color
    return pixels


def paint_ring(pixels: np.ndarray, color: tuple[int, int, int] = NICKEL, thickness: int = 8) -> np.ndarray:
    height, width = pixels.shape[:2]
    radius = int(min(width, height) * 0.3)
    cv2.circle(pixels, (width // 2, height // 2), radius, (*color, 255), thickness)
    return pixels


def note_frame(color: tuple[int, int, int]) -> Frame:
    return Frame(paint_stripes(solid_pixels(color)))


@pytest.fixture
def twenty_note_frame() -> Frame:
    return note_frame(TWENTY_GREEN)


@pytest.fixture
def note_and_coin_frame() -> Frame:
    return Frame(paint_ring(paint_stripes(solid_pixels(TWENTY_GREEN))))
