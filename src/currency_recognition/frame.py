"""RGBA frame container consumed by the currency classifier."""

from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np


@dataclass(frozen=True, eq=False)
class Frame:
    """A height x width grid of RGBA pixels with 0-255 channel intensities."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels is None:
            raise ValueError("Frame requires a pixel buffer")
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected an RGBA array of shape (H, W, 4), got {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @classmethod
    def from_rgba(cls, array: np.ndarray) -> "Frame":
        """Wrap an (H, W, 4) RGBA or (H, W, 3) RGB array; RGB gets an opaque alpha channel."""
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) array, got {array.shape}")
        if array.dtype != np.uint8:
            array = np.clip(array, 0, 255).astype(np.uint8)
        if array.shape[2] == 3:
            alpha = np.full(array.shape[:2] + (1,), 255, dtype=np.uint8)
            array = np.concatenate([array, alpha], axis=2)
        return cls(array)

    @classmethod
    def from_buffer(cls, data: bytes, width: int, height: int) -> "Frame":
        """Build a frame from a flat RGBA byte buffer, as produced by canvas ``ImageData``."""
        if width < 0 or height < 0:
            raise ValueError(f"Frame dimensions must be non-negative, got {width}x{height}")
        array = np.frombuffer(data, dtype=np.uint8)
        expected = width * height * 4
        if array.size != expected:
            raise ValueError(
                f"Pixel buffer holds {array.size} bytes, expected {expected} for {width}x{height} RGBA"
            )
        return cls(array.reshape(height, width, 4))

    @classmethod
    def from_bgr(cls, image: np.ndarray) -> "Frame":
        """Convert an OpenCV image (BGR, BGRA or grayscale) to an RGBA frame."""
        if image is None:
            raise ValueError("Frame requires a pixel buffer")
        if image.size == 0:
            height, width = image.shape[:2]
            return cls(np.zeros((height, width, 4), dtype=np.uint8))
        if image.ndim == 2:
            code = cv2.COLOR_GRAY2RGBA
        elif image.shape[2] == 4:
            code = cv2.COLOR_BGRA2RGBA
        else:
            code = cv2.COLOR_BGR2RGBA
        return cls(cv2.cvtColor(image, code))
