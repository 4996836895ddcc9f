"""Dominant color extraction and brightness statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .frame import Frame

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class DominantColor:
    """A quantized color bucket and the number of sampled pixels that fell into it."""

    r: int
    g: int
    b: int
    count: int

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class BrightnessStats:
    mean: float
    contrast: float


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Brightness as the plain mean of the R, G and B channels."""
    return pixels[..., :3].astype(np.float32).mean(axis=-1)


def sample_pixels(frame: Frame, stride: int, min_alpha: int) -> np.ndarray:
    """Return the RGB values of every ``stride``-th opaque pixel of the flattened frame."""
    if stride < 1:
        raise ValueError(f"stride must be at least 1, got {stride}")
    flat = frame.pixels.reshape(-1, 4)[::stride]
    return flat[flat[:, 3] >= min_alpha][:, :3]


def extract_dominant_colors(
    frame: Frame,
    stride: int = 10,
    bucket_size: int = 20,
    top_k: int = 8,
    min_alpha: int = 128,
) -> List[DominantColor]:
    if frame.is_empty:
        return []
    samples = sample_pixels(frame, stride, min_alpha)
    if samples.size == 0:
        return []

    quantized = (samples.astype(np.int32) // bucket_size) * bucket_size
    buckets, first_seen, counts = np.unique(
        quantized, axis=0, return_index=True, return_counts=True
    )
    # Most frequent first; equal counts keep sampling order.
    order = np.lexsort((first_seen, -counts))[:top_k]
    return [
        DominantColor(
            r=int(buckets[idx, 0]),
            g=int(buckets[idx, 1]),
            b=int(buckets[idx, 2]),
            count=int(counts[idx]),
        )
        for idx in order
    ]


def brightness_stats(frame: Frame, stride: int = 10, min_alpha: int = 128) -> BrightnessStats:
    """Mean brightness and its standard deviation over the sampled opaque pixels."""
    if frame.is_empty:
        return BrightnessStats(mean=0.0, contrast=0.0)
    samples = sample_pixels(frame, stride, min_alpha)
    if samples.size == 0:
        return BrightnessStats(mean=0.0, contrast=0.0)
    values = luminance(samples)
    return BrightnessStats(mean=float(values.mean()), contrast=float(values.std()))


def color_distances(reference: np.ndarray, samples: np.ndarray) -> np.ndarray:
    """Euclidean RGB distance between every reference color (rows) and every sample (columns)."""
    diff = reference[:, None, :].astype(np.float32) - samples[None, :, :].astype(np.float32)
    return np.linalg.norm(diff, axis=2)
