"""Heuristic currency classifier.

This is a placeholder classifier: no learned model is involved. A frame is
reduced to a handful of dominant colors, checked for a high-contrast
rectangle (note) and a metallic ring (coin), and each detected shape is
matched against the reference colors of the configured template table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .colors import brightness_stats, extract_dominant_colors, luminance
from .config import ClassifierSettings
from .frame import Frame
from .matcher import DenominationMatcher
from .shapes import BoundingBox, detect_circle, detect_rectangle
from .templates import ShapeClass, TemplateLibrary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """A recognized note or coin."""

    kind: ShapeClass
    denomination: str
    currency: str
    value: float
    confidence: int
    bounding_box: Optional[BoundingBox] = None

    def as_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "denomination": self.denomination,
            "currency": self.currency,
            "value": self.value,
            "confidence": self.confidence,
            "bounding_box": self.bounding_box.as_dict() if self.bounding_box else None,
        }


class CurrencyClassifier:
    """Classify at most one note and one coin per frame."""

    def __init__(
        self,
        library: Optional[TemplateLibrary] = None,
        settings: Optional[ClassifierSettings] = None,
        noise: Optional[np.random.Generator] = None,
    ) -> None:
        self.library = library or TemplateLibrary.builtin("USD")
        self.settings = settings or ClassifierSettings()
        self.matcher = DenominationMatcher(self.library, self.settings, noise=noise)

    def classify(self, frame: Optional[Frame]) -> List[ClassificationResult]:
        if frame is None or frame.is_empty:
            return []

        settings = self.settings
        colors = extract_dominant_colors(
            frame,
            stride=settings.sample_stride,
            bucket_size=settings.bucket_size,
            top_k=settings.top_k,
            min_alpha=settings.min_alpha,
        )
        if not colors:
            return []

        stats = brightness_stats(frame, stride=settings.sample_stride, min_alpha=settings.min_alpha)
        high_contrast = stats.contrast >= settings.contrast_threshold
        gray = luminance(frame.pixels)
        logger.debug(
            "Frame %dx%d: %d colors, brightness %.1f, contrast %.1f",
            frame.width,
            frame.height,
            len(colors),
            stats.mean,
            stats.contrast,
        )

        results: List[ClassificationResult] = []
        for shape, detect in ((ShapeClass.NOTE, detect_rectangle), (ShapeClass.COIN, detect_circle)):
            box = detect(gray, settings)
            if box is None:
                continue
            match = self.matcher.match(colors, shape, stats.mean, high_contrast)
            if match is None:
                continue
            template = match.template
            results.append(
                ClassificationResult(
                    kind=shape,
                    denomination=template.denomination,
                    currency=template.currency,
                    value=template.value,
                    confidence=match.confidence,
                    bounding_box=box,
                )
            )
        return results


def classify(frame: Optional[Frame]) -> List[ClassificationResult]:
    """Classify a frame against the built-in USD table with default settings."""
    return CurrencyClassifier().classify(frame)
