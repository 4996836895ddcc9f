"""Run the currency classifier on images loaded with OpenCV."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np

from .classifier import ClassificationResult, CurrencyClassifier
from .config import ClassifierSettings
from .frame import Frame
from .templates import ShapeClass, TemplateLibrary


class RecognitionPipeline:
    """Classify BGR images against a built-in or JSON-loaded template table."""

    def __init__(
        self,
        currency: str = "USD",
        template_file: Optional[Path] = None,
        settings: Optional[ClassifierSettings] = None,
        noise: Optional[np.random.Generator] = None,
    ) -> None:
        if template_file is not None:
            library = TemplateLibrary.from_json(template_file)
        else:
            library = TemplateLibrary.builtin(currency)
        self.classifier = CurrencyClassifier(library=library, settings=settings, noise=noise)

    def __call__(self, image: np.ndarray) -> List[ClassificationResult]:
        return self.classifier.classify(Frame.from_bgr(image))


def load_image_from_bytes(data: bytes) -> np.ndarray:
    array = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(array, cv2.IMREAD_COLOR) if array.size else None
    if image is None:
        raise ValueError("Unable to decode the uploaded image. Check the format (jpg/png).")
    return image


def visualize_results(
    image: np.ndarray,
    results: List[ClassificationResult],
    note_color: tuple[int, int, int] = (0, 255, 0),
    coin_color: tuple[int, int, int] = (0, 165, 255),
) -> np.ndarray:
    annotated = image.copy()
    for result in results:
        box = result.bounding_box
        if box is None:
            continue
        color = note_color if result.kind is ShapeClass.NOTE else coin_color
        if result.kind is ShapeClass.NOTE:
            cv2.rectangle(annotated, (box.x, box.y), (box.x + box.width, box.y + box.height), color, 2)
        else:
            center = (box.x + box.width // 2, box.y + box.height // 2)
            cv2.circle(annotated, center, max(1, min(box.width, box.height) // 2), color, 2)
        text = f"{result.denomination}: {result.confidence}%"
        cv2.putText(annotated, text, (box.x, max(0, box.y - 10)), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 2)
    return annotated
