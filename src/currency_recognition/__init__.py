"""Heuristic note and coin recognition for an accessibility assistant."""

from .classifier import ClassificationResult, CurrencyClassifier, classify
from .colors import DominantColor, extract_dominant_colors
from .config import ClassifierSettings, MatchProfile
from .frame import Frame
from .matcher import DenominationMatcher, MatchResult
from .pipeline import RecognitionPipeline
from .shapes import BoundingBox, detect_circle, detect_rectangle
from .tally import RunningTotal, describe
from .templates import BrightnessBias, CurrencyTemplate, ShapeClass, TemplateLibrary

__all__ = [
    "BoundingBox",
    "BrightnessBias",
    "ClassificationResult",
    "ClassifierSettings",
    "CurrencyClassifier",
    "CurrencyTemplate",
    "DenominationMatcher",
    "DominantColor",
    "Frame",
    "MatchProfile",
    "MatchResult",
    "RecognitionPipeline",
    "RunningTotal",
    "ShapeClass",
    "TemplateLibrary",
    "classify",
    "describe",
    "detect_circle",
    "detect_rectangle",
    "extract_dominant_colors",
]
