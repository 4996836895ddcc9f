"""Color-distance scoring of dominant colors against denomination templates."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .colors import DominantColor, color_distances
from .config import ClassifierSettings, MatchProfile
from .templates import BrightnessBias, CurrencyTemplate, ShapeClass, TemplateLibrary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    template: CurrencyTemplate
    score: float
    confidence: int


class DenominationMatcher:
    """Pick the template of a shape class whose reference colors sit closest to the sampled colors.

    ``noise`` is an optional seeded generator used to jitter the final
    confidence. Without it the jitter is the fixed ``confidence_jitter``
    setting and matching is fully deterministic. A generator is stateful, so
    do not share one matcher with noise across threads.
    """

    def __init__(
        self,
        library: TemplateLibrary,
        settings: Optional[ClassifierSettings] = None,
        noise: Optional[np.random.Generator] = None,
    ) -> None:
        self.library = library
        self.settings = settings or ClassifierSettings()
        self.noise = noise

    def match(
        self,
        colors: Sequence[DominantColor],
        shape: ShapeClass,
        brightness: float,
        high_contrast: bool,
    ) -> Optional[MatchResult]:
        templates = self.library.for_shape(shape)
        if not colors or not templates:
            return None

        profile = self.settings.profile_for(shape)
        samples = np.array([color.rgb for color in colors], dtype=np.float32)

        best_template: Optional[CurrencyTemplate] = None
        best_score = -math.inf
        for template in templates:
            similarity = self.best_similarity(template, samples, profile.acceptance_distance)
            if similarity <= 0:
                continue
            score = similarity + self._adjustments(template, profile, brightness, high_contrast)
            logger.debug("%s %s scored %.2f", shape.value, template.denomination, score)
            if score <= profile.confidence_floor:
                continue
            # Strict comparison keeps the earlier template on ties.
            if score > best_score:
                best_template, best_score = template, score

        if best_template is None:
            return None
        return MatchResult(
            template=best_template,
            score=best_score,
            confidence=self._confidence(best_score, profile),
        )

    @staticmethod
    def best_similarity(template: CurrencyTemplate, samples: np.ndarray, acceptance_distance: float) -> float:
        """Similarity in [0, 100] of the closest template/sample color pair; 0 when none is in range."""
        reference = np.array(template.colors, dtype=np.float32)
        distances = color_distances(reference, samples)
        accepted = distances[distances < acceptance_distance]
        if accepted.size == 0:
            return 0.0
        return float(100.0 * (1.0 - accepted.min() / acceptance_distance))

    def _adjustments(
        self,
        template: CurrencyTemplate,
        profile: MatchProfile,
        brightness: float,
        high_contrast: bool,
    ) -> float:
        bonus = profile.contrast_bonus if high_contrast else 0.0
        if template.brightness_bias is BrightnessBias.DARK and brightness < self.settings.dark_brightness_max:
            bonus += self.settings.tier_bonus
        elif template.brightness_bias is BrightnessBias.BRIGHT and brightness > self.settings.bright_brightness_min:
            bonus += self.settings.tier_bonus
        return bonus

    def _confidence(self, score: float, profile: MatchProfile) -> int:
        if self.noise is not None:
            jitter = float(self.noise.uniform(0.0, self.settings.jitter_range)) if self.settings.jitter_range else 0.0
        else:
            jitter = self.settings.confidence_jitter
        return max(0, min(profile.confidence_cap, int(math.floor(score + jitter))))
