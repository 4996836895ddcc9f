"""Classifier thresholds and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Mapping, Optional, get_type_hints

from .templates import ShapeClass

ENV_PREFIX = "CURRENCY_"


@dataclass(frozen=True)
class MatchProfile:
    """Per-shape-class matching thresholds."""

    acceptance_distance: float
    confidence_floor: float
    confidence_cap: int
    contrast_bonus: float = 0.0

    def __post_init__(self) -> None:
        if self.acceptance_distance <= 0:
            raise ValueError("acceptance_distance must be positive")
        if not 0 <= self.confidence_cap <= 100:
            raise ValueError("confidence_cap must lie in [0, 100]")


NOTE_PROFILE = MatchProfile(acceptance_distance=80.0, confidence_floor=55.0, confidence_cap=95, contrast_bonus=10.0)
COIN_PROFILE = MatchProfile(acceptance_distance=60.0, confidence_floor=50.0, confidence_cap=90, contrast_bonus=0.0)


@dataclass(frozen=True)
class ClassifierSettings:
    """Every tunable constant of the heuristic classifier."""

    # dominant colors
    sample_stride: int = 10
    min_alpha: int = 128
    bucket_size: int = 20
    top_k: int = 8
    contrast_threshold: float = 40.0

    # rectangle test
    edge_sample_step: int = 4
    edge_threshold: float = 40.0
    edge_density_threshold: float = 0.015
    note_box_width_ratio: float = 0.6
    note_box_height_ratio: float = 0.4

    # ring test
    ring_radius_ratio: float = 0.3
    ring_angle_step: int = 15
    metallic_min: float = 80.0
    metallic_max: float = 220.0
    ring_min_hits: int = 8

    # scoring
    dark_brightness_max: float = 100.0
    bright_brightness_min: float = 150.0
    tier_bonus: float = 5.0
    confidence_jitter: float = 0.0
    jitter_range: float = 4.0

    note: MatchProfile = field(default_factory=lambda: NOTE_PROFILE)
    coin: MatchProfile = field(default_factory=lambda: COIN_PROFILE)

    def __post_init__(self) -> None:
        for name in ("sample_stride", "bucket_size", "top_k", "edge_sample_step", "ring_angle_step"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")
        for name in ("note_box_width_ratio", "note_box_height_ratio", "ring_radius_ratio"):
            if not 0 < getattr(self, name) <= 1:
                raise ValueError(f"{name} must lie in (0, 1]")
        if self.metallic_min > self.metallic_max:
            raise ValueError("metallic_min must not exceed metallic_max")
        if self.jitter_range < 0:
            raise ValueError("jitter_range must be non-negative")

    def profile_for(self, shape: ShapeClass) -> MatchProfile:
        return self.note if shape is ShapeClass.NOTE else self.coin

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClassifierSettings":
        """Override scalar settings from ``CURRENCY_<FIELD>`` environment variables."""
        environ = os.environ if environ is None else environ
        settings = cls()
        overrides = {}
        hints = get_type_hints(cls)
        for item in fields(cls):
            caster = hints[item.name]
            if caster not in (int, float):
                continue
            key = ENV_PREFIX + item.name.upper()
            raw = environ.get(key)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[item.name] = caster(raw)
            except ValueError as exc:
                raise ValueError(f"Invalid value for {key}: {raw!r}") from exc
        return replace(settings, **overrides) if overrides else settings


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    environ = os.environ if environ is None else environ
    level = logging.DEBUG if environ.get("CURRENCY_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
