"""Reference color templates for currency denominations."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


class ShapeClass(str, Enum):
    NOTE = "note"
    COIN = "coin"


class BrightnessBias(str, Enum):
    """Brightness range a template's denomination tier tends to show up in."""

    NONE = "none"
    DARK = "dark"
    BRIGHT = "bright"


@dataclass(frozen=True)
class CurrencyTemplate:
    """Expected visual signature of one denomination."""

    denomination: str
    value: float
    currency: str
    shape: ShapeClass
    primary_color: RGB
    alternate_colors: Tuple[RGB, ...] = ()
    features: Tuple[str, ...] = ()
    brightness_bias: BrightnessBias = BrightnessBias.NONE

    @property
    def colors(self) -> Tuple[RGB, ...]:
        return (self.primary_color,) + self.alternate_colors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CurrencyTemplate":
        try:
            return cls(
                denomination=str(data["denomination"]),
                value=float(data["value"]),
                currency=str(data["currency"]).upper(),
                shape=ShapeClass(data["shape"]),
                primary_color=_parse_color(data["primary_color"]),
                alternate_colors=tuple(_parse_color(c) for c in data.get("alternate_colors", ())),
                features=tuple(str(f) for f in data.get("features", ())),
                brightness_bias=BrightnessBias(data.get("brightness_bias", "none")),
            )
        except KeyError as exc:
            raise ValueError(f"Template is missing required key {exc.args[0]!r}") from exc


def _parse_color(value: Any) -> RGB:
    if len(value) != 3:
        raise ValueError(f"Colors must be [r, g, b] triples, got {value!r}")
    r, g, b = (int(channel) for channel in value)
    if not all(0 <= channel <= 255 for channel in (r, g, b)):
        raise ValueError(f"Color channels must lie in [0, 255], got {value!r}")
    return (r, g, b)


class TemplateLibrary:
    """Immutable, ordered collection of currency templates."""

    def __init__(self, templates: Iterable[CurrencyTemplate]):
        self._templates = tuple(templates)
        if not self._templates:
            raise ValueError("TemplateLibrary requires at least one template")

    @classmethod
    def from_json(cls, path: Path) -> "TemplateLibrary":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template file not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        entries = payload.get("templates", []) if isinstance(payload, dict) else payload
        library = cls(CurrencyTemplate.from_dict(entry) for entry in entries)
        logger.debug("Loaded %d templates from %s", len(library), path)
        return library

    @classmethod
    def builtin(cls, currency: str = "USD") -> "TemplateLibrary":
        code = currency.upper()
        if code not in BUILTIN_TEMPLATES:
            known = ", ".join(sorted(BUILTIN_TEMPLATES))
            raise ValueError(f"No built-in templates for {currency!r} (known: {known})")
        return cls(BUILTIN_TEMPLATES[code])

    def for_shape(self, shape: ShapeClass) -> Tuple[CurrencyTemplate, ...]:
        return tuple(template for template in self._templates if template.shape is shape)

    def __iter__(self) -> Iterator[CurrencyTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


def _note(denomination, value, currency, primary, alternates=(), features=(), bias=BrightnessBias.NONE):
    return CurrencyTemplate(
        denomination, value, currency, ShapeClass.NOTE, primary, tuple(alternates), tuple(features), bias
    )


def _coin(denomination, value, currency, primary, alternates=(), features=()):
    return CurrencyTemplate(
        denomination, value, currency, ShapeClass.COIN, primary, tuple(alternates), tuple(features)
    )


USD_TEMPLATES: Tuple[CurrencyTemplate, ...] = (
    _note("$1", 1.0, "USD", (140, 160, 120), [(200, 205, 190)],
          ["Washington portrait", "green treasury seal"], BrightnessBias.BRIGHT),
    _note("$5", 5.0, "USD", (160, 140, 180), [(190, 180, 200)],
          ["Lincoln portrait", "purple tint"], BrightnessBias.BRIGHT),
    _note("$10", 10.0, "USD", (220, 180, 120), [(220, 200, 160)],
          ["Hamilton portrait", "orange tint"]),
    _note("$20", 20.0, "USD", (120, 160, 100), [(170, 190, 150)],
          ["Jackson portrait", "green tint"]),
    _note("$50", 50.0, "USD", (200, 100, 140), [(160, 130, 170)],
          ["Grant portrait", "red and blue tint"], BrightnessBias.DARK),
    _note("$100", 100.0, "USD", (80, 120, 120), [(160, 190, 180)],
          ["Franklin portrait", "blue security ribbon"], BrightnessBias.DARK),
    _coin("$0.01", 0.01, "USD", (180, 100, 60), [(140, 80, 40)], ["copper", "Lincoln profile"]),
    _coin("$0.05", 0.05, "USD", (160, 160, 160), [(120, 120, 120)], ["nickel", "smooth edge"]),
    _coin("$0.10", 0.10, "USD", (200, 200, 200), [], ["silver", "reeded edge"]),
    _coin("$0.25", 0.25, "USD", (180, 180, 200), [], ["silver", "reeded edge"]),
    _coin("$0.50", 0.50, "USD", (220, 220, 200), [], ["silver", "Kennedy profile"]),
    _coin("$1.00", 1.00, "USD", (200, 160, 80), [(160, 140, 60)], ["golden", "manganese brass"]),
)

INR_TEMPLATES: Tuple[CurrencyTemplate, ...] = (
    _note("₹10", 10.0, "INR", (140, 100, 60), [(190, 150, 110)],
          ["chocolate brown", "Konark sun temple"], BrightnessBias.BRIGHT),
    _note("₹20", 20.0, "INR", (200, 200, 100), [(220, 220, 150)],
          ["greenish yellow", "Ellora caves"], BrightnessBias.BRIGHT),
    _note("₹50", 50.0, "INR", (100, 200, 220), [(150, 210, 220)],
          ["fluorescent blue", "Hampi chariot"]),
    _note("₹100", 100.0, "INR", (180, 160, 200), [(200, 190, 220)],
          ["lavender", "Rani ki vav"]),
    _note("₹200", 200.0, "INR", (240, 200, 80), [(230, 170, 70)],
          ["bright yellow", "Sanchi stupa"]),
    _note("₹500", 500.0, "INR", (160, 160, 140), [(130, 140, 120)],
          ["stone grey", "Red Fort"], BrightnessBias.DARK),
    _note("₹2000", 2000.0, "INR", (200, 80, 160), [(190, 110, 170)],
          ["magenta", "Mangalyaan"], BrightnessBias.DARK),
    _coin("₹1", 1.0, "INR", (180, 180, 180), [], ["stainless steel"]),
    _coin("₹2", 2.0, "INR", (160, 160, 180), [], ["stainless steel"]),
    _coin("₹5", 5.0, "INR", (200, 160, 100), [], ["nickel brass"]),
    _coin("₹10", 10.0, "INR", (200, 180, 120), [(170, 170, 170)], ["bimetallic", "brass ring"]),
    _coin("₹20", 20.0, "INR", (220, 180, 100), [(175, 175, 175)], ["bimetallic", "twelve-sided"]),
)

BUILTIN_TEMPLATES: Dict[str, Tuple[CurrencyTemplate, ...]] = {
    "USD": USD_TEMPLATES,
    "INR": INR_TEMPLATES,
}
