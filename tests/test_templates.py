from __future__ import annotations

import json
from pathlib import Path

import pytest

from currency_recognition import BrightnessBias, CurrencyTemplate, ShapeClass, TemplateLibrary
from currency_recognition.templates import BUILTIN_TEMPLATES


def test_builtin_tables_cover_notes_and_coins() -> None:
    for code in BUILTIN_TEMPLATES:
        library = TemplateLibrary.builtin(code)
        assert len(library.for_shape(ShapeClass.NOTE)) >= 6
        assert len(library.for_shape(ShapeClass.COIN)) >= 5
        assert {template.currency for template in library} == {code}


def test_usd_denominations() -> None:
    library = TemplateLibrary.builtin("usd")

    notes = [template.denomination for template in library.for_shape(ShapeClass.NOTE)]
    coins = [template.denomination for template in library.for_shape(ShapeClass.COIN)]
    assert notes == ["$1", "$5", "$10", "$20", "$50", "$100"]
    assert coins == ["$0.01", "$0.05", "$0.10", "$0.25", "$0.50", "$1.00"]


def test_unknown_builtin_currency() -> None:
    with pytest.raises(ValueError, match="EUR"):
        TemplateLibrary.builtin("EUR")


def test_empty_library_is_rejected() -> None:
    with pytest.raises(ValueError):
        TemplateLibrary([])


def test_template_colors_start_with_primary() -> None:
    template = TemplateLibrary.builtin("USD").for_shape(ShapeClass.NOTE)[3]

    assert template.colors == ((120, 160, 100), (170, 190, 150))


def test_from_json(tmp_path: Path) -> None:
    path = tmp_path / "eur.json"
    path.write_text(
        json.dumps(
            {
                "templates": [
                    {
                        "denomination": "€5",
                        "value": 5,
                        "currency": "eur",
                        "shape": "note",
                        "primary_color": [150, 150, 140],
                        "alternate_colors": [[120, 130, 120]],
                        "features": ["grey", "classical architecture"],
                        "brightness_bias": "bright",
                    },
                    {
                        "denomination": "€2",
                        "value": 2,
                        "currency": "EUR",
                        "shape": "coin",
                        "primary_color": [190, 190, 180],
                    },
                ]
            }
        ),
        encoding="utf-8",
    )

    library = TemplateLibrary.from_json(path)

    note, coin = list(library)
    assert note == CurrencyTemplate(
        "€5",
        5.0,
        "EUR",
        ShapeClass.NOTE,
        (150, 150, 140),
        ((120, 130, 120),),
        ("grey", "classical architecture"),
        BrightnessBias.BRIGHT,
    )
    assert coin.brightness_bias is BrightnessBias.NONE
    assert coin.alternate_colors == ()


def test_from_json_accepts_plain_list(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    entry = {"denomination": "X", "value": 1, "currency": "TST", "shape": "coin", "primary_color": [1, 2, 3]}
    path.write_text(json.dumps([entry]), encoding="utf-8")

    assert len(TemplateLibrary.from_json(path)) == 1


def test_from_json_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TemplateLibrary.from_json(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps([{"denomination": "X", "value": 1}]), encoding="utf-8")
    with pytest.raises(ValueError, match="currency"):
        TemplateLibrary.from_json(bad)

    bad_color = {"denomination": "X", "value": 1, "currency": "T", "shape": "note", "primary_color": [300, 0, 0]}
    bad.write_text(json.dumps([bad_color]), encoding="utf-8")
    with pytest.raises(ValueError, match="0, 255"):
        TemplateLibrary.from_json(bad)

    empty = tmp_path / "empty.json"
    empty.write_text(json.dumps({"templates": []}), encoding="utf-8")
    with pytest.raises(ValueError, match="at least one"):
        TemplateLibrary.from_json(empty)
