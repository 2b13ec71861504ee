import json
from pathlib import Path

import pytest

from docx2html.core import presets
from docx2html.core.presets import Presets, apply_preset, get_preset, preset_names
from docx2html.resources import loader
from docx2html.utils.config import StyleOptions


PRESETS_FILE = Path(loader.__file__).parent / "presets.json"


def shipped() -> dict:
    return json.loads(PRESETS_FILE.read_text(encoding="utf-8"))


def test_shipped_presets() -> None:
    assert preset_names() == ["default", "clean", "professional", "print", "web"]


def test_presets_are_complete() -> None:
    fields = set(StyleOptions.field_names())
    for name, values in shipped().items():
        assert set(values) == fields, name


def test_default_preset_matches_defaults() -> None:
    assert StyleOptions.from_dict(get_preset("default")) == StyleOptions()


def test_apply_clean_reproduces_literals() -> None:
    options = apply_preset(StyleOptions(font_size=99, custom_css="x"), "clean")
    for name, value in shipped()["clean"].items():
        assert getattr(options, name) == value, name


def test_second_preset_wins() -> None:
    options = apply_preset(apply_preset(StyleOptions(), "print"), "web")
    assert options == StyleOptions.from_dict(shipped()["web"])


def test_apply_is_idempotent() -> None:
    once = apply_preset(StyleOptions(), "professional")
    assert apply_preset(once, "professional") == once


def test_unknown_preset() -> None:
    with pytest.raises(KeyError, match="Available"):
        apply_preset(StyleOptions(), "neon")


def test_partial_preset_keeps_other_fields(monkeypatch) -> None:
    monkeypatch.setattr(Presets, "_PRESETS", {"tiny": {"font_size": 10, "bogus": 1}})
    options = apply_preset(StyleOptions(text_color="#abcdef"), "tiny")
    assert options.font_size == 10
    assert options.text_color == "#abcdef"


def test_get_preset_returns_copy() -> None:
    get_preset("clean")["font_size"] = 1
    assert presets.get_preset("clean")["font_size"] != 1
