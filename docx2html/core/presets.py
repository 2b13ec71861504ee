"""
Named style presets. Each preset is a complete StyleOptions literal
shipped in resources/presets.json.
"""
import dataclasses
import logging

from ..resources.loader import load_json
from ..utils.config import StyleOptions


log = logging.getLogger("docx2html")


class Presets:
    """Lazily loaded registry of the packaged presets."""
    _PRESETS: dict[str, dict] = {}

    @classmethod
    def load(cls):
        cls._PRESETS = load_json("presets.json")
        log.debug(f"Loaded presets: {list(cls._PRESETS)}")

    @classmethod
    def all(cls) -> dict[str, dict]:
        if not cls._PRESETS:
            cls.load()
        return cls._PRESETS


def preset_names() -> list[str]:
    return list(Presets.all())


def get_preset(name: str) -> dict:
    """Returns a copy of the preset's values. Raises KeyError for unknown names."""
    presets = Presets.all()
    if name not in presets:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(presets)}")
    return dict(presets[name])


def apply_preset(options: StyleOptions, name: str) -> StyleOptions:
    """
    Returns a copy of `options` with every field named by the preset overwritten.
    Fields the preset does not mention keep their current value.
    """
    values = get_preset(name)
    known = set(StyleOptions.field_names())
    unknown = set(values) - known
    if unknown:
        log.warning(f"Preset '{name}' has unknown fields, ignoring: {sorted(unknown)}")
    return dataclasses.replace(options, **{k: v for k, v in values.items() if k in known})
