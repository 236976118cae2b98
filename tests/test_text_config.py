import pytest

from wayedges.common import ConfigError
from wayedges.text_config import TextConfig, TextPreset
from wayedges.widget_common import COLOR_BLACK, color_translate


def test_time_preset_defaults():
    preset = TextPreset.from_value({"type": "time"})
    assert preset.kind == "time"
    assert preset.format == "%Y-%m-%d %H:%M:%S"
    assert preset.time_zone is None
    assert preset.update_interval == 1000


def test_time_preset_overrides():
    preset = TextPreset.from_value(
        {"type": "time", "format": "%H:%M", "time_zone": "UTC", "update_interval": 60000}
    )
    assert preset.format == "%H:%M"
    assert preset.time_zone == "UTC"
    assert preset.update_interval == 60000


def test_custom_preset():
    preset = TextPreset.from_value(
        {"type": "custom", "update_with_interval_ms": [2000, "date"]}
    )
    assert preset.update_with_interval_ms == (2000, "date")


def test_custom_preset_requires_interval():
    with pytest.raises(ConfigError, match="update_with_interval_ms"):
        TextPreset.from_value({"type": "custom"})


def test_config_defaults():
    cfg = TextConfig.from_dict({"preset": {"type": "time"}})
    assert cfg.fg_color == COLOR_BLACK
    assert cfg.font_size == 24
    assert cfg.font_family is None


def test_config_overrides():
    cfg = TextConfig.from_dict(
        {"preset": {"type": "time"}, "fg_color": "#abc", "font_family": "Mono"}
    )
    assert cfg.fg_color == color_translate("#aabbcc")
    assert cfg.font_family == "Mono"


def test_missing_preset():
    with pytest.raises(ConfigError, match="preset"):
        TextConfig.from_dict({})


def test_preset_must_be_object():
    with pytest.raises(ConfigError):
        TextPreset.from_value("time")