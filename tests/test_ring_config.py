import pytest

from wayedges.common import DEFAULT_CURVE, ConfigError, Curve
from wayedges.ring_config import RingConfig, RingPreset
from wayedges.widget_common import color_translate


def test_defaults():
    cfg = RingConfig.from_dict({"preset": {"type": "ram"}})
    assert cfg.bg_color == color_translate("#9F9F9F")
    assert cfg.fg_color == color_translate("#F1FA8C")
    assert cfg.text_transition_ms == 300
    assert cfg.animation_curve is DEFAULT_CURVE
    assert cfg.prefix is None and cfg.suffix is None
    assert cfg.prefix_hide is False
    assert cfg.font_size == 2 * cfg.radius


def test_font_size_follows_radius():
    cfg = RingConfig.from_dict({"radius": 7, "preset": {"type": "swap"}})
    assert cfg.radius == 7
    assert cfg.font_size == 2 * cfg.radius


def test_explicit_font_size_wins():
    cfg = RingConfig.from_dict({"radius": 7, "font_size": 9, "preset": {"type": "swap"}})
    assert cfg.font_size == 9


def test_prefix_and_curve():
    cfg = RingConfig.from_dict(
        {"prefix": "CPU {float}", "animation_curve": "linear", "preset": {"type": "cpu"}}
    )
    assert cfg.prefix == "CPU {float}"
    assert cfg.animation_curve is Curve.LINEAR


def test_ram_preset_default_interval():
    preset = RingPreset.from_value({"type": "ram"})
    assert preset.kind == "ram"
    assert preset.update_interval == 1000


def test_cpu_preset_core():
    preset = RingPreset.from_value({"type": "cpu", "core": 2, "update_interval": 500})
    assert preset.core == 2
    assert preset.update_interval == 500


def test_disk_preset_default_partition():
    assert RingPreset.from_value({"type": "disk"}).partition == "/"
    assert RingPreset.from_value({"type": "disk", "partition": "/home"}).partition == "/home"


def test_custom_preset_requires_fields():
    with pytest.raises(ConfigError, match="update_interval"):
        RingPreset.from_value({"type": "custom", "cmd": "echo 1"})
    with pytest.raises(ConfigError, match="cmd"):
        RingPreset.from_value({"type": "custom", "update_interval": 1000})


def test_custom_preset():
    preset = RingPreset.from_value({"type": "custom", "update_interval": 1000, "cmd": "echo 1"})
    assert preset.cmd == "echo 1"


def test_missing_preset():
    with pytest.raises(ConfigError, match="preset"):
        RingConfig.from_dict({})


def test_unknown_preset():
    with pytest.raises(ConfigError, match="unknown variant"):
        RingPreset.from_value({"type": "gpu"})


def test_prefix_must_be_string():
    with pytest.raises(ConfigError):
        RingConfig.from_dict({"prefix": 1, "preset": {"type": "ram"}})