"""Configuration of the slider widget and its presets."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .common import (
    DEFAULT_CURVE,
    ConfigError,
    Curve,
    _field,
    _optional,
    _require_mapping,
    _to_bool,
    _to_float,
    _to_i32,
    _to_str,
    _to_u64,
    parse_curve,
)
from .widget_common import (
    COLOR_BLACK,
    Color,
    CommonSize,
    color_translate,
    option_color_translate,
    parse_key_event_map,
)


def _tagged(
    value: Any, what: str, variants: Sequence[str]
) -> tuple[str, Mapping[str, Any]]:
    """Split an internally tagged object into its ``type`` and its fields."""
    data = _require_mapping(value, what)
    if "type" not in data:
        raise ConfigError(f"{what}: missing field `type`")
    tag = data["type"]
    if tag not in variants:
        expected = ", ".join(f"`{v}`" for v in variants)
        raise ConfigError(f"{what}: unknown variant `{tag}`, expected one of {expected}")
    return tag, data


def _interval_command(value: Any) -> tuple[int, str]:
    """Parse an ``[interval_ms, command]`` pair."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ConfigError("expected a pair of [interval, command]")
    if len(value) != 2:
        raise ConfigError(f"expected a pair, got {len(value)} elements")
    return _to_u64(value[0]), _to_str(value[1])


@dataclass(frozen=True)
class PulseAudioConfig:
    """Speaker or microphone slider options."""

    mute_color: Color = COLOR_BLACK
    mute_text_color: Color | None = None
    animation_curve: Curve = DEFAULT_CURVE
    device: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PulseAudioConfig:
        return cls(
            mute_color=_field(data, "mute_color", color_translate, COLOR_BLACK),
            mute_text_color=_field(data, "mute_text_color", option_color_translate, None),
            animation_curve=_field(data, "animation_curve", parse_curve, DEFAULT_CURVE),
            device=_field(data, "device", _optional(_to_str), None),
        )


@dataclass(frozen=True)
class BacklightConfig:
    """Backlight slider options."""

    device: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BacklightConfig:
        return cls(device=_field(data, "device", _optional(_to_str), None))


@dataclass(frozen=True)
class CustomConfig:
    """Slider driven by user commands."""

    interval_update: tuple[int, str] = (0, "")
    on_change: str | None = None
    event_map: dict[int, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CustomConfig:
        return cls(
            interval_update=_field(data, "interval_update", _interval_command, (0, "")),
            on_change=_field(data, "on_change", _to_str, None),
            event_map=_field(data, "event_map", parse_key_event_map, {}),
        )


PresetConfig = Union[PulseAudioConfig, BacklightConfig, CustomConfig]

_PRESETS = {
    "speaker": PulseAudioConfig,
    "microphone": PulseAudioConfig,
    "backlight": BacklightConfig,
    "custom": CustomConfig,
}


@dataclass(frozen=True)
class SlidePreset:
    """A slider preset: ``speaker``, ``microphone``, ``backlight`` or ``custom``."""

    kind: str = "custom"
    config: PresetConfig = field(default_factory=CustomConfig)

    @classmethod
    def from_value(cls, value: Any) -> SlidePreset:
        kind, data = _tagged(value, "slide preset", list(_PRESETS))
        return cls(kind, _PRESETS[kind].from_dict(data))


_BG_COLOR = color_translate("#808080")
_FG_COLOR = color_translate("#FFB847")
_BORDER_COLOR = color_translate("#646464")


@dataclass
class SlideConfig:
    """Configuration of a slider widget."""

    size: CommonSize
    border_width: int = 3
    obtuse_angle: float = 120.0
    radius: float = 20.0
    bg_color: Color = _BG_COLOR
    fg_color: Color = _FG_COLOR
    border_color: Color = _BORDER_COLOR
    fg_text_color: Color | None = None
    bg_text_color: Color | None = None
    redraw_only_on_internal_update: bool = False
    preset: SlidePreset = field(default_factory=SlidePreset)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SlideConfig:
        data = _require_mapping(data, "slide config")
        return cls(
            size=CommonSize.from_dict(data),
            border_width=_field(data, "border_width", _to_i32, 3),
            obtuse_angle=_field(data, "obtuse_angle", _to_float, 120.0),
            radius=_field(data, "radius", _to_float, 20.0),
            bg_color=_field(data, "bg_color", color_translate, _BG_COLOR),
            fg_color=_field(data, "fg_color", color_translate, _FG_COLOR),
            border_color=_field(data, "border_color", color_translate, _BORDER_COLOR),
            fg_text_color=_field(data, "fg_text_color", option_color_translate, None),
            bg_text_color=_field(data, "bg_text_color", option_color_translate, None),
            redraw_only_on_internal_update=_field(
                data, "redraw_only_on_internal_update", _to_bool, False
            ),
            preset=_field(data, "preset", SlidePreset.from_value, SlidePreset()),
        )