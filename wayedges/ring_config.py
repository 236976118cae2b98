"""Configuration of the ring widget inside a wrap box."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .common import (
    DEFAULT_CURVE,
    Curve,
    _field,
    _int_range,
    _optional,
    _require_mapping,
    _to_bool,
    _to_i32,
    _to_str,
    _to_u64,
    parse_curve,
)
from .slide_config import _tagged
from .widget_common import Color, color_translate

_to_usize = _int_range(0, 2**64 - 1)

_RING_KINDS = ("ram", "swap", "cpu", "battery", "disk", "custom")


@dataclass(frozen=True)
class RingPreset:
    """What a ring shows: ``ram``, ``swap``, ``cpu``, ``battery``, ``disk`` or ``custom``."""

    kind: str = "custom"
    update_interval: int = 1000
    core: int | None = None
    partition: str = "/"
    cmd: str = ""

    @classmethod
    def from_value(cls, value: Any) -> RingPreset:
        kind, data = _tagged(value, "ring preset", _RING_KINDS)
        if kind == "custom":
            return cls(
                kind,
                update_interval=_field(data, "update_interval", _to_u64),
                cmd=_field(data, "cmd", _to_str),
            )
        interval = _field(data, "update_interval", _to_u64, 1000)
        if kind == "cpu":
            return cls(kind, interval, core=_field(data, "core", _optional(_to_usize), None))
        if kind == "disk":
            return cls(kind, interval, partition=_field(data, "partition", _to_str, "/"))
        return cls(kind, interval)


_BG = color_translate("#9F9F9F")
_FG = color_translate("#F1FA8C")


@dataclass
class RingConfig:
    """Configuration of a ring widget."""

    preset: RingPreset
    radius: int = 13
    ring_width: int = 5
    bg_color: Color = _BG
    fg_color: Color = _FG
    text_transition_ms: int = 300
    animation_curve: Curve = DEFAULT_CURVE
    prefix: str | None = None
    prefix_hide: bool = False
    suffix: str | None = None
    suffix_hide: bool = False
    font_family: str | None = None
    font_size: int = 26

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RingConfig:
        data = _require_mapping(data, "ring config")
        radius = _field(data, "radius", _to_i32, 13)
        font_size = _field(data, "font_size", _optional(_to_i32), None)
        return cls(
            preset=_field(data, "preset", RingPreset.from_value),
            radius=radius,
            ring_width=_field(data, "ring_width", _to_i32, 5),
            bg_color=_field(data, "bg_color", color_translate, _BG),
            fg_color=_field(data, "fg_color", color_translate, _FG),
            text_transition_ms=_field(data, "text_transition_ms", _to_u64, 300),
            animation_curve=_field(data, "animation_curve", parse_curve, DEFAULT_CURVE),
            prefix=_field(data, "prefix", _to_str, None),
            prefix_hide=_field(data, "prefix_hide", _to_bool, False),
            suffix=_field(data, "suffix", _to_str, None),
            suffix_hide=_field(data, "suffix_hide", _to_bool, False),
            font_family=_field(data, "font_family", _optional(_to_str), None),
            font_size=radius * 2 if font_size is None else font_size,
        )