"""Configuration of the text widget inside a wrap box."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .common import _field, _optional, _require_mapping, _to_i32, _to_str, _to_u64
from .slide_config import _interval_command, _tagged
from .widget_common import COLOR_BLACK, Color, color_translate

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class TextPreset:
    """What the text shows: the ``time`` or the output of a ``custom`` command."""

    kind: str
    format: str = DEFAULT_TIME_FORMAT
    time_zone: str | None = None
    update_interval: int = 1000
    update_with_interval_ms: tuple[int, str] | None = None

    @classmethod
    def from_value(cls, value: Any) -> TextPreset:
        kind, data = _tagged(value, "text preset", ("time", "custom"))
        if kind == "custom":
            return cls(
                kind,
                update_with_interval_ms=_field(
                    data, "update_with_interval_ms", _interval_command
                ),
            )
        return cls(
            kind,
            format=_field(data, "format", _to_str, DEFAULT_TIME_FORMAT),
            time_zone=_field(data, "time_zone", _optional(_to_str), None),
            update_interval=_field(data, "update_interval", _to_u64, 1000),
        )


@dataclass
class TextConfig:
    """Configuration of a text widget."""

    preset: TextPreset
    fg_color: Color = COLOR_BLACK
    font_size: int = 24
    font_family: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TextConfig:
        data = _require_mapping(data, "text config")
        return cls(
            preset=_field(data, "preset", TextPreset.from_value),
            fg_color=_field(data, "fg_color", color_translate, COLOR_BLACK),
            font_size=_field(data, "font_size", _to_i32, 24),
            font_family=_field(data, "font_family", _optional(_to_str), None),
        )