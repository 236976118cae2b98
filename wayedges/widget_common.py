"""Configuration pieces shared by widgets, and the button widget."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .common import (
    Anchor,
    ConfigError,
    NumOrRelative,
    _field,
    _require_mapping,
    _to_i32,
    parse_num_or_relative,
)

Color = tuple[int, int, int, int]

COLOR_BLACK: Color = (0, 0, 0, 255)
COLOR_WHITE: Color = (255, 255, 255, 255)

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})", re.ASCII)
_KEY_RE = re.compile(r"\+?\d+", re.ASCII)


def _parse_color(text: str) -> Color:
    match = _HEX_RE.fullmatch(text)
    if match is None:
        raise ConfigError(f"invalid color: {text!r}")
    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return (r, g, b, a)


def option_color_translate(value: Any) -> Color | None:
    """Parse an optional color string."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError("expected a color string")
    return _parse_color(value)


def color_translate(value: Any) -> Color:
    """Parse a required color string."""
    color = option_color_translate(value)
    if color is None:
        raise ConfigError("color is not optional")
    return color


def parse_key_event_map(value: Any) -> dict[int, str]:
    """Parse a mapping of mouse button codes (as strings) to commands."""
    mapping = _require_mapping(value, "event map")
    result: dict[int, str] = {}
    for key, command in mapping.items():
        if not isinstance(key, str) or _KEY_RE.fullmatch(key) is None:
            raise ConfigError(f"invalid key: {key!r}")
        code = int(key)
        if code >= 2**32:
            raise ConfigError(f"key out of range: {key!r}")
        if not isinstance(command, str):
            raise ConfigError(f"command for key {key!r} must be a string")
        result[code] = command
    return result


@dataclass
class CommonSize:
    """Thickness and length of a widget along its edge."""

    thickness: NumOrRelative
    length: NumOrRelative

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommonSize:
        data = _require_mapping(data, "size")
        return cls(
            thickness=_field(data, "thickness", parse_num_or_relative),
            length=_field(data, "length", parse_num_or_relative),
        )

    def calculate_relative(self, monitor_size: tuple[int, int], edge: Anchor) -> None:
        """Resolve relative sizes against the monitor size for the given edge."""
        width, height = monitor_size
        if edge in (Anchor.LEFT, Anchor.RIGHT):
            thickness_max, length_max = width, height
        elif edge in (Anchor.TOP, Anchor.BOTTOM):
            thickness_max, length_max = height, width
        else:
            raise ValueError(f"not a single edge: {edge!r}")
        self.thickness = self.thickness.calculate_relative(float(thickness_max))
        self.length = self.length.calculate_relative(float(length_max))


_BTN_COLOR = _parse_color("#7B98FF")


@dataclass
class BtnConfig:
    """Configuration of a button widget."""

    size: CommonSize
    color: Color = _BTN_COLOR
    border_width: int = 3
    border_color: Color = COLOR_BLACK
    event_map: dict[int, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BtnConfig:
        data = _require_mapping(data, "button config")
        return cls(
            size=CommonSize.from_dict(data),
            color=_field(data, "color", color_translate, _BTN_COLOR),
            border_width=_field(data, "border_width", _to_i32, 3),
            border_color=_field(data, "border_color", color_translate, COLOR_BLACK),
            event_map=_field(data, "event_map", parse_key_event_map, {}),
        )