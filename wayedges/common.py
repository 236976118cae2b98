"""Shared configuration types and value parsers."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any, TypeVar

T = TypeVar("T")


class ConfigError(ValueError):
    """Raised when a configuration value cannot be interpreted."""


class Curve(Enum):
    """Easing curve of an animation."""

    LINEAR = "linear"
    EASE_QUAD = "ease-quad"
    EASE_CUBIC = "ease-cubic"
    EASE_EXPO = "ease-expo"


DEFAULT_CURVE = Curve.EASE_CUBIC


class Anchor(IntFlag):
    """Screen edges a layer surface can be anchored to."""

    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8


class Layer(Enum):
    """Stacking layer of a layer surface."""

    BACKGROUND = 0
    BOTTOM = 1
    TOP = 2
    OVERLAY = 3


@dataclass(frozen=True)
class NumOrRelative:
    """An absolute number, or a fraction of some maximum when ``relative``."""

    value: float = 0.0
    relative: bool = False

    def is_relative(self) -> bool:
        return self.relative

    def get_num(self) -> float:
        if self.relative:
            raise ConfigError("relative, not num")
        return self.value

    def get_rel(self) -> float:
        if not self.relative:
            raise ConfigError("num, not relative")
        return self.value

    def is_valid_length(self) -> bool:
        return self.value > 0.0

    def calculate_relative(self, max_value: float) -> NumOrRelative:
        """Return the absolute value for ``max_value``; absolute values are kept."""
        if self.relative:
            return NumOrRelative(self.value * max_value)
        return self


_PERCENT_RE = re.compile(r"(\d+(\.\d+)?)%\s*(.*)", re.ASCII)

_EDGES = {
    "top": Anchor.TOP,
    "left": Anchor.LEFT,
    "bottom": Anchor.BOTTOM,
    "right": Anchor.RIGHT,
}

_LAYERS = {
    "background": Layer.BACKGROUND,
    "bottom": Layer.BOTTOM,
    "top": Layer.TOP,
    "overlay": Layer.OVERLAY,
}


def parse_curve(value: Any) -> Curve:
    """Parse a kebab-case curve name."""
    if isinstance(value, Curve):
        return value
    if isinstance(value, str):
        try:
            return Curve(value)
        except ValueError:
            pass
    expected = ", ".join(c.value for c in Curve)
    raise ConfigError(f"unknown curve {value!r}, expected one of: {expected}")


def parse_num_or_relative(value: Any) -> NumOrRelative:
    """Parse a number, or a percentage string such as ``"40%"``."""
    if isinstance(value, NumOrRelative):
        return value
    if isinstance(value, bool):
        raise ConfigError("expected a number or a string")
    if isinstance(value, (int, float)):
        return NumOrRelative(float(value))
    if isinstance(value, str):
        match = _PERCENT_RE.fullmatch(value)
        if match is None:
            raise ConfigError("Input does not match the expected format.")
        return NumOrRelative(float(match.group(1)) * 0.01, relative=True)
    raise ConfigError("expected a number or a string")


def parse_optional_edge(value: Any) -> Anchor | None:
    """Parse an edge name; ``None`` stays ``None``."""
    if value is None:
        return None
    if isinstance(value, str) and value in _EDGES:
        return _EDGES[value]
    raise ConfigError(
        f"invalid value {value!r}: edge only support: left, right, top, bottom"
    )


def parse_edge(value: Any) -> Anchor:
    """Parse a required edge name."""
    edge = parse_optional_edge(value)
    if edge is None:
        raise ConfigError("edge is not optional")
    return edge


def parse_layer(value: Any) -> Layer:
    """Parse a layer name."""
    if isinstance(value, str) and value in _LAYERS:
        return _LAYERS[value]
    raise ConfigError(
        f"invalid value {value!r}: layer only support: background, bottom, top, overlay"
    )


# ---- helpers shared by the configuration modules ----

_REQUIRED = object()


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"{what} must be an object")
    return data


def _field(
    data: Mapping[str, Any],
    key: str,
    convert: Callable[[Any], T],
    default: Any = _REQUIRED,
) -> T:
    if key not in data:
        if default is _REQUIRED:
            raise ConfigError(f"missing field `{key}`")
        return default
    try:
        return convert(data[key])
    except ConfigError as err:
        raise ConfigError(f"{key}: {err}") from err


def _int_range(low: int, high: int) -> Callable[[Any], int]:
    def convert(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"expected an integer, got {value!r}")
        if not low <= value <= high:
            raise ConfigError(f"integer {value} out of range")
        return value

    return convert


_to_i32 = _int_range(-(2**31), 2**31 - 1)
_to_u64 = _int_range(0, 2**64 - 1)


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"expected a number, got {value!r}")
    return float(value)


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"expected a boolean, got {value!r}")
    return value


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"expected a string, got {value!r}")
    return value


def _optional(convert: Callable[[Any], T]) -> Callable[[Any], T | None]:
    def wrapped(value: Any) -> T | None:
        return None if value is None else convert(value)

    return wrapped