"""Configuration of the workspace indicator widget."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

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
from .widget_common import Color, CommonSize, color_translate, option_color_translate


@dataclass(frozen=True)
class NiriConf:
    """Options specific to the niri preset."""

    filter_empty: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NiriConf:
        data = _require_mapping(data, "niri config")
        return cls(filter_empty=_field(data, "filter_empty", _to_bool, True))


@dataclass(frozen=True)
class WorkspacePreset:
    """Which compositor the workspace widget talks to: ``hyprland`` or ``niri``."""

    kind: str
    niri: NiriConf | None = None

    @classmethod
    def from_value(cls, value: Any) -> WorkspacePreset:
        if isinstance(value, str):
            if value == "hyprland":
                return cls("hyprland")
            if value == "niri":
                return cls("niri", NiriConf())
            raise ConfigError(
                f"unknown variant `{value}`, expected one of `hyprland`, `niri`"
            )
        if not isinstance(value, Mapping):
            raise ConfigError(
                "Failed to deserialize as object: expected a string or an object"
            )
        if "type" not in value:
            raise ConfigError("Failed to deserialize as object: missing field `type`")
        tag = value["type"]
        if tag == "hyprland":
            return cls("hyprland")
        if tag == "niri":
            try:
                return cls("niri", NiriConf.from_dict(value))
            except ConfigError as err:
                raise ConfigError(f"Failed to deserialize as object: {err}") from err
        raise ConfigError(
            f"Failed to deserialize as object: unknown variant `{tag}`, "
            "expected one of `hyprland`, `niri`"
        )

    def __str__(self) -> str:
        if self.kind == "niri" and self.niri is not None:
            flag = "true" if self.niri.filter_empty else "false"
            return f"Niri(filter_empty: {flag})"
        return "Hyprland"


_DEFAULT_COLOR = color_translate("#003049")
_FOCUS_COLOR = color_translate("#669bbc")
_ACTIVE_COLOR = color_translate("#aaa")


@dataclass
class WorkspaceConfig:
    """Configuration of a workspace widget."""

    size: CommonSize
    preset: WorkspacePreset
    gap: int = 5
    active_increase: float = 0.5
    workspace_transition_duration: int = 300
    animation_curve: Curve = DEFAULT_CURVE
    pop_duration: int = 1000
    default_color: Color = _DEFAULT_COLOR
    focus_color: Color = _FOCUS_COLOR
    active_color: Color = _ACTIVE_COLOR
    hover_color: Color | None = None
    invert_direction: bool = False
    output_name: str | None = field(default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceConfig:
        data = _require_mapping(data, "workspace config")
        return cls(
            size=CommonSize.from_dict(data),
            preset=_field(data, "preset", WorkspacePreset.from_value),
            gap=_field(data, "gap", _to_i32, 5),
            active_increase=_field(data, "active_increase", _to_float, 0.5),
            workspace_transition_duration=_field(
                data, "workspace_transition_duration", _to_u64, 300
            ),
            animation_curve=_field(data, "animation_curve", parse_curve, DEFAULT_CURVE),
            pop_duration=_field(data, "pop_duration", _to_u64, 1000),
            default_color=_field(data, "default_color", color_translate, _DEFAULT_COLOR),
            focus_color=_field(data, "focus_color", color_translate, _FOCUS_COLOR),
            active_color=_field(data, "active_color", color_translate, _ACTIVE_COLOR),
            hover_color=_field(data, "hover_color", option_color_translate, None),
            invert_direction=_field(data, "invert_direction", _to_bool, False),
            output_name=_field(data, "output_name", _optional(_to_str), None),
        )