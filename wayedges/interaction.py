"""Pointer handling for a widget: hover and button state, and pop/pin state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .animation import ToggleAnimation, ToggleDirection

log = logging.getLogger(__name__)

Position = tuple[float, float]

# Linux input event code of the middle mouse button.
BTN_MIDDLE = 0x112


class PointerKind(Enum):
    """Kind of a raw pointer event from the compositor."""

    ENTER = "enter"
    LEAVE = "leave"
    MOTION = "motion"
    PRESS = "press"
    RELEASE = "release"
    AXIS = "axis"


@dataclass(frozen=True)
class PointerEvent:
    """A raw pointer event on a widget surface."""

    kind: PointerKind
    position: Position = (0.0, 0.0)
    button: int = 0
    horizontal: float | None = None
    vertical: float | None = None


class MouseEventKind(Enum):
    """Kind of a mouse event passed on to a widget."""

    PRESS = "press"
    RELEASE = "release"
    ENTER = "enter"
    LEAVE = "leave"
    MOTION = "motion"


@dataclass(frozen=True)
class MouseEvent:
    """A filtered mouse event; ``position`` is ``None`` only for ``LEAVE``."""

    kind: MouseEventKind
    position: Position | None = None
    button: int | None = None


@dataclass
class MouseStateData:
    """Whether the pointer is over the widget, and which button is held."""

    hovering: bool = False
    pressing: int | None = None


@dataclass
class MouseState:
    """Turns raw pointer events into mouse events, tracking hover and press."""

    data: MouseStateData = field(default_factory=MouseStateData)
    mouse_debug: bool = False

    def is_hovering(self) -> bool:
        return self.data.hovering

    def from_pointer(self, event: PointerEvent) -> MouseEvent | None:
        """Update the state for ``event``; return the event to pass on, if any."""
        kind = event.kind
        if kind is PointerKind.ENTER:
            self.data.hovering = True
            return MouseEvent(MouseEventKind.ENTER, event.position)
        if kind is PointerKind.LEAVE:
            self.data.hovering = False
            return MouseEvent(MouseEventKind.LEAVE)
        if kind is PointerKind.MOTION:
            return MouseEvent(MouseEventKind.MOTION, event.position)
        if kind is PointerKind.PRESS:
            return self._press(event.button, event.position)
        if kind is PointerKind.RELEASE:
            return self._release(event.button, event.position)
        log.debug("Scroll H:%r, V:%r", event.horizontal, event.vertical)
        return None

    def _press(self, button: int, pos: Position) -> MouseEvent | None:
        if self.mouse_debug:
            log.debug("Mouse Debug info: key pressed: %d", button)
        if self.data.pressing is not None:
            return None
        self.data.pressing = button
        return MouseEvent(MouseEventKind.PRESS, pos, button)

    def _release(self, button: int, pos: Position) -> MouseEvent | None:
        if self.mouse_debug:
            log.debug("Mouse Debug info: key released: %d", button)
        if self.data.pressing != button:
            return None
        self.data.pressing = None
        return MouseEvent(MouseEventKind.RELEASE, pos, button)


@dataclass
class WindowPopState:
    """Whether a widget is pinned open, and its pending temporary pop-up.

    ``pop_state`` holds a token for the current temporary pop-up; a timer that
    wants to hide the widget again checks that its token is still the one held.
    """

    pop_animation: ToggleAnimation
    pin_state: bool = False
    pop_state: object | None = None
    pin_key: int = BTN_MIDDLE
    pop_duration: float = 1.0

    def invalidate_pop(self) -> None:
        self.pop_state = None

    def toggle_pin(self, is_hovering: bool) -> None:
        self.invalidate_pop()
        self.pin_state = not self.pin_state
        if is_hovering:
            return
        self.pop_animation.set_direction(ToggleDirection.from_bool(self.pin_state))

    def enter(self) -> None:
        self.invalidate_pop()
        if self.pin_state:
            return
        self.pop_animation.set_direction(ToggleDirection.FORWARD)

    def leave(self) -> None:
        self.invalidate_pop()
        if self.pin_state:
            return
        self.pop_animation.set_direction(ToggleDirection.BACKWARD)