"""Time-based toggle animations with easing curves."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Iterator
from enum import Enum

from .common import Curve

Clock = Callable[[], float]
_Easing = Callable[[float], float]


def _linear(x: float) -> float:
    return x


def _quad_y(x: float) -> float:
    return x * (2.0 - x)


def _quad_x(y: float) -> float:
    return 1.0 - math.sqrt(max(1.0 - y, 0.0))


def _cubic_y(x: float) -> float:
    d = x - 1.0
    return 1.0 + d * d * d


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1.0 / 3.0), v)


def _cubic_x(y: float) -> float:
    return 1.0 + _cbrt(y - 1.0)


def _expo_forward(x: float) -> float:
    return 1.0 - 2.0 ** (-10.0 * x)


def _expo_inverse(y: float) -> float:
    return -math.log(1.0 - y) / (10.0 * math.log(2.0))


# (progress from time, time from progress)
_CURVES: dict[Curve, tuple[_Easing, _Easing]] = {
    Curve.LINEAR: (_linear, _linear),
    Curve.EASE_QUAD: (_quad_y, _quad_x),
    Curve.EASE_CUBIC: (_cubic_y, _cubic_x),
    Curve.EASE_EXPO: (_expo_inverse, _expo_forward),
}


class ToggleDirection(Enum):
    """Which way a toggle animation runs."""

    FORWARD = "forward"
    BACKWARD = "backward"

    def __invert__(self) -> ToggleDirection:
        if self is ToggleDirection.FORWARD:
            return ToggleDirection.BACKWARD
        return ToggleDirection.FORWARD

    @classmethod
    def from_bool(cls, value: bool) -> ToggleDirection:
        return cls.FORWARD if value else cls.BACKWARD


class Animation:
    """Eased progress from 0 to 1 over ``time_cost`` seconds."""

    def __init__(
        self, time_cost: float, curve: Curve, clock: Clock = time.monotonic
    ) -> None:
        self.time_cost = time_cost
        self._clock = clock
        self._get_y, self._get_x = _CURVES[curve]
        self.start_time = clock()
        self._cache_y = 0.0

    def refresh(self) -> None:
        """Recompute progress for the current time."""
        elapsed = self._clock() - self.start_time
        if self.time_cost <= 0:
            x = math.inf if elapsed > 0 else 0.0
        else:
            x = elapsed / self.time_cost
        if x >= 1.0:
            self._cache_y = 1.0
        elif x <= 0.0:
            self._cache_y = 0.0
        else:
            self._cache_y = self._get_y(x)

    def flip(self) -> None:
        """Restart so that progress continues from ``1 - progress``."""
        now = self._clock()
        if now - self.start_time < self.time_cost:
            self.start_time = now - self.time_cost * self._get_x(1.0 - self._cache_y)
        else:
            self.start_time = now
        self.refresh()

    def progress(self) -> float:
        return self._cache_y


class ToggleAnimation:
    """An animation that can be run forward or backward and reversed midway."""

    def __init__(
        self, time_cost: float, curve: Curve, clock: Clock = time.monotonic
    ) -> None:
        self.direction = ToggleDirection.BACKWARD
        self._base = Animation(time_cost, curve, clock)

    def refresh(self) -> None:
        self._base.refresh()

    def progress(self) -> float:
        p = self._base.progress()
        return p if self.direction is ToggleDirection.FORWARD else 1.0 - p

    def set_direction(self, to_direction: ToggleDirection) -> None:
        if self.direction is to_direction:
            return
        self._base.flip()
        self.direction = to_direction

    def flip(self) -> None:
        self.set_direction(~self.direction)

    def progress_abs(self) -> float:
        return self._base.progress()

    def is_in_progress(self) -> bool:
        p = self.progress()
        return 0.0 < p < 1.0


class AnimationList:
    """A set of toggle animations refreshed together."""

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._inner: set[ToggleAnimation] = set()

    def __len__(self) -> int:
        return len(self._inner)

    def __contains__(self, item: object) -> bool:
        return item in self._inner

    def __iter__(self) -> Iterator[ToggleAnimation]:
        return iter(self._inner)

    def has_in_progress(self) -> bool:
        return any(a.is_in_progress() for a in self._inner)

    def new_transition(self, time_cost: int, curve: Curve) -> ToggleAnimation:
        """Create and track an animation lasting ``time_cost`` milliseconds."""
        item = ToggleAnimation(time_cost / 1000.0, curve, self._clock)
        self._inner.add(item)
        return item

    def refresh(self) -> None:
        for item in self._inner:
            item.refresh()

    def extend_list(self, other: AnimationList) -> None:
        self._inner.update(other._inner)

    def remove_item(self, item: ToggleAnimation) -> None:
        self._inner.discard(item)


def calculate_transition(y: float, value_range: tuple[float, float]) -> float:
    """Interpolate within ``value_range`` by progress ``y``."""
    low, high = value_range
    return low + (high - low) * y