"""Workspace state per output, callback registry, and Hyprland data handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class WorkspaceData:
    """Workspace summary for one output.

    ``workspace_count`` counts from 1; ``focus`` and ``active`` are indexes from
    0, with -1 meaning none.
    """

    workspace_count: int = 1
    focus: int = 0
    active: int = 0


@dataclass
class WorkspaceCallback:
    """A receiver of workspace data for one output, with backend-specific options."""

    sender: Callable[[WorkspaceData], None]
    output: str
    data: Any = None


class WorkspaceCtx:
    """Registered callbacks, keyed by increasing ids."""

    def __init__(self) -> None:
        self.callbacks: dict[int, WorkspaceCallback] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self.callbacks)

    def add_cb(self, cb: WorkspaceCallback) -> int:
        cb_id = self._next_id
        self.callbacks[cb_id] = cb
        self._next_id += 1
        return cb_id

    def remove_cb(self, cb_id: int) -> None:
        self.callbacks.pop(cb_id, None)

    def call(self, data_func: Callable[[str, Any], WorkspaceData]) -> None:
        """Compute data for each callback's output and send it."""
        for cb in self.callbacks.values():
            data = data_func(cb.output, cb.data)
            if data.active < -1:
                raise ValueError(f"invalid active workspace: {data.active}")
            if data.focus >= 0 and data.focus != data.active:
                raise ValueError(
                    f"focused workspace {data.focus} is not the active one {data.active}"
                )
            cb.sender(data)


@dataclass(frozen=True)
class HyprWorkspace:
    """A Hyprland workspace and the monitor it is on."""

    id: int
    monitor: str


@dataclass(frozen=True)
class HyprMonitor:
    """A Hyprland monitor and the id of its active workspace."""

    name: str
    active_workspace_id: int


HyprMap = dict[str, tuple[list[HyprWorkspace], int]]


def sort_hypr_workspaces(
    workspaces: Iterable[HyprWorkspace], monitors: Iterable[HyprMonitor]
) -> HyprMap:
    """Group workspaces by monitor, sorted by id, with the active index of each."""
    grouped: dict[str, list[HyprWorkspace]] = {}
    for ws in workspaces:
        grouped.setdefault(ws.monitor, []).append(ws)

    monitors_by_name = {m.name: m for m in monitors}
    result: HyprMap = {}
    for name, items in grouped.items():
        items.sort(key=lambda w: w.id)
        monitor = monitors_by_name.get(name)
        if monitor is None:
            raise ValueError(f"no monitor named {name!r}")
        result[name] = (items, monitor.active_workspace_id - items[0].id)
    return result


def hypr_workspace_data(
    workspaces: list[HyprWorkspace], focus_id: int, active: int
) -> WorkspaceData:
    """Summarise a sorted, non-empty workspace list of one monitor."""
    if not workspaces:
        raise ValueError("no workspaces")
    min_id = workspaces[0].id
    max_id = workspaces[-1].id
    focus_index = focus_id - min_id
    return WorkspaceData(
        workspace_count=max_id - min_id + 1,
        focus=focus_index if focus_index > -1 else -1,
        active=active,
    )


@dataclass
class HyprCache:
    """Last known Hyprland workspaces per monitor, and the focused workspace id."""

    map: HyprMap = field(default_factory=dict)
    focus: int = -1

    def get_workspace_data(self, output: str) -> WorkspaceData:
        entry = self.map.get(output)
        if entry is None:
            return WorkspaceData()
        workspaces, active = entry
        return hypr_workspace_data(workspaces, self.focus, active)

    def workspace_id_for_index(self, output: str, index: int) -> int | None:
        """Workspace id at ``index`` counted from the first workspace of ``output``."""
        entry = self.map.get(output)
        if entry is None:
            return None
        return entry[0][0].id + index