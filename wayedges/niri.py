"""Niri workspace data and a client for the niri IPC socket."""

from __future__ import annotations

import asyncio
import contextlib
import json
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .workspace import WorkspaceData

SOCKET_PATH_ENV = "NIRI_SOCKET"


@dataclass(frozen=True)
class NiriWorkspace:
    """A workspace as reported by niri."""

    id: int
    idx: int
    name: str | None = None
    output: str | None = None
    is_active: bool = False
    is_focused: bool = False
    active_window_id: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NiriWorkspace:
        if not isinstance(data, Mapping):
            raise ValueError("workspace must be an object")
        try:
            return cls(
                id=int(data["id"]),
                idx=int(data["idx"]),
                name=data.get("name"),
                output=data.get("output"),
                is_active=bool(data.get("is_active", False)),
                is_focused=bool(data.get("is_focused", False)),
                active_window_id=data.get("active_window_id"),
            )
        except KeyError as err:
            raise ValueError(f"missing field {err}") from err


def filter_empty_workspace(workspaces: Iterable[NiriWorkspace]) -> list[NiriWorkspace]:
    """Keep workspaces that are focused or hold a window."""
    return [w for w in workspaces if w.is_focused or w.active_window_id is not None]


def sort_niri_workspaces(
    workspaces: Iterable[NiriWorkspace],
) -> dict[str, list[NiriWorkspace]]:
    """Group workspaces by output, ordered by index; those on no output are dropped."""
    grouped: dict[str, list[NiriWorkspace]] = {}
    for ws in workspaces:
        if ws.output is None:
            continue
        grouped.setdefault(ws.output, []).append(ws)
    for items in grouped.values():
        items.sort(key=lambda w: w.idx)
    return grouped


@dataclass
class NiriDataCache:
    """Last known niri workspaces per output."""

    inner: dict[str, list[NiriWorkspace]] = field(default_factory=dict)

    def _shown(self, output: str, filter_empty: bool) -> list[NiriWorkspace] | None:
        workspaces = self.inner.get(output)
        if workspaces is None:
            return None
        return filter_empty_workspace(workspaces) if filter_empty else list(workspaces)

    def get_workspace_data(self, output: str, filter_empty: bool) -> WorkspaceData:
        shown = self._shown(output, filter_empty)
        if shown is None:
            return WorkspaceData()
        focus = next((i for i, w in enumerate(shown) if w.is_focused), -1)
        active = next((i for i, w in enumerate(shown) if w.is_active), -1)
        return WorkspaceData(workspace_count=len(shown), focus=focus, active=active)

    def get_workspace(
        self, output: str, filter_empty: bool, index: int
    ) -> NiriWorkspace | None:
        shown = self._shown(output, filter_empty)
        if shown is None or not 0 <= index < len(shown):
            return None
        return shown[index]


def _unwrap_reply(line: bytes) -> Any:
    if not line:
        raise ConnectionError("niri closed the connection without a reply")
    reply = json.loads(line)
    if isinstance(reply, Mapping):
        if "Ok" in reply:
            return reply["Ok"]
        if "Err" in reply:
            raise RuntimeError(f"niri error: {reply['Err']}")
    raise ValueError(f"unexpected niri reply: {reply!r}")


class NiriListener:
    """Reads events, one JSON object per line, from an event stream."""

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        self._reader = reader
        self._writer = writer

    async def next_event(self) -> Any:
        """Return the next event; raise ``EOFError`` once the stream is closed."""
        line = await self._reader.readline()
        if not line:
            raise EOFError("niri event stream closed")
        return json.loads(line)

    def __aiter__(self) -> NiriListener:
        return self

    async def __anext__(self) -> Any:
        try:
            return await self.next_event()
        except EOFError:
            raise StopAsyncIteration from None

    async def close(self) -> None:
        self._writer.close()
        with contextlib.suppress(OSError):
            await self._writer.wait_closed()


class NiriConnection:
    """A connection to the niri IPC socket carrying one request."""

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        self._reader = reader
        self._writer = writer

    @classmethod
    async def connect(
        cls, socket_path: str | os.PathLike[str] | None = None
    ) -> NiriConnection:
        """Connect to ``socket_path``, or to the socket named by ``$NIRI_SOCKET``."""
        path = socket_path if socket_path is not None else os.environ.get(SOCKET_PATH_ENV)
        if not path:
            raise FileNotFoundError(
                f"{SOCKET_PATH_ENV} is not set, are you running this within niri?"
            )
        reader, writer = await asyncio.open_unix_connection(os.fspath(path))
        return cls(reader, writer)

    async def push_request(self, request: Any) -> Any:
        """Send ``request`` and return the value of the ``Ok`` reply."""
        self._writer.write(json.dumps(request).encode("utf-8"))
        await self._writer.drain()
        if self._writer.can_write_eof():
            self._writer.write_eof()
        return _unwrap_reply(await self._reader.readline())

    async def to_listener(self) -> NiriListener:
        """Ask for the event stream and return a listener reading it."""
        await self.push_request("EventStream")
        return NiriListener(self._reader, self._writer)

    async def close(self) -> None:
        self._writer.close()
        with contextlib.suppress(OSError):
            await self._writer.wait_closed()

    async def __aenter__(self) -> NiriConnection:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()