import asyncio
import json
import os
import shutil
import tempfile

import pytest

from wayedges.niri import (
    NiriConnection,
    NiriDataCache,
    NiriWorkspace,
    filter_empty_workspace,
    sort_niri_workspaces,
)
from wayedges.workspace import WorkspaceData


def ws(id, idx, output="DP-1", active=False, focused=False, window=None):
    return NiriWorkspace(
        id=id,
        idx=idx,
        output=output,
        is_active=active,
        is_focused=focused,
        active_window_id=window,
    )


def test_from_dict_reads_niri_fields():
    raw = {
        "id": 7,
        "idx": 2,
        "name": None,
        "output": "HDMI-A-1",
        "is_active": True,
        "is_focused": False,
        "active_window_id": 42,
    }
    w = NiriWorkspace.from_dict(raw)
    assert w == NiriWorkspace(7, 2, None, "HDMI-A-1", True, False, 42)


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        NiriWorkspace.from_dict({"idx": 1})


def test_sort_groups_and_orders():
    items = [ws(1, 3), ws(2, 1), ws(3, 1, output="B"), ws(4, 2), ws(5, 1, output=None)]
    grouped = sort_niri_workspaces(items)
    assert set(grouped) == {"DP-1", "B"}
    assert [w.idx for w in grouped["DP-1"]] == sorted(w.idx for w in grouped["DP-1"])
    assert [w.id for w in grouped["B"]] == [3]
    assert all(w.id != 5 for ws_list in grouped.values() for w in ws_list)


def test_filter_empty_keeps_focused_and_occupied():
    focused = ws(1, 1, focused=True, active=True)
    occupied = ws(2, 2, window=9)
    empty = ws(3, 3)
    assert filter_empty_workspace([focused, occupied, empty]) == [focused, occupied]


def test_workspace_data_without_filter():
    items = [ws(1, 1), ws(2, 2, active=True, focused=True), ws(3, 3)]
    cache = NiriDataCache(sort_niri_workspaces(items))
    assert cache.get_workspace_data("DP-1", False) == WorkspaceData(3, 1, 1)


def test_workspace_data_with_filter():
    items = [ws(1, 1), ws(2, 2, active=True, focused=True), ws(3, 3, window=5)]
    cache = NiriDataCache(sort_niri_workspaces(items))
    data = cache.get_workspace_data("DP-1", True)
    assert data.workspace_count == len(filter_empty_workspace(items))
    assert data.focus == data.active
    assert cache.get_workspace("DP-1", True, data.focus).id == 2


def test_workspace_data_without_focus():
    cache = NiriDataCache(sort_niri_workspaces([ws(1, 1), ws(2, 2)]))
    data = cache.get_workspace_data("DP-1", False)
    assert data.focus == -1
    assert data.active == -1


def test_unknown_output_gives_default():
    cache = NiriDataCache(sort_niri_workspaces([ws(1, 1)]))
    assert cache.get_workspace_data("nope", False) == WorkspaceData()
    assert cache.get_workspace("nope", False, 0) is None


def test_get_workspace_by_index():
    items = [ws(10, 2), ws(11, 1), ws(12, 3)]
    cache = NiriDataCache(sort_niri_workspaces(items))
    assert cache.get_workspace("DP-1", False, 0).id == 11
    assert cache.get_workspace("DP-1", False, len(items)) is None
    assert cache.get_workspace("DP-1", True, 0) is None


@pytest.fixture
def sock_path():
    directory = tempfile.mkdtemp(prefix="ni")
    yield os.path.join(directory, "s")
    shutil.rmtree(directory, ignore_errors=True)


async def _serve(path, replies, received):
    async def handle(reader, writer):
        received.append(await reader.read())
        for line in replies:
            writer.write(line.encode() + b"\n")
        await writer.drain()
        writer.close()

    return await asyncio.start_unix_server(handle, path=path)


@pytest.mark.asyncio
async def test_push_request_sends_json_and_unwraps_ok(sock_path):
    response = {"Workspaces": [{"id": 1, "idx": 1, "output": "DP-1"}]}
    received = []
    server = await _serve(sock_path, [json.dumps({"Ok": response})], received)
    async with server:
        async with await NiriConnection.connect(sock_path) as conn:
            result = await conn.push_request("Workspaces")
    assert received == [b'"Workspaces"']
    assert result == response


@pytest.mark.asyncio
async def test_push_request_error_reply(sock_path):
    received = []
    server = await _serve(sock_path, [json.dumps({"Err": "bad request"})], received)
    async with server:
        async with await NiriConnection.connect(sock_path) as conn:
            with pytest.raises(RuntimeError, match="bad request"):
                await conn.push_request({"Action": {}})


@pytest.mark.asyncio
async def test_listener_reads_events_until_closed(sock_path):
    events = [{"WorkspaceActivated": {"id": 1, "focused": True}}, {"Other": {}}]
    received = []
    lines = [json.dumps({"Ok": "Handled"})] + [json.dumps(e) for e in events]
    server = await _serve(sock_path, lines, received)
    async with server:
        conn = await NiriConnection.connect(sock_path)
        listener = await conn.to_listener()
        got = [await listener.next_event() for _ in events]
        with pytest.raises(EOFError):
            await listener.next_event()
        await listener.close()
    assert received == [b'"EventStream"']
    assert got == events


@pytest.mark.asyncio
async def test_connect_uses_environment(sock_path, monkeypatch):
    received = []
    server = await _serve(sock_path, [json.dumps({"Ok": "Handled"})], received)
    monkeypatch.setenv("NIRI_SOCKET", sock_path)
    async with server:
        async with await NiriConnection.connect() as conn:
            result = await conn.push_request("EventStream")
    assert result == "Handled"


@pytest.mark.asyncio
async def test_connect_without_socket_variable(monkeypatch):
    monkeypatch.delenv("NIRI_SOCKET", raising=False)
    with pytest.raises(FileNotFoundError, match="NIRI_SOCKET"):
        await NiriConnection.connect()