"""Finding tray icons in an icon theme folder given by the application."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from pathlib import Path

log = logging.getLogger(__name__)

_ICON_EXTENSIONS = ("png", "svg")

_cache: dict[str, dict[str, Path]] = {}
_lock = threading.Lock()


def rsplit_file_at_dot(name: str) -> tuple[str | None, str | None]:
    """Split a file name into stem and extension at its last dot.

    A name without a dot gives ``(None, name)``; a name whose only dot leads,
    and ``".."``, give ``(name, None)``.
    """
    if name == "..":
        return name, None
    before, sep, after = name.rpartition(".")
    if not sep:
        return None, after
    if before == "":
        return name, None
    return before, after


def _try_cached(theme_path: str, icon_name: str) -> Path | None:
    with _lock:
        return _cache.get(theme_path, {}).get(icon_name)


def _insert_to_cache(theme_path: str, icon_name: str, path: Path) -> None:
    with _lock:
        _cache.setdefault(theme_path, {})[icon_name] = path


def clear_cache() -> None:
    """Forget every icon found so far."""
    with _lock:
        _cache.clear()


def _entries(root: str) -> Iterator[Path]:
    """The entries directly inside ``root``, then ``root`` itself."""
    try:
        with os.scandir(root) as it:
            children = [Path(entry.path) for entry in it]
    except NotADirectoryError:
        children = []
    except OSError as err:
        log.error("Error walking dir: %s", err)
        return
    yield from children
    yield Path(root)


def find_icon(icon_theme_path: str | os.PathLike[str], icon_name: str) -> Path | None:
    """Find ``<icon_name>.png`` or ``<icon_name>.svg`` directly in ``icon_theme_path``."""
    root = os.fspath(icon_theme_path)
    cached = _try_cached(root, icon_name)
    if cached is not None:
        return cached

    for path in _entries(root):
        before, after = rsplit_file_at_dot(path.name)
        if before is None or after is None:
            continue
        if after in _ICON_EXTENSIONS and before == icon_name:
            _insert_to_cache(root, icon_name, path)
            return path
    return None