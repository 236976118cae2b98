"""System tray items, their menus, and the events that change them."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

log = logging.getLogger(__name__)


class IconKind(Enum):
    """How a tray icon is given."""

    NAMED = "named"
    PNG_DATA = "png_data"
    PIXMAP = "pixmap"


@dataclass(frozen=True, eq=False)
class Icon:
    """A tray icon: a theme icon name, PNG bytes, or a list of pixmaps.

    Named icons are equal when their names are; icons given as data are never
    equal to anything, since comparing them is costly.
    """

    kind: IconKind
    data: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Icon):
            return NotImplemented
        if self.kind is IconKind.NAMED and other.kind is IconKind.NAMED:
            return self.data == other.data
        return False

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def named(cls, name: str) -> Icon:
        return cls(IconKind.NAMED, name)


class MenuType(Enum):
    """Kind of a menu entry."""

    RADIO = "radio"
    CHECK = "check"
    SEPARATOR = "separator"
    NORMAL = "normal"


_TOGGLE_STATES = {"on": True, "off": False, "indeterminate": None}


def _norm(value: Any) -> str:
    return str(value).replace("-", "_").lower()


def _menu_type(data: Mapping[str, Any]) -> tuple[MenuType, bool]:
    raw_type = _norm(data.get("menu_type", "standard"))
    if raw_type == "separator":
        return MenuType.SEPARATOR, False
    if raw_type != "standard":
        raise ValueError(f"unknown menu type: {data.get('menu_type')!r}")

    toggle_type = _norm(data.get("toggle_type", "cannot_be_toggled"))
    if toggle_type in ("cannot_be_toggled", "cannotbetoggled"):
        return MenuType.NORMAL, False
    if toggle_type not in ("checkmark", "radio"):
        raise ValueError(f"unknown toggle type: {data.get('toggle_type')!r}")

    state_key = _norm(data.get("toggle_state", "indeterminate"))
    if state_key not in _TOGGLE_STATES:
        raise ValueError(f"unknown toggle state: {data.get('toggle_state')!r}")
    state = _TOGGLE_STATES[state_key]
    if state is None:
        log.error("menu item has toggle but not toggle state")
        state = False
    kind = MenuType.CHECK if toggle_type == "checkmark" else MenuType.RADIO
    return kind, state


def _items(value: Any) -> list[Mapping[str, Any]]:
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise ValueError("submenu must be a list of menu items")
    return list(value)


@dataclass
class MenuItem:
    """An entry of a tray menu; ``checked`` applies to check and radio entries."""

    id: int
    enabled: bool = True
    label: str | None = None
    icon: Icon | None = None
    menu_type: MenuType = MenuType.NORMAL
    checked: bool = False
    submenu: list[MenuItem] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MenuItem:
        if not isinstance(data, Mapping):
            raise ValueError("menu item must be an object")
        icon_data = data.get("icon_data")
        icon_name = data.get("icon_name")
        if icon_data is not None:
            icon: Icon | None = Icon(IconKind.PNG_DATA, icon_data)
        elif icon_name is not None:
            icon = Icon.named(icon_name)
        else:
            icon = None

        menu_type, checked = _menu_type(data)
        submenu = None
        if data.get("children_display") == "submenu":
            submenu = [cls.from_dict(item) for item in _items(data.get("submenu"))]

        return cls(
            id=int(data.get("id", 0)),
            enabled=bool(data.get("enabled", True)),
            label=data.get("label"),
            icon=icon,
            menu_type=menu_type,
            checked=checked,
            submenu=submenu,
        )


@dataclass
class RootMenu:
    """The top of a tray item's menu."""

    id: int
    submenus: list[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RootMenu:
        if not isinstance(data, Mapping):
            raise ValueError("menu must be an object")
        return cls(
            id=int(data.get("id", 0)),
            submenus=[MenuItem.from_dict(item) for item in _items(data.get("submenus"))],
        )


@dataclass
class Tray:
    """A status notifier item shown in the tray."""

    id: str
    title: str | None = None
    icon: Icon | None = None
    icon_theme_path: str | None = None
    menu_path: str | None = None
    menu: RootMenu | None = None

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> Tray:
        """Build from a status notifier item; a named icon wins over pixmaps."""
        if not isinstance(item, Mapping):
            raise ValueError("tray item must be an object")
        icon_name = item.get("icon_name")
        icon_pixmap = item.get("icon_pixmap")
        if icon_name:
            icon: Icon | None = Icon.named(icon_name)
        elif icon_pixmap is not None:
            icon = Icon(IconKind.PIXMAP, icon_pixmap)
        else:
            icon = None
        return cls(
            id=str(item.get("id", "")),
            title=item.get("title"),
            icon=icon,
            icon_theme_path=item.get("icon_theme_path"),
            menu_path=item.get("menu"),
        )

    def update_title(self, title: str | None) -> bool:
        """Set the title; return whether it changed."""
        if self.title == title:
            return False
        self.title = title
        return True

    def update_icon(self, icon: Icon | None) -> bool:
        """Set the icon; return whether it counts as changed."""
        same = self.icon is None and icon is None
        if self.icon is not None and icon is not None:
            same = self.icon == icon
        if same:
            return False
        self.icon = icon
        return True

    def update_menu(self, menu: RootMenu) -> None:
        self.menu = menu


class TraySignalKind(Enum):
    """What happened to a tray item."""

    ADD = "add"
    RM = "rm"
    UPDATE = "update"


@dataclass(frozen=True)
class TrayEventSignal:
    """Notice sent to listeners that the tray item at ``destination`` changed."""

    kind: TraySignalKind
    destination: str


@dataclass(frozen=True)
class TrayAdd:
    """A new tray item appeared at ``destination``."""

    destination: str
    item: Mapping[str, Any]


@dataclass(frozen=True)
class TrayRemove:
    """The tray item at ``destination`` went away."""

    destination: str


_UPDATE_KINDS = frozenset(
    {
        "menu",
        "title",
        "icon",
        "attention_icon",
        "overlay_icon",
        "status",
        "tooltip",
        "menu_diff",
        "menu_connect",
    }
)


@dataclass(frozen=True)
class TrayUpdate:
    """A property of the tray item at ``destination`` changed.

    ``kind`` names the property: menu, title, icon, attention_icon,
    overlay_icon, status, tooltip, menu_diff or menu_connect.
    """

    destination: str
    kind: str
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind not in _UPDATE_KINDS:
            raise ValueError(f"unknown tray update: {self.kind!r}")


TrayEvent = Union[TrayAdd, TrayRemove, TrayUpdate]


class TrayMap:
    """The current tray items by destination."""

    def __init__(self) -> None:
        self.inner: dict[str, Tray] = {}

    def __len__(self) -> int:
        return len(self.inner)

    def list_tray(self) -> list[tuple[str, Tray]]:
        return list(self.inner.items())

    def get_tray(self, destination: str) -> Tray | None:
        return self.inner.get(destination)

    def handle_event(self, event: TrayEvent) -> TrayEventSignal | None:
        """Apply ``event``; return the signal to send, or ``None`` if nothing shows."""
        if isinstance(event, TrayAdd):
            self.inner[event.destination] = Tray.from_item(event.item)
            return TrayEventSignal(TraySignalKind.ADD, event.destination)
        if isinstance(event, TrayRemove):
            self.inner.pop(event.destination, None)
            return TrayEventSignal(TraySignalKind.RM, event.destination)
        if isinstance(event, TrayUpdate):
            if self._apply_update(event):
                return TrayEventSignal(TraySignalKind.UPDATE, event.destination)
            return None
        raise TypeError(f"not a tray event: {event!r}")

    def _apply_update(self, event: TrayUpdate) -> bool:
        tray = self.inner.get(event.destination)
        if event.kind == "menu":
            if tray is not None:
                menu = event.value
                if not isinstance(menu, RootMenu):
                    menu = RootMenu.from_dict(menu)
                tray.update_menu(menu)
            return True
        if event.kind == "title":
            return tray.update_title(event.value) if tray is not None else False
        if event.kind == "icon":
            if not event.value:
                return False
            return tray.update_icon(Icon.named(event.value)) if tray is not None else False
        log.warning("NOT IMPLEMENTED %s", event.kind.upper())
        return False


class TrayContext:
    """Shared tray state and the listeners told about its changes."""

    def __init__(self, tray_map: TrayMap | None = None) -> None:
        self.tray_map = tray_map if tray_map is not None else TrayMap()
        self.lock = threading.Lock()
        self._cbs: dict[int, Callable[[TrayEventSignal], None]] = {}
        self._count = 0

    def call(self, event: TrayEvent) -> TrayEventSignal | None:
        """Apply ``event`` and pass the resulting signal to every listener."""
        with self.lock:
            signal = self.tray_map.handle_event(event)
        if signal is not None:
            for cb in list(self._cbs.values()):
                cb(signal)
        return signal

    def add_cb(self, cb: Callable[[TrayEventSignal], None]) -> int:
        key = self._count
        self._count += 1
        self._cbs[key] = cb
        return key

    def remove_cb(self, key: int) -> None:
        self._cbs.pop(key, None)