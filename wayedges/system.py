"""Memory, CPU, battery and disk readings for the ring widgets."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

import psutil

_cpu_lock = threading.Lock()


@dataclass(frozen=True)
class MemoryInfo:
    """Used and total memory in bytes."""

    used: int
    total: int


@dataclass(frozen=True)
class DiskInfo:
    """Used and total space of a partition in bytes."""

    used: int
    total: int


class BatteryState(Enum):
    """Charging state of a battery."""

    UNKNOWN = "unknown"
    CHARGING = "charging"
    DISCHARGING = "discharging"
    EMPTY = "empty"
    FULL = "full"


def get_ram_info() -> MemoryInfo:
    mem = psutil.virtual_memory()
    return MemoryInfo(used=mem.total - mem.available, total=mem.total)


def get_swap_info() -> MemoryInfo:
    swap = psutil.swap_memory()
    return MemoryInfo(used=swap.total - swap.free, total=swap.total)


def get_cpu_info(core: int | None = None) -> float:
    """CPU usage since the previous call, from 0 to 1; one core when ``core`` is given.

    A core that does not exist reads as 0.
    """
    with _cpu_lock:
        if core is None:
            usage = psutil.cpu_percent(interval=None)
        else:
            per_core = psutil.cpu_percent(interval=None, percpu=True)
            if not 0 <= core < len(per_core):
                return 0.0
            usage = per_core[core]
    return float(usage) / 100.0


def _battery_state(percent: float, plugged: bool | None) -> BatteryState:
    if plugged is None:
        return BatteryState.UNKNOWN
    if plugged:
        return BatteryState.FULL if percent >= 100 else BatteryState.CHARGING
    return BatteryState.EMPTY if percent <= 0 else BatteryState.DISCHARGING


def get_battery_info() -> tuple[float, BatteryState]:
    """Charge of the first battery from 0 to 1, and its state."""
    sensors_battery = getattr(psutil, "sensors_battery", None)
    battery = sensors_battery() if sensors_battery is not None else None
    if battery is None:
        raise RuntimeError("no battery found")
    return battery.percent / 100.0, _battery_state(battery.percent, battery.power_plugged)


def get_disk_info(partition: str) -> DiskInfo:
    """Space of the disk mounted at ``partition``."""
    mounts = {p.mountpoint for p in psutil.disk_partitions(all=True)}
    if partition not in mounts:
        raise ValueError(f"no disk mounted at {partition!r}")
    usage = psutil.disk_usage(partition)
    return DiskInfo(used=usage.total - usage.free, total=usage.total)