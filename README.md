# wayedges

Building blocks for small widgets that slide out from the edges of the
screen. The package parses the settings of individual widgets, runs eased
pop-out animations, tracks pointer state, and turns workspace, tray and
system data into the values a widget draws.

## What is in it

- `wayedges.common`: shared value types and parsers. `NumOrRelative`
  holds an absolute number or a fraction, and `parse_num_or_relative`
  accepts numbers and percentage strings such as `"40%"`. `parse_edge`
  and `parse_layer` read edge and layer names, and `parse_curve` reads
  curve names (`linear`, `ease-quad`, `ease-cubic`, `ease-expo`). A bad
  value raises `ConfigError`.
- `wayedges.widget_common`: `CommonSize` (thickness and length),
  `color_translate` and `option_color_translate` for `#rgb`, `#rgba`,
  `#rrggbb` and `#rrggbbaa` colours, `parse_key_event_map` for
  button-code-to-command maps, and `BtnConfig` for button widgets.
- `wayedges.workspace_config`: `WorkspaceConfig` and `WorkspacePreset`.
  A preset is `"hyprland"`, `"niri"`, or an object with a `type` field.
  `NiriConf` holds the niri options.
- `wayedges.slide_config`: `SlideConfig` and `SlidePreset`. The presets
  are `speaker`, `microphone`, `backlight` and `custom`.
- `wayedges.ring_config`: `RingConfig` and `RingPreset`. The presets are
  `ram`, `swap`, `cpu`, `battery`, `disk` and `custom`.
- `wayedges.text_config`: `TextConfig` and `TextPreset`. The presets are
  `time` and `custom`.
- `wayedges.animation`: `Animation`, `ToggleAnimation`, `ToggleDirection`,
  `AnimationList` and `calculate_transition`. Each animation accepts a
  clock function, so it can be driven by hand.
- `wayedges.interaction`: `MouseState` turns raw `PointerEvent`s into
  `MouseEvent`s and tracks hovering and the pressed button.
  `WindowPopState` handles pinning, entering and leaving.
- `wayedges.workspace`: `WorkspaceData`, the `WorkspaceCtx` callback
  registry, and the Hyprland helpers `sort_hypr_workspaces`,
  `hypr_workspace_data` and `HyprCache`.
- `wayedges.niri`: `NiriWorkspace`, `NiriDataCache`, and an asyncio client
  for the niri socket. `NiriConnection.connect` uses `$NIRI_SOCKET` when
  no path is given. It provides `push_request` and `to_listener`, and the
  listener is an async iterator of events.
- `wayedges.system`: `get_ram_info`, `get_swap_info`, `get_cpu_info`,
  `get_battery_info` and `get_disk_info`, built on psutil.
- `wayedges.icon_lookup`: `find_icon` looks for `<name>.png` or
  `<name>.svg` directly inside a theme directory and caches what it
  finds. `clear_cache` empties that cache.
- `wayedges.tray`: `Tray`, `MenuItem`, `RootMenu`, `Icon` and `TrayMap`.
  `TrayMap.handle_event` applies `TrayAdd`, `TrayRemove` and `TrayUpdate`
  events and returns a `TrayEventSignal`. `TrayContext` passes each
  signal on to its registered callbacks.

## Example

```python
from wayedges.animation import ToggleAnimation, ToggleDirection
from wayedges.common import Anchor, Curve
from wayedges.workspace_config import WorkspaceConfig

config = WorkspaceConfig.from_dict(
    {"thickness": 20, "length": "40%", "preset": {"type": "niri", "filter_empty": False}}
)
config.size.calculate_relative((1920, 1080), Anchor.LEFT)
print(config.size.length.get_num())   # 432.0
print(config.preset)                   # Niri(filter_empty: false)

now = [0.0]
anim = ToggleAnimation(0.3, Curve.LINEAR, clock=lambda: now[0])
now[0] = 1.0
anim.refresh()
anim.set_direction(ToggleDirection.FORWARD)
now[0] = 1.15
anim.refresh()
print(anim.progress())                 # 0.5
```

## What it does not do

The package works on one widget's settings at a time. It does not read a
whole configuration file, and it does not parse groups or per-widget
placement (edge, layer, margins, monitor). It has no wrap-box container
settings. It opens no windows and draws nothing on screen. It does not
watch files for changes, and it runs no control socket and provides no
command-line tool.

## Installing

```
pip install .
pip install ".[test]"   # with the test dependencies
pytest
```