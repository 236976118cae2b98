"""Widget configuration, toggle animations, pointer state, and workspace, tray and system helpers for edge-anchored desktop widgets."""

__version__ = "0.1.0"