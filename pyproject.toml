[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wayedges"
version = "0.1.0"
description = "Widget configuration, toggle animations, pointer state, workspace, tray and system helpers for edge-anchored desktop widgets"
requires-python = ">=3.10"
keywords = ["wayland", "widgets", "hyprland", "niri", "tray", "animation", "workspaces"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
    "Typing :: Typed",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["wayedges"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
