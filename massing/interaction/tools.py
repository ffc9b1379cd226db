"""
Tools of the studio.

A tool is a small frozen record; its type selects which transitions apply
and its fields carry only what those transitions need.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.units import feet_to_meters
from ..geometry.walls import DOOR_SPEC, WINDOW_SPEC, OpeningSpec


@dataclass(frozen=True)
class DrawTool:
    """Drag a footprint rectangle on the ground plane."""
    min_size: float = 0.01  # Rejects degenerate clicks (m)


@dataclass(frozen=True)
class PushPullTool:
    """Drag a roof up or down to change the mass height."""
    min_height: float = feet_to_meters(8)


@dataclass(frozen=True)
class WindowTool:
    """Click a wall to cut a window."""
    spec: OpeningSpec = WINDOW_SPEC
    material_id: str = "glass-loE"


@dataclass(frozen=True)
class DoorTool:
    """Click a wall to cut a door."""
    spec: OpeningSpec = DOOR_SPEC
    material_id: str = "glass-loE"


@dataclass(frozen=True)
class TreeTool:
    """Trees are planted by command; gestures do nothing under this tool."""
    x: float = 0.0
    y: float = feet_to_meters(10)
    h: float = 2.4


Tool = Union[DrawTool, PushPullTool, WindowTool, DoorTool, TreeTool]

TOOL_NAMES = {
    "draw": DrawTool,
    "select": PushPullTool,
    "window": WindowTool,
    "door": DoorTool,
    "tree": TreeTool,
}


def tool_from_name(name: str) -> Tool:
    """
    Build a default tool from its UI name.

    Raises:
        KeyError: For names outside draw/select/window/door/tree
    """
    try:
        return TOOL_NAMES[name.lower()]()
    except KeyError:
        raise KeyError(f"Unknown tool '{name}', expected one of {sorted(TOOL_NAMES)}") from None


def tool_name(tool: Tool) -> str:
    for name, cls in TOOL_NAMES.items():
        if isinstance(tool, cls):
            return name
    raise TypeError(f"Not a tool: {tool!r}")
