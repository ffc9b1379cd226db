"""
Interaction - pointer gestures and commands that edit the model.

Usage:
    from massing.interaction import (
        StudioState,
        gesture_start,
        gesture_move,
        gesture_end,
        GestureEvent,
        Point3,
    )
"""

from .events import GestureEvent, GestureOutcome, Point3, RoofHit, SurfaceHit, WallHit
from .tools import (
    DoorTool,
    DrawTool,
    PushPullTool,
    Tool,
    TreeTool,
    WindowTool,
    tool_from_name,
    tool_name,
)
from .state_machine import (
    DrawSession,
    PushSession,
    StudioState,
    Transition,
    add_tree,
    gesture_end,
    gesture_move,
    gesture_start,
    set_active_materials,
    set_default_height,
    set_grid_module,
    set_tool,
)
from .studio import Studio

__all__ = [
    # Events
    "GestureEvent",
    "GestureOutcome",
    "Point3",
    "RoofHit",
    "SurfaceHit",
    "WallHit",
    # Tools
    "DoorTool",
    "DrawTool",
    "PushPullTool",
    "Tool",
    "TreeTool",
    "WindowTool",
    "tool_from_name",
    "tool_name",
    # Transitions
    "DrawSession",
    "PushSession",
    "StudioState",
    "Transition",
    "add_tree",
    "gesture_end",
    "gesture_move",
    "gesture_start",
    "set_active_materials",
    "set_default_height",
    "set_grid_module",
    "set_tool",
    "Studio",
]
