"""
Studio session holder.

Keeps the current `StudioState` and `Model` for an application and feeds
events through the pure transitions. Listeners receive every new model
value (the renderer rebuilds its scene from it).
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..core.config import Settings, settings as default_settings
from ..core.models import Model
from . import state_machine as sm
from .events import GestureEvent
from .tools import DoorTool, PushPullTool, Tool, WindowTool, tool_from_name

logger = logging.getLogger(__name__)

ModelListener = Callable[[Model], None]


class Studio:
    """
    Current state and model of one editing session.

    Usage:
        studio = Studio()
        studio.set_tool(DrawTool())
        studio.gesture_start(GestureEvent(ground=Point3(2, 0, 3)))
        studio.gesture_move(GestureEvent(ground=Point3(10, 0, 9)))
        studio.gesture_end()
    """

    def __init__(self, model: Optional[Model] = None, config: Optional[Settings] = None):
        config = config or default_settings
        self.config = config
        self.state = sm.StudioState.from_settings(config)
        self.model = model or Model(grid_module=config.grid_module_m)
        self._listeners: List[ModelListener] = []

    def subscribe(self, listener: ModelListener) -> None:
        self._listeners.append(listener)

    def _apply_model(self, model: Model) -> None:
        if model is self.model:
            return
        self.model = model
        for listener in self._listeners:
            listener(model)

    def _apply(self, transition: sm.Transition) -> sm.Transition:
        self.state = transition.state
        self._apply_model(transition.model)
        return transition

    # Gestures

    def gesture_start(self, event: GestureEvent) -> sm.Transition:
        return self._apply(sm.gesture_start(self.state, self.model, event))

    def gesture_move(self, event: GestureEvent) -> sm.Transition:
        return self._apply(sm.gesture_move(self.state, self.model, event))

    def gesture_end(self, event: Optional[GestureEvent] = None) -> sm.Transition:
        return self._apply(sm.gesture_end(self.state, self.model, event))

    # Commands

    def set_tool(self, tool: Tool) -> None:
        self.state = sm.set_tool(self.state, tool)

    def use(self, name: str) -> Tool:
        """Switch to a tool by its UI name, configured from settings."""
        tool = tool_from_name(name)
        if isinstance(tool, PushPullTool):
            tool = PushPullTool(min_height=self.config.min_height_m)
        elif isinstance(tool, (WindowTool, DoorTool)):
            tool = type(tool)(material_id=self.config.default_glazing_material)
        self.set_tool(tool)
        return tool

    def set_active_materials(self, wall_material_id: Optional[str] = None, roof_material_id: Optional[str] = None) -> None:
        self.state = sm.set_active_materials(self.state, wall_material_id, roof_material_id)

    def set_default_height(self, height: float) -> None:
        self.state = sm.set_default_height(self.state, height)

    def set_grid_module(self, module: float) -> None:
        self._apply_model(sm.set_grid_module(self.model, module))

    def add_tree(self, x: Optional[float] = None, y: Optional[float] = None, h: Optional[float] = None) -> None:
        self._apply_model(sm.add_tree(self.state, self.model, x, y, h))

    def load(self, model: Model) -> None:
        """Replace the model, e.g. after restoring a snapshot."""
        self.state = sm.set_tool(self.state, self.state.tool)
        self._apply_model(model)
