"""
Interaction state machine.

Turns pointer gestures into model changes. Every transition is a pure
function: it takes the current `StudioState` and `Model` and returns a
`Transition` holding the next values plus an outcome. The caller keeps the
current values and threads them through.

Only one gesture session runs at a time:
- Draw: start opens a temporary rectangle at the snapped ground point, move
  resizes it in any quadrant, end commits a mass if both sides exceed the
  tool's minimum size.
- Push-pull: start on a roof records the hit height and mass height, move
  sets the height live (never below the tool's minimum), end clears.
- Window/Door: start on a wall places a clamped opening.
- Tree: gestures are ignored; trees are added by command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from ..core.config import Settings
from ..core.materials import MATERIAL_CATALOG
from ..core.models import Mass, Model, TemporaryRect, Tree
from ..core.units import feet_to_meters
from ..geometry.grid import snap
from ..geometry.walls import place_opening, to_wall_local
from ..utils.validation import validate_grid_module, validate_height, validate_material_id
from .events import GestureEvent, GestureOutcome, RoofHit, WallHit
from .tools import DoorTool, DrawTool, PushPullTool, Tool, TreeTool, WindowTool, tool_name

logger = logging.getLogger(__name__)


# =============================================================================
# STATE
# =============================================================================


@dataclass(frozen=True)
class DrawSession:
    """Draw gesture in progress."""
    anchor_x: float
    anchor_y: float
    rect: TemporaryRect


@dataclass(frozen=True)
class PushSession:
    """Push-pull gesture in progress."""
    mass_id: str
    start_y: float
    base_height: float


Session = Union[DrawSession, PushSession]


@dataclass(frozen=True)
class StudioState:
    """Active tool, active materials and the gesture session, if any."""
    tool: Tool = DrawTool()
    wall_material_id: str = "wood-insul"
    roof_material_id: str = "roof-insul"
    default_height: float = feet_to_meters(12)
    session: Optional[Session] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> StudioState:
        return cls(
            tool=DrawTool(),
            wall_material_id=settings.default_wall_material,
            roof_material_id=settings.default_roof_material,
            default_height=settings.default_height_m,
        )

    @property
    def temporary_rect(self) -> Optional[TemporaryRect]:
        """Rectangle being drawn, for the renderer's rubber band."""
        if isinstance(self.session, DrawSession):
            return self.session.rect
        return None


@dataclass(frozen=True)
class Transition:
    """Next state and model after one event."""
    state: StudioState
    model: Model
    outcome: GestureOutcome
    message: str = ""
    mass_id: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.outcome is GestureOutcome.APPLIED


def _unchanged(state: StudioState, model: Model, outcome: GestureOutcome, message: str = "") -> Transition:
    return Transition(state=state, model=model, outcome=outcome, message=message)


def _unhandled(tool: Tool) -> TypeError:
    return TypeError(f"Unhandled tool: {tool!r}")


# =============================================================================
# GESTURES
# =============================================================================


def gesture_start(state: StudioState, model: Model, event: GestureEvent) -> Transition:
    """Handle pointer-down for the active tool."""
    if state.session is not None:
        logger.warning(
            "Gesture start while a session is active; ignored",
            extra={"tool": tool_name(state.tool)},
        )
        return _unchanged(state, model, GestureOutcome.IGNORED, "Session already active")

    tool = state.tool
    if isinstance(tool, DrawTool):
        return _draw_start(state, model, event)
    if isinstance(tool, PushPullTool):
        return _push_start(state, model, event)
    if isinstance(tool, (WindowTool, DoorTool)):
        return _opening_start(state, model, event, tool)
    if isinstance(tool, TreeTool):
        return _unchanged(state, model, GestureOutcome.IGNORED, "Trees are added with the tree command")
    raise _unhandled(tool)


def gesture_move(state: StudioState, model: Model, event: GestureEvent) -> Transition:
    """Handle pointer-move for the active session."""
    session = state.session
    if isinstance(session, DrawSession):
        return _draw_move(state, model, event, session)
    if isinstance(session, PushSession):
        return _push_move(state, model, event, session)
    return _unchanged(state, model, GestureOutcome.IGNORED)


def gesture_end(state: StudioState, model: Model, event: Optional[GestureEvent] = None) -> Transition:
    """Handle pointer-up. Always clears the session."""
    session = state.session
    cleared = replace(state, session=None)

    if isinstance(session, DrawSession):
        return _draw_end(cleared, model, session)
    if isinstance(session, PushSession):
        return Transition(state=cleared, model=model, outcome=GestureOutcome.APPLIED, mass_id=session.mass_id)
    return _unchanged(cleared, model, GestureOutcome.IGNORED)


# Draw -----------------------------------------------------------------------


def _draw_start(state: StudioState, model: Model, event: GestureEvent) -> Transition:
    if event.ground is None:
        return _unchanged(state, model, GestureOutcome.NO_TARGET, "Pointer is off the ground plane")

    x = snap(event.ground.x, model.grid_module)
    y = snap(event.ground.z, model.grid_module)
    session = DrawSession(anchor_x=x, anchor_y=y, rect=TemporaryRect(x=x, y=y))
    return Transition(state=replace(state, session=session), model=model, outcome=GestureOutcome.APPLIED)


def _draw_move(state: StudioState, model: Model, event: GestureEvent, session: DrawSession) -> Transition:
    if event.ground is None:
        return _unchanged(state, model, GestureOutcome.IGNORED)

    cx = snap(event.ground.x, model.grid_module)
    cy = snap(event.ground.z, model.grid_module)
    rect = TemporaryRect(
        x=min(session.anchor_x, cx),
        y=min(session.anchor_y, cy),
        w=abs(cx - session.anchor_x),
        d=abs(cy - session.anchor_y),
    )
    return Transition(
        state=replace(state, session=replace(session, rect=rect)),
        model=model,
        outcome=GestureOutcome.APPLIED,
    )


def _draw_end(state: StudioState, model: Model, session: DrawSession) -> Transition:
    rect = session.rect
    min_size = state.tool.min_size if isinstance(state.tool, DrawTool) else DrawTool().min_size

    if rect.w <= min_size or rect.d <= min_size:
        logger.debug(f"Discarded draw of {rect.w:.3f} x {rect.d:.3f} m")
        return _unchanged(state, model, GestureOutcome.DISCARDED, "Rectangle too small")

    mass = Mass(
        x=rect.x,
        y=rect.y,
        w=rect.w,
        d=rect.d,
        h=state.default_height,
        wall_material_id=state.wall_material_id,
        roof_material_id=state.roof_material_id,
    )
    logger.info(f"Committed mass {rect.w:.2f} x {rect.d:.2f} m", extra={"mass_id": mass.id})
    return Transition(state=state, model=model.add_mass(mass), outcome=GestureOutcome.APPLIED, mass_id=mass.id)


# Push-pull ------------------------------------------------------------------


def _push_start(state: StudioState, model: Model, event: GestureEvent) -> Transition:
    hit = event.surface
    if not isinstance(hit, RoofHit):
        return _unchanged(state, model, GestureOutcome.NO_TARGET, "Height is changed from the roof")

    mass = model.get_mass(hit.mass_id)
    if mass is None:
        return _unchanged(state, model, GestureOutcome.NO_TARGET, f"No mass '{hit.mass_id}'")

    session = PushSession(mass_id=mass.id, start_y=hit.point.y, base_height=mass.h)
    return Transition(
        state=replace(state, session=session),
        model=model,
        outcome=GestureOutcome.APPLIED,
        mass_id=mass.id,
    )


def _push_move(state: StudioState, model: Model, event: GestureEvent, session: PushSession) -> Transition:
    point = event.point
    mass = model.get_mass(session.mass_id)
    if point is None or mass is None:
        return _unchanged(state, model, GestureOutcome.IGNORED)

    min_height = state.tool.min_height if isinstance(state.tool, PushPullTool) else PushPullTool().min_height
    new_height = max(min_height, session.base_height + (point.y - session.start_y))
    return Transition(
        state=state,
        model=model.replace_mass(mass.with_height(new_height)),
        outcome=GestureOutcome.APPLIED,
        mass_id=mass.id,
    )


# Openings -------------------------------------------------------------------


def _opening_start(
    state: StudioState,
    model: Model,
    event: GestureEvent,
    tool: Union[WindowTool, DoorTool],
) -> Transition:
    hit = event.surface
    if not isinstance(hit, WallHit):
        logger.info("Opening gesture did not hit a wall", extra={"tool": tool_name(tool)})
        return _unchanged(state, model, GestureOutcome.NO_TARGET, "Click a wall to place.")

    mass = model.get_mass(hit.mass_id)
    if mass is None:
        return _unchanged(state, model, GestureOutcome.NO_TARGET, f"No mass '{hit.mass_id}'")

    local_x = to_wall_local(hit.wall_key, mass, hit.point.x, hit.point.z)
    opening = place_opening(mass, hit.wall_key, local_x, tool.spec, material_id=tool.material_id)
    return Transition(
        state=state,
        model=model.replace_mass(mass.with_opening(opening)),
        outcome=GestureOutcome.APPLIED,
        mass_id=mass.id,
    )


# =============================================================================
# COMMANDS
# =============================================================================


def set_tool(state: StudioState, tool: Tool) -> StudioState:
    """Switch tools. Any session in progress is dropped."""
    if state.session is not None:
        logger.debug("Tool change dropped the active session", extra={"tool": tool_name(tool)})
    return replace(state, tool=tool, session=None)


def set_active_materials(
    state: StudioState,
    wall_material_id: Optional[str] = None,
    roof_material_id: Optional[str] = None,
) -> StudioState:
    """Choose the materials given to the next drawn mass."""
    updates = {}
    if wall_material_id is not None:
        updates["wall_material_id"] = validate_material_id(wall_material_id, MATERIAL_CATALOG)
    if roof_material_id is not None:
        updates["roof_material_id"] = validate_material_id(roof_material_id, MATERIAL_CATALOG)
    return replace(state, **updates)


def set_default_height(state: StudioState, height: float) -> StudioState:
    return replace(state, default_height=validate_height(height, field="default_height"))


def set_grid_module(model: Model, module: float) -> Model:
    """Change the snapping quantum; existing masses are not re-snapped."""
    return model.with_grid_module(validate_grid_module(module))


def add_tree(
    state: StudioState,
    model: Model,
    x: Optional[float] = None,
    y: Optional[float] = None,
    h: Optional[float] = None,
) -> Model:
    """Plant a tree, defaulting to the tree tool's position and height."""
    defaults = state.tool if isinstance(state.tool, TreeTool) else TreeTool()
    tree = Tree(
        x=defaults.x if x is None else x,
        y=defaults.y if y is None else y,
        h=defaults.h if h is None else h,
    )
    return model.add_tree(tree)
