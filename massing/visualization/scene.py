"""
Scene description for the web renderer.

Creates Three.js compatible data for the massing model. The renderer owns
its meshes; the studio only hands out plain records and keeps a one-way
table from entity id to renderer handle, rebuilt whole on every change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..core.models import Mass, Model, Tree, WallKey
from ..geometry.walls import wall_width

H = TypeVar("H")


@dataclass(frozen=True)
class WallFrame:
    """Placement of a wall plane centred on its wall."""
    wall_key: WallKey
    width: float
    height: float
    center: tuple[float, float, float]
    rotation_y: float
    normal: tuple[float, float, float]


def wall_frames(mass: Mass) -> List[WallFrame]:
    """
    Wall planes of a mass in world coordinates (y up).

    N sits at z = y facing -Z, S at z = y + d facing +Z, W at x facing -X,
    E at x + w facing +X.
    """
    cy = mass.h / 2
    return [
        WallFrame(WallKey.NORTH, mass.w, mass.h, (mass.x + mass.w / 2, cy, mass.y), 0.0, (0.0, 0.0, -1.0)),
        WallFrame(WallKey.SOUTH, mass.w, mass.h, (mass.x + mass.w / 2, cy, mass.y + mass.d), math.pi, (0.0, 0.0, 1.0)),
        WallFrame(WallKey.WEST, mass.d, mass.h, (mass.x, cy, mass.y + mass.d / 2), math.pi / 2, (-1.0, 0.0, 0.0)),
        WallFrame(WallKey.EAST, mass.d, mass.h, (mass.x + mass.w, cy, mass.y + mass.d / 2), -math.pi / 2, (1.0, 0.0, 0.0)),
    ]


def opening_holes(mass: Mass, wall_key: WallKey) -> List[List[tuple[float, float]]]:
    """
    Opening outlines on one wall, in wall-centred coordinates.

    The wall plane spans x in [-width/2, width/2] and y in [0, h].
    """
    half = wall_width(wall_key, mass) / 2
    holes = []
    for opening in mass.openings:
        if opening.wall_key != wall_key:
            continue
        x0 = opening.x - half
        holes.append([
            (x0, opening.z),
            (x0 + opening.w, opening.z),
            (x0 + opening.w, opening.z + opening.h),
            (x0, opening.z + opening.h),
        ])
    return holes


def mass_scene(mass: Mass) -> Dict[str, Any]:
    walls = []
    for frame in wall_frames(mass):
        walls.append({
            "massId": mass.id,
            "wallKey": frame.wall_key.value,
            "type": "wall",
            "width": frame.width,
            "height": frame.height,
            "position": list(frame.center),
            "rotationY": frame.rotation_y,
            "holes": [[list(p) for p in hole] for hole in opening_holes(mass, frame.wall_key)],
            "material": mass.wall_material_id,
        })
    return {
        "id": mass.id,
        "walls": walls,
        "roof": {
            "massId": mass.id,
            "type": "roof",
            "width": mass.w,
            "depth": mass.d,
            "position": [mass.x + mass.w / 2, mass.h, mass.y + mass.d / 2],
            "material": mass.roof_material_id,
        },
    }


def tree_scene(tree: Tree) -> Dict[str, Any]:
    """Trunk cylinder and cone crown on top of it."""
    return {
        "id": tree.id,
        "trunk": {"radius": 0.1, "height": tree.h, "position": [tree.x, tree.h / 2, tree.y]},
        "crown": {"radius": 0.9, "height": 1.8, "position": [tree.x, tree.h + 0.9, tree.y]},
    }


def build_scene(model: Model, sun_position: Optional[tuple[float, float, float]] = None) -> Dict[str, Any]:
    """Complete scene record for one model value."""
    return {
        "metadata": {"generator": "massing-studio", "gridModule": model.grid_module},
        "masses": [mass_scene(mass) for mass in model.masses],
        "trees": [tree_scene(tree) for tree in model.trees],
        "lights": {
            "hemisphere": {"sky": 0xE0F7FF, "ground": 0x777777, "intensity": 0.7},
            "sun": {"position": list(sun_position or (20.0, 30.0, 20.0)), "intensity": 1.0},
        },
    }


class SceneIndex(Generic[H]):
    """
    Entity id -> renderer handle.

    Usage:
        index = SceneIndex(lambda record: renderer.add(record))
        index.rebuild(model)
        handle = index.handle_for(mass_id)
    """

    def __init__(
        self,
        create: Callable[[Dict[str, Any]], H],
        dispose: Optional[Callable[[H], None]] = None,
    ):
        self._create = create
        self._dispose = dispose
        self._handles: Dict[str, H] = {}

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._handles

    def handle_for(self, entity_id: str) -> Optional[H]:
        return self._handles.get(entity_id)

    def clear(self) -> None:
        if self._dispose is not None:
            for handle in self._handles.values():
                self._dispose(handle)
        self._handles = {}

    def rebuild(self, model: Model) -> None:
        """Dispose every handle and create new ones from the model."""
        self.clear()
        for mass in model.masses:
            self._handles[mass.id] = self._create(mass_scene(mass))
        for tree in model.trees:
            self._handles[tree.id] = self._create(tree_scene(tree))
