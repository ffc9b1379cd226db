"""
Tests for renderer scene data.
"""

import math

import pytest

from massing.core.models import WallKey
from massing.visualization.scene import SceneIndex, build_scene, opening_holes, wall_frames


class TestWallFrames:
    """Tests for wall plane placement."""

    def test_frames(self, simple_mass):
        frames = {f.wall_key: f for f in wall_frames(simple_mass)}

        assert frames[WallKey.NORTH].center == (3.0, 1.5, 0.0)
        assert frames[WallKey.SOUTH].center == (3.0, 1.5, 4.0)
        assert frames[WallKey.WEST].center == (0.0, 1.5, 2.0)
        assert frames[WallKey.EAST].center == (6.0, 1.5, 2.0)
        assert frames[WallKey.SOUTH].rotation_y == pytest.approx(math.pi)
        assert frames[WallKey.EAST].width == 4.0

    def test_offset_mass(self, tall_mass):
        north = wall_frames(tall_mass)[0]
        assert north.center == (16.0, 3.0, 4.0)
        assert north.normal == (0.0, 0.0, -1.0)


class TestOpeningHoles:

    def test_hole_in_wall_centred_frame(self, two_mass_model):
        mass = two_mass_model.get_mass("mass-a")
        holes = opening_holes(mass, WallKey.SOUTH)
        assert holes == [[(-2.0, 1.0), (0.0, 1.0), (0.0, 2.5), (-2.0, 2.5)]]

    def test_other_walls_have_none(self, two_mass_model):
        mass = two_mass_model.get_mass("mass-a")
        assert opening_holes(mass, WallKey.NORTH) == []


class TestBuildScene:
    """Tests for build_scene()."""

    def test_structure(self, two_mass_model):
        scene = build_scene(two_mass_model)

        assert scene["metadata"]["gridModule"] == 1.0
        assert [m["id"] for m in scene["masses"]] == ["mass-a", "mass-b"]
        assert len(scene["masses"][0]["walls"]) == 4
        assert scene["masses"][0]["roof"]["position"] == [3.0, 3.0, 2.0]
        assert scene["trees"][0]["trunk"]["height"] == 4.0

    def test_sun_position(self, simple_model):
        scene = build_scene(simple_model, sun_position=(0.0, 60.0, 0.0))
        assert scene["lights"]["sun"]["position"] == [0.0, 60.0, 0.0]

    def test_walls_carry_ids(self, two_mass_model):
        south = next(
            w for w in build_scene(two_mass_model)["masses"][0]["walls"] if w["wallKey"] == "S"
        )
        assert south["massId"] == "mass-a"
        assert len(south["holes"]) == 1


class TestSceneIndex:
    """Tests for the entity id -> handle table."""

    def test_rebuild(self, two_mass_model):
        created = []
        index = SceneIndex(lambda record: created.append(record) or len(created))
        index.rebuild(two_mass_model)

        assert len(index) == 3
        assert "mass-b" in index
        assert index.handle_for("tree-1") == 3
        assert index.handle_for("missing") is None

    def test_rebuild_disposes_previous(self, two_mass_model, simple_model):
        disposed = []
        index = SceneIndex(lambda record: record["id"], dispose=disposed.append)
        index.rebuild(two_mass_model)
        index.rebuild(simple_model)

        assert sorted(disposed) == ["mass-a", "mass-b", "tree-1"]
        assert len(index) == 1
        assert "mass-b" not in index
