"""
Tests for the interaction state machine, tools and the Studio holder.

Run with: pytest tests/test_interaction.py -v
"""

import pytest

from massing.core.models import Model, WallKey
from massing.interaction import state_machine as sm
from massing.interaction.events import GestureEvent, GestureOutcome, Point3, RoofHit, WallHit
from massing.interaction.studio import Studio
from massing.interaction.tools import (
    DoorTool,
    DrawTool,
    PushPullTool,
    TreeTool,
    WindowTool,
    tool_from_name,
    tool_name,
)
from massing.utils.validation import ValidationError


def ground(x, z):
    return GestureEvent(ground=Point3(x, 0.0, z))


def wall_click(mass_id, wall_key, x, y, z):
    return GestureEvent(surface=WallHit(mass_id, wall_key, Point3(x, y, z)), ground=Point3(x, 0.0, z))


def roof_at(mass_id, y):
    return GestureEvent(surface=RoofHit(mass_id, Point3(1.0, y, 1.0)))


def drag(state, model, *events):
    """Run start, moves and end; return every transition."""
    transitions = [sm.gesture_start(state, model, events[0])]
    for event in events[1:]:
        last = transitions[-1]
        transitions.append(sm.gesture_move(last.state, last.model, event))
    last = transitions[-1]
    transitions.append(sm.gesture_end(last.state, last.model))
    return transitions


class TestDraw:
    """Tests for the draw gesture."""

    def test_snaps_to_coarse_grid(self, state):
        """Test that corners land on a 4 m grid."""
        model = Model(grid_module=4.0)
        *_, end = drag(state, model, ground(2, 3), ground(10, 3), ground(10, 9))

        assert end.outcome == GestureOutcome.APPLIED
        mass = end.model.get_mass(end.mass_id)
        assert (mass.x, mass.y, mass.w, mass.d) == (4.0, 4.0, 8.0, 4.0)

    def test_unit_grid(self, state):
        model = Model(grid_module=1.0)
        *_, end = drag(state, model, ground(2, 3), ground(10, 9))

        mass = end.model.masses[0]
        assert (mass.x, mass.y, mass.w, mass.d) == (2.0, 3.0, 8.0, 6.0)

    def test_any_quadrant(self, state):
        """Test dragging up-left from the anchor."""
        model = Model(grid_module=1.0)
        *_, end = drag(state, model, ground(10, 9), ground(2, 3))

        mass = end.model.masses[0]
        assert (mass.x, mass.y, mass.w, mass.d) == (2.0, 3.0, 8.0, 6.0)

    def test_new_mass_uses_active_settings(self, state):
        state = sm.set_active_materials(state, wall_material_id="concrete")
        state = sm.set_default_height(state, 5.0)
        *_, end = drag(state, Model(grid_module=1.0), ground(0, 0), ground(3, 3))

        mass = end.model.masses[0]
        assert mass.h == 5.0
        assert mass.wall_material_id == "concrete"
        assert mass.roof_material_id == "roof-insul"
        assert mass.openings == ()

    def test_default_height_is_twelve_feet(self, state):
        *_, end = drag(state, Model(grid_module=1.0), ground(0, 0), ground(3, 3))
        assert end.model.masses[0].h == pytest.approx(3.6576)

    def test_temporary_rect_follows_pointer(self, state):
        model = Model(grid_module=1.0)
        start = sm.gesture_start(state, model, ground(2, 2))
        assert start.state.temporary_rect.w == 0

        moved = sm.gesture_move(start.state, model, ground(5, 4))
        rect = moved.state.temporary_rect
        assert (rect.x, rect.y, rect.w, rect.d) == (2.0, 2.0, 3.0, 2.0)
        assert moved.model is model

    def test_degenerate_click_discarded(self, state):
        """Test that a release without drag adds nothing."""
        model = Model(grid_module=1.0)
        *_, end = drag(state, model, ground(2, 2), ground(2.2, 2.3))

        assert end.outcome == GestureOutcome.DISCARDED
        assert end.model is model
        assert end.state.session is None

    def test_thin_rectangle_discarded(self, state):
        model = Model(grid_module=1.0)
        *_, end = drag(state, model, ground(0, 0), ground(6, 0.4))
        assert end.outcome == GestureOutcome.DISCARDED
        assert end.model.masses == ()

    def test_min_size_is_a_tool_setting(self):
        state = sm.StudioState(tool=DrawTool(min_size=0.005))
        model = Model(grid_module=0.001)
        *_, end = drag(state, model, ground(0, 0), ground(0.006, 0.006))
        assert end.outcome == GestureOutcome.APPLIED

    def test_start_off_ground(self, state):
        result = sm.gesture_start(state, Model(), GestureEvent())
        assert result.outcome == GestureOutcome.NO_TARGET
        assert result.state.session is None

    def test_move_off_ground_keeps_rect(self, state):
        model = Model(grid_module=1.0)
        start = sm.gesture_start(state, model, ground(1, 1))
        moved = sm.gesture_move(start.state, model, ground(4, 4))
        off = sm.gesture_move(moved.state, model, GestureEvent())
        assert off.outcome == GestureOutcome.IGNORED
        assert off.state.temporary_rect == moved.state.temporary_rect

    def test_second_start_ignored(self, state):
        model = Model(grid_module=1.0)
        start = sm.gesture_start(state, model, ground(1, 1))
        again = sm.gesture_start(start.state, model, ground(5, 5))
        assert again.outcome == GestureOutcome.IGNORED
        assert again.state.session == start.state.session

    def test_idle_move_and_end(self, state, simple_model):
        assert sm.gesture_move(state, simple_model, ground(1, 1)).outcome == GestureOutcome.IGNORED
        end = sm.gesture_end(state, simple_model)
        assert end.outcome == GestureOutcome.IGNORED
        assert end.model is simple_model


class TestPushPull:
    """Tests for the push-pull gesture."""

    @pytest.fixture
    def push_state(self, state):
        return sm.set_tool(state, PushPullTool())

    def test_raise_roof(self, push_state, simple_model):
        transitions = drag(push_state, simple_model, roof_at("mass-a", 3.0), roof_at("mass-a", 6.0))
        end = transitions[-1]

        assert end.outcome == GestureOutcome.APPLIED
        assert end.model.get_mass("mass-a").h == pytest.approx(6.0)
        assert end.state.session is None

    def test_height_is_live(self, push_state, simple_model):
        start = sm.gesture_start(push_state, simple_model, roof_at("mass-a", 3.0))
        moved = sm.gesture_move(start.state, start.model, roof_at("mass-a", 4.5))
        assert moved.model.get_mass("mass-a").h == pytest.approx(4.5)

    def test_floor_at_min_height(self, push_state, simple_model):
        """Test that pushing down stops at 8 ft."""
        *_, end = drag(push_state, simple_model, roof_at("mass-a", 3.0), roof_at("mass-a", 0.0))
        assert end.model.get_mass("mass-a").h == pytest.approx(2.4384)

    def test_custom_min_height(self, state, simple_model):
        push_state = sm.set_tool(state, PushPullTool(min_height=1.0))
        *_, end = drag(push_state, simple_model, roof_at("mass-a", 3.0), roof_at("mass-a", -10.0))
        assert end.model.get_mass("mass-a").h == 1.0

    def test_move_measured_from_start(self, push_state, simple_model):
        """Test that the delta is relative to the hit height, not absolute."""
        *_, end = drag(push_state, simple_model, roof_at("mass-a", 2.0), roof_at("mass-a", 3.0))
        assert end.model.get_mass("mass-a").h == pytest.approx(4.0)

    def test_wall_hit_is_no_target(self, push_state, simple_model):
        result = sm.gesture_start(push_state, simple_model, wall_click("mass-a", WallKey.NORTH, 1, 1, 0))
        assert result.outcome == GestureOutcome.NO_TARGET
        assert result.state.session is None

    def test_missing_mass(self, push_state, simple_model):
        result = sm.gesture_start(push_state, simple_model, roof_at("ghost", 3.0))
        assert result.outcome == GestureOutcome.NO_TARGET

    def test_only_target_changes(self, push_state, two_mass_model):
        *_, end = drag(push_state, two_mass_model, roof_at("mass-b", 6.0), roof_at("mass-b", 9.0))
        assert end.model.get_mass("mass-b").h == pytest.approx(9.0)
        assert end.model.masses[0] is two_mass_model.masses[0]


class TestOpenings:
    """Tests for window and door placement."""

    def test_window_on_north_wall(self, state, simple_model):
        state = sm.set_tool(state, WindowTool())
        result = sm.gesture_start(state, simple_model, wall_click("mass-a", WallKey.NORTH, 2.0, 1.0, 0.0))

        assert result.outcome == GestureOutcome.APPLIED
        opening = result.model.get_mass("mass-a").openings[0]
        assert opening.wall_key == WallKey.NORTH
        assert opening.x == pytest.approx(2.0)
        assert opening.z == pytest.approx(1.5 - 0.6096)
        assert opening.material_id == "glass-loE"
        assert result.state.session is None

    def test_window_near_edge_clamped(self, state, simple_model):
        state = sm.set_tool(state, WindowTool())
        north = sm.gesture_start(state, simple_model, wall_click("mass-a", WallKey.NORTH, 5.9, 1.0, 0.0))
        east = sm.gesture_start(state, simple_model, wall_click("mass-a", WallKey.EAST, 6.0, 1.0, 3.9))

        assert north.model.masses[0].openings[0].x == pytest.approx(4.7808)
        assert east.model.masses[0].openings[0].x == pytest.approx(2.7808)

    def test_door_on_floor(self, state, tall_mass):
        model = Model(masses=(tall_mass,))
        state = sm.set_tool(state, DoorTool())
        result = sm.gesture_start(state, model, wall_click("mass-b", WallKey.SOUTH, 16.0, 0.5, 12.0))

        door = result.model.masses[0].openings[0]
        assert door.z == 0.0
        assert door.x == pytest.approx(4.0)
        assert door.kind.value == "door"

    def test_openings_accumulate(self, state, simple_model):
        state = sm.set_tool(state, WindowTool())
        first = sm.gesture_start(state, simple_model, wall_click("mass-a", WallKey.WEST, 0.0, 1.0, 1.0))
        second = sm.gesture_start(first.state, first.model, wall_click("mass-a", WallKey.WEST, 0.0, 1.0, 3.0))
        assert len(second.model.masses[0].openings) == 2

    def test_no_wall_leaves_model(self, state, simple_model):
        state = sm.set_tool(state, WindowTool())
        result = sm.gesture_start(state, simple_model, ground(3, 3))

        assert result.outcome == GestureOutcome.NO_TARGET
        assert result.message == "Click a wall to place."
        assert result.model is simple_model

    def test_roof_is_not_a_wall(self, state, simple_model):
        state = sm.set_tool(state, DoorTool())
        result = sm.gesture_start(state, simple_model, roof_at("mass-a", 3.0))
        assert result.outcome == GestureOutcome.NO_TARGET

    def test_copy_on_write(self, state, two_mass_model):
        """Test that untouched masses and the old model survive."""
        state = sm.set_tool(state, WindowTool())
        result = sm.gesture_start(state, two_mass_model, wall_click("mass-b", WallKey.NORTH, 14.0, 2.0, 4.0))

        assert result.model is not two_mass_model
        assert result.model.masses[0] is two_mass_model.masses[0]
        assert two_mass_model.get_mass("mass-b").openings == ()
        assert len(result.model.get_mass("mass-b").openings) == 1


class TestTreesAndCommands:
    """Tests for the tree tool and command transitions."""

    def test_tree_tool_ignores_gestures(self, state, simple_model):
        state = sm.set_tool(state, TreeTool())
        result = sm.gesture_start(state, simple_model, ground(1, 1))
        assert result.outcome == GestureOutcome.IGNORED
        assert result.model is simple_model

    def test_add_tree_defaults(self, state, simple_model):
        model = sm.add_tree(state, simple_model)
        tree = model.trees[0]
        assert (tree.x, tree.y, tree.h) == (0.0, pytest.approx(3.048), 2.4)

    def test_add_tree_at_point(self, state, simple_model):
        model = sm.add_tree(state, simple_model, x=5, y=-2, h=6)
        assert (model.trees[0].x, model.trees[0].y, model.trees[0].h) == (5, -2, 6)

    def test_set_tool_drops_session(self, state):
        start = sm.gesture_start(state, Model(grid_module=1.0), ground(1, 1))
        switched = sm.set_tool(start.state, WindowTool())
        assert switched.session is None
        assert isinstance(switched.tool, WindowTool)

    def test_unknown_material_rejected(self, state):
        with pytest.raises(ValidationError) as exc:
            sm.set_active_materials(state, roof_material_id="thatch")
        assert exc.value.field == "material_id"

    def test_bad_height_rejected(self, state):
        with pytest.raises(ValidationError):
            sm.set_default_height(state, 0)

    def test_grid_module(self, simple_model):
        assert sm.set_grid_module(simple_model, 2.0).grid_module == 2.0
        with pytest.raises(ValidationError):
            sm.set_grid_module(simple_model, -1)

    def test_grid_change_does_not_resnap(self, simple_model):
        model = sm.set_grid_module(simple_model, 5.0)
        assert model.masses == simple_model.masses


class TestTools:

    @pytest.mark.parametrize("name,cls", [
        ("draw", DrawTool),
        ("select", PushPullTool),
        ("window", WindowTool),
        ("door", DoorTool),
        ("tree", TreeTool),
    ])
    def test_from_name(self, name, cls):
        tool = tool_from_name(name)
        assert isinstance(tool, cls)
        assert tool_name(tool) == name

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            tool_from_name("lasso")


class TestStudio:
    """Tests for the Studio session holder."""

    def test_draw_notifies_listeners(self, config):
        studio = Studio(config=config)
        seen = []
        studio.subscribe(seen.append)

        studio.gesture_start(ground(0, 0))
        studio.gesture_move(ground(5, 5))
        assert seen == []

        result = studio.gesture_end()
        assert result.applied
        assert len(studio.model.masses) == 1
        assert seen == [studio.model]

    def test_discard_does_not_notify(self, config):
        studio = Studio(config=config)
        seen = []
        studio.subscribe(seen.append)
        studio.gesture_start(ground(0, 0))
        studio.gesture_end()
        assert seen == []

    def test_use_configures_tools(self, config):
        studio = Studio(config=config)
        tool = studio.use("select")
        assert tool.min_height == pytest.approx(config.min_height_m)
        assert studio.use("window").material_id == config.default_glazing_material
        assert isinstance(studio.state.tool, WindowTool)

    def test_commands(self, config):
        studio = Studio(config=config)
        seen = []
        studio.subscribe(seen.append)

        studio.set_grid_module(2.0)
        studio.add_tree(1, 1)
        studio.set_active_materials(wall_material_id="straw-bale")

        assert studio.model.grid_module == 2.0
        assert len(studio.model.trees) == 1
        assert studio.state.wall_material_id == "straw-bale"
        assert len(seen) == 2

    def test_load_replaces_model(self, config, two_mass_model):
        studio = Studio(config=config)
        studio.gesture_start(ground(0, 0))
        studio.load(two_mass_model)
        assert studio.model is two_mass_model
        assert studio.state.session is None

    def test_default_model_uses_config_grid(self, config):
        assert Studio(config=config).model.grid_module == pytest.approx(config.grid_module_m)
