"""
Pytest configuration and fixtures for Massing Studio tests.

Provides reusable test fixtures for:
- Masses and models of known dimensions
- Studio state with default tools
- Temporary output directories
"""

import pytest
from pathlib import Path
import tempfile
import shutil

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from massing.core.config import Settings
from massing.core.models import Mass, Model, Opening, Tree, WallKey
from massing.interaction.state_machine import StudioState


# =============================================================================
# PATH FIXTURES
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory for test outputs, cleaned up after test."""
    tmp = tempfile.mkdtemp(prefix="massing_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


# =============================================================================
# GEOMETRY FIXTURES
# =============================================================================

@pytest.fixture
def simple_mass() -> Mass:
    """6m x 4m x 3m timber mass with an insulated roof."""
    return Mass(
        id="mass-a",
        x=0.0,
        y=0.0,
        w=6.0,
        d=4.0,
        h=3.0,
        wall_material_id="wood-insul",
        roof_material_id="roof-insul",
    )


@pytest.fixture
def tall_mass() -> Mass:
    """8m x 8m x 6m concrete mass, away from the origin."""
    return Mass(
        id="mass-b",
        x=12.0,
        y=4.0,
        w=8.0,
        d=8.0,
        h=6.0,
        wall_material_id="concrete",
        roof_material_id="roof-insul",
    )


@pytest.fixture
def simple_model(simple_mass) -> Model:
    """Model with one mass and no openings."""
    return Model(grid_module=1.0, masses=(simple_mass,))


@pytest.fixture
def two_mass_model(simple_mass, tall_mass) -> Model:
    """Two masses, one south window, one tree."""
    window = Opening(wall_key=WallKey.SOUTH, x=1.0, z=1.0, w=2.0, h=1.5, material_id="glass-loE")
    return Model(
        grid_module=1.0,
        masses=(simple_mass.with_opening(window), tall_mass),
        trees=(Tree(id="tree-1", x=-3.0, y=2.0, h=4.0),),
    )


# =============================================================================
# STUDIO FIXTURES
# =============================================================================

@pytest.fixture
def config() -> Settings:
    """Settings with library defaults, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def state() -> StudioState:
    """Draw tool, timber walls, insulated roof, 12 ft default height."""
    return StudioState()
