"""
Material catalog.

Static envelope and glazing assemblies referenced by id from masses and
openings. Each entry carries:
- U: thermal transmittance (W/m²K)
- EC: embodied carbon intensity (kgCO₂e/m²)
"""

import logging
from typing import Dict, Iterable, List

from .models import Material

logger = logging.getLogger(__name__)


# =============================================================================
# CATALOG
# =============================================================================

MATERIAL_CATALOG: Dict[str, Material] = {

    # Studio assemblies
    "wood-insul": Material(id="wood-insul", name="Timber stud + insulation", U=0.35, EC=35),
    "concrete": Material(id="concrete", name="Concrete wall", U=1.80, EC=180),
    "glass-loE": Material(id="glass-loE", name="LoE Double Glazing", U=1.70, EC=120),
    "roof-insul": Material(id="roof-insul", name="Insulated roof panel", U=0.25, EC=40),

    # Grid builder assemblies
    "insulated-wood": Material(id="insulated-wood", name="Insulated Wood Panel", U=0.25, EC=40),
    "straw-bale": Material(id="straw-bale", name="Straw Bale", U=0.15, EC=25),
    "cross-lam": Material(id="cross-lam", name="Cross-Laminated Timber", U=0.35, EC=60),
    "glass-curtain": Material(id="glass-curtain", name="Glass Curtain Wall", U=5.8, EC=200),
}

DEFAULT_MATERIAL_ID = "wood-insul"


def get_material(material_id: str) -> Material:
    """
    Look up a material by id.

    Unknown ids resolve to the first catalog entry so that restored models
    with stale references still produce numbers.
    """
    material = MATERIAL_CATALOG.get(material_id)
    if material is None:
        logger.warning(f"Unknown material '{material_id}', using '{DEFAULT_MATERIAL_ID}'")
        return MATERIAL_CATALOG[DEFAULT_MATERIAL_ID]
    return material


def list_materials() -> List[Material]:
    """All catalog entries in catalog order."""
    return list(MATERIAL_CATALOG.values())


def materials_for_ids(material_ids: Iterable[str]) -> List[Material]:
    """Resolve ids to catalog entries, de-duplicated, in first-seen order."""
    seen: Dict[str, Material] = {}
    for material_id in material_ids:
        material = get_material(material_id)
        seen.setdefault(material.id, material)
    return list(seen.values())
