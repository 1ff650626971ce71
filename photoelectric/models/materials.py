"""
Photocathode Material Catalog

Static table of the cathode materials offered by the experiment, with their
work functions (eV) and the colors used to draw them.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config.settings import ERROR_MESSAGES
from .errors import UnknownMaterialError


@dataclass(frozen=True)
class Material:
    """A photocathode material."""
    name: str
    symbol: str
    work_function_ev: float
    display_color: str


MATERIALS: Tuple[Material, ...] = (
    Material("Cesium", "Cs", 2.10, "#FF6B6B"),
    Material("Sodium", "Na", 2.28, "#4ECDC4"),
    Material("Potassium", "K", 2.30, "#45B7D1"),
    Material("Aluminum", "Al", 4.08, "#96CEB4"),
    Material("Copper", "Cu", 4.70, "#FFEAA7"),
    Material("Silver", "Ag", 4.73, "#DDA0DD"),
    Material("Gold", "Au", 5.10, "#FFD700"),
)

# Lookup keys: lower-cased symbol and name
_BY_KEY: Dict[str, Material] = {}
for _material in MATERIALS:
    _BY_KEY[_material.symbol.lower()] = _material
    _BY_KEY[_material.name.lower()] = _material


def list_materials() -> List[Material]:
    """Return the catalog in display order."""
    return list(MATERIALS)


def get_material(material_id: str) -> Material:
    """
    Look up a material by chemical symbol or name (case-insensitive).

    Args:
        material_id: Symbol (e.g., "Cs") or name (e.g., "cesium")

    Returns:
        Material: The catalog entry

    Raises:
        UnknownMaterialError: If the material is not in the catalog
    """
    material = _BY_KEY.get(str(material_id).strip().lower())
    if material is None:
        raise UnknownMaterialError(
            ERROR_MESSAGES["unknown_material"].format(
                material_id=material_id,
                choices=", ".join(m.symbol for m in MATERIALS),
            )
        )
    return material
