"""Reference catalogs for materials, finishes and hardware.

Catalogs are plain configuration data: a ``Catalogs`` snapshot is passed
into every generator and builder call and is never mutated by the engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class MaterialType(str, Enum):
    """Board families available for panels."""

    MDF = "mdf"
    MELAMINE = "melamine"
    PLYWOOD = "plywood"
    HDF = "hdf"
    SOLID_WOOD = "solid_wood"


class HardwareKind(str, Enum):
    """Hardware families referenced by the inference rules."""

    HINGE = "hinge"
    SLIDE = "slide"
    HANDLE = "handle"
    SHELF_PIN = "shelf_pin"
    RAIL_SUPPORT = "rail_support"
    HANGING_RAIL = "hanging_rail"
    SLIDING_RAIL = "sliding_rail"


@dataclass(frozen=True)
class Material:
    """Sheet material with pricing and physical attributes.

    Attributes:
        id: Catalog key.
        name: Display name.
        material_type: Board family.
        price_per_sqm: Price per square metre of board.
        standard_sheet_width: Sheet width in mm.
        standard_sheet_length: Sheet length in mm.
        density: Density in kg/m3.
        standard_thicknesses: Thicknesses the board is stocked in (mm).
    """

    id: str
    name: str
    material_type: MaterialType
    price_per_sqm: float
    standard_sheet_width: float = 1220
    standard_sheet_length: float = 2440
    density: float = 700
    standard_thicknesses: tuple[float, ...] = ()

    @property
    def sheet_area_sqm(self) -> float:
        """Area of one standard sheet in square metres."""
        return self.standard_sheet_width * self.standard_sheet_length / 1_000_000


@dataclass(frozen=True)
class Finish:
    """Surface finish applied to visible parts."""

    id: str
    name: str
    color_hex: str


@dataclass(frozen=True)
class HardwareSpec:
    """Hardware catalog entry.

    Attributes:
        id: Catalog key.
        name: Display name.
        hardware_type: Hardware family.
        unit_price: Price per unit.
        unit: Unit of sale (piece, pair, set, m).
    """

    id: str
    name: str
    hardware_type: HardwareKind
    unit_price: float
    unit: str = "piece"


def hdf_for_thickness(
    materials: Mapping[str, Material], thickness: float
) -> str | None:
    """Find an HDF board stocked in the given thickness.

    Candidates are checked in sorted id order so the result never
    depends on catalog insertion order.

    Args:
        materials: Material catalog to search.
        thickness: Required board thickness in mm.

    Returns:
        Material id of the first matching HDF board, or None.
    """
    for material_id in sorted(materials):
        material = materials[material_id]
        if (
            material.material_type == MaterialType.HDF
            and thickness in material.standard_thicknesses
        ):
            return material_id
    return None


@dataclass(frozen=True)
class Catalogs:
    """Immutable snapshot of the three reference catalogs."""

    materials: Mapping[str, Material] = field(default_factory=dict)
    finishes: Mapping[str, Finish] = field(default_factory=dict)
    hardware: Mapping[str, HardwareSpec] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dicts cannot leak in
        for name in ("materials", "finishes", "hardware"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def material(self, material_id: str) -> Material | None:
        return self.materials.get(material_id)

    def finish(self, finish_id: str) -> Finish | None:
        return self.finishes.get(finish_id)

    def hardware_spec(self, hardware_id: str) -> HardwareSpec | None:
        return self.hardware.get(hardware_id)

    def hdf_for_thickness(self, thickness: float) -> str | None:
        return hdf_for_thickness(self.materials, thickness)

    def merged(
        self,
        materials: Mapping[str, Material] | None = None,
        finishes: Mapping[str, Finish] | None = None,
        hardware: Mapping[str, HardwareSpec] | None = None,
    ) -> Catalogs:
        """Return a new snapshot with entries added or replaced.

        Args:
            materials: Material entries to add or override.
            finishes: Finish entries to add or override.
            hardware: Hardware entries to add or override.

        Returns:
            A new Catalogs instance; this one is left untouched.
        """
        return Catalogs(
            materials={**self.materials, **(materials or {})},
            finishes={**self.finishes, **(finishes or {})},
            hardware={**self.hardware, **(hardware or {})},
        )


# Carcass material and finish used when a furniture does not name one
DEFAULT_MATERIAL_ID = "mdf_18"
DEFAULT_FINISH_ID = "raw"
