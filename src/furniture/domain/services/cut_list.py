"""Cut-list estimation by material and thickness.

Sheet consumption is an area-based capacity estimate: the total part area
of a group is divided by the usable area of one sheet after a fixed
waste allowance for kerf and trim. No nesting layout is computed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..catalogs import Catalogs
from ..value_objects import GrainDirection, Part

logger = logging.getLogger(__name__)

# Share of every sheet lost to saw kerf and edge trimming
WASTE_FACTOR = 0.10
DEFAULT_SHEET_WIDTH = 1220
DEFAULT_SHEET_LENGTH = 2440


def sheets_needed(total_area_sqm: float, sheet_area_sqm: float, waste_factor: float) -> int:
    """Estimate how many sheets cover an area.

    Non-decreasing in ``total_area_sqm`` for a fixed sheet and waste
    factor. The quotient is rounded to 9 decimals before ceil so float
    noise cannot add a sheet to an exact fit.

    Args:
        total_area_sqm: Area of all pieces in square metres.
        sheet_area_sqm: Area of one sheet in square metres.
        waste_factor: Fraction of each sheet lost (0 <= f < 1).

    Returns:
        Number of whole sheets, 0 for an empty area.

    Raises:
        ValueError: If the sheet area or waste factor is out of range.
    """
    if sheet_area_sqm <= 0:
        raise ValueError("Sheet area must be positive")
    if not 0 <= waste_factor < 1:
        raise ValueError("Waste factor must be in [0, 1)")
    if total_area_sqm <= 0:
        return 0
    return math.ceil(round(total_area_sqm / (sheet_area_sqm * (1 - waste_factor)), 9))


@dataclass(frozen=True)
class CutListItem:
    """One part as it appears on the cut list."""

    part_id: str
    code: str
    label: str
    length: float
    width: float
    quantity: int
    grain: GrainDirection

    @property
    def area_sqm(self) -> float:
        return self.length * self.width / 1_000_000

    @property
    def total_area_sqm(self) -> float:
        return self.area_sqm * self.quantity


@dataclass(frozen=True)
class SheetGroup:
    """Parts sharing a material and thickness.

    Attributes:
        material_id: Material catalog key.
        material_name: Display name (the id when the material is unknown).
        thickness: Board thickness in mm.
        items: Parts in generation order.
        total_area_sqm: Area of all pieces, rounded to 4 decimals.
        sheet_width: Sheet width used for the estimate (mm).
        sheet_length: Sheet length used for the estimate (mm).
        sheets_needed: Estimated number of sheets.
        weight_kg: Estimated weight of the cut pieces.
    """

    material_id: str
    material_name: str
    thickness: float
    items: tuple[CutListItem, ...]
    total_area_sqm: float
    sheet_width: float
    sheet_length: float
    sheets_needed: int
    weight_kg: float


@dataclass(frozen=True)
class CutList:
    """Sheet groups ordered by material id, then thickness descending."""

    groups: tuple[SheetGroup, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_sheets(self) -> int:
        return sum(group.sheets_needed for group in self.groups)

    @property
    def total_area_sqm(self) -> float:
        return round(sum(group.total_area_sqm for group in self.groups), 4)

    @property
    def total_weight_kg(self) -> float:
        return round(sum(group.weight_kg for group in self.groups), 2)


class CutListEstimator:
    """Groups parts by (material, thickness) and estimates sheets."""

    def __init__(self, waste_factor: float = WASTE_FACTOR) -> None:
        if not 0 <= waste_factor < 1:
            raise ValueError("Waste factor must be in [0, 1)")
        self.waste_factor = waste_factor

    def estimate(self, parts: Sequence[Part], catalogs: Catalogs) -> CutList:
        """Build the cut list of a set of parts.

        Args:
            parts: Parts of one or more furnitures.
            catalogs: Catalogs providing sheet sizes and densities.

        Returns:
            CutList with one group per (material, thickness) pair.
        """
        grouped: dict[tuple[str, float], list[Part]] = {}
        for part in parts:
            grouped.setdefault((part.material_id, part.thickness), []).append(part)

        warnings: list[str] = []
        groups = [
            self._group(material_id, thickness, members, catalogs, warnings)
            for (material_id, thickness), members in sorted(
                grouped.items(), key=lambda entry: (entry[0][0], -entry[0][1])
            )
        ]
        logger.debug(
            f"Cut list: {len(groups)} group(s), "
            f"{sum(g.sheets_needed for g in groups)} sheet(s)"
        )
        return CutList(tuple(groups), tuple(warnings))

    def _group(
        self,
        material_id: str,
        thickness: float,
        parts: list[Part],
        catalogs: Catalogs,
        warnings: list[str],
    ) -> SheetGroup:
        material = catalogs.material(material_id)
        if material is None:
            message = (
                f"Unknown material '{material_id}'; assuming "
                f"{DEFAULT_SHEET_WIDTH}x{DEFAULT_SHEET_LENGTH} mm sheets"
            )
            logger.warning(message)
            warnings.append(message)
            name = material_id
            sheet_width, sheet_length = DEFAULT_SHEET_WIDTH, DEFAULT_SHEET_LENGTH
            density = 0.0
        else:
            name = material.name
            sheet_width = material.standard_sheet_width
            sheet_length = material.standard_sheet_length
            density = material.density
            if (
                material.standard_thicknesses
                and thickness not in material.standard_thicknesses
            ):
                warnings.append(
                    f"{thickness:g} mm is not a standard thickness for "
                    f"'{material_id}'"
                )

        items = tuple(
            CutListItem(
                part_id=part.id,
                code=part.code,
                label=part.label,
                length=part.length,
                width=part.width,
                quantity=part.quantity,
                grain=part.grain,
            )
            for part in parts
        )
        total_area = sum(item.total_area_sqm for item in items)
        sheet_area = sheet_width * sheet_length / 1_000_000
        return SheetGroup(
            material_id=material_id,
            material_name=name,
            thickness=thickness,
            items=items,
            total_area_sqm=round(total_area, 4),
            sheet_width=sheet_width,
            sheet_length=sheet_length,
            sheets_needed=sheets_needed(total_area, sheet_area, self.waste_factor),
            weight_kg=round(total_area * thickness / 1000 * density, 2),
        )
