"""Bill of materials construction.

Rounding policy: every line subtotal is rounded to cents first, the
rounded lines are summed, and the sum is rounded again. Totals therefore
always equal the sum of the printed lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..catalogs import Catalogs
from ..errors import CatalogMissError
from ..value_objects import HardwareItem, Part, round2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogMiss:
    """A catalog lookup that failed while pricing a BOM line.

    Attributes:
        catalog: Which catalog was consulted (material, finish, hardware).
        item_id: The identifier that could not be resolved.
        reference: Id of the part or hardware line that referenced it.
    """

    catalog: str
    item_id: str
    reference: str

    @property
    def message(self) -> str:
        return f"Unknown {self.catalog} '{self.item_id}' referenced by {self.reference}"


@dataclass(frozen=True)
class BomPartLine:
    """Priced part line.

    ``area_sqm`` is rounded to 4 decimals for display; the subtotal is
    computed from the unrounded area.
    """

    part_id: str
    code: str
    label: str
    material_id: str
    material_name: str
    finish_id: str
    finish_name: str
    length: float
    width: float
    thickness: float
    quantity: int
    area_sqm: float
    price_per_sqm: float
    subtotal: float


@dataclass(frozen=True)
class BomHardwareLine:
    """Priced hardware line."""

    hardware_id: str
    hardware_type_id: str
    name: str
    unit: str
    quantity: int
    unit_price: float
    subtotal: float


@dataclass(frozen=True)
class Bom:
    """Priced bill of materials for one furniture or a whole project.

    Invariant: ``grand_total == round2(total_materials + total_hardware)``.
    """

    furniture_id: str
    parts: tuple[BomPartLine, ...]
    hardware: tuple[BomHardwareLine, ...]
    total_materials: float
    total_hardware: float
    grand_total: float
    issues: tuple[CatalogMiss, ...] = field(default_factory=tuple)

    @classmethod
    def from_lines(
        cls,
        furniture_id: str,
        parts: Iterable[BomPartLine],
        hardware: Iterable[BomHardwareLine],
        issues: Iterable[CatalogMiss] = (),
    ) -> Bom:
        """Assemble a BOM, computing totals from already-rounded lines."""
        parts = tuple(parts)
        hardware = tuple(hardware)
        total_materials = round2(sum(line.subtotal for line in parts))
        total_hardware = round2(sum(line.subtotal for line in hardware))
        return cls(
            furniture_id=furniture_id,
            parts=parts,
            hardware=hardware,
            total_materials=total_materials,
            total_hardware=total_hardware,
            grand_total=round2(total_materials + total_hardware),
            issues=tuple(issues),
        )


class BomBuilder:
    """Joins parts and hardware with the catalogs into a priced BOM.

    A missing catalog entry prices the line at zero and records a
    CatalogMiss. With ``strict=True`` the miss raises CatalogMissError
    instead.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def build(
        self,
        furniture_id: str,
        parts: Sequence[Part],
        hardware: Sequence[HardwareItem],
        catalogs: Catalogs,
    ) -> Bom:
        """Price a furniture's parts and hardware.

        Args:
            furniture_id: Furniture the BOM belongs to.
            parts: Generated parts.
            hardware: Inferred hardware.
            catalogs: Material, finish and hardware catalogs.

        Returns:
            The priced Bom.

        Raises:
            CatalogMissError: In strict mode, on the first unknown id.
        """
        issues: list[CatalogMiss] = []
        part_lines = [self._part_line(part, catalogs, issues) for part in parts]
        hardware_lines = [
            self._hardware_line(item, catalogs, issues) for item in hardware
        ]
        bom = Bom.from_lines(furniture_id, part_lines, hardware_lines, issues)
        logger.debug(
            f"BOM for '{furniture_id}': materials {bom.total_materials:.2f}, "
            f"hardware {bom.total_hardware:.2f}, total {bom.grand_total:.2f}"
        )
        return bom

    def _miss(
        self, catalog: str, item_id: str, reference: str, issues: list[CatalogMiss]
    ) -> None:
        if self.strict:
            raise CatalogMissError(catalog, item_id)
        miss = CatalogMiss(catalog, item_id, reference)
        logger.warning(f"{miss.message}; priced at 0")
        issues.append(miss)

    def _part_line(
        self, part: Part, catalogs: Catalogs, issues: list[CatalogMiss]
    ) -> BomPartLine:
        material = catalogs.material(part.material_id)
        if material is None:
            self._miss("material", part.material_id, part.id, issues)
            price, material_name = 0.0, part.material_id
        else:
            price, material_name = material.price_per_sqm, material.name

        finish = catalogs.finish(part.finish_id)
        if finish is None:
            self._miss("finish", part.finish_id, part.id, issues)
            finish_name = part.finish_id
        else:
            finish_name = finish.name

        area = part.total_area_sqm
        return BomPartLine(
            part_id=part.id,
            code=part.code,
            label=part.label,
            material_id=part.material_id,
            material_name=material_name,
            finish_id=part.finish_id,
            finish_name=finish_name,
            length=part.length,
            width=part.width,
            thickness=part.thickness,
            quantity=part.quantity,
            area_sqm=round(area, 4),
            price_per_sqm=price,
            subtotal=round2(area * price),
        )

    def _hardware_line(
        self, item: HardwareItem, catalogs: Catalogs, issues: list[CatalogMiss]
    ) -> BomHardwareLine:
        spec = catalogs.hardware_spec(item.hardware_type_id)
        if spec is None:
            self._miss("hardware", item.hardware_type_id, item.id, issues)
            return BomHardwareLine(
                hardware_id=item.id,
                hardware_type_id=item.hardware_type_id,
                name=item.hardware_type_id,
                unit="piece",
                quantity=item.quantity,
                unit_price=0.0,
                subtotal=0.0,
            )
        return BomHardwareLine(
            hardware_id=item.id,
            hardware_type_id=item.hardware_type_id,
            name=spec.name,
            unit=spec.unit,
            quantity=item.quantity,
            unit_price=spec.unit_price,
            subtotal=round2(item.quantity * spec.unit_price),
        )


def consolidate_boms(boms: Sequence[Bom], furniture_id: str = "project") -> Bom:
    """Combine several BOMs into one.

    Lines are concatenated in input order without merging identical
    parts; totals are recomputed from the concatenated lines with the
    same rounding policy.

    Args:
        boms: BOMs to combine.
        furniture_id: Identifier of the combined BOM.

    Returns:
        A new Bom covering every input.
    """
    return Bom.from_lines(
        furniture_id,
        (line for bom in boms for line in bom.parts),
        (line for bom in boms for line in bom.hardware),
        (issue for bom in boms for issue in bom.issues),
    )
