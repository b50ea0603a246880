"""Shelf component."""

from __future__ import annotations

import math

from ..modules import Module, ShelfParams
from ..value_objects import PanelType, Part
from .context import CarcassContext
from .factory import PartFactory
from .registry import component_registry
from .results import HardwareRequirement, ValidationResult

SHELF_PIN_ID = "shelf_pin_5"
# One pair of pins per 800 mm of shelf span, plus the closing pair
PIN_SPAN = 800
# Unsupported span above which an 18 mm shelf visibly sags
SAG_SPAN = 900
SAG_MAX_THICKNESS = 18


def pins_per_shelf(shelf_width: float) -> int:
    """Number of shelf pins supporting one shelf.

    Args:
        shelf_width: Shelf span in mm.

    Returns:
        Pin count, always even and at least 4.
    """
    return 2 * (math.ceil(shelf_width / PIN_SPAN) + 1)


def shelf_positions(zone: tuple[float, float], count: int) -> list[float]:
    """Evenly distribute shelves over a vertical zone.

    The zone is split into ``count + 1`` equal gaps.

    Args:
        zone: (bottom, top) heights above the floor in mm.
        count: Number of shelves.

    Returns:
        Shelf heights from the floor, lowest first.
    """
    bottom, top = zone
    spacing = (top - bottom) / (count + 1)
    return [round(bottom + spacing * (i + 1), 1) for i in range(count)]


@component_registry.register("module.shelf")
class ShelfComponent:
    """Evenly spaced shelves spanning the interior width.

    Shelves are placed in the context's shelf zone: above any drawer
    stack and, in a wardrobe with a hanging rail, above the rail's
    hanger clearance.
    """

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        params: ShelfParams = module.params
        errors: list[str] = []
        warnings: list[str] = []

        bottom, top = context.shelf_zone
        available = top - bottom
        if available <= 0:
            errors.append(
                f"Module '{module.id}': no vertical space left for shelves"
            )
        else:
            spacing = available / (params.count + 1)
            if spacing <= context.board_thickness:
                errors.append(
                    f"Module '{module.id}': {params.count} shelves leave "
                    f"{spacing:.1f} mm spacing, less than the board thickness"
                )

        if (
            context.interior_width > SAG_SPAN
            and context.board_thickness <= SAG_MAX_THICKNESS
        ):
            warnings.append(
                f"Module '{module.id}': shelf span {context.interior_width:.0f} mm "
                f"exceeds {SAG_SPAN} mm and may sag"
            )

        return ValidationResult.from_lists(errors, warnings)

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        params: ShelfParams = module.params
        material_id = params.material_id or context.default_material_id
        return [
            factory.make(
                label=f"Shelf {index}",
                length=context.interior_width,
                width=context.usable_depth,
                thickness=context.board_thickness,
                panel_type=PanelType.SHELF,
                material_id=material_id,
                module_id=module.id,
                position=position,
            )
            for index, position in enumerate(
                shelf_positions(context.shelf_zone, params.count), start=1
            )
        ]

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        params: ShelfParams = module.params
        if not params.adjustable:
            return []
        return [
            HardwareRequirement(
                SHELF_PIN_ID, pins_per_shelf(context.interior_width) * params.count
            )
        ]
