"""Hanging rail component."""

from __future__ import annotations

import math

from ..modules import HangingRailParams, Module
from ..value_objects import Part
from .context import CarcassContext
from .factory import PartFactory
from .registry import component_registry
from .results import HardwareRequirement, ValidationResult

RAIL_SUPPORT_ID = "rail_support"
RAIL_TUBE_ID = "hanging_rail_tube"
# One support bracket per started 1200 mm of furniture width, plus one
RAIL_SUPPORT_INTERVAL = 1200
# Hangers need this much room between the rail and the top panel
RAIL_TOP_CLEARANCE = 60
# Hanger hooks reach this far above the rail; shelves start above it
HANGER_CLEARANCE = 60


def rail_height_for(module: Module, default_height: float) -> float:
    """Height of a rail module, falling back to the furniture default."""
    params: HangingRailParams = module.params
    return params.height if params.height is not None else default_height


def rail_support_count(total_width: float) -> int:
    """Number of support brackets for a rail across ``total_width``."""
    return math.ceil(total_width / RAIL_SUPPORT_INTERVAL) + 1


def rail_tube_metres(interior_width: float) -> int:
    """Rail tube length to buy, in whole metres."""
    return max(1, math.ceil(interior_width / 1000))


@component_registry.register("module.hanging_rail")
class HangingRailComponent:
    """Clothes rail. Contributes hardware only, never a panel."""

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        height = rail_height_for(module, context.rail_height or 0.0)
        ceiling = context.interior_top - RAIL_TOP_CLEARANCE
        if not context.interior_bottom < height <= ceiling:
            return ValidationResult.fail(
                [
                    f"Module '{module.id}': rail height {height:.0f} mm must lie between "
                    f"{context.interior_bottom:.0f} and {ceiling:.0f} mm"
                ]
            )
        return ValidationResult.ok()

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        return []

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        return [
            HardwareRequirement(RAIL_SUPPORT_ID, rail_support_count(context.total_width)),
            HardwareRequirement(RAIL_TUBE_ID, rail_tube_metres(context.interior_width)),
        ]
