"""Kitchen base and wall unit generators."""

from __future__ import annotations

from typing import ClassVar

from ..components import CarcassContext, PartFactory
from ..params import KitchenBaseParams, KitchenWallParams
from ..value_objects import FurnitureType, ModuleType, PanelType, Part
from .base import FurnitureGenerator
from .registry import register_generator


@register_generator(FurnitureType.KITCHEN_BASE)
class KitchenBaseGenerator(FurnitureGenerator):
    """Floor unit on a plinth, finished with an overhanging countertop."""

    params_type = KitchenBaseParams
    supported_modules: ClassVar[frozenset[ModuleType]] = frozenset(
        {
            ModuleType.SHELF,
            ModuleType.DRAWER,
            ModuleType.HINGED_DOOR,
            ModuleType.VERTICAL_DIVIDER,
            ModuleType.SOCLE,
        }
    )

    def trailing_extras(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        params: KitchenBaseParams = context.params
        if not params.has_countertop:
            return []
        overhang = params.countertop_overhang
        return [
            factory.make(
                label="Countertop",
                length=params.total_width + 2 * overhang,
                width=params.total_depth + overhang,
                thickness=params.countertop_thickness,
                panel_type=PanelType.COUNTERTOP,
                material_id=params.countertop_material_id,
                position=params.total_height,
            )
        ]


@register_generator(FurnitureType.KITCHEN_WALL)
class KitchenWallGenerator(FurnitureGenerator):
    """Wall-hung unit. No plinth, drawers or clothes rail."""

    params_type = KitchenWallParams
    supported_modules: ClassVar[frozenset[ModuleType]] = frozenset(
        {
            ModuleType.SHELF,
            ModuleType.HINGED_DOOR,
            ModuleType.SLIDING_DOOR,
            ModuleType.VERTICAL_DIVIDER,
        }
    )
