"""Furniture family generators.

One generator per furniture family turns validated params and modules
into an ordered part list. ``generate_parts`` dispatches on the params
variant.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..catalogs import Material
from ..modules import Module
from ..params import CarcassParams
from ..value_objects import Part
from .base import (
    OPEN_BACK_SETBACK,
    SHELF_SETBACK,
    FurnitureGenerator,
    GenerationPlan,
    resolve_back_material,
)
from .bookcase import BookcaseGenerator
from .entertainment_center import EntertainmentCenterGenerator
from .kitchen import KitchenBaseGenerator, KitchenWallGenerator
from .registry import generator_for, register_generator, registered_families
from .tv_unit import TvUnitGenerator
from .wardrobe import WardrobeGenerator


def generate_parts(
    furniture_id: str,
    params: CarcassParams,
    modules: Sequence[Module],
    material_map: Mapping[str, Material],
    default_material_id: str,
    default_finish_id: str,
) -> list[Part]:
    """Generate the ordered part list of one furniture.

    Args:
        furniture_id: Identifier used to prefix part ids.
        params: Family params variant.
        modules: Modules in any order; processed by ascending ``order``.
        material_map: Material catalog.
        default_material_id: Carcass material.
        default_finish_id: Finish applied to every part.

    Returns:
        Shell panels, family extras and module parts in generation order.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    return generator_for(params).generate(
        furniture_id,
        params,
        modules,
        material_map,
        default_material_id,
        default_finish_id,
    )


__all__ = [
    "BookcaseGenerator",
    "EntertainmentCenterGenerator",
    "FurnitureGenerator",
    "GenerationPlan",
    "KitchenBaseGenerator",
    "KitchenWallGenerator",
    "OPEN_BACK_SETBACK",
    "SHELF_SETBACK",
    "TvUnitGenerator",
    "WardrobeGenerator",
    "generate_parts",
    "generator_for",
    "register_generator",
    "registered_families",
    "resolve_back_material",
]
