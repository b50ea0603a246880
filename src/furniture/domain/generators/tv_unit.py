"""TV unit generator."""

from __future__ import annotations

from ..components import CarcassContext, PartFactory
from ..params import TvUnitParams
from ..value_objects import FurnitureType, PanelType, Part
from .base import FurnitureGenerator
from .registry import register_generator


def niche_left_offset(context: CarcassContext) -> float:
    """Offset of the niche's left divider from the interior left face."""
    params: TvUnitParams = context.params
    return (context.interior_width - params.tv_niche_width) / 2 - params.board_thickness


@register_generator(FurnitureType.TV_UNIT)
class TvUnitGenerator(FurnitureGenerator):
    """Low media unit with an optional centred open niche.

    The niche is framed by two full-height dividers and closed on top by
    a niche shelf; it is built before the modules so shelves and doors
    are fitted around it.
    """

    params_type = TvUnitParams

    def validate_extras(self, context: CarcassContext) -> list[str]:
        params: TvUnitParams = context.params
        if not params.has_niche:
            return []
        errors: list[str] = []
        if niche_left_offset(context) <= 0:
            errors.append(
                f"tv niche width {params.tv_niche_width:.0f} mm does not fit the "
                f"interior width of {context.interior_width:.0f} mm"
            )
        if params.tv_niche_height >= context.interior_height - params.board_thickness:
            errors.append(
                f"tv niche height {params.tv_niche_height:.0f} mm does not fit the "
                f"interior height of {context.interior_height:.0f} mm"
            )
        return errors

    def leading_extras(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        params: TvUnitParams = context.params
        if not params.has_niche:
            return []
        t = params.board_thickness
        left = niche_left_offset(context)
        material = context.default_material_id
        return [
            factory.make(
                label="Niche divider left",
                length=context.interior_height,
                width=context.usable_depth,
                thickness=t,
                panel_type=PanelType.NICHE_DIVIDER,
                material_id=material,
                position=left,
            ),
            factory.make(
                label="Niche divider right",
                length=context.interior_height,
                width=context.usable_depth,
                thickness=t,
                panel_type=PanelType.NICHE_DIVIDER,
                material_id=material,
                position=left + t + params.tv_niche_width,
            ),
            factory.make(
                label="Niche shelf",
                length=params.tv_niche_width,
                width=context.usable_depth,
                thickness=t,
                panel_type=PanelType.NICHE_SHELF,
                material_id=material,
                position=context.interior_bottom + params.tv_niche_height,
            ),
        ]
