"""Entertainment center generator."""

from __future__ import annotations

from ..components import CarcassContext, PartFactory
from ..params import CarcassParams, EntertainmentCenterParams
from ..value_objects import FurnitureType, PanelType, Part
from .base import FurnitureGenerator
from .registry import register_generator


@register_generator(FurnitureType.ENTERTAINMENT_CENTER)
class EntertainmentCenterGenerator(FurnitureGenerator):
    """Base cabinet with an optional side column and raised back panel.

    Modules live in the base cabinet. The side column stands to the right
    of the base over the full height; the raised panel closes the wall
    above the base behind the screen.
    """

    params_type = EntertainmentCenterParams

    def body_height(self, params: CarcassParams) -> float:
        return params.base_height

    def shell(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        parts = super().shell(context, factory)
        params: EntertainmentCenterParams = context.params
        if params.side_column_width <= 0:
            return parts

        t = params.board_thickness
        material = context.default_material_id
        column_inner = params.side_column_width - 2 * t
        parts.extend(
            [
                factory.make(
                    label="Column left side",
                    length=params.total_height,
                    width=params.total_depth,
                    thickness=t,
                    panel_type=PanelType.COLUMN_SIDE,
                    material_id=material,
                ),
                factory.make(
                    label="Column right side",
                    length=params.total_height,
                    width=params.total_depth,
                    thickness=t,
                    panel_type=PanelType.COLUMN_SIDE,
                    material_id=material,
                ),
                factory.make(
                    label="Column top",
                    length=column_inner,
                    width=params.total_depth,
                    thickness=t,
                    panel_type=PanelType.COLUMN_TOP,
                    material_id=material,
                    position=params.total_height - t,
                ),
                factory.make(
                    label="Column bottom",
                    length=column_inner,
                    width=params.total_depth,
                    thickness=t,
                    panel_type=PanelType.COLUMN_BOTTOM,
                    material_id=material,
                    position=params.plinth_height,
                ),
            ]
        )
        if params.has_back:
            parts.append(
                factory.make(
                    label="Column back",
                    length=params.total_height - params.plinth_height - 2 * t,
                    width=column_inner,
                    thickness=params.back_panel_thickness,
                    panel_type=PanelType.COLUMN_BACK,
                    material_id=context.back_material_id,
                )
            )
        return parts

    def trailing_extras(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        params: EntertainmentCenterParams = context.params
        if not params.has_raised_panel:
            return []
        return [
            factory.make(
                label="Raised back panel",
                length=params.base_width,
                width=params.raised_panel_height,
                thickness=params.board_thickness,
                panel_type=PanelType.RAISED_PANEL,
                material_id=context.default_material_id,
                position=params.base_height,
            )
        ]
