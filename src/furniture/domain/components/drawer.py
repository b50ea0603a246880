"""Drawer component.

A drawer is a visible front plus a box riding on a pair of side-mount
slides. Drawers stack upwards from the interior floor in module order;
the stack heights are precomputed into the carcass context.
"""

from __future__ import annotations

from ..modules import DrawerParams, Module, SlideType
from ..value_objects import PanelType, Part
from .context import CarcassContext
from .door import DOOR_GAP
from .factory import PartFactory
from .registry import component_registry
from .results import HardwareRequirement, ValidationResult

# Standard side-mount slide lengths in mm
STANDARD_SLIDE_LENGTHS: tuple[int, ...] = (300, 350, 400, 450, 500, 550)
# Space kept free behind the slide, in front of the back panel
SLIDE_DEPTH_CLEARANCE = 30
# Side clearance taken by each slide
SLIDE_SIDE_CLEARANCE = 13
# Box is lower than the front so it clears the carcass when opening
BOX_HEIGHT_CLEARANCE = 40
DRAWER_BOTTOM_THICKNESS = 6
DRAWER_BOTTOM_MATERIAL = "hdf_6"
# Bottom panel sits in 8 mm grooves on each side
BOTTOM_GROOVE = 8


def slide_length_for_depth(available_depth: float) -> int | None:
    """Select the longest standard slide fitting a depth.

    Args:
        available_depth: Free depth behind the drawer front in mm.

    Returns:
        Slide length in mm, or None if even the shortest slide is too long.
    """
    fitting = [length for length in STANDARD_SLIDE_LENGTHS if length <= available_depth]
    return fitting[-1] if fitting else None


def drawer_slide_length(context: CarcassContext) -> int | None:
    """Slide length for a drawer in the given carcass."""
    available = (
        context.total_depth - context.params.back_thickness - SLIDE_DEPTH_CLEARANCE
    )
    return slide_length_for_depth(available)


def slide_hardware_id(slide_type: SlideType, length: int) -> str:
    """Catalog id of a slide pair, e.g. ``slide_soft_500``."""
    prefix = "soft" if slide_type == SlideType.SOFT_CLOSE else "basic"
    return f"slide_{prefix}_{length}"


@component_registry.register("module.drawer")
class DrawerComponent:
    """Drawer with front, four-sided box and bottom."""

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        params: DrawerParams = module.params
        errors: list[str] = []

        if drawer_slide_length(context) is None:
            errors.append(
                f"Module '{module.id}': carcass depth {context.total_depth:.0f} mm "
                f"is too shallow for a {STANDARD_SLIDE_LENGTHS[0]} mm drawer slide"
            )

        bottom = context.drawer_positions.get(module.id, context.interior_bottom)
        if bottom + params.height > context.interior_top:
            errors.append(
                f"Module '{module.id}': drawer of {params.height:.0f} mm does not fit; "
                f"the drawer stack would exceed the interior height of "
                f"{context.interior_height:.0f} mm"
            )

        return ValidationResult.from_lists(errors, [])

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        params: DrawerParams = module.params
        slide_length = drawer_slide_length(context)
        t = context.board_thickness
        front_material = params.front_material_id or context.default_material_id
        body_material = params.body_material_id or context.default_material_id
        position = context.drawer_positions.get(module.id, context.interior_bottom)

        box_width = context.interior_width - 2 * SLIDE_SIDE_CLEARANCE
        box_height = params.height - BOX_HEIGHT_CLEARANCE

        return [
            factory.make(
                label="Drawer front",
                length=context.interior_width - DOOR_GAP,
                width=params.height,
                thickness=t,
                panel_type=PanelType.DRAWER_FRONT,
                material_id=front_material,
                module_id=module.id,
                position=position,
            ),
            factory.make(
                label="Drawer box front",
                length=box_width - 2 * t,
                width=box_height,
                thickness=t,
                panel_type=PanelType.DRAWER_BOX_FRONT,
                material_id=body_material,
                module_id=module.id,
            ),
            factory.make(
                label="Drawer box back",
                length=box_width - 2 * t,
                width=box_height,
                thickness=t,
                panel_type=PanelType.DRAWER_BOX_BACK,
                material_id=body_material,
                module_id=module.id,
            ),
            factory.make(
                label="Drawer box side",
                length=slide_length,
                width=box_height,
                thickness=t,
                quantity=2,
                panel_type=PanelType.DRAWER_BOX_SIDE,
                material_id=body_material,
                module_id=module.id,
            ),
            factory.make(
                label="Drawer bottom",
                length=box_width - 2 * t + 2 * BOTTOM_GROOVE,
                width=slide_length - 2 * t + 2 * BOTTOM_GROOVE,
                thickness=DRAWER_BOTTOM_THICKNESS,
                panel_type=PanelType.DRAWER_BOTTOM,
                material_id=DRAWER_BOTTOM_MATERIAL,
                module_id=module.id,
            ),
        ]

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        params: DrawerParams = module.params
        items: list[HardwareRequirement] = []
        slide_length = drawer_slide_length(context)
        if slide_length is not None:
            items.append(
                HardwareRequirement(slide_hardware_id(params.slide_type, slide_length), 1)
            )
        items.append(HardwareRequirement(params.handle_type, 1))
        return items
