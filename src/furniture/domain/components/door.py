"""Hinged and sliding door components."""

from __future__ import annotations

from ..modules import HingedDoorParams, Module, SlidingDoorParams
from ..value_objects import PanelType, Part
from .context import CarcassContext
from .factory import PartFactory
from .registry import component_registry
from .results import HardwareRequirement, ValidationResult

# Reveal around each hinged leaf: 1 mm per edge
DOOR_GAP = 2
# Clearance between the leaf and the top and bottom panels
DOOR_HEIGHT_CLEARANCE = 4
MIN_LEAF_WIDTH = 150
HEAVY_LEAF_HEIGHT = 2000
WIDE_LEAF_WIDTH = 600

# (max leaf height in mm, hinges per leaf)
HINGE_STEPS: tuple[tuple[float, int], ...] = ((900, 2), (1600, 3), (2000, 4))
MAX_HINGES = 5

HINGE_ID = "hinge_35"
SOFT_HINGE_ID = "hinge_35_soft"

SLIDING_OVERLAP = 60
SLIDING_TRACK_ALLOWANCE = 40
SLIDING_PANEL_THICKNESS = 18
SLIDING_RAIL_KIT_ID = "sliding_rail_kit"


def hinges_per_leaf(leaf_height: float) -> int:
    """Determine hinge count based on leaf height.

    Args:
        leaf_height: Height of the door leaf in mm.

    Returns:
        Number of hinges required (2 to 5).
    """
    for max_height, hinges in HINGE_STEPS:
        if leaf_height <= max_height:
            return hinges
    return MAX_HINGES


def hinged_leaf_size(context: CarcassContext, count: int) -> tuple[float, float]:
    """Return (width, height) of one inset hinged leaf."""
    width = (context.interior_width - DOOR_GAP * (count - 1)) / count
    height = context.interior_height - DOOR_HEIGHT_CLEARANCE
    return width, height


def sliding_panel_size(context: CarcassContext, panel_count: int) -> tuple[float, float]:
    """Return (width, height) of one sliding panel.

    Adjacent panels overlap by ``SLIDING_OVERLAP`` so the opening stays
    closed when every panel is pushed to one side.
    """
    width = (context.interior_width + SLIDING_OVERLAP * (panel_count - 1)) / panel_count
    height = context.interior_height - SLIDING_TRACK_ALLOWANCE
    return width, height


@component_registry.register("module.hinged_door")
class HingedDoorComponent:
    """Inset hinged doors dividing the interior width evenly."""

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        params: HingedDoorParams = module.params
        errors: list[str] = []
        warnings: list[str] = []

        width, height = hinged_leaf_size(context, params.count)
        if width < MIN_LEAF_WIDTH:
            errors.append(
                f"Module '{module.id}': {params.count} leaves would be {width:.0f} mm "
                f"wide, below the {MIN_LEAF_WIDTH} mm minimum"
            )
        elif width > WIDE_LEAF_WIDTH:
            warnings.append(
                f"Module '{module.id}': leaf width {width:.0f} mm exceeds "
                f"{WIDE_LEAF_WIDTH} mm, consider more leaves"
            )
        if height > HEAVY_LEAF_HEIGHT:
            warnings.append(
                f"Module '{module.id}': leaf height {height:.0f} mm exceeds "
                f"{HEAVY_LEAF_HEIGHT} mm, check hinge capacity"
            )

        return ValidationResult.from_lists(errors, warnings)

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        params: HingedDoorParams = module.params
        width, height = hinged_leaf_size(context, params.count)
        material_id = params.material_id or context.default_material_id
        return [
            factory.make(
                label="Door" if params.count == 1 else f"Door {index + 1}",
                length=height,
                width=width,
                thickness=context.board_thickness,
                panel_type=PanelType.DOOR,
                material_id=material_id,
                module_id=module.id,
                position=context.interior_bottom + DOOR_HEIGHT_CLEARANCE / 2,
            )
            for index in range(params.count)
        ]

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        params: HingedDoorParams = module.params
        _, height = hinged_leaf_size(context, params.count)
        hinge_id = SOFT_HINGE_ID if params.soft_close else HINGE_ID
        return [
            HardwareRequirement(hinge_id, hinges_per_leaf(height) * params.count),
            HardwareRequirement(params.handle_type, params.count),
        ]


@component_registry.register("module.sliding_door")
class SlidingDoorComponent:
    """Overlapping sliding panels running on a single rail kit."""

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        params: SlidingDoorParams = module.params
        width, _ = sliding_panel_size(context, params.panel_count)
        if width < MIN_LEAF_WIDTH:
            return ValidationResult.fail(
                [
                    f"Module '{module.id}': sliding panels would be {width:.0f} mm "
                    f"wide, below the {MIN_LEAF_WIDTH} mm minimum"
                ]
            )
        return ValidationResult.ok()

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        params: SlidingDoorParams = module.params
        width, height = sliding_panel_size(context, params.panel_count)
        material_id = params.material_id or context.default_material_id
        return [
            factory.make(
                label=f"Sliding door {index + 1}",
                length=height,
                width=width,
                thickness=SLIDING_PANEL_THICKNESS,
                panel_type=PanelType.SLIDING_DOOR,
                material_id=material_id,
                module_id=module.id,
            )
            for index in range(params.panel_count)
        ]

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        # One kit carries every panel of the set
        return [HardwareRequirement(SLIDING_RAIL_KIT_ID, 1)]
