"""Vertical divider component."""

from __future__ import annotations

from ..modules import Module, VerticalDividerParams
from ..value_objects import PanelType, Part
from .context import CarcassContext
from .factory import PartFactory
from .registry import component_registry
from .results import HardwareRequirement, ValidationResult


@component_registry.register("module.vertical_divider")
class VerticalDividerComponent:
    """Full-height partition placed at an offset from the left side."""

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        params: VerticalDividerParams = module.params
        if not 0 < params.position < context.interior_width:
            return ValidationResult.fail(
                [
                    f"Module '{module.id}': divider position {params.position:.0f} mm "
                    f"is outside the interior (0-{context.interior_width:.0f} mm)"
                ]
            )
        return ValidationResult.ok()

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        params: VerticalDividerParams = module.params
        return [
            factory.make(
                label="Vertical divider",
                length=context.interior_height,
                width=context.usable_depth,
                thickness=context.board_thickness,
                panel_type=PanelType.DIVIDER,
                material_id=params.material_id or context.default_material_id,
                module_id=module.id,
                position=params.position,
            )
        ]

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        return []
