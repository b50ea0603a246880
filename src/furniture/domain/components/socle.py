"""Rear plinth component."""

from __future__ import annotations

from ..modules import Module, SocleParams
from ..value_objects import PanelType, Part
from .context import CarcassContext
from .factory import PartFactory
from .registry import component_registry
from .results import HardwareRequirement, ValidationResult


@component_registry.register("module.socle")
class SocleComponent:
    """Second plinth rail set back under the carcass.

    Only meaningful on a furniture that stands on a plinth.
    """

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        params: SocleParams = module.params
        if not context.params.has_socle:
            return ValidationResult.fail(
                [f"Module '{module.id}': a rear plinth requires has_socle"]
            )
        if params.height != context.params.socle_height:
            return ValidationResult.ok(
                [
                    f"Module '{module.id}': rear plinth height {params.height:.0f} mm "
                    f"differs from the front plinth ({context.params.socle_height:.0f} mm)"
                ]
            )
        return ValidationResult.ok()

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        params: SocleParams = module.params
        return [
            factory.make(
                label="Rear plinth",
                length=context.interior_width,
                width=params.height,
                thickness=context.board_thickness,
                panel_type=PanelType.SOCLE_REAR,
                material_id=params.material_id or context.default_material_id,
                module_id=module.id,
            )
        ]

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        return []
