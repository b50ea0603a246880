"""Shared carcass generation for every furniture family."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from ..catalogs import Material, hdf_for_thickness
from ..components import (
    HANGER_CLEARANCE,
    CarcassContext,
    ComponentRegistry,
    HardwareRequirement,
    PartFactory,
    component_registry,
    rail_height_for,
)
from ..errors import ConfigError
from ..modules import DrawerParams, Module, sort_modules
from ..params import CarcassParams, WardrobeParams
from ..value_objects import DoorType, ModuleType, PanelType, Part

logger = logging.getLogger(__name__)

# Shelves and dividers stop short of the front edge
SHELF_SETBACK = 20
# Without a back, shelves are set back from both edges
OPEN_BACK_SETBACK = 10

DOOR_MODULE_FOR: dict[DoorType, ModuleType] = {
    DoorType.HINGED: ModuleType.HINGED_DOOR,
    DoorType.SLIDING: ModuleType.SLIDING_DOOR,
}


def resolve_back_material(
    params: CarcassParams, materials: Mapping[str, Material]
) -> str:
    """Pick the material of the back panel.

    An explicit ``back_material_id`` wins; otherwise the first HDF board
    stocked in the back thickness, falling back to ``hdf_<thickness>``.
    """
    if params.back_material_id:
        return params.back_material_id
    found = hdf_for_thickness(materials, params.back_panel_thickness)
    return found or f"hdf_{params.back_panel_thickness:g}"


@dataclass(frozen=True)
class GenerationPlan:
    """Validated inputs ready for part and hardware generation.

    Attributes:
        context: Carcass context shared by every module.
        modules: Modules in processing order.
        warnings: Non-fatal findings from module validation.
    """

    context: CarcassContext
    modules: tuple[Module, ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)


class FurnitureGenerator:
    """Base generator: plinth-aware box carcass with modules inside.

    Subclasses declare their params type and supported modules and may
    add family extras before the modules (structural parts that modules
    rely on) or after them (finishing parts such as a countertop).
    """

    params_type: ClassVar[type[CarcassParams]]
    supported_modules: ClassVar[frozenset[ModuleType]] = frozenset(
        set(ModuleType) - {ModuleType.HANGING_RAIL}
    )

    def __init__(self, registry: ComponentRegistry | None = None) -> None:
        self.registry = registry or component_registry

    # -- validation -------------------------------------------------------

    def plan(
        self,
        furniture_id: str,
        params: CarcassParams,
        modules: Sequence[Module],
        materials: Mapping[str, Material],
        default_material_id: str,
        default_finish_id: str,
    ) -> GenerationPlan:
        """Validate a furniture and build its carcass context.

        Args:
            furniture_id: Identifier used to prefix part ids.
            params: Family params; must be this generator's params type.
            modules: Modules in any order.
            materials: Material catalog, used to resolve the back board.
            default_material_id: Carcass material.
            default_finish_id: Finish applied to every part.

        Returns:
            A GenerationPlan with the context and ordered modules.

        Raises:
            ConfigError: If a module is unsupported, inconsistent with the
                params, or does not fit the carcass.
        """
        if not isinstance(params, self.params_type):
            raise ConfigError(
                f"{type(self).__name__} expects {self.params_type.__name__}, "
                f"got {type(params).__name__}",
                error_type="unsupported_combination",
            )
        ordered = sort_modules(modules)
        self._check_combination(params, ordered)

        context = self.build_context(
            furniture_id,
            params,
            ordered,
            resolve_back_material(params, materials),
            default_material_id,
            default_finish_id,
        )

        errors: list[str] = list(self.validate_extras(context))
        warnings: list[str] = []
        for module in ordered:
            result = self.registry.for_module(module.type).validate(module, context)
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        if errors:
            raise ConfigError(
                f"Invalid {params.family.value} '{furniture_id}':\n"
                + "\n".join(f"  - {error}" for error in errors),
                error_type="params",
                details=[{"path": furniture_id, "message": error} for error in errors],
            )

        logger.debug(
            f"Planned {params.family.value} '{furniture_id}': interior "
            f"{context.interior_width:.0f}x{context.interior_height:.0f} mm, "
            f"{len(ordered)} module(s)"
        )
        return GenerationPlan(context, tuple(ordered), tuple(warnings))

    def _check_combination(self, params: CarcassParams, modules: list[Module]) -> None:
        errors: list[str] = []
        seen: set[str] = set()
        for module in modules:
            if module.id in seen:
                errors.append(f"duplicate module id '{module.id}'")
            seen.add(module.id)

            if module.type not in self.supported_modules:
                errors.append(
                    f"module '{module.id}': {params.family.value} does not support "
                    f"{module.type.value} modules"
                )
            elif module.type.is_door:
                expected = DOOR_MODULE_FOR.get(params.door_type)
                if expected is None:
                    errors.append(
                        f"module '{module.id}': door type is 'none' but a "
                        f"{module.type.value} module was given"
                    )
                elif module.type != expected:
                    errors.append(
                        f"module '{module.id}': {module.type.value} does not match "
                        f"door type '{params.door_type.value}'"
                    )
        rail_count = sum(1 for m in modules if m.type == ModuleType.HANGING_RAIL)
        if rail_count > 1:
            errors.append(f"only one hanging_rail module is supported, got {rail_count}")
        if errors:
            raise ConfigError(
                f"Unsupported {params.family.value} configuration:\n"
                + "\n".join(f"  - {error}" for error in errors),
                error_type="unsupported_combination",
                details=[{"path": "modules", "message": error} for error in errors],
            )

    def validate_extras(self, context: CarcassContext) -> list[str]:
        """Family-specific fit checks. Returns error messages."""
        return []

    # -- layout -----------------------------------------------------------

    def body_height(self, params: CarcassParams) -> float:
        """Height of the carcass holding the modules, floor to top."""
        return params.total_height

    def build_context(
        self,
        furniture_id: str,
        params: CarcassParams,
        modules: list[Module],
        back_material_id: str,
        default_material_id: str,
        default_finish_id: str,
    ) -> CarcassContext:
        t = params.board_thickness
        interior_bottom = params.plinth_height + t
        interior_height = self.body_height(params) - params.plinth_height - 2 * t
        interior_top = interior_bottom + interior_height
        if params.has_back:
            usable_depth = params.total_depth - params.back_panel_thickness - SHELF_SETBACK
        else:
            usable_depth = params.total_depth - OPEN_BACK_SETBACK

        rail_height = None
        rails = [m for m in modules if m.type == ModuleType.HANGING_RAIL]
        if rails:
            if isinstance(params, WardrobeParams):
                default_height = params.hanging_rail_height
            else:
                default_height = interior_top
            rail_height = rail_height_for(rails[0], default_height)

        drawer_positions: dict[str, float] = {}
        stack_top = interior_bottom
        for module in modules:
            if isinstance(module.params, DrawerParams):
                drawer_positions[module.id] = stack_top
                stack_top += module.params.height

        zone_bottom = stack_top
        if rail_height is not None:
            zone_bottom = max(zone_bottom, rail_height + HANGER_CLEARANCE)

        return CarcassContext(
            furniture_id=furniture_id,
            params=params,
            interior_width=params.interior_width,
            interior_height=interior_height,
            interior_bottom=interior_bottom,
            usable_depth=usable_depth,
            default_material_id=default_material_id,
            default_finish_id=default_finish_id,
            back_material_id=back_material_id,
            rail_height=rail_height,
            drawer_positions=drawer_positions,
            shelf_zone=(zone_bottom, interior_top),
        )

    # -- parts ------------------------------------------------------------

    def generate(
        self,
        furniture_id: str,
        params: CarcassParams,
        modules: Sequence[Module],
        materials: Mapping[str, Material],
        default_material_id: str,
        default_finish_id: str,
    ) -> list[Part]:
        """Validate and generate the furniture's ordered part list.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        plan = self.plan(
            furniture_id,
            params,
            modules,
            materials,
            default_material_id,
            default_finish_id,
        )
        return self.build_parts(plan)

    def build_parts(self, plan: GenerationPlan) -> list[Part]:
        """Emit shell, leading extras, modules and trailing extras in order."""
        context = plan.context
        factory = PartFactory(context.furniture_id, context.default_finish_id)
        parts = self.shell(context, factory)
        parts.extend(self.leading_extras(context, factory))
        for module in plan.modules:
            component = self.registry.for_module(module.type)
            parts.extend(component.generate(module, context, factory))
        parts.extend(self.trailing_extras(context, factory))
        logger.debug(f"Generated {len(parts)} parts for '{context.furniture_id}'")
        return parts

    def shell(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        """Sides, top, bottom and, when enabled, back panel and plinth."""
        params = context.params
        t = params.board_thickness
        material = context.default_material_id
        if params.SIDES_TO_FLOOR:
            side_height = self.body_height(params)
        else:
            side_height = self.body_height(params) - params.plinth_height

        parts = [
            factory.make(
                label="Left side",
                length=side_height,
                width=params.total_depth,
                thickness=t,
                panel_type=PanelType.LEFT_SIDE,
                material_id=material,
            ),
            factory.make(
                label="Right side",
                length=side_height,
                width=params.total_depth,
                thickness=t,
                panel_type=PanelType.RIGHT_SIDE,
                material_id=material,
            ),
            factory.make(
                label="Top",
                length=context.interior_width,
                width=params.total_depth,
                thickness=t,
                panel_type=PanelType.TOP,
                material_id=material,
                position=context.interior_top,
            ),
            factory.make(
                label="Bottom",
                length=context.interior_width,
                width=params.total_depth,
                thickness=t,
                panel_type=PanelType.BOTTOM,
                material_id=material,
                position=context.interior_bottom - t,
            ),
        ]
        if params.has_back:
            parts.append(
                factory.make(
                    label="Back panel",
                    length=context.interior_height,
                    width=context.interior_width,
                    thickness=params.back_panel_thickness,
                    panel_type=PanelType.BACK,
                    material_id=context.back_material_id,
                )
            )
        if params.has_socle:
            parts.append(
                factory.make(
                    label="Plinth",
                    length=context.interior_width,
                    width=params.socle_height,
                    thickness=t,
                    panel_type=PanelType.PLINTH,
                    material_id=material,
                    position=0.0,
                )
            )
        return parts

    def leading_extras(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        """Family parts emitted between the shell and the modules."""
        return []

    def trailing_extras(self, context: CarcassContext, factory: PartFactory) -> list[Part]:
        """Family parts emitted after every module."""
        return []

    # -- hardware ---------------------------------------------------------

    def hardware(self, plan: GenerationPlan) -> list[tuple[str, HardwareRequirement]]:
        """Hardware requirements of every module, tagged with its module id."""
        requirements: list[tuple[str, HardwareRequirement]] = []
        for module in plan.modules:
            component = self.registry.for_module(module.type)
            for requirement in component.hardware(module, plan.context):
                requirements.append((module.id, requirement))
        return requirements
