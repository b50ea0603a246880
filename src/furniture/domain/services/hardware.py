"""Hardware inference from params and modules."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..catalogs import DEFAULT_FINISH_ID, DEFAULT_MATERIAL_ID, Catalogs
from ..generators import FurnitureGenerator, GenerationPlan, generator_for
from ..modules import Module
from ..params import CarcassParams
from ..value_objects import HardwareItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HardwareResult:
    """Inferred hardware plus the lines that had to be dropped.

    Attributes:
        items: Hardware items in module order, with sequential ids.
        warnings: One message per requirement whose catalog id is unknown.
    """

    items: tuple[HardwareItem, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


class HardwareInference:
    """Derives hardware from params and modules using each module's rule.

    Parts are not needed: every rule works from the carcass context. A
    requirement whose hardware id is missing from the catalog is dropped
    with a warning; inference itself never fails on catalog content.
    """

    def __init__(self, catalogs: Catalogs) -> None:
        self.catalogs = catalogs

    def infer(
        self,
        furniture_id: str,
        params: CarcassParams,
        modules: Sequence[Module],
    ) -> HardwareResult:
        """Infer the hardware of a furniture.

        Args:
            furniture_id: Identifier used to prefix hardware ids.
            params: Family params variant.
            modules: Modules in any order.

        Returns:
            HardwareResult with items and warnings.

        Raises:
            ConfigError: If params and modules do not form a valid furniture.
        """
        generator = generator_for(params)
        plan = generator.plan(
            furniture_id,
            params,
            modules,
            self.catalogs.materials,
            DEFAULT_MATERIAL_ID,
            DEFAULT_FINISH_ID,
        )
        return self.from_plan(generator, plan)

    def from_plan(
        self, generator: FurnitureGenerator, plan: GenerationPlan
    ) -> HardwareResult:
        """Infer hardware for an already validated plan."""
        furniture_id = plan.context.furniture_id
        items: list[HardwareItem] = []
        warnings: list[str] = []

        for module_id, requirement in generator.hardware(plan):
            if requirement.quantity < 1:
                continue
            if self.catalogs.hardware_spec(requirement.hardware_type_id) is None:
                message = (
                    f"Unknown hardware '{requirement.hardware_type_id}' required by "
                    f"module '{module_id}' of '{furniture_id}'; item dropped"
                )
                logger.warning(message)
                warnings.append(message)
                continue
            items.append(
                HardwareItem(
                    id=f"{furniture_id}_hw{len(items) + 1:03d}",
                    hardware_type_id=requirement.hardware_type_id,
                    quantity=requirement.quantity,
                    module_id=module_id,
                )
            )

        logger.debug(f"Inferred {len(items)} hardware item(s) for '{furniture_id}'")
        return HardwareResult(tuple(items), tuple(warnings))
