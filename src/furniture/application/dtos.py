"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from furniture.domain import (
    DEFAULT_FINISH_ID,
    DEFAULT_MATERIAL_ID,
    ConfigError,
    FurnitureParams,
    Module,
    Part,
)
from furniture.domain.services import (
    AssemblyStep,
    Bom,
    CostSummary,
    CutList,
)
from furniture.domain.value_objects import HardwareItem


@dataclass(frozen=True)
class FurnitureRequest:
    """Domain-level input for generating one furniture.

    Attributes:
        furniture_id: Identifier used to prefix part and hardware ids.
        params: Family params variant.
        modules: Modules in any order.
        material_id: Carcass material.
        finish_id: Finish applied to every part.
        name: Optional display name.
    """

    furniture_id: str
    params: FurnitureParams
    modules: tuple[Module, ...] = ()
    material_id: str = DEFAULT_MATERIAL_ID
    finish_id: str = DEFAULT_FINISH_ID
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.furniture_id


@dataclass(frozen=True)
class FurnitureResult:
    """Everything computed for one valid furniture.

    Attributes:
        furniture_id: Furniture identifier.
        name: Display name.
        family: Furniture family value (e.g. "wardrobe").
        parts: Parts in generation order.
        hardware: Inferred hardware items.
        bom: Priced bill of materials.
        cut_list: Sheet groups for this furniture alone.
        cost: Margin-adjusted price.
        assembly_steps: Ordered assembly instructions.
        warnings: Non-fatal findings from every stage.
    """

    furniture_id: str
    name: str
    family: str
    parts: tuple[Part, ...]
    hardware: tuple[HardwareItem, ...]
    bom: Bom
    cut_list: CutList
    cost: CostSummary
    assembly_steps: tuple[AssemblyStep, ...]
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class FurnitureOutcome:
    """Either a result or the error that prevented one.

    Exactly one of ``result`` and ``error`` is set.
    """

    furniture_id: str
    result: FurnitureResult | None = None
    error: ConfigError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("FurnitureOutcome needs exactly one of result or error")

    @property
    def is_valid(self) -> bool:
        """Check if the furniture was generated successfully."""
        return self.result is not None


@dataclass
class ProjectQuote:
    """Consolidated quote over every furniture of a project.

    Totals cover only the furnitures that generated successfully; the
    others are listed in ``errors``.

    Attributes:
        name: Project name.
        currency: Currency code of every price.
        outcomes: One outcome per furniture, in input order.
        bom: Consolidated bill of materials.
        cost: Consolidated cost summary.
        cut_list: Project-wide cut list over all valid parts.
    """

    name: str
    currency: str
    outcomes: list[FurnitureOutcome]
    bom: Bom
    cost: CostSummary
    cut_list: CutList
    warnings: list[str] = field(default_factory=list)

    @property
    def results(self) -> list[FurnitureResult]:
        return [o.result for o in self.outcomes if o.result is not None]

    @property
    def errors(self) -> list[tuple[str, ConfigError]]:
        return [(o.furniture_id, o.error) for o in self.outcomes if o.error is not None]

    @property
    def is_valid(self) -> bool:
        """True when every furniture generated."""
        return not self.errors
