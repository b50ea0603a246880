"""Cost rollup from bills of material."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import ConfigError
from ..value_objects import round2
from .bom import Bom

DEFAULT_MARGIN_PERCENT = 30.0


@dataclass(frozen=True)
class CostSummary:
    """Margin-adjusted price of one furniture or a project.

    Attributes:
        furniture_id: Furniture (or "project") the summary covers.
        materials_cost: Board cost from the BOM.
        hardware_cost: Hardware cost from the BOM.
        subtotal: Materials plus hardware.
        margin_percent: Margin applied on top of the subtotal.
        sale_price: Subtotal including margin.
    """

    furniture_id: str
    materials_cost: float
    hardware_cost: float
    subtotal: float
    margin_percent: float
    sale_price: float


def calculate_cost(
    furniture_id: str, bom: Bom, margin_percent: float = DEFAULT_MARGIN_PERCENT
) -> CostSummary:
    """Roll a BOM into a sale price.

    Args:
        furniture_id: Furniture the BOM belongs to.
        bom: Priced bill of materials.
        margin_percent: Margin on top of cost, e.g. 30 for 30%.

    Returns:
        The CostSummary.

    Raises:
        ConfigError: If the margin is negative.
    """
    if margin_percent < 0:
        raise ConfigError(
            f"Margin must not be negative (got {margin_percent})",
            error_type="params",
            details=[
                {"path": "margin_percent", "message": "must be >= 0", "value": margin_percent}
            ],
        )
    materials = bom.total_materials
    hardware = bom.total_hardware
    subtotal = round2(materials + hardware)
    return CostSummary(
        furniture_id=furniture_id,
        materials_cost=materials,
        hardware_cost=hardware,
        subtotal=subtotal,
        margin_percent=margin_percent,
        sale_price=round2(subtotal * (1 + margin_percent / 100)),
    )


def consolidate_costs(
    costs: Sequence[CostSummary], furniture_id: str = "project"
) -> CostSummary:
    """Sum several cost summaries field by field.

    The resulting ``margin_percent`` is the effective margin of the
    combined figures, since the inputs may use different margins.
    """
    materials = round2(sum(cost.materials_cost for cost in costs))
    hardware = round2(sum(cost.hardware_cost for cost in costs))
    subtotal = round2(sum(cost.subtotal for cost in costs))
    sale_price = round2(sum(cost.sale_price for cost in costs))
    margin = round2((sale_price / subtotal - 1) * 100) if subtotal else 0.0
    return CostSummary(
        furniture_id=furniture_id,
        materials_cost=materials,
        hardware_cost=hardware,
        subtotal=subtotal,
        margin_percent=margin,
        sale_price=sale_price,
    )
