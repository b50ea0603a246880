"""Tests for cost rollup."""

from __future__ import annotations

import pytest

from furniture.domain import ConfigError, HardwareItem, PanelType
from furniture.domain.components import PartFactory
from furniture.domain.services import (
    DEFAULT_MARGIN_PERCENT,
    BomBuilder,
    CostSummary,
    calculate_cost,
    consolidate_costs,
)


@pytest.fixture
def bom(catalogs):
    """BOM of one 1 m2 mdf_18 panel (12.00) and four hinges (6.00)."""
    part = PartFactory("f1", "raw").make(
        label="Panel",
        length=1000,
        width=1000,
        thickness=18,
        panel_type=PanelType.SHELF,
        material_id="mdf_18",
    )
    hinges = HardwareItem(id="f1_hw001", hardware_type_id="hinge_35", quantity=4)
    return BomBuilder().build("f1", [part], [hinges], catalogs)


def _cost(subtotal: float, sale_price: float) -> CostSummary:
    return CostSummary(
        furniture_id="x",
        materials_cost=subtotal,
        hardware_cost=0.0,
        subtotal=subtotal,
        margin_percent=round((sale_price / subtotal - 1) * 100, 2),
        sale_price=sale_price,
    )


class TestCalculateCost:
    """Tests for calculate_cost."""

    def test_default_margin(self, bom) -> None:
        cost = calculate_cost("f1", bom)

        assert DEFAULT_MARGIN_PERCENT == 30.0
        assert (cost.materials_cost, cost.hardware_cost, cost.subtotal) == (12.0, 6.0, 18.0)
        assert cost.margin_percent == 30.0
        assert cost.sale_price == 23.4

    def test_zero_margin(self, bom) -> None:
        assert calculate_cost("f1", bom, 0).sale_price == 18.0

    def test_double_margin(self, bom) -> None:
        assert calculate_cost("f1", bom, 100).sale_price == 36.0

    def test_negative_margin_rejected(self, bom) -> None:
        with pytest.raises(ConfigError) as exc_info:
            calculate_cost("f1", bom, -5)

        assert exc_info.value.error_type == "params"
        assert exc_info.value.details[0]["path"] == "margin_percent"


class TestConsolidateCosts:
    """Tests for consolidate_costs."""

    def test_sums_fields(self) -> None:
        total = consolidate_costs([_cost(100, 130), _cost(100, 150)])

        assert total.furniture_id == "project"
        assert total.subtotal == 200
        assert total.sale_price == 280
        assert total.materials_cost == 200

    def test_effective_margin(self) -> None:
        total = consolidate_costs([_cost(100, 130), _cost(100, 150)])

        assert total.margin_percent == 40.0

    def test_empty(self) -> None:
        total = consolidate_costs([])

        assert (total.subtotal, total.sale_price, total.margin_percent) == (0, 0, 0.0)
