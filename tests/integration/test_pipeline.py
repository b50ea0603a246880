"""End-to-end tests of the single-furniture pipeline.

Each test runs GenerateFurnitureCommand from params (or a bundled
template) through parts, hardware, BOM, cut list, cost and assembly.
"""

from __future__ import annotations

import json

import pytest

from furniture.application import FurnitureRequest, GenerateFurnitureCommand
from furniture.application.config import load_config_from_dict
from furniture.application.templates import TemplateManager
from furniture.domain import HingedDoorParams, Module, ShelfParams
from furniture.domain.services import BomBuilder


@pytest.fixture
def command(catalogs) -> GenerateFurnitureCommand:
    return GenerateFurnitureCommand(catalogs=catalogs)


@pytest.fixture
def scenario_a(command, wardrobe_params, scenario_a_modules):
    """Full result of the two-door wardrobe with three shelves."""
    request = FurnitureRequest("wardrobe", wardrobe_params, tuple(scenario_a_modules))
    outcome = command.execute(request)
    assert outcome.is_valid, outcome.error
    return outcome.result


def _part_area(parts) -> float:
    return sum(p.length * p.width * p.quantity for p in parts) / 1_000_000


class TestWardrobePipeline:
    """Two-door hinged wardrobe from parts through to assembly."""

    def test_part_count(self, scenario_a) -> None:
        assert len(scenario_a.parts) == 10
        assert scenario_a.family == "wardrobe"

    def test_handles_and_hinges(self, scenario_a) -> None:
        by_type = {item.hardware_type_id: item.quantity for item in scenario_a.hardware}

        assert by_type["handle_bar_128"] == 2
        assert by_type["hinge_35"] == 10

    def test_totals(self, scenario_a) -> None:
        assert scenario_a.bom.total_materials == 124.79
        assert scenario_a.bom.total_hardware == 27.5
        assert scenario_a.cost.subtotal == 152.29
        assert scenario_a.cost.sale_price == pytest.approx(152.29 * 1.3, abs=0.01)

    def test_cut_list_conserves_area(self, scenario_a) -> None:
        grouped = sum(g.total_area_sqm for g in scenario_a.cut_list.groups)

        assert grouped == pytest.approx(_part_area(scenario_a.parts), abs=0.01)

    def test_steps_contiguous(self, scenario_a) -> None:
        numbers = [step.step_number for step in scenario_a.assembly_steps]

        assert numbers == list(range(1, len(numbers) + 1))

    def test_every_part_assembled_once(self, scenario_a) -> None:
        codes = [c for step in scenario_a.assembly_steps for c in step.part_codes]

        assert sorted(codes) == sorted(p.code for p in scenario_a.parts)

    def test_idempotent(self, command, wardrobe_params, scenario_a_modules, scenario_a) -> None:
        """The same request always yields the same result."""
        request = FurnitureRequest("wardrobe", wardrobe_params, tuple(scenario_a_modules))

        again = command.execute(request).result

        assert again == scenario_a

    def test_order_field_decides_sequence(self, command, wardrobe_params) -> None:
        """Input position does not matter once modules carry an order."""
        shelves = Module("shelves", 1, ShelfParams(count=3))
        doors = Module("doors", 2, HingedDoorParams(count=2))

        forward = command.execute(
            FurnitureRequest("wardrobe", wardrobe_params, (shelves, doors))
        ).result
        backward = command.execute(
            FurnitureRequest("wardrobe", wardrobe_params, (doors, shelves))
        ).result

        assert forward == backward


class TestShellOnly:
    """A furniture without modules."""

    def test_shell_only(self, command, open_bookcase_params) -> None:
        outcome = command.execute(FurnitureRequest("bookcase", open_bookcase_params))

        result = outcome.result
        assert result is not None
        assert all(p.module_id is None for p in result.parts)
        assert len(result.cut_list.groups) == 1
        assert result.cut_list.groups[0].material_id == "mdf_18"
        assert len(result.assembly_steps) == 1
        assert result.hardware == ()


class TestKitchenTemplate:
    """The bundled kitchen drawer unit."""

    @pytest.fixture
    def result(self, command):
        data = json.loads(TemplateManager().get_template("kitchen-base-drawers"))
        config = load_config_from_dict(data)
        outcome = command.execute_config(config.furnitures[0], config.project.profit_margin)
        assert outcome.is_valid, outcome.error
        return outcome.result

    def test_drawer_fronts_stacked(self, result) -> None:
        fronts = {
            p.module_id: p.position for p in result.parts if p.label == "Drawer front"
        }

        assert fronts == {"drawer_low": 118, "drawer_mid": 418, "drawer_top": 618}

    def test_soft_close_slides(self, result) -> None:
        slides = [h for h in result.hardware if h.hardware_type_id.startswith("slide")]

        assert len(slides) == 3
        assert {h.hardware_type_id for h in slides} == {"slide_soft_500"}

    def test_countertop_is_last_part(self, result) -> None:
        assert result.parts[-1].material_id == "mdf_25"
        assert result.parts[-1].thickness == 30

    def test_name_and_material(self, result) -> None:
        assert result.name == "Base unit with three drawers"
        shell = [p for p in result.parts if p.module_id is None and p.label.endswith("side")]
        assert shell
        assert all(p.material_id == "melamine_18" for p in shell)


class TestCatalogMisses:
    """Unknown catalog ids in lenient and strict mode."""

    def test_lenient_reports_issue(self, command, open_bookcase_params) -> None:
        request = FurnitureRequest("bookcase", open_bookcase_params, material_id="teak")

        result = command.execute(request).result

        assert result is not None
        assert any("teak" in w for w in result.warnings)

    def test_strict_returns_catalog_miss(self, catalogs, open_bookcase_params) -> None:
        command = GenerateFurnitureCommand(
            catalogs=catalogs, bom_builder=BomBuilder(strict=True)
        )
        request = FurnitureRequest("bookcase", open_bookcase_params, material_id="teak")

        outcome = command.execute(request)

        assert not outcome.is_valid
        assert outcome.error.error_type == "catalog_miss"
        assert outcome.error.details[0]["value"] == "teak"

    def test_invalid_combination_not_raised(self, command, open_bookcase_params) -> None:
        request = FurnitureRequest(
            "bookcase",
            open_bookcase_params,
            (Module("a", 0, ShelfParams()), Module("a", 1, ShelfParams())),
        )

        outcome = command.execute(request)

        assert outcome.error is not None
        assert "duplicate module id 'a'" in outcome.error.message
