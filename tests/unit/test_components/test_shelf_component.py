"""Tests for ShelfComponent, shelf spacing and pin counts."""

from __future__ import annotations

import pytest

from furniture.domain import (
    BookcaseParams,
    HangingRailParams,
    Module,
    PanelType,
    ShelfParams,
    WardrobeParams,
)
from furniture.domain.components import (
    PartFactory,
    ShelfComponent,
    pins_per_shelf,
    shelf_positions,
)


@pytest.fixture
def shelf_component() -> ShelfComponent:
    """Create a ShelfComponent instance for testing."""
    return ShelfComponent()


class TestPinsPerShelf:
    """Tests for the shelf pin rule."""

    @pytest.mark.parametrize(
        ("width", "pins"), [(400, 4), (800, 4), (801, 6), (1164, 6), (1600, 6), (1601, 8)]
    )
    def test_pin_count(self, width: float, pins: int) -> None:
        assert pins_per_shelf(width) == pins

    def test_always_even(self) -> None:
        for width in range(100, 3000, 137):
            assert pins_per_shelf(width) % 2 == 0


class TestShelfPositions:
    """Tests for uniform shelf spacing."""

    def test_even_distribution(self) -> None:
        assert shelf_positions((0, 1000), 3) == [250, 500, 750]

    def test_offset_zone(self) -> None:
        assert shelf_positions((18, 2382), 3) == [609, 1200, 1791]

    def test_single_shelf_in_the_middle(self) -> None:
        assert shelf_positions((100, 300), 1) == [200]


class TestShelfComponentValidation:
    """Tests for ShelfComponent.validate."""

    def test_narrow_shelf_is_valid(self, shelf_component, make_context) -> None:
        params = BookcaseParams(total_width=800, total_height=1800, total_depth=300)
        module = Module("shelves", 0, ShelfParams(count=4))

        result = shelf_component.validate(module, make_context(params, [module]))

        assert result.is_valid
        assert result.warnings == ()

    def test_wide_thin_shelf_warns_about_sag(
        self, shelf_component, make_context, wardrobe_params
    ) -> None:
        module = Module("shelves", 0, ShelfParams(count=3))

        result = shelf_component.validate(module, make_context(wardrobe_params, [module]))

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "may sag" in result.warnings[0]

    def test_thick_board_does_not_sag(self, shelf_component, make_context) -> None:
        params = WardrobeParams(
            total_width=1200, total_height=2400, total_depth=600, board_thickness=25
        )
        module = Module("shelves", 0, ShelfParams(count=3))

        result = shelf_component.validate(module, make_context(params, [module]))

        assert result.warnings == ()

    def test_no_space_above_rail(
        self, shelf_component, make_context, wardrobe_params
    ) -> None:
        """A rail at its highest position leaves no shelf zone."""
        rail = Module("rail", 0, HangingRailParams(height=2322))
        shelves = Module("shelves", 1, ShelfParams(count=1))

        result = shelf_component.validate(
            shelves, make_context(wardrobe_params, [rail, shelves])
        )

        assert not result.is_valid
        assert "no vertical space" in result.errors[0]


class TestShelfComponentGeneration:
    """Tests for ShelfComponent.generate and hardware."""

    def test_generates_one_part_per_shelf(
        self, shelf_component, make_context, wardrobe_params
    ) -> None:
        module = Module("shelves", 0, ShelfParams(count=3))
        context = make_context(wardrobe_params, [module])

        parts = shelf_component.generate(module, context, PartFactory("f1", "raw"))

        assert [p.label for p in parts] == ["Shelf 1", "Shelf 2", "Shelf 3"]
        assert all(p.panel_type == PanelType.SHELF for p in parts)
        assert all(p.module_id == "shelves" for p in parts)
        assert [p.position for p in parts] == [609, 1200, 1791]
        assert parts[0].length == 1164
        assert parts[0].width == 574  # 600 - 6 back - 20 setback

    def test_shelves_start_above_rail_clearance(
        self, shelf_component, make_context, wardrobe_params
    ) -> None:
        rail = Module("rail", 0, HangingRailParams())
        shelves = Module("shelves", 1, ShelfParams(count=1))
        context = make_context(wardrobe_params, [rail, shelves])

        assert context.shelf_zone == (1660, 2382)
        parts = shelf_component.generate(shelves, context, PartFactory("f1", "raw"))
        assert parts[0].position == 2021

    def test_shelf_material_override(self, shelf_component, make_context) -> None:
        params = BookcaseParams(total_width=800, total_height=1800, total_depth=300)
        module = Module("shelves", 0, ShelfParams(count=1, material_id="solid_oak_20"))

        parts = shelf_component.generate(
            module, make_context(params, [module]), PartFactory("f1", "raw")
        )

        assert parts[0].material_id == "solid_oak_20"

    def test_adjustable_shelves_need_pins(
        self, shelf_component, make_context, wardrobe_params
    ) -> None:
        module = Module("shelves", 0, ShelfParams(count=3))

        hardware = shelf_component.hardware(module, make_context(wardrobe_params, [module]))

        assert len(hardware) == 1
        assert hardware[0].hardware_type_id == "shelf_pin_5"
        assert hardware[0].quantity == 18

    def test_fixed_shelves_need_no_hardware(
        self, shelf_component, make_context, wardrobe_params
    ) -> None:
        module = Module("shelves", 0, ShelfParams(count=3, adjustable=False))

        assert shelf_component.hardware(module, make_context(wardrobe_params, [module])) == []
