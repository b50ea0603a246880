"""Tests for the furniture family generators."""

from __future__ import annotations

import pytest

from furniture.domain import (
    BookcaseParams,
    ConfigError,
    DrawerParams,
    EntertainmentCenterParams,
    FurnitureType,
    HangingRailParams,
    HingedDoorParams,
    KitchenBaseParams,
    KitchenWallParams,
    Module,
    PanelType,
    ShelfParams,
    SlidingDoorParams,
    TvUnitParams,
    WardrobeParams,
    generate_parts,
    generator_for,
)
from furniture.domain.generators import (
    BookcaseGenerator,
    WardrobeGenerator,
    registered_families,
    resolve_back_material,
)


@pytest.fixture
def generate(catalogs):
    """Generate parts with the bundled materials, mdf_18 and a raw finish."""

    def _generate(params, modules=(), furniture_id="f1"):
        return generate_parts(furniture_id, params, list(modules), catalogs.materials, "mdf_18", "raw")

    return _generate


class TestGeneratorLookup:
    """Tests for generator_for and the family registry."""

    def test_every_family_registered(self) -> None:
        assert registered_families() == sorted(FurnitureType, key=lambda f: f.value)

    def test_dispatch_on_params(self, wardrobe_params, open_bookcase_params) -> None:
        assert isinstance(generator_for(wardrobe_params), WardrobeGenerator)
        assert isinstance(generator_for(open_bookcase_params), BookcaseGenerator)

    def test_unknown_params_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            generator_for(object())

        assert exc_info.value.error_type == "unsupported_combination"

    def test_params_type_mismatch(self, catalogs, open_bookcase_params) -> None:
        with pytest.raises(ConfigError) as exc_info:
            WardrobeGenerator().plan(
                "f1", open_bookcase_params, [], catalogs.materials, "mdf_18", "raw"
            )

        assert exc_info.value.error_type == "unsupported_combination"


class TestBackMaterial:
    """Tests for resolve_back_material."""

    def test_hdf_matching_thickness(self, catalogs, wardrobe_params) -> None:
        assert resolve_back_material(wardrobe_params, catalogs.materials) == "hdf_6"

    def test_explicit_material_wins(self, catalogs) -> None:
        params = BookcaseParams(
            total_width=800, total_height=1800, total_depth=300, back_material_id="plywood_18"
        )

        assert resolve_back_material(params, catalogs.materials) == "plywood_18"


class TestWardrobeGenerator:
    """Tests for the wardrobe family."""

    def test_scenario_parts(self, generate, wardrobe_params, scenario_a_modules) -> None:
        parts = generate(wardrobe_params, scenario_a_modules, furniture_id="wardrobe")

        assert [p.code for p in parts] == list("ABCDEFGHIJ")
        assert [p.id for p in parts][:2] == ["wardrobe_p001", "wardrobe_p002"]
        assert [(p.label, p.length, p.width, p.thickness) for p in parts[:5]] == [
            ("Left side", 2400, 600, 18),
            ("Right side", 2400, 600, 18),
            ("Top", 1164, 600, 18),
            ("Bottom", 1164, 600, 18),
            ("Back panel", 2364, 1164, 6),
        ]
        assert parts[4].material_id == "hdf_6"
        assert [p.panel_type for p in parts[5:8]] == [PanelType.SHELF] * 3
        assert [(p.length, p.width) for p in parts[8:]] == [(2360, 581), (2360, 581)]

    def test_modules_processed_by_order(self, generate, wardrobe_params) -> None:
        modules = [
            Module("doors", 2, HingedDoorParams(count=2)),
            Module("shelves", 1, ShelfParams(count=1)),
        ]

        parts = generate(wardrobe_params, modules)

        assert [p.module_id for p in parts[5:]] == ["shelves", "doors", "doors"]

    def test_plinth_between_floor_length_sides(self, generate) -> None:
        params = WardrobeParams(
            total_width=1200, total_height=2400, total_depth=600, has_socle=True, socle_height=100
        )

        parts = generate(params)

        assert parts[0].length == 2400
        assert parts[-1].label == "Plinth"
        assert (parts[-1].length, parts[-1].width, parts[-1].position) == (1164, 100, 0.0)
        # Back shrinks by the plinth height
        assert parts[4].length == 2264

    def test_rail_and_shelves(self, generate, wardrobe_params) -> None:
        modules = [
            Module("rail", 0, HangingRailParams()),
            Module("shelves", 1, ShelfParams(count=1)),
        ]

        parts = generate(wardrobe_params, modules)

        shelves = [p for p in parts if p.panel_type == PanelType.SHELF]
        assert [s.position for s in shelves] == [2021]

    def test_sliding_doors(self, generate) -> None:
        params = WardrobeParams(
            total_width=2400, total_height=2400, total_depth=650, door_type="sliding"
        )

        parts = generate(params, [Module("sliders", 0, SlidingDoorParams(panel_count=3))])

        assert [p.panel_type for p in parts].count(PanelType.SLIDING_DOOR) == 3

    def test_deterministic(self, generate, wardrobe_params, scenario_a_modules) -> None:
        assert generate(wardrobe_params, scenario_a_modules) == generate(
            wardrobe_params, scenario_a_modules
        )


class TestCombinationErrors:
    """Tests for rejected module and family combinations."""

    def _error(self, generate, params, modules) -> ConfigError:
        with pytest.raises(ConfigError) as exc_info:
            generate(params, modules)
        return exc_info.value

    def test_rail_outside_wardrobe(self, generate, open_bookcase_params) -> None:
        error = self._error(generate, open_bookcase_params, [Module("rail", 0, HangingRailParams())])

        assert error.error_type == "unsupported_combination"
        assert "does not support hanging_rail modules" in error.message

    def test_second_rail_rejected(self, generate, wardrobe_params) -> None:
        modules = [
            Module("rail_low", 0, HangingRailParams(height=1000)),
            Module("rail_high", 1, HangingRailParams()),
        ]

        error = self._error(generate, wardrobe_params, modules)

        assert error.error_type == "unsupported_combination"
        assert "only one hanging_rail module is supported, got 2" in error.message

    def test_drawer_in_wall_unit(self, generate) -> None:
        params = KitchenWallParams(total_width=600, total_height=720, total_depth=320)

        error = self._error(generate, params, [Module("d", 0, DrawerParams())])

        assert error.error_type == "unsupported_combination"

    def test_door_module_without_door_type(self, generate, open_bookcase_params) -> None:
        error = self._error(
            generate, open_bookcase_params, [Module("doors", 0, HingedDoorParams())]
        )

        assert "door type is 'none'" in error.message

    def test_door_module_mismatch(self, generate, wardrobe_params) -> None:
        error = self._error(
            generate, wardrobe_params, [Module("sliders", 0, SlidingDoorParams())]
        )

        assert "does not match door type 'hinged'" in error.message

    def test_duplicate_module_ids(self, generate, wardrobe_params) -> None:
        modules = [
            Module("shelves", 0, ShelfParams()),
            Module("shelves", 1, ShelfParams()),
        ]

        error = self._error(generate, wardrobe_params, modules)

        assert "duplicate module id 'shelves'" in error.message

    def test_every_problem_reported(self, generate, open_bookcase_params) -> None:
        modules = [
            Module("rail", 0, HangingRailParams()),
            Module("doors", 1, HingedDoorParams()),
        ]

        error = self._error(generate, open_bookcase_params, modules)

        assert len(error.details) == 2

    def test_fit_errors_are_params_errors(self, generate, kitchen_base_params) -> None:
        modules = [
            Module("d1", 1, DrawerParams(height=400)),
            Module("d2", 2, DrawerParams(height=400)),
        ]

        error = self._error(generate, kitchen_base_params, modules)

        assert error.error_type == "params"
        assert "does not fit" in error.message


class TestKitchenGenerators:
    """Tests for kitchen base and wall units."""

    def test_base_countertop_last(self, generate, kitchen_base_params) -> None:
        parts = generate(kitchen_base_params, [Module("shelf", 0, ShelfParams())])

        assert [p.label for p in parts[:6]] == [
            "Left side",
            "Right side",
            "Top",
            "Bottom",
            "Back panel",
            "Plinth",
        ]
        # Plinth sits under the carcass: sides stop above it
        assert parts[0].length == 770
        countertop = parts[-1]
        assert countertop.panel_type == PanelType.COUNTERTOP
        assert (countertop.length, countertop.width, countertop.thickness) == (640, 600, 30)
        assert countertop.material_id == "mdf_25"

    def test_base_without_countertop(self, generate) -> None:
        params = KitchenBaseParams(
            total_width=600, total_height=870, total_depth=580, has_countertop=False
        )

        parts = generate(params)

        assert PanelType.COUNTERTOP not in {p.panel_type for p in parts}

    def test_wall_unit(self, generate) -> None:
        params = KitchenWallParams(
            total_width=600, total_height=720, total_depth=320, door_type="hinged"
        )

        parts = generate(params, [Module("doors", 0, HingedDoorParams(count=2))])

        assert parts[0].length == 720
        assert [p.panel_type for p in parts[-2:]] == [PanelType.DOOR, PanelType.DOOR]
        assert parts[-1].length == 680


class TestTvUnitGenerator:
    """Tests for the TV unit niche."""

    @pytest.fixture
    def tv_params(self) -> TvUnitParams:
        return TvUnitParams(
            total_width=1800,
            total_height=500,
            total_depth=450,
            tv_niche_width=800,
            tv_niche_height=300,
        )

    def test_niche_parts_before_modules(self, generate, tv_params) -> None:
        parts = generate(tv_params, [Module("shelf", 0, ShelfParams())])

        niche = parts[5:8]
        assert [p.label for p in niche] == [
            "Niche divider left",
            "Niche divider right",
            "Niche shelf",
        ]
        assert [p.position for p in niche] == [464, 1282, 318]
        assert niche[2].length == 800
        assert parts[-1].panel_type == PanelType.SHELF

    def test_no_niche(self, generate) -> None:
        params = TvUnitParams(total_width=1800, total_height=500, total_depth=450)

        parts = generate(params)

        assert len(parts) == 5

    def test_niche_too_wide(self, generate) -> None:
        params = TvUnitParams(
            total_width=1200,
            total_height=500,
            total_depth=450,
            tv_niche_width=1200,
            tv_niche_height=300,
        )

        with pytest.raises(ConfigError, match="does not fit the interior width"):
            generate(params)

    def test_niche_too_tall(self, generate) -> None:
        params = TvUnitParams(
            total_width=1800,
            total_height=500,
            total_depth=450,
            tv_niche_width=800,
            tv_niche_height=450,
        )

        with pytest.raises(ConfigError, match="does not fit the interior height"):
            generate(params)


class TestBookcaseGenerator:
    """Tests for the bookcase family."""

    def test_open_bookcase_has_no_back(self, generate, open_bookcase_params) -> None:
        parts = generate(open_bookcase_params, [Module("shelves", 0, ShelfParams(count=4))])

        assert PanelType.BACK not in {p.panel_type for p in parts}
        assert {p.material_id for p in parts} == {"mdf_18"}
        # 300 mm deep minus 10 mm setback
        assert parts[-1].width == 290

    def test_plinth_shortens_sides(self, generate) -> None:
        params = BookcaseParams(
            total_width=800, total_height=1800, total_depth=300, has_socle=True, socle_height=80
        )

        parts = generate(params)

        assert parts[0].length == 1720


class TestEntertainmentCenterGenerator:
    """Tests for the entertainment center family."""

    @pytest.fixture
    def center_params(self) -> EntertainmentCenterParams:
        return EntertainmentCenterParams(
            total_width=1800,
            total_height=2000,
            total_depth=450,
            side_column_width=500,
            has_raised_panel=True,
            raised_panel_height=800,
        )

    def test_column_in_shell(self, generate, center_params) -> None:
        parts = generate(center_params)

        assert [p.label for p in parts] == [
            "Left side",
            "Right side",
            "Top",
            "Bottom",
            "Back panel",
            "Column left side",
            "Column right side",
            "Column top",
            "Column bottom",
            "Column back",
            "Raised back panel",
        ]
        assert parts[0].length == 900
        assert parts[2].length == 1264
        assert parts[5].length == 2000
        assert parts[7].length == 464
        assert (parts[9].length, parts[9].width) == (1964, 464)

    def test_raised_panel_last(self, generate, center_params) -> None:
        parts = generate(center_params, [Module("shelf", 0, ShelfParams())])

        raised = parts[-1]
        assert raised.panel_type == PanelType.RAISED_PANEL
        assert (raised.length, raised.width, raised.position) == (1300, 800, 900)

    def test_plain_base(self, generate) -> None:
        params = EntertainmentCenterParams(total_width=1800, total_height=2000, total_depth=450)

        parts = generate(params)

        assert len(parts) == 5
        assert parts[2].length == 1764
