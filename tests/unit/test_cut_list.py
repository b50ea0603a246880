"""Tests for the cut-list estimator."""

from __future__ import annotations

import pytest

from furniture.domain import PanelType, generate_parts
from furniture.domain.components import PartFactory
from furniture.domain.services import WASTE_FACTOR, CutListEstimator, sheets_needed

SHEET_AREA = 1.22 * 2.44


def _parts(*specs):
    """Build parts from (material_id, thickness, length, width, quantity) tuples."""
    factory = PartFactory("f1", "raw")
    return [
        factory.make(
            label=f"Panel {index}",
            length=length,
            width=width,
            thickness=thickness,
            panel_type=PanelType.SHELF,
            material_id=material_id,
            quantity=quantity,
        )
        for index, (material_id, thickness, length, width, quantity) in enumerate(specs)
    ]


class TestSheetsNeeded:
    """Tests for the sheet count estimate."""

    def test_empty_area(self) -> None:
        assert sheets_needed(0, SHEET_AREA, WASTE_FACTOR) == 0

    def test_exact_fit_is_one_sheet(self) -> None:
        assert sheets_needed(SHEET_AREA * 0.9, SHEET_AREA, 0.1) == 1

    def test_just_over_adds_a_sheet(self) -> None:
        assert sheets_needed(SHEET_AREA * 0.9 + 0.001, SHEET_AREA, 0.1) == 2

    def test_no_waste(self) -> None:
        assert sheets_needed(SHEET_AREA * 3, SHEET_AREA, 0) == 3

    def test_non_decreasing(self) -> None:
        counts = [sheets_needed(area / 10, SHEET_AREA, WASTE_FACTOR) for area in range(200)]

        assert counts == sorted(counts)

    @pytest.mark.parametrize("waste", [-0.1, 1.0, 1.5])
    def test_invalid_waste_factor(self, waste: float) -> None:
        with pytest.raises(ValueError, match="Waste factor"):
            sheets_needed(1.0, SHEET_AREA, waste)

    def test_invalid_sheet_area(self) -> None:
        with pytest.raises(ValueError, match="Sheet area"):
            sheets_needed(1.0, 0, WASTE_FACTOR)

    def test_estimator_rejects_bad_waste(self) -> None:
        with pytest.raises(ValueError):
            CutListEstimator(waste_factor=1.0)


class TestCutListEstimator:
    """Tests for CutListEstimator.estimate."""

    def test_scenario_groups(self, catalogs, wardrobe_params, scenario_a_modules) -> None:
        parts = generate_parts(
            "w", wardrobe_params, scenario_a_modules, catalogs.materials, "mdf_18", "raw"
        )

        cut_list = CutListEstimator().estimate(parts, catalogs)

        assert [(g.material_id, g.thickness, g.sheets_needed) for g in cut_list.groups] == [
            ("hdf_6", 6, 2),
            ("mdf_18", 18, 4),
        ]
        assert [item.code for item in cut_list.groups[0].items] == ["E"]
        assert cut_list.total_sheets == 6
        assert cut_list.warnings == ()

    def test_area_conserved(self, catalogs, wardrobe_params, scenario_a_modules) -> None:
        parts = generate_parts(
            "w", wardrobe_params, scenario_a_modules, catalogs.materials, "mdf_18", "raw"
        )

        cut_list = CutListEstimator().estimate(parts, catalogs)

        assert cut_list.total_area_sqm == pytest.approx(
            sum(p.total_area_sqm for p in parts), abs=1e-3
        )
        assert sum(len(g.items) for g in cut_list.groups) == len(parts)

    def test_thickness_descending_within_material(self, catalogs) -> None:
        parts = _parts(("plywood_18", 12, 500, 400, 1), ("plywood_18", 18, 500, 400, 1))

        cut_list = CutListEstimator().estimate(parts, catalogs)

        assert [g.thickness for g in cut_list.groups] == [18, 12]
        assert cut_list.warnings == ("12 mm is not a standard thickness for 'plywood_18'",)

    def test_items_keep_generation_order(self, catalogs) -> None:
        parts = _parts(
            ("mdf_18", 18, 500, 400, 1),
            ("hdf_6", 6, 500, 400, 1),
            ("mdf_18", 18, 600, 400, 2),
        )

        cut_list = CutListEstimator().estimate(parts, catalogs)

        mdf = cut_list.groups[1]
        assert [item.code for item in mdf.items] == ["A", "C"]
        assert mdf.items[1].quantity == 2

    def test_weight(self, catalogs) -> None:
        cut_list = CutListEstimator().estimate(_parts(("mdf_18", 18, 1000, 500, 1)), catalogs)

        # 0.5 m2 x 0.018 m x 700 kg/m3
        assert cut_list.groups[0].weight_kg == 6.3
        assert cut_list.total_weight_kg == 6.3

    def test_unknown_material(self, catalogs) -> None:
        cut_list = CutListEstimator().estimate(_parts(("teak_18", 18, 1000, 500, 1)), catalogs)

        group = cut_list.groups[0]
        assert group.material_name == "teak_18"
        assert (group.sheet_width, group.sheet_length) == (1220, 2440)
        assert group.weight_kg == 0
        assert group.sheets_needed == 1
        assert "Unknown material 'teak_18'" in cut_list.warnings[0]

    def test_countertop_thickness_warning(self, catalogs, kitchen_base_params) -> None:
        parts = generate_parts("k", kitchen_base_params, [], catalogs.materials, "mdf_18", "raw")

        cut_list = CutListEstimator().estimate(parts, catalogs)

        assert [g.material_id for g in cut_list.groups] == ["hdf_6", "mdf_18", "mdf_25"]
        assert cut_list.warnings == ("30 mm is not a standard thickness for 'mdf_25'",)

    def test_empty(self, catalogs) -> None:
        cut_list = CutListEstimator().estimate([], catalogs)

        assert cut_list.groups == ()
        assert cut_list.total_sheets == 0
