"""Tests for PartFactory numbering and sizing."""

from __future__ import annotations

import pytest

from furniture.domain import ConfigError, GrainDirection, PanelType
from furniture.domain.components import PartFactory


def _make(factory: PartFactory, label: str = "Panel", **kwargs):
    defaults = {
        "length": 1000,
        "width": 500,
        "thickness": 18,
        "panel_type": PanelType.SHELF,
        "material_id": "mdf_18",
    }
    defaults.update(kwargs)
    return factory.make(label=label, **defaults)


class TestPartFactory:
    """Tests for PartFactory."""

    def test_sequential_ids_and_codes(self) -> None:
        factory = PartFactory("wardrobe", "white")

        parts = [_make(factory) for _ in range(28)]

        assert parts[0].id == "wardrobe_p001"
        assert parts[27].id == "wardrobe_p028"
        assert [p.code for p in parts[:3]] == ["A", "B", "C"]
        assert parts[25].code == "Z"
        assert parts[26].code == "AA"
        assert factory.count == 28

    def test_finish_applied(self) -> None:
        part = _make(PartFactory("f1", "oak_oil"))

        assert part.finish_id == "oak_oil"

    def test_dimensions_rounded_to_tenth(self) -> None:
        part = _make(PartFactory("f1", "raw"), length=1163.96, width=579.04)

        assert part.length == 1164.0
        assert part.width == 579.0

    def test_grain_follows_panel_type(self) -> None:
        factory = PartFactory("f1", "raw")

        back = _make(factory, panel_type=PanelType.BACK)
        override = _make(factory, grain=GrainDirection.ALONG)

        assert back.grain == GrainDirection.ANY
        assert override.grain == GrainDirection.ALONG

    def test_non_positive_size_raises_config_error(self) -> None:
        factory = PartFactory("f1", "raw")

        with pytest.raises(ConfigError) as exc_info:
            _make(factory, label="Door", width=-4, module_id="doors")

        assert exc_info.value.error_type == "params"
        assert "Cannot size 'Door'" in exc_info.value.message
        assert exc_info.value.details[0]["path"] == "doors"
        # A failed part does not consume a number
        assert factory.count == 0
        assert _make(factory).code == "A"
