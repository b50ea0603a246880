"""Unit tests for module params and ordering."""

import pytest

from furniture.domain import (
    ConfigError,
    DrawerParams,
    HangingRailParams,
    HingedDoorParams,
    Module,
    ModuleType,
    OpenDirection,
    ShelfParams,
    SlideType,
    SlidingDoorParams,
    SocleParams,
    VerticalDividerParams,
)
from furniture.domain.modules import MODULE_PARAMS_BY_TYPE, sort_modules


class TestModuleParams:
    """Tests for module parameter limits."""

    def test_defaults(self) -> None:
        assert ShelfParams().count == 1
        assert DrawerParams().slide_type is SlideType.BASIC
        assert HingedDoorParams().open_direction is OpenDirection.BOTH
        assert SlidingDoorParams().panel_count == 2

    @pytest.mark.parametrize("count", [0, 11, True])
    def test_shelf_count_limits(self, count: int) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ShelfParams(count=count)
        assert exc_info.value.details[0]["path"] == "count"
        assert "shelf module params" in exc_info.value.message

    def test_drawer_height_and_slide_type(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            DrawerParams(height=50, slide_type="turbo")
        paths = {d["path"] for d in exc_info.value.details}
        assert paths == {"height", "slide_type"}

    def test_slide_type_string_is_converted(self) -> None:
        assert DrawerParams(slide_type="soft_close").slide_type is SlideType.SOFT_CLOSE

    def test_hinged_door_limits(self) -> None:
        with pytest.raises(ConfigError):
            HingedDoorParams(count=5)
        with pytest.raises(ConfigError):
            HingedDoorParams(open_direction="up")

    @pytest.mark.parametrize("panels", [1, 4])
    def test_sliding_panel_count(self, panels: int) -> None:
        with pytest.raises(ConfigError):
            SlidingDoorParams(panel_count=panels)

    def test_rail_height_must_be_positive(self) -> None:
        assert HangingRailParams().height is None
        with pytest.raises(ConfigError):
            HangingRailParams(height=-1)

    def test_divider_position_must_be_positive(self) -> None:
        with pytest.raises(ConfigError):
            VerticalDividerParams(position=0)

    def test_socle_height_range(self) -> None:
        SocleParams(height=60)
        with pytest.raises(ConfigError):
            SocleParams(height=250)

    def test_every_module_type_has_params(self) -> None:
        assert set(MODULE_PARAMS_BY_TYPE) == set(ModuleType)


class TestModule:
    """Tests for the Module wrapper."""

    def test_type_follows_params(self) -> None:
        module = Module("m1", 0, DrawerParams())
        assert module.type is ModuleType.DRAWER

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Module("", 0, ShelfParams())

    def test_sort_by_order(self) -> None:
        modules = [
            Module("c", 3, ShelfParams()),
            Module("a", 1, ShelfParams()),
            Module("b", 2, ShelfParams()),
        ]
        assert [m.id for m in sort_modules(modules)] == ["a", "b", "c"]

    def test_sort_keeps_input_position_on_ties(self) -> None:
        modules = [
            Module("second", 0, ShelfParams()),
            Module("first", 0, ShelfParams()),
            Module("early", -1, ShelfParams()),
        ]
        assert [m.id for m in sort_modules(modules)] == ["early", "second", "first"]
