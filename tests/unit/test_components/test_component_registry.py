"""Tests for the module component registry."""

from __future__ import annotations

import pytest

from furniture.domain import ModuleType
from furniture.domain.components import (
    ComponentRegistry,
    DrawerComponent,
    ShelfComponent,
    component_registry,
)


class TestComponentRegistry:
    """Tests for ComponentRegistry."""

    def test_singleton(self) -> None:
        assert ComponentRegistry() is component_registry

    def test_every_module_kind_registered(self) -> None:
        assert component_registry.list() == sorted(
            f"module.{kind.value}" for kind in ModuleType
        )
        assert len(component_registry.list()) == 7

    def test_get(self) -> None:
        assert component_registry.get("module.shelf") is ShelfComponent

    def test_for_module_instantiates(self) -> None:
        assert isinstance(component_registry.for_module(ModuleType.DRAWER), DrawerComponent)

    def test_unknown_component(self) -> None:
        with pytest.raises(KeyError, match="Unknown component"):
            component_registry.get("module.trapdoor")

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            component_registry.register("module.shelf")(ShelfComponent)

    @pytest.mark.parametrize("component_id", ["shelf", "panel.shelf", "module."])
    def test_invalid_id_rejected(self, component_id: str) -> None:
        with pytest.raises(ValueError, match="Invalid component ID"):
            component_registry.register(component_id)(ShelfComponent)
        assert component_id not in component_registry.list()
