"""Component registry for module components."""

from __future__ import annotations

from typing import Callable, TypeVar

from ..value_objects import ModuleType
from .protocol import Component

C = TypeVar("C", bound=Component)


class ComponentRegistry:
    """Singleton registry for module component classes.

    Component ids have the form 'module.<kind>' where ``<kind>`` is a
    ModuleType value. The registry holds code, not data: catalogs are
    never stored here.

    Example:
        @component_registry.register("module.shelf")
        class ShelfComponent:
            ...

        component = component_registry.for_module(ModuleType.SHELF)
    """

    _instance: ComponentRegistry | None = None
    _components: dict[str, type[Component]]

    def __new__(cls) -> ComponentRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._components = {}
        return cls._instance

    def register(self, component_id: str) -> Callable[[type[C]], type[C]]:
        """Decorator to register a component class.

        Args:
            component_id: Unique identifier for the component type.

        Returns:
            A decorator function that registers the class and returns it unchanged.

        Raises:
            ValueError: If component_id is already registered or has invalid format.
        """

        def decorator(cls: type[C]) -> type[C]:
            if component_id in self._components:
                raise ValueError(f"Component '{component_id}' already registered")
            self._validate_id(component_id)
            self._components[component_id] = cls
            return cls

        return decorator

    def get(self, component_id: str) -> type[Component]:
        """Get a component class by id.

        Raises:
            KeyError: If no component is registered with the given id.
        """
        if component_id not in self._components:
            raise KeyError(f"Unknown component: {component_id}")
        return self._components[component_id]

    def for_module(self, module_type: ModuleType) -> Component:
        """Instantiate the component handling a module kind."""
        return self.get(f"module.{module_type.value}")()

    def list(self) -> list[str]:
        """List all registered component ids, sorted."""
        return sorted(self._components.keys())

    def _validate_id(self, component_id: str) -> None:
        category, _, kind = component_id.partition(".")
        if category != "module" or not kind:
            raise ValueError(
                f"Invalid component ID '{component_id}': must be 'module.<kind>'"
            )

    def clear(self) -> None:
        """Remove every registered component.

        Intended for tests only.
        """
        self._components = {}


component_registry = ComponentRegistry()
