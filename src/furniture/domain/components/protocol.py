"""Protocol definition for module components."""

from __future__ import annotations

from typing import Protocol

from ..modules import Module
from ..value_objects import Part
from .context import CarcassContext
from .factory import PartFactory
from .results import HardwareRequirement, ValidationResult


class Component(Protocol):
    """Protocol for module components.

    Components are registered with the ComponentRegistry under an id of
    the form 'module.<kind>', one per ModuleType.

    Example:
        @component_registry.register("module.shelf")
        class ShelfComponent:
            def validate(self, module, context) -> ValidationResult:
                ...

            def generate(self, module, context, factory) -> list[Part]:
                ...

            def hardware(self, module, context) -> list[HardwareRequirement]:
                ...
    """

    def validate(self, module: Module, context: CarcassContext) -> ValidationResult:
        """Check that the module fits the carcass it is placed in.

        Args:
            module: The module to check.
            context: Carcass dimensions and module layout.

        Returns:
            ValidationResult with any errors or warnings found.
        """
        ...

    def generate(
        self, module: Module, context: CarcassContext, factory: PartFactory
    ) -> list[Part]:
        """Emit the module's parts in their fixed sub-order.

        Should only be called after validate() returns a successful result.

        Args:
            module: The module to expand.
            context: Carcass dimensions and module layout.
            factory: Shared factory assigning sequential ids and codes.

        Returns:
            Parts created for the module, possibly empty.
        """
        ...

    def hardware(
        self, module: Module, context: CarcassContext
    ) -> list[HardwareRequirement]:
        """Return hardware requirements for the module.

        This is separate from generate() so hardware can be inferred
        without generating parts.

        Args:
            module: The module to inspect.
            context: Carcass dimensions and module layout.

        Returns:
            Hardware requirements in a fixed order.
        """
        ...
