"""Sequential part creation."""

from __future__ import annotations

from ..errors import ConfigError
from ..value_objects import PANEL_GRAIN, GrainDirection, PanelType, Part, part_code


class PartFactory:
    """Creates parts with sequential ids and codes for one furniture.

    The counter is the single source of part numbering: every part of a
    furniture must be created through the same factory, in generation
    order, so codes are stable for identical inputs.
    """

    def __init__(self, furniture_id: str, finish_id: str) -> None:
        self.furniture_id = furniture_id
        self.finish_id = finish_id
        self._count = 0

    @property
    def count(self) -> int:
        """Number of parts issued so far."""
        return self._count

    def make(
        self,
        label: str,
        length: float,
        width: float,
        thickness: float,
        panel_type: PanelType,
        material_id: str,
        quantity: int = 1,
        module_id: str | None = None,
        position: float | None = None,
        grain: GrainDirection | None = None,
    ) -> Part:
        """Create the next part.

        Args:
            label: Human-readable part name.
            length: First cut dimension in mm.
            width: Second cut dimension in mm.
            thickness: Board thickness in mm.
            panel_type: Role of the part; also selects the grain.
            material_id: Material catalog key.
            quantity: Number of identical pieces.
            module_id: Owning module, None for shell panels.
            position: Height or offset of the part, if meaningful.
            grain: Override for the panel type's default grain.

        Returns:
            The new Part.

        Raises:
            ConfigError: If the computed dimensions are not positive.
        """
        index = self._count
        try:
            part = Part(
                id=f"{self.furniture_id}_p{index + 1:03d}",
                code=part_code(index),
                label=label,
                length=round(length, 1),
                width=round(width, 1),
                thickness=thickness,
                quantity=quantity,
                material_id=material_id,
                finish_id=self.finish_id,
                grain=grain or PANEL_GRAIN[panel_type],
                panel_type=panel_type,
                module_id=module_id,
                position=position,
            )
        except ValueError as e:
            raise ConfigError(
                f"Cannot size '{label}': {e}",
                error_type="params",
                details=[{"path": module_id or "shell", "message": str(e)}],
            ) from e
        self._count += 1
        return part
