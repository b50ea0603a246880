"""Carcass context shared by module components."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..params import CarcassParams


@dataclass(frozen=True)
class CarcassContext:
    """Immutable description of the space a module is generated into.

    Built once per furniture by its family generator, after the shell is
    sized and before any module is processed. Heights are measured from
    the floor in millimetres.

    Attributes:
        furniture_id: Owning furniture identifier.
        params: Validated family params.
        interior_width: Clear width between the side panels.
        interior_height: Clear height between bottom and top panels.
        interior_bottom: Height of the interior floor above the ground.
        usable_depth: Depth of shelves and dividers (back and front
            setback removed).
        default_material_id: Carcass material.
        default_finish_id: Finish applied to every part.
        back_material_id: Resolved back panel material.
        rail_height: Height of the active hanging rail, if any.
        drawer_positions: Bottom height of each drawer module, keyed by
            module id, stacked upwards from the interior floor.
        shelf_zone: (bottom, top) heights shelves are distributed over.
    """

    furniture_id: str
    params: CarcassParams
    interior_width: float
    interior_height: float
    interior_bottom: float
    usable_depth: float
    default_material_id: str
    default_finish_id: str
    back_material_id: str
    rail_height: float | None = None
    drawer_positions: Mapping[str, float] = field(default_factory=dict)
    shelf_zone: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "drawer_positions", MappingProxyType(dict(self.drawer_positions))
        )

    @property
    def interior_top(self) -> float:
        """Height of the underside of the top panel."""
        return self.interior_bottom + self.interior_height

    @property
    def board_thickness(self) -> float:
        return self.params.board_thickness

    @property
    def total_width(self) -> float:
        return self.params.total_width

    @property
    def total_depth(self) -> float:
        return self.params.total_depth
