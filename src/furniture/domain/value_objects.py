"""Value objects for the furniture domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class FurnitureType(str, Enum):
    """Furniture families the engine can generate."""

    WARDROBE = "wardrobe"
    KITCHEN_BASE = "kitchen_base"
    KITCHEN_WALL = "kitchen_wall"
    TV_UNIT = "tv_unit"
    BOOKCASE = "bookcase"
    ENTERTAINMENT_CENTER = "entertainment_center"


class ModuleType(str, Enum):
    """Functional modules that can be added to a furniture shell."""

    SHELF = "shelf"
    DRAWER = "drawer"
    HINGED_DOOR = "hinged_door"
    SLIDING_DOOR = "sliding_door"
    HANGING_RAIL = "hanging_rail"
    VERTICAL_DIVIDER = "vertical_divider"
    SOCLE = "socle"

    @property
    def is_door(self) -> bool:
        """True for module kinds that close the front of the furniture."""
        return self in (ModuleType.HINGED_DOOR, ModuleType.SLIDING_DOOR)


class DoorType(str, Enum):
    """Front closure declared by a furniture's params."""

    NONE = "none"
    HINGED = "hinged"
    SLIDING = "sliding"


class GrainDirection(str, Enum):
    """Required fiber orientation of a part relative to the source sheet.

    Attributes:
        ALONG: Grain runs with the part's length (vertical panels).
        ACROSS: Grain runs across the part (horizontal panels).
        ANY: No preferred orientation (backs, drawer boxes).
    """

    ALONG = "along"
    ACROSS = "across"
    ANY = "any"


class PanelType(str, Enum):
    """Role of a part within the furniture."""

    LEFT_SIDE = "left_side"
    RIGHT_SIDE = "right_side"
    TOP = "top"
    BOTTOM = "bottom"
    BACK = "back"
    PLINTH = "plinth"
    SHELF = "shelf"
    DIVIDER = "divider"
    DOOR = "door"
    SLIDING_DOOR = "sliding_door"
    DRAWER_FRONT = "drawer_front"
    DRAWER_BOX_FRONT = "drawer_box_front"
    DRAWER_BOX_BACK = "drawer_box_back"
    DRAWER_BOX_SIDE = "drawer_box_side"
    DRAWER_BOTTOM = "drawer_bottom"
    COUNTERTOP = "countertop"
    NICHE_DIVIDER = "niche_divider"
    NICHE_SHELF = "niche_shelf"
    COLUMN_SIDE = "column_side"
    COLUMN_TOP = "column_top"
    COLUMN_BOTTOM = "column_bottom"
    COLUMN_BACK = "column_back"
    RAISED_PANEL = "raised_panel"
    SOCLE_REAR = "socle_rear"


# Grain follows the panel's orientation in the finished piece
PANEL_GRAIN: dict[PanelType, GrainDirection] = {
    PanelType.LEFT_SIDE: GrainDirection.ALONG,
    PanelType.RIGHT_SIDE: GrainDirection.ALONG,
    PanelType.TOP: GrainDirection.ACROSS,
    PanelType.BOTTOM: GrainDirection.ACROSS,
    PanelType.BACK: GrainDirection.ANY,
    PanelType.PLINTH: GrainDirection.ACROSS,
    PanelType.SHELF: GrainDirection.ACROSS,
    PanelType.DIVIDER: GrainDirection.ALONG,
    PanelType.DOOR: GrainDirection.ALONG,
    PanelType.SLIDING_DOOR: GrainDirection.ALONG,
    PanelType.DRAWER_FRONT: GrainDirection.ACROSS,
    PanelType.DRAWER_BOX_FRONT: GrainDirection.ANY,
    PanelType.DRAWER_BOX_BACK: GrainDirection.ANY,
    PanelType.DRAWER_BOX_SIDE: GrainDirection.ANY,
    PanelType.DRAWER_BOTTOM: GrainDirection.ANY,
    PanelType.COUNTERTOP: GrainDirection.ACROSS,
    PanelType.NICHE_DIVIDER: GrainDirection.ALONG,
    PanelType.NICHE_SHELF: GrainDirection.ACROSS,
    PanelType.COLUMN_SIDE: GrainDirection.ALONG,
    PanelType.COLUMN_TOP: GrainDirection.ACROSS,
    PanelType.COLUMN_BOTTOM: GrainDirection.ACROSS,
    PanelType.COLUMN_BACK: GrainDirection.ANY,
    PanelType.RAISED_PANEL: GrainDirection.ACROSS,
    PanelType.SOCLE_REAR: GrainDirection.ACROSS,
}


def round2(value: float) -> float:
    """Round half-up to two decimals.

    Python's round() uses banker's rounding, which would make money totals
    differ from other implementations on exact halves.

    Args:
        value: Amount to round.

    Returns:
        The amount rounded to cents.
    """
    return math.floor(value * 100 + 0.5) / 100


def part_code(index: int) -> str:
    """Convert a zero-based index into a spreadsheet-style code.

    Examples:
        >>> part_code(0)
        'A'
        >>> part_code(25)
        'Z'
        >>> part_code(26)
        'AA'
    """
    if index < 0:
        raise ValueError("Part code index must be non-negative")
    letters = ""
    n = index + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


@dataclass(frozen=True)
class Part:
    """A physical panel to be cut from sheet material.

    Dimensions are in millimetres. ``length`` is the dimension measured
    along the grain when the grain is ``along``.

    Attributes:
        id: Unique identifier within the furniture (``<furniture>_p001``).
        code: Sequential human-readable code (A, B, ..., AA).
        label: Human-readable part name.
        length: First cut dimension in mm.
        width: Second cut dimension in mm.
        thickness: Board thickness in mm.
        quantity: Number of identical pieces.
        material_id: Material catalog key.
        finish_id: Finish catalog key.
        grain: Required grain orientation.
        panel_type: Role of the part within the furniture.
        module_id: Owning module, or None for shell panels and extras.
        position: Height of a horizontal part above the floor, or the
            offset of a vertical divider from the interior left face.
    """

    id: str
    code: str
    label: str
    length: float
    width: float
    thickness: float
    quantity: int
    material_id: str
    finish_id: str
    grain: GrainDirection
    panel_type: PanelType
    module_id: str | None = None
    position: float | None = None

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.thickness <= 0:
            raise ValueError(
                f"Part '{self.label}' dimensions must be positive "
                f"(got {self.length} x {self.width} x {self.thickness})"
            )
        if self.quantity < 1:
            raise ValueError(f"Part '{self.label}' quantity must be at least 1")

    @property
    def area_sqm(self) -> float:
        """Area of a single piece in square metres."""
        return self.length * self.width / 1_000_000

    @property
    def total_area_sqm(self) -> float:
        """Area of all pieces of this part in square metres."""
        return self.area_sqm * self.quantity


@dataclass(frozen=True)
class HardwareItem:
    """A hardware line required by a furniture.

    Attributes:
        id: Unique identifier within the furniture (``<furniture>_hw001``).
        hardware_type_id: Hardware catalog key.
        quantity: Number of units (pieces, pairs, sets or metres).
        module_id: Module the hardware belongs to.
    """

    id: str
    hardware_type_id: str
    quantity: int
    module_id: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(
                f"Hardware '{self.hardware_type_id}' quantity must be at least 1"
            )
