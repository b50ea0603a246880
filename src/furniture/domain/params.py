"""Per-family furniture parameters.

Each furniture family has its own frozen params class carrying the family
tag and the valid ranges for its dimensions. Construction validates every
field and raises ConfigError listing all violations at once, so an
invalid params object can never reach a generator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .errors import ConfigError
from .value_objects import DoorType, FurnitureType

BOARD_THICKNESSES: tuple[float, ...] = (15, 18, 25)
BACK_PANEL_THICKNESSES: tuple[float, ...] = (3, 6, 9)

ALL_DOOR_TYPES: frozenset[DoorType] = frozenset(DoorType)


def _check_range(
    details: list[dict[str, Any]],
    name: str,
    value: float,
    bounds: tuple[float, float],
) -> None:
    low, high = bounds
    if not low <= value <= high:
        details.append(
            {
                "path": name,
                "message": f"must be between {low:g} and {high:g} mm",
                "value": value,
            }
        )


def _check_choice(
    details: list[dict[str, Any]],
    name: str,
    value: float,
    choices: tuple[float, ...],
) -> None:
    if value not in choices:
        allowed = ", ".join(f"{c:g}" for c in choices)
        details.append(
            {"path": name, "message": f"must be one of {allowed}", "value": value}
        )


@dataclass(frozen=True)
class CarcassParams:
    """Dimensions and options shared by every furniture family.

    Attributes:
        total_width: Outer width in mm.
        total_height: Outer height in mm, floor to top.
        total_depth: Outer depth in mm.
        board_thickness: Carcass board thickness in mm.
        back_panel_thickness: Back panel thickness in mm.
        has_back: Whether a back panel is fitted.
        has_socle: Whether the carcass stands on a plinth.
        socle_height: Plinth height in mm (ignored without a plinth).
        door_type: Front closure expected by the door modules.
        back_material_id: Explicit back panel material. When None, the
            back uses an HDF board matching ``back_panel_thickness``.
    """

    family: ClassVar[FurnitureType]
    WIDTH_RANGE: ClassVar[tuple[float, float]]
    HEIGHT_RANGE: ClassVar[tuple[float, float]]
    DEPTH_RANGE: ClassVar[tuple[float, float]]
    SOCLE_RANGE: ClassVar[tuple[float, float] | None] = (60, 150)
    DOOR_TYPES: ClassVar[frozenset[DoorType]] = ALL_DOOR_TYPES
    # Side panels run down to the floor and the plinth sits between them
    SIDES_TO_FLOOR: ClassVar[bool] = False

    total_width: float
    total_height: float
    total_depth: float
    board_thickness: float = 18
    back_panel_thickness: float = 6
    has_back: bool = True
    has_socle: bool = False
    socle_height: float = 100
    door_type: DoorType = DoorType.NONE
    back_material_id: str | None = None

    def __post_init__(self) -> None:
        details: list[dict[str, Any]] = []
        try:
            object.__setattr__(self, "door_type", DoorType(self.door_type))
        except ValueError:
            details.append(
                {
                    "path": "door_type",
                    "message": "must be one of none, hinged, sliding",
                    "value": self.door_type,
                }
            )
        self._collect_errors(details)
        if details:
            raise ConfigError.from_fields(f"{self.family.value} params", details)

    def _collect_errors(self, details: list[dict[str, Any]]) -> None:
        """Append one detail per invalid field.

        Subclasses extend this with their family-specific fields.
        """
        for name in ("total_width", "total_height", "total_depth"):
            if getattr(self, name) <= 0:
                details.append(
                    {
                        "path": name,
                        "message": "must be greater than 0",
                        "value": getattr(self, name),
                    }
                )
        _check_range(details, "total_width", self.total_width, self.WIDTH_RANGE)
        _check_range(details, "total_height", self.total_height, self.HEIGHT_RANGE)
        _check_range(details, "total_depth", self.total_depth, self.DEPTH_RANGE)
        _check_choice(details, "board_thickness", self.board_thickness, BOARD_THICKNESSES)
        if self.has_back:
            _check_choice(
                details,
                "back_panel_thickness",
                self.back_panel_thickness,
                BACK_PANEL_THICKNESSES,
            )
        if self.has_socle:
            if self.SOCLE_RANGE is None:
                details.append(
                    {
                        "path": "has_socle",
                        "message": f"{self.family.value} cannot stand on a plinth",
                        "value": True,
                    }
                )
            else:
                _check_range(details, "socle_height", self.socle_height, self.SOCLE_RANGE)
        if isinstance(self.door_type, DoorType) and self.door_type not in self.DOOR_TYPES:
            supported = ", ".join(sorted(d.value for d in self.DOOR_TYPES))
            details.append(
                {
                    "path": "door_type",
                    "message": f"{self.family.value} supports only: {supported}",
                    "value": self.door_type.value,
                }
            )

    @property
    def plinth_height(self) -> float:
        """Height taken by the plinth, 0 when there is none."""
        return self.socle_height if self.has_socle else 0.0

    @property
    def interior_width(self) -> float:
        """Clear width between the two side panels."""
        return self.total_width - 2 * self.board_thickness

    @property
    def back_thickness(self) -> float:
        """Back panel thickness, 0 when there is no back."""
        return self.back_panel_thickness if self.has_back else 0.0


@dataclass(frozen=True)
class WardrobeParams(CarcassParams):
    """Wardrobe carcass with an optional clothes rail."""

    family: ClassVar[FurnitureType] = FurnitureType.WARDROBE
    WIDTH_RANGE: ClassVar[tuple[float, float]] = (600, 3600)
    HEIGHT_RANGE: ClassVar[tuple[float, float]] = (1800, 2800)
    DEPTH_RANGE: ClassVar[tuple[float, float]] = (450, 700)
    SOCLE_RANGE: ClassVar[tuple[float, float] | None] = (60, 200)
    SIDES_TO_FLOOR: ClassVar[bool] = True

    hanging_rail_height: float = 1600

    def _collect_errors(self, details: list[dict[str, Any]]) -> None:
        super()._collect_errors(details)
        if self.hanging_rail_height <= 0:
            details.append(
                {
                    "path": "hanging_rail_height",
                    "message": "must be greater than 0",
                    "value": self.hanging_rail_height,
                }
            )


@dataclass(frozen=True)
class KitchenBaseParams(CarcassParams):
    """Floor-standing kitchen unit with an optional countertop."""

    family: ClassVar[FurnitureType] = FurnitureType.KITCHEN_BASE
    WIDTH_RANGE: ClassVar[tuple[float, float]] = (300, 1200)
    HEIGHT_RANGE: ClassVar[tuple[float, float]] = (700, 950)
    DEPTH_RANGE: ClassVar[tuple[float, float]] = (450, 700)
    DOOR_TYPES: ClassVar[frozenset[DoorType]] = frozenset(
        {DoorType.NONE, DoorType.HINGED}
    )
    COUNTERTOP_RANGE: ClassVar[tuple[float, float]] = (20, 40)
    OVERHANG_RANGE: ClassVar[tuple[float, float]] = (0, 50)

    has_countertop: bool = True
    countertop_thickness: float = 30
    countertop_overhang: float = 20
    countertop_material_id: str = "mdf_25"

    def _collect_errors(self, details: list[dict[str, Any]]) -> None:
        super()._collect_errors(details)
        if self.has_countertop:
            _check_range(
                details,
                "countertop_thickness",
                self.countertop_thickness,
                self.COUNTERTOP_RANGE,
            )
            _check_range(
                details,
                "countertop_overhang",
                self.countertop_overhang,
                self.OVERHANG_RANGE,
            )


@dataclass(frozen=True)
class KitchenWallParams(CarcassParams):
    """Wall-hung kitchen unit. Never has a plinth."""

    family: ClassVar[FurnitureType] = FurnitureType.KITCHEN_WALL
    WIDTH_RANGE: ClassVar[tuple[float, float]] = (300, 1200)
    HEIGHT_RANGE: ClassVar[tuple[float, float]] = (300, 900)
    DEPTH_RANGE: ClassVar[tuple[float, float]] = (200, 400)
    SOCLE_RANGE: ClassVar[tuple[float, float] | None] = None
    MOUNTING_RANGE: ClassVar[tuple[float, float]] = (1200, 2000)
    SIDES_TO_FLOOR: ClassVar[bool] = True

    mounting_height: float = 1450

    def _collect_errors(self, details: list[dict[str, Any]]) -> None:
        super()._collect_errors(details)
        _check_range(details, "mounting_height", self.mounting_height, self.MOUNTING_RANGE)


@dataclass(frozen=True)
class TvUnitParams(CarcassParams):
    """Low media unit with an optional open niche.

    A ``tv_niche_width`` of 0 means no niche.
    """

    family: ClassVar[FurnitureType] = FurnitureType.TV_UNIT
    WIDTH_RANGE: ClassVar[tuple[float, float]] = (900, 2400)
    HEIGHT_RANGE: ClassVar[tuple[float, float]] = (400, 600)
    DEPTH_RANGE: ClassVar[tuple[float, float]] = (350, 550)

    tv_niche_width: float = 0
    tv_niche_height: float = 0

    def _collect_errors(self, details: list[dict[str, Any]]) -> None:
        super()._collect_errors(details)
        if self.tv_niche_width < 0:
            details.append(
                {
                    "path": "tv_niche_width",
                    "message": "must not be negative",
                    "value": self.tv_niche_width,
                }
            )
        if self.tv_niche_width > 0 and self.tv_niche_height <= 0:
            details.append(
                {
                    "path": "tv_niche_height",
                    "message": "must be greater than 0 when a niche is requested",
                    "value": self.tv_niche_height,
                }
            )

    @property
    def has_niche(self) -> bool:
        return self.tv_niche_width > 0


@dataclass(frozen=True)
class BookcaseParams(CarcassParams):
    """Open or closed bookcase."""

    family: ClassVar[FurnitureType] = FurnitureType.BOOKCASE
    WIDTH_RANGE: ClassVar[tuple[float, float]] = (600, 1800)
    HEIGHT_RANGE: ClassVar[tuple[float, float]] = (900, 2400)
    DEPTH_RANGE: ClassVar[tuple[float, float]] = (200, 400)


@dataclass(frozen=True)
class EntertainmentCenterParams(CarcassParams):
    """Low base cabinet with an optional side column and raised back panel.

    Modules are placed inside the base cabinet, whose height is
    ``BASE_HEIGHT_RATIO`` of the total height.
    """

    family: ClassVar[FurnitureType] = FurnitureType.ENTERTAINMENT_CENTER
    WIDTH_RANGE: ClassVar[tuple[float, float]] = (1200, 2800)
    HEIGHT_RANGE: ClassVar[tuple[float, float]] = (1800, 2400)
    DEPTH_RANGE: ClassVar[tuple[float, float]] = (350, 550)
    SIDE_COLUMN_RANGE: ClassVar[tuple[float, float]] = (0, 800)
    BASE_HEIGHT_RATIO: ClassVar[float] = 0.45
    # Narrowest base cabinet left beside a side column
    MIN_BASE_WIDTH: ClassVar[float] = 600

    side_column_width: float = 0
    has_raised_panel: bool = False
    raised_panel_height: float = 800

    def _collect_errors(self, details: list[dict[str, Any]]) -> None:
        super()._collect_errors(details)
        _check_range(
            details, "side_column_width", self.side_column_width, self.SIDE_COLUMN_RANGE
        )
        if self.side_column_width > 0 and self.base_width < self.MIN_BASE_WIDTH:
            details.append(
                {
                    "path": "side_column_width",
                    "message": (
                        f"leaves a base cabinet narrower than "
                        f"{self.MIN_BASE_WIDTH:g} mm"
                    ),
                    "value": self.side_column_width,
                }
            )
        if self.has_raised_panel:
            free_height = self.total_height - self.base_height
            if not 0 < self.raised_panel_height <= free_height:
                details.append(
                    {
                        "path": "raised_panel_height",
                        "message": (
                            f"must be between 0 and {free_height:g} mm "
                            "(wall space above the base)"
                        ),
                        "value": self.raised_panel_height,
                    }
                )

    @property
    def base_height(self) -> float:
        """Height of the base cabinet holding the modules."""
        return float(math.floor(self.total_height * self.BASE_HEIGHT_RATIO + 0.5))

    @property
    def base_width(self) -> float:
        """Width of the base cabinet, excluding the side column."""
        return self.total_width - self.side_column_width

    @property
    def interior_width(self) -> float:
        return self.base_width - 2 * self.board_thickness


FurnitureParams = Union[
    WardrobeParams,
    KitchenBaseParams,
    KitchenWallParams,
    TvUnitParams,
    BookcaseParams,
    EntertainmentCenterParams,
]

PARAMS_BY_FAMILY: dict[FurnitureType, type[CarcassParams]] = {
    cls.family: cls
    for cls in (
        WardrobeParams,
        KitchenBaseParams,
        KitchenWallParams,
        TvUnitParams,
        BookcaseParams,
        EntertainmentCenterParams,
    )
}
