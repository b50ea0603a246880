"""Functional modules added to a furniture shell.

A module's kind is carried by its params variant, so a module whose type
disagrees with its parameter shape cannot be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from .errors import ConfigError
from .value_objects import ModuleType

DEFAULT_HANDLE = "handle_bar_128"


class SlideType(str, Enum):
    """Drawer runner quality."""

    BASIC = "basic"
    SOFT_CLOSE = "soft_close"


class OpenDirection(str, Enum):
    """Side on which a hinged door set opens."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


def _raise_if(kind: ModuleType, details: list[dict[str, Any]]) -> None:
    if details:
        raise ConfigError.from_fields(f"{kind.value} module params", details)


def _count_detail(name: str, value: int, low: int, high: int) -> list[dict[str, Any]]:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        return [
            {
                "path": name,
                "message": f"must be an integer between {low} and {high}",
                "value": value,
            }
        ]
    return []


def _length_detail(
    name: str, value: float, low: float, high: float
) -> list[dict[str, Any]]:
    if not low <= value <= high:
        return [
            {
                "path": name,
                "message": f"must be between {low:g} and {high:g} mm",
                "value": value,
            }
        ]
    return []


@dataclass(frozen=True)
class ShelfParams:
    """Evenly spaced shelves.

    Attributes:
        count: Number of shelves (1-10).
        adjustable: Pin-supported shelves instead of fixed ones.
        material_id: Shelf material, defaults to the carcass material.
    """

    kind: ClassVar[ModuleType] = ModuleType.SHELF

    count: int = 1
    adjustable: bool = True
    material_id: str | None = None

    def __post_init__(self) -> None:
        _raise_if(self.kind, _count_detail("count", self.count, 1, 10))


@dataclass(frozen=True)
class DrawerParams:
    """A single drawer stacked from the bottom of the interior.

    Attributes:
        height: Drawer front height in mm (100-400).
        slide_type: Runner quality.
        front_material_id: Front material, defaults to the carcass material.
        body_material_id: Box material, defaults to the carcass material.
        handle_type: Hardware catalog id of the handle.
    """

    kind: ClassVar[ModuleType] = ModuleType.DRAWER

    height: float = 180
    slide_type: SlideType = SlideType.BASIC
    front_material_id: str | None = None
    body_material_id: str | None = None
    handle_type: str = DEFAULT_HANDLE

    def __post_init__(self) -> None:
        details = _length_detail("height", self.height, 100, 400)
        try:
            object.__setattr__(self, "slide_type", SlideType(self.slide_type))
        except ValueError:
            details.append(
                {
                    "path": "slide_type",
                    "message": "must be one of basic, soft_close",
                    "value": self.slide_type,
                }
            )
        _raise_if(self.kind, details)


@dataclass(frozen=True)
class HingedDoorParams:
    """A set of hinged door leaves sharing the interior width."""

    kind: ClassVar[ModuleType] = ModuleType.HINGED_DOOR

    count: int = 2
    open_direction: OpenDirection = OpenDirection.BOTH
    soft_close: bool = False
    material_id: str | None = None
    handle_type: str = DEFAULT_HANDLE

    def __post_init__(self) -> None:
        details = _count_detail("count", self.count, 1, 4)
        try:
            object.__setattr__(
                self, "open_direction", OpenDirection(self.open_direction)
            )
        except ValueError:
            details.append(
                {
                    "path": "open_direction",
                    "message": "must be one of left, right, both",
                    "value": self.open_direction,
                }
            )
        _raise_if(self.kind, details)


@dataclass(frozen=True)
class SlidingDoorParams:
    """Overlapping sliding panels on a shared rail kit."""

    kind: ClassVar[ModuleType] = ModuleType.SLIDING_DOOR

    panel_count: int = 2
    material_id: str | None = None

    def __post_init__(self) -> None:
        _raise_if(self.kind, _count_detail("panel_count", self.panel_count, 2, 3))


@dataclass(frozen=True)
class HangingRailParams:
    """Clothes rail. Produces hardware only.

    Attributes:
        height: Rail height above the floor in mm. None uses the
            wardrobe's ``hanging_rail_height``.
    """

    kind: ClassVar[ModuleType] = ModuleType.HANGING_RAIL

    height: float | None = None

    def __post_init__(self) -> None:
        if self.height is not None and self.height <= 0:
            _raise_if(
                self.kind,
                [{"path": "height", "message": "must be greater than 0", "value": self.height}],
            )


@dataclass(frozen=True)
class VerticalDividerParams:
    """Full-height partition.

    Attributes:
        position: Offset of the divider from the interior left face in mm.
        material_id: Divider material, defaults to the carcass material.
    """

    kind: ClassVar[ModuleType] = ModuleType.VERTICAL_DIVIDER

    position: float
    material_id: str | None = None

    def __post_init__(self) -> None:
        if self.position <= 0:
            _raise_if(
                self.kind,
                [{"path": "position", "message": "must be greater than 0", "value": self.position}],
            )


@dataclass(frozen=True)
class SocleParams:
    """Recessed rear plinth rail."""

    kind: ClassVar[ModuleType] = ModuleType.SOCLE

    height: float = 100
    material_id: str | None = None

    def __post_init__(self) -> None:
        _raise_if(self.kind, _length_detail("height", self.height, 60, 200))


ModuleParams = Union[
    ShelfParams,
    DrawerParams,
    HingedDoorParams,
    SlidingDoorParams,
    HangingRailParams,
    VerticalDividerParams,
    SocleParams,
]

MODULE_PARAMS_BY_TYPE: dict[ModuleType, type] = {
    cls.kind: cls
    for cls in (
        ShelfParams,
        DrawerParams,
        HingedDoorParams,
        SlidingDoorParams,
        HangingRailParams,
        VerticalDividerParams,
        SocleParams,
    )
}


@dataclass(frozen=True)
class Module:
    """A functional addition to a furniture shell.

    Attributes:
        id: Identifier unique within the furniture.
        order: Processing sequence; lower orders are generated first.
        params: Kind-specific parameters. The module type is taken from it.
    """

    id: str
    order: int
    params: ModuleParams

    def __post_init__(self) -> None:
        if not self.id:
            raise ConfigError(
                "Module id must not be empty", error_type="params"
            )

    @property
    def type(self) -> ModuleType:
        return self.params.kind


def sort_modules(modules: list[Module] | tuple[Module, ...]) -> list[Module]:
    """Return modules in processing order.

    Ties on ``order`` keep their input position.
    """
    return sorted(modules, key=lambda module: module.order)
