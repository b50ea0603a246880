"""Domain layer: value objects, catalogs, generators and pipeline services."""

from .catalogs import (
    DEFAULT_FINISH_ID,
    DEFAULT_MATERIAL_ID,
    Catalogs,
    Finish,
    HardwareKind,
    HardwareSpec,
    Material,
    MaterialType,
)
from .errors import CatalogMissError, ConfigError, FurnitureError
from .generators import generate_parts, generator_for
from .modules import (
    DrawerParams,
    HangingRailParams,
    HingedDoorParams,
    Module,
    ModuleParams,
    OpenDirection,
    ShelfParams,
    SlideType,
    SlidingDoorParams,
    SocleParams,
    VerticalDividerParams,
)
from .params import (
    BookcaseParams,
    CarcassParams,
    EntertainmentCenterParams,
    FurnitureParams,
    KitchenBaseParams,
    KitchenWallParams,
    TvUnitParams,
    WardrobeParams,
)
from .value_objects import (
    DoorType,
    FurnitureType,
    GrainDirection,
    HardwareItem,
    ModuleType,
    PanelType,
    Part,
    round2,
)

__all__ = [
    "BookcaseParams",
    "CarcassParams",
    "CatalogMissError",
    "Catalogs",
    "ConfigError",
    "DEFAULT_FINISH_ID",
    "DEFAULT_MATERIAL_ID",
    "DoorType",
    "DrawerParams",
    "EntertainmentCenterParams",
    "Finish",
    "FurnitureError",
    "FurnitureParams",
    "FurnitureType",
    "GrainDirection",
    "HangingRailParams",
    "HardwareItem",
    "HardwareKind",
    "HardwareSpec",
    "HingedDoorParams",
    "KitchenBaseParams",
    "KitchenWallParams",
    "Material",
    "MaterialType",
    "Module",
    "ModuleParams",
    "ModuleType",
    "OpenDirection",
    "PanelType",
    "Part",
    "ShelfParams",
    "SlideType",
    "SlidingDoorParams",
    "SocleParams",
    "TvUnitParams",
    "VerticalDividerParams",
    "WardrobeParams",
    "generate_parts",
    "generator_for",
    "round2",
]
