"""Pydantic configuration schema models for furniture project files.

The schema checks the shape of a project file: field names, types and
basic signs. Family-specific ranges and module/family combinations are
checked when the configuration is turned into domain objects, so the same
rules apply to files, API requests and direct Python callers.

The domain enums are reused so configuration values and domain values
cannot drift apart.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from furniture.domain.catalogs import (
    DEFAULT_FINISH_ID,
    DEFAULT_MATERIAL_ID,
    HardwareKind,
    MaterialType,
)
from furniture.domain.modules import DEFAULT_HANDLE, OpenDirection, SlideType
from furniture.domain.value_objects import DoorType

# Supported schema versions for project files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


# -- catalogs ---------------------------------------------------------------


class MaterialEntry(BaseModel):
    """Material catalog entry."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    material_type: MaterialType
    price_per_sqm: float = Field(..., ge=0)
    standard_sheet_width: float = Field(default=1220, gt=0)
    standard_sheet_length: float = Field(default=2440, gt=0)
    density: float = Field(default=700, gt=0)
    standard_thicknesses: list[float] = Field(default_factory=list)


class FinishEntry(BaseModel):
    """Finish catalog entry."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    color_hex: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")


class HardwareEntry(BaseModel):
    """Hardware catalog entry."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    hardware_type: HardwareKind
    unit_price: float = Field(..., ge=0)
    unit: Literal["piece", "pair", "set", "m"] = "piece"


class CatalogsConfig(BaseModel):
    """Catalog entries keyed by id.

    In a project file these entries are merged over the bundled defaults.
    """

    model_config = ConfigDict(extra="forbid")

    materials: dict[str, MaterialEntry] = Field(default_factory=dict)
    finishes: dict[str, FinishEntry] = Field(default_factory=dict)
    hardware: dict[str, HardwareEntry] = Field(default_factory=dict)


# -- modules ----------------------------------------------------------------


class ShelfModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=1, ge=1)
    adjustable: bool = True
    material_id: str | None = None


class DrawerModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    height: float = Field(default=180, gt=0)
    slide_type: SlideType = SlideType.BASIC
    front_material_id: str | None = None
    body_material_id: str | None = None
    handle_type: str = DEFAULT_HANDLE


class HingedDoorModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=2, ge=1)
    open_direction: OpenDirection = OpenDirection.BOTH
    soft_close: bool = False
    material_id: str | None = None
    handle_type: str = DEFAULT_HANDLE


class SlidingDoorModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    panel_count: int = Field(default=2, ge=1)
    material_id: str | None = None


class HangingRailModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    height: float | None = Field(default=None, gt=0)


class VerticalDividerModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    position: float = Field(..., gt=0)
    material_id: str | None = None


class SocleModuleParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    height: float = Field(default=100, gt=0)
    material_id: str | None = None


class _ModuleBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    order: int = 0


class ShelfModuleConfig(_ModuleBase):
    type: Literal["shelf"]
    params: ShelfModuleParams = Field(default_factory=ShelfModuleParams)


class DrawerModuleConfig(_ModuleBase):
    type: Literal["drawer"]
    params: DrawerModuleParams = Field(default_factory=DrawerModuleParams)


class HingedDoorModuleConfig(_ModuleBase):
    type: Literal["hinged_door"]
    params: HingedDoorModuleParams = Field(default_factory=HingedDoorModuleParams)


class SlidingDoorModuleConfig(_ModuleBase):
    type: Literal["sliding_door"]
    params: SlidingDoorModuleParams = Field(default_factory=SlidingDoorModuleParams)


class HangingRailModuleConfig(_ModuleBase):
    type: Literal["hanging_rail"]
    params: HangingRailModuleParams = Field(default_factory=HangingRailModuleParams)


class VerticalDividerModuleConfig(_ModuleBase):
    type: Literal["vertical_divider"]
    params: VerticalDividerModuleParams


class SocleModuleConfig(_ModuleBase):
    type: Literal["socle"]
    params: SocleModuleParams = Field(default_factory=SocleModuleParams)


ModuleConfig = Annotated[
    Union[
        ShelfModuleConfig,
        DrawerModuleConfig,
        HingedDoorModuleConfig,
        SlidingDoorModuleConfig,
        HangingRailModuleConfig,
        VerticalDividerModuleConfig,
        SocleModuleConfig,
    ],
    Field(discriminator="type"),
]


# -- furniture params -------------------------------------------------------


class CarcassParamsConfig(BaseModel):
    """Dimensions shared by every furniture family (mm)."""

    model_config = ConfigDict(extra="forbid")

    total_width: float = Field(..., gt=0)
    total_height: float = Field(..., gt=0)
    total_depth: float = Field(..., gt=0)
    board_thickness: float = Field(default=18, gt=0)
    back_panel_thickness: float = Field(default=6, gt=0)
    has_back: bool = True
    has_socle: bool = False
    socle_height: float = Field(default=100, gt=0)
    door_type: DoorType = DoorType.NONE
    back_material_id: str | None = None


class WardrobeParamsConfig(CarcassParamsConfig):
    hanging_rail_height: float = Field(default=1600, gt=0)


class KitchenBaseParamsConfig(CarcassParamsConfig):
    has_countertop: bool = True
    countertop_thickness: float = Field(default=30, gt=0)
    countertop_overhang: float = Field(default=20, ge=0)
    countertop_material_id: str = "mdf_25"


class KitchenWallParamsConfig(CarcassParamsConfig):
    mounting_height: float = Field(default=1450, gt=0)


class TvUnitParamsConfig(CarcassParamsConfig):
    tv_niche_width: float = Field(default=0, ge=0)
    tv_niche_height: float = Field(default=0, ge=0)


class BookcaseParamsConfig(CarcassParamsConfig):
    pass


class EntertainmentCenterParamsConfig(CarcassParamsConfig):
    side_column_width: float = Field(default=0, ge=0)
    has_raised_panel: bool = False
    raised_panel_height: float = Field(default=800, gt=0)


class _FurnitureBase(BaseModel):
    """Fields shared by every furniture entry of a project."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, pattern=r"^[A-Za-z0-9_-]+$")
    name: str | None = None
    material_id: str = DEFAULT_MATERIAL_ID
    finish_id: str = DEFAULT_FINISH_ID
    modules: list[ModuleConfig] = Field(default_factory=list, max_length=30)

    @model_validator(mode="after")
    def validate_unique_module_ids(self) -> _FurnitureBase:
        ids = [module.id for module in self.modules]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate module ids: {', '.join(duplicates)}")
        return self


class WardrobeConfig(_FurnitureBase):
    type: Literal["wardrobe"]
    params: WardrobeParamsConfig


class KitchenBaseConfig(_FurnitureBase):
    type: Literal["kitchen_base"]
    params: KitchenBaseParamsConfig


class KitchenWallConfig(_FurnitureBase):
    type: Literal["kitchen_wall"]
    params: KitchenWallParamsConfig


class TvUnitConfig(_FurnitureBase):
    type: Literal["tv_unit"]
    params: TvUnitParamsConfig


class BookcaseConfig(_FurnitureBase):
    type: Literal["bookcase"]
    params: BookcaseParamsConfig


class EntertainmentCenterConfig(_FurnitureBase):
    type: Literal["entertainment_center"]
    params: EntertainmentCenterParamsConfig


FurnitureConfig = Annotated[
    Union[
        WardrobeConfig,
        KitchenBaseConfig,
        KitchenWallConfig,
        TvUnitConfig,
        BookcaseConfig,
        EntertainmentCenterConfig,
    ],
    Field(discriminator="type"),
]


# -- project ----------------------------------------------------------------


class ProjectSettings(BaseModel):
    """Project-wide pricing settings.

    Attributes:
        name: Project name used in reports.
        currency: Currency code shown next to prices.
        profit_margin: Margin in percent applied to every furniture.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = "Untitled project"
    currency: str = Field(default="USD", min_length=3, max_length=3)
    profit_margin: float = Field(default=30.0, ge=0, le=500)


class ProjectConfig(BaseModel):
    """Root model of a furniture project file.

    Attributes:
        schema_version: Configuration schema version.
        project: Pricing settings.
        catalogs: Catalog entries merged over the bundled defaults.
        furnitures: Furnitures to generate (1 to 50).
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project: ProjectSettings = Field(default_factory=ProjectSettings)
    catalogs: CatalogsConfig = Field(default_factory=CatalogsConfig)
    furnitures: list[FurnitureConfig] = Field(..., min_length=1, max_length=50)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_furniture_ids(self) -> ProjectConfig:
        ids = [furniture.id for furniture in self.furnitures]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate furniture ids: {', '.join(duplicates)}")
        return self
