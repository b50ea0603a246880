"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from furniture.application.config import CatalogsConfig, FurnitureConfig


class GenerateRequest(BaseModel):
    """Request for generating a single furniture."""

    furniture: FurnitureConfig = Field(..., description="Furniture entry, keyed on type")
    margin_percent: float = Field(
        default=30.0, ge=0, le=500, description="Profit margin in percent"
    )
    catalogs: CatalogsConfig = Field(
        default_factory=CatalogsConfig,
        description="Catalog entries added to or replacing the bundled ones",
    )


class QuoteRequest(BaseModel):
    """Request for quoting a full project."""

    config: dict[str, Any] = Field(..., description="Full project configuration JSON")
    margin_percent: float | None = Field(
        default=None,
        ge=0,
        le=500,
        description="Overrides the project's profit margin when given",
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a project configuration."""

    config: dict[str, Any] = Field(..., description="Project configuration JSON")
