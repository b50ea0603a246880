"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class TemplateListItemSchema(BaseModel):
    """Single template in the list."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateListItemSchema] = Field(
        ..., description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Response for template content."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template project content")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
