"""Pydantic schemas for the REST API."""

from furniture.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateRequest,
    QuoteRequest,
)
from furniture.web.schemas.responses import (
    ErrorResponseSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "GenerateRequest",
    "QuoteRequest",
    # Responses
    "ErrorResponseSchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
