"""Template management endpoints."""

import json

from fastapi import APIRouter

from furniture.application.templates.manager import TEMPLATE_METADATA
from furniture.web.dependencies import TemplateManagerDep
from furniture.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List all available templates."""
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get the content of a specific template.

    Raises:
        TemplateNotFoundError: If template does not exist (handled as 404).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
