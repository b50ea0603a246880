"""Furniture generation endpoints."""

from typing import Any

from fastapi import APIRouter

from furniture.application import GenerateFurnitureCommand
from furniture.application.config import merge_catalogs
from furniture.infrastructure import JsonExporter
from furniture.web.dependencies import CatalogsDep
from furniture.web.schemas.requests import GenerateRequest

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("")
async def generate_furniture(
    request: GenerateRequest,
    catalogs: CatalogsDep,
) -> dict[str, Any]:
    """Generate parts, hardware, BOM, cut list, cost and assembly steps.

    Args:
        request: Furniture entry, margin and optional catalog overrides.
        catalogs: Injected bundled catalogs.

    Returns:
        The JSON-exported furniture result.

    Raises:
        ConfigError: If the furniture cannot be built (handled as 422).
    """
    command = GenerateFurnitureCommand(catalogs=merge_catalogs(request.catalogs, catalogs))
    outcome = command.execute_config(request.furniture, request.margin_percent)
    if outcome.error is not None:
        raise outcome.error
    return JsonExporter().result_to_dict(outcome.result)
