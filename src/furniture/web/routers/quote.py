"""Project quoting endpoints."""

from typing import Any

from fastapi import APIRouter

from furniture.application.config import load_config_from_dict
from furniture.infrastructure import JsonExporter
from furniture.web.dependencies import QuoteCommandDep
from furniture.web.schemas.requests import QuoteRequest

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post("")
async def quote_project(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> dict[str, Any]:
    """Quote every furniture of a project.

    Furnitures with configuration errors are listed under ``errors`` and
    left out of the consolidated totals; the request itself still succeeds.
    A project that fails schema validation is rejected with 422.
    """
    config = load_config_from_dict(request.config)
    quote = command.execute(config, margin_percent=request.margin_percent)
    return JsonExporter().quote_to_dict(quote)
