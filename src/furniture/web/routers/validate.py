"""Configuration validation endpoints."""

from fastapi import APIRouter

from furniture.application.config import load_config_from_dict, validate_config
from furniture.domain import ConfigError
from furniture.web.dependencies import CatalogsDep
from furniture.web.schemas.requests import ConfigValidateRequest
from furniture.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    catalogs: CatalogsDep,
) -> ValidationResultSchema:
    """Validate a project configuration without generating.

    Schema problems are reported as errors of an invalid result rather
    than as an HTTP error.

    Args:
        request: Request containing configuration to validate.
        catalogs: Injected bundled catalogs.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message", e.message), "path": d.get("path", "")}
                for d in e.details
            ]
            or [{"message": e.message, "path": ""}],
        )

    result = validate_config(config, catalogs)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
