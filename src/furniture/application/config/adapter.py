"""Adapter from configuration schema models to domain objects.

Schema models only guarantee shape. Building the domain objects applies
the family ranges and module limits, and every violation of one
furniture is reported together in a single ConfigError whose detail
paths point back into the configuration.
"""

from __future__ import annotations

import logging
from typing import Any

from furniture.application.config.catalogs import catalogs_from_config, default_catalogs
from furniture.application.config.schemas import (
    CatalogsConfig,
    FurnitureConfig,
    ModuleConfig,
    ProjectConfig,
)
from furniture.application.dtos import FurnitureRequest
from furniture.domain import Catalogs, ConfigError, FurnitureParams, Module
from furniture.domain.modules import MODULE_PARAMS_BY_TYPE
from furniture.domain.params import PARAMS_BY_FAMILY
from furniture.domain.value_objects import FurnitureType, ModuleType

logger = logging.getLogger(__name__)


def _prefixed(prefix: str, error: ConfigError) -> list[dict[str, Any]]:
    if not error.details:
        return [{"path": prefix, "message": error.message}]
    return [
        {**detail, "path": f"{prefix}.{detail['path']}" if detail.get("path") else prefix}
        for detail in error.details
    ]


def build_params(furniture: FurnitureConfig) -> FurnitureParams:
    """Build the family params variant of a furniture entry.

    Raises:
        ConfigError: If a value is outside the family's valid range.
    """
    params_type = PARAMS_BY_FAMILY[FurnitureType(furniture.type)]
    return params_type(**furniture.params.model_dump())


def build_module(module: ModuleConfig) -> Module:
    """Build a domain Module from a module entry.

    Raises:
        ConfigError: If a module parameter is outside its limits.
    """
    params_type = MODULE_PARAMS_BY_TYPE[ModuleType(module.type)]
    return Module(
        id=module.id, order=module.order, params=params_type(**module.params.model_dump())
    )


def build_request(furniture: FurnitureConfig) -> FurnitureRequest:
    """Convert one furniture entry into a FurnitureRequest.

    Params and every module are built even after a failure, so all
    problems of the furniture are reported at once.

    Args:
        furniture: Validated furniture entry.

    Returns:
        The FurnitureRequest.

    Raises:
        ConfigError: With error_type "params", listing every invalid field.
    """
    details: list[dict[str, Any]] = []
    params: FurnitureParams | None = None
    try:
        params = build_params(furniture)
    except ConfigError as e:
        details.extend(_prefixed("params", e))

    modules: list[Module] = []
    for index, module_config in enumerate(furniture.modules):
        try:
            modules.append(build_module(module_config))
        except ConfigError as e:
            details.extend(_prefixed(f"modules[{index}].params", e))

    if details or params is None:
        raise ConfigError.from_fields(f"furniture '{furniture.id}'", details)

    return FurnitureRequest(
        furniture_id=furniture.id,
        params=params,
        modules=tuple(modules),
        material_id=furniture.material_id,
        finish_id=furniture.finish_id,
        name=furniture.name,
    )


def merge_catalogs(overrides: CatalogsConfig, base: Catalogs | None = None) -> Catalogs:
    """Merge project catalog entries over a base snapshot.

    Args:
        overrides: Catalog entries from the project file.
        base: Catalogs to merge into; the bundled defaults when None.

    Returns:
        A new Catalogs snapshot.
    """
    base = base or default_catalogs()
    extra = catalogs_from_config(overrides)
    if extra.materials or extra.finishes or extra.hardware:
        logger.debug(
            f"Merging project catalogs: {len(extra.materials)} materials, "
            f"{len(extra.finishes)} finishes, {len(extra.hardware)} hardware"
        )
    return base.merged(
        materials=extra.materials, finishes=extra.finishes, hardware=extra.hardware
    )


def project_catalogs(config: ProjectConfig, base: Catalogs | None = None) -> Catalogs:
    """Catalogs in effect for a project file."""
    return merge_catalogs(config.catalogs, base)
