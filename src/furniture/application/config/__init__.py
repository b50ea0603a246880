"""Configuration schema and loading system for furniture projects.

This package provides JSON-based project loading and validation. It
includes Pydantic models for schema validation, a loader with error
reporting, the adapter that turns configuration into domain objects and
woodworking advisory checks.

Public API:
    - ProjectConfig: Root configuration model
    - FurnitureConfig: Furniture entry, discriminated on ``type``
    - ModuleConfig: Module entry, discriminated on ``type``
    - CatalogsConfig: Catalog overrides
    - load_config: Load a project from a JSON file
    - load_config_from_dict: Load a project from a dictionary
    - default_catalogs: Load the bundled catalogs
    - build_request: Convert a furniture entry into a FurnitureRequest
    - project_catalogs: Catalogs in effect for a project
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from furniture.application.config import load_config
    >>> from furniture.domain import ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{len(config.furnitures)} furniture(s)")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from furniture.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CatalogsConfig,
    FinishEntry,
    FurnitureConfig,
    HardwareEntry,
    MaterialEntry,
    ModuleConfig,
    ProjectConfig,
    ProjectSettings,
)
from furniture.application.config.catalogs import catalogs_from_config, default_catalogs
from furniture.application.config.loader import load_config, load_config_from_dict
from furniture.application.config.adapter import (
    build_module,
    build_params,
    build_request,
    merge_catalogs,
    project_catalogs,
)
from furniture.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "CatalogsConfig",
    "FinishEntry",
    "FurnitureConfig",
    "HardwareEntry",
    "MaterialEntry",
    "ModuleConfig",
    "ProjectConfig",
    "ProjectSettings",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "build_module",
    "build_params",
    "build_request",
    "catalogs_from_config",
    "default_catalogs",
    "load_config",
    "load_config_from_dict",
    "merge_catalogs",
    "project_catalogs",
    "validate_config",
]
