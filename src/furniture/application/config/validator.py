"""Validation structures and woodworking advisory checks.

``validate_config`` builds the domain objects of every furniture (so
range and combination errors are reported exactly as generation would
report them) and adds non-blocking advisories about common workshop
pitfalls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from furniture.application.config.adapter import build_request, project_catalogs
from furniture.application.config.schemas import FurnitureConfig, ProjectConfig
from furniture.domain import Catalogs, ConfigError, generator_for

MIN_RECOMMENDED_MARGIN = 10.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g. "furnitures[0].params.total_width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _add_config_error(result: ValidationResult, prefix: str, error: ConfigError) -> None:
    if not error.details:
        result.add_error(prefix, error.message)
        return
    for detail in error.details:
        path = detail.get("path")
        result.add_error(
            f"{prefix}.{path}" if path else prefix,
            detail.get("message", error.message),
            detail.get("value"),
        )


def check_furniture(
    furniture: FurnitureConfig, catalogs: Catalogs, path: str
) -> ValidationResult:
    """Validate one furniture entry and collect its advisories.

    Args:
        furniture: Furniture entry from the project file.
        catalogs: Catalogs in effect for the project.
        path: JSON path of the entry, used to prefix messages.

    Returns:
        ValidationResult with the furniture's errors and warnings.
    """
    result = ValidationResult()
    try:
        request = build_request(furniture)
    except ConfigError as e:
        _add_config_error(result, path, e)
        return result

    try:
        plan = generator_for(request.params).plan(
            request.furniture_id,
            request.params,
            request.modules,
            catalogs.materials,
            request.material_id,
            request.finish_id,
        )
    except ConfigError as e:
        for detail in e.details or [{"message": e.message}]:
            result.add_error(f"{path}.modules", detail.get("message", e.message))
        return result

    for message in plan.warnings:
        result.add_warning(f"{path}.modules", message)

    params = request.params
    material = catalogs.material(request.material_id)
    if material is None:
        result.add_warning(
            f"{path}.material_id",
            f"Material '{request.material_id}' is not in the catalog; it will be priced at 0",
        )
    elif (
        material.standard_thicknesses
        and params.board_thickness not in material.standard_thicknesses
    ):
        stocked = ", ".join(f"{t:g}" for t in material.standard_thicknesses)
        result.add_warning(
            f"{path}.params.board_thickness",
            f"{params.board_thickness:g} mm is not a standard thickness for "
            f"'{material.id}' (stocked: {stocked} mm)",
            suggestion="Pick a material stocked in this thickness",
        )
    if catalogs.finish(request.finish_id) is None:
        result.add_warning(
            f"{path}.finish_id", f"Finish '{request.finish_id}' is not in the catalog"
        )
    return result


def validate_config(
    config: ProjectConfig, catalogs: Catalogs | None = None
) -> ValidationResult:
    """Perform full validation of a project configuration.

    Args:
        config: A ProjectConfig instance (already validated by Pydantic)
        catalogs: Base catalogs; the bundled defaults when None.

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    effective = project_catalogs(config, catalogs)

    for index, furniture in enumerate(config.furnitures):
        result.merge(check_furniture(furniture, effective, f"furnitures[{index}]"))

    margin = config.project.profit_margin
    if margin < MIN_RECOMMENDED_MARGIN:
        result.add_warning(
            "project.profit_margin",
            f"Profit margin of {margin:g}% is below {MIN_RECOMMENDED_MARGIN:g}%",
            suggestion="Check that the margin covers labour and overhead",
        )
    return result
