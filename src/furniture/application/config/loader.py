"""Project file loader with error reporting.

Loads and parses JSON project files. File system errors, JSON syntax
errors and schema violations are all reported as ConfigError with a
category and per-field details, so callers only handle one exception.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from furniture.application.config.schemas import ProjectConfig
from furniture.domain import FurnitureType, ModuleType
from furniture.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# Tags Pydantic inserts into error locations of discriminated unions
_UNION_TAGS: frozenset[str] = frozenset(
    [t.value for t in FurnitureType] + [t.value for t in ModuleType]
)


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Args:
        loc: Tuple of path segments (strings for keys, ints for array indices)

    Returns:
        Formatted JSON path like "furnitures[0].params.total_width"

    Examples:
        >>> _format_json_path(("project", "profit_margin"))
        'project.profit_margin'
        >>> _format_json_path(("furnitures", 0, "modules", 1, "id"))
        'furnitures[0].modules[1].id'
    """
    parts: list[str] = []
    previous: str | int | None = None
    for segment in loc:
        if isinstance(previous, int) and segment in _UNION_TAGS:
            previous = segment
            continue
        previous = segment
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Turn a Pydantic ValidationError into detail dicts.

    Returns:
        One dict per error with path, message, value and error_type.
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        # Whole-object inputs make the message unreadable
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config_from_dict(data: Any, path: Path | None = None) -> ProjectConfig:
    """Validate already-parsed project data.

    Args:
        data: Parsed JSON content (normally a dict).
        path: File the data came from, recorded on errors.

    Returns:
        A validated ProjectConfig.

    Raises:
        ConfigError: With error_type "validation" if the data does not
            match the schema.
    """
    try:
        return ProjectConfig.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> ProjectConfig:
    """Load and validate a project file.

    Args:
        path: Path to the JSON project file.

    Returns:
        A validated ProjectConfig.

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute tells which step failed:
            - "file_not_found": File does not exist
            - "permission_denied" / "file_read_error": File unreadable
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    config = load_config_from_dict(data, path=path)
    logger.debug(f"Loaded {len(config.furnitures)} furniture(s) from {path}")
    return config
