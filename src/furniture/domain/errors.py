"""Error types raised by the furniture engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FurnitureError(Exception):
    """Base class for all furniture engine errors."""


class ConfigError(FurnitureError):
    """Raised when a furniture configuration cannot be generated.

    Covers everything that makes a single furniture impossible to build:
    unreadable project files, schema violations, parameters outside their
    valid range and unsupported module/family combinations. Generation of
    the affected furniture is aborted; other furnitures are unaffected.

    Attributes:
        message: The primary error message.
        error_type: Category of error (file_not_found, json_parse,
            validation, params, unsupported_combination, ...).
        path: Path to the configuration file (if applicable).
        details: Additional error details, typically one dict per
            offending field with ``path``, ``message`` and ``value`` keys.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message

    @classmethod
    def from_fields(
        cls,
        subject: str,
        details: list[dict[str, Any]],
        error_type: str = "params",
    ) -> ConfigError:
        """Build a ConfigError summarising several field errors.

        Args:
            subject: What was being validated (e.g. "wardrobe params").
            details: Field error dicts with ``path`` and ``message`` keys.
            error_type: Error category to record.

        Returns:
            A ConfigError whose message lists every field error.
        """
        lines = [f"Invalid {subject}:"]
        for detail in details:
            lines.append(f"  - {detail['path']}: {detail['message']}")
        return cls("\n".join(lines), error_type=error_type, details=details)


class CatalogMissError(FurnitureError):
    """Raised when a referenced catalog entry does not exist.

    Catalog misses are normally recoverable: the BOM builder prices the
    line at zero and records the miss. This exception is only raised when
    a builder runs in strict mode.

    Attributes:
        catalog: Which catalog was consulted (material, finish, hardware).
        item_id: The identifier that could not be resolved.
    """

    def __init__(self, catalog: str, item_id: str) -> None:
        self.catalog = catalog
        self.item_id = item_id
        super().__init__(f"Unknown {catalog} '{item_id}'")
