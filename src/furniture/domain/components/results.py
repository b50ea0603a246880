"""Result types for component validation and hardware rules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HardwareRequirement:
    """Hardware needed by a module before it is given an id.

    Attributes:
        hardware_type_id: Hardware catalog key.
        quantity: Number of units required.
    """

    hardware_type_id: str
    quantity: int


@dataclass(frozen=True)
class ValidationResult:
    """Result of component validation.

    A component is valid if there are no errors, even if there are
    warnings.

    Attributes:
        errors: Tuple of error messages (validation failures).
        warnings: Tuple of warning messages (non-fatal issues).
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        """Create a successful validation result."""
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a failed validation result."""
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))

    @classmethod
    def from_lists(cls, errors: list[str], warnings: list[str]) -> ValidationResult:
        return cls(errors=tuple(errors), warnings=tuple(warnings))
