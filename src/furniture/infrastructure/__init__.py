"""Infrastructure layer - text formatters and JSON export."""

from .formatters import (
    AssemblyFormatter,
    BomFormatter,
    CostFormatter,
    CutListFormatter,
    HardwareFormatter,
    JsonExporter,
    PartListFormatter,
    ReportFormatter,
)

__all__ = [
    "AssemblyFormatter",
    "BomFormatter",
    "CostFormatter",
    "CutListFormatter",
    "HardwareFormatter",
    "JsonExporter",
    "PartListFormatter",
    "ReportFormatter",
]
