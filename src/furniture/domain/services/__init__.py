"""Pipeline services: hardware, BOM, cut list, cost and assembly."""

from .assembly import AssemblyStep, StepHardware, synthesize_assembly
from .bom import (
    Bom,
    BomBuilder,
    BomHardwareLine,
    BomPartLine,
    CatalogMiss,
    consolidate_boms,
)
from .cost import (
    DEFAULT_MARGIN_PERCENT,
    CostSummary,
    calculate_cost,
    consolidate_costs,
)
from .cut_list import (
    WASTE_FACTOR,
    CutList,
    CutListEstimator,
    CutListItem,
    SheetGroup,
    sheets_needed,
)
from .hardware import HardwareInference, HardwareResult

__all__ = [
    "AssemblyStep",
    "Bom",
    "BomBuilder",
    "BomHardwareLine",
    "BomPartLine",
    "CatalogMiss",
    "CostSummary",
    "CutList",
    "CutListEstimator",
    "CutListItem",
    "DEFAULT_MARGIN_PERCENT",
    "HardwareInference",
    "HardwareResult",
    "SheetGroup",
    "StepHardware",
    "WASTE_FACTOR",
    "calculate_cost",
    "consolidate_boms",
    "consolidate_costs",
    "sheets_needed",
    "synthesize_assembly",
]
