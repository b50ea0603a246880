"""Output formatters and exporters for furniture results."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from furniture.application.dtos import FurnitureResult, ProjectQuote
from furniture.domain import Part
from furniture.domain.services import (
    AssemblyStep,
    Bom,
    BomHardwareLine,
    CostSummary,
    CutList,
)


class PartListFormatter:
    """Formats the part list of one furniture."""

    def format(self, parts: Sequence[Part]) -> str:
        """Format parts as a table in generation order."""
        if not parts:
            return "No parts."

        lines = [
            "PART LIST",
            "=" * 70,
            f"{'Code':<5} {'Part':<22} {'L (mm)':>8} {'W (mm)':>8} {'T':>4} "
            f"{'Qty':>4}  {'Material'}",
            "-" * 70,
        ]
        for part in parts:
            lines.append(
                f"{part.code:<5} {part.label:<22} {part.length:>8.1f} {part.width:>8.1f} "
                f"{part.thickness:>4g} {part.quantity:>4}  {part.material_id}"
            )
        lines.append("-" * 70)
        total_area = sum(part.total_area_sqm for part in parts)
        lines.append(
            f"{len(parts)} part line(s), "
            f"{sum(p.quantity for p in parts)} piece(s), {total_area:.3f} m2"
        )
        return "\n".join(lines)


class HardwareFormatter:
    """Formats priced hardware lines as a shopping list."""

    def format(self, lines_in: Sequence[BomHardwareLine]) -> str:
        lines = ["HARDWARE", "=" * 70]
        if not lines_in:
            lines.append("No hardware required.")
            return "\n".join(lines)

        lines.append(f"{'Item':<40} {'Qty':>6} {'Unit':<6}")
        lines.append("-" * 70)
        for line in lines_in:
            lines.append(f"{line.name:<40} {line.quantity:>6} {line.unit:<6}")
        return "\n".join(lines)


class BomFormatter:
    """Formats a priced bill of materials."""

    def format(self, bom: Bom, currency: str = "USD") -> str:
        lines = [
            f"BILL OF MATERIALS ({bom.furniture_id})",
            "=" * 70,
            f"{'Code':<5} {'Part':<22} {'Material':<18} {'m2':>8} {'Subtotal':>12}",
            "-" * 70,
        ]
        for line in bom.parts:
            lines.append(
                f"{line.code:<5} {line.label:<22} {line.material_name:<18} "
                f"{line.area_sqm:>8.4f} {line.subtotal:>12.2f}"
            )
        if bom.hardware:
            lines.append("")
            lines.append(f"{'Hardware':<34} {'Qty':>5} {'Unit price':>12} {'Subtotal':>12}")
            lines.append("-" * 70)
            for line in bom.hardware:
                lines.append(
                    f"{line.name:<34} {line.quantity:>5} {line.unit_price:>12.2f} "
                    f"{line.subtotal:>12.2f}"
                )

        lines.append("-" * 70)
        lines.append(f"{'Materials':<56} {bom.total_materials:>10.2f} {currency}")
        lines.append(f"{'Hardware':<56} {bom.total_hardware:>10.2f} {currency}")
        lines.append(f"{'TOTAL':<56} {bom.grand_total:>10.2f} {currency}")

        if bom.issues:
            lines.append("")
            lines.append("Catalog issues:")
            for issue in bom.issues:
                lines.append(f"  - {issue.message}")
        return "\n".join(lines)


class CutListFormatter:
    """Formats sheet groups with their estimated sheet counts."""

    def format(self, cut_list: CutList) -> str:
        if not cut_list.groups:
            return "No pieces in cut list."

        lines = ["CUT LIST", "=" * 70]
        for group in cut_list.groups:
            lines.append(
                f"{group.material_name} ({group.thickness:g} mm) - "
                f"{group.sheet_width:g}x{group.sheet_length:g} mm sheets"
            )
            lines.append(f"  {'Code':<5} {'Part':<22} {'L':>8} {'W':>8} {'Qty':>4} {'Grain':<6}")
            for item in group.items:
                lines.append(
                    f"  {item.code:<5} {item.label:<22} {item.length:>8.1f} "
                    f"{item.width:>8.1f} {item.quantity:>4} {item.grain.value:<6}"
                )
            lines.append(
                f"  Area: {group.total_area_sqm:.4f} m2   Sheets: {group.sheets_needed}"
                f"   Weight: {group.weight_kg:.1f} kg"
            )
            lines.append("")

        lines.append("-" * 70)
        lines.append(
            f"TOTAL: {cut_list.total_sheets} sheet(s), {cut_list.total_area_sqm:.4f} m2, "
            f"{cut_list.total_weight_kg:.1f} kg"
        )
        for warning in cut_list.warnings:
            lines.append(f"Warning: {warning}")
        return "\n".join(lines)


class CostFormatter:
    """Formats a cost summary."""

    def format(self, cost: CostSummary, currency: str = "USD") -> str:
        return "\n".join(
            [
                "COST",
                "=" * 70,
                f"{'Materials':<40} {cost.materials_cost:>14.2f} {currency}",
                f"{'Hardware':<40} {cost.hardware_cost:>14.2f} {currency}",
                f"{'Subtotal':<40} {cost.subtotal:>14.2f} {currency}",
                f"{'Margin':<40} {cost.margin_percent:>13.2f}%",
                "-" * 70,
                f"{'SALE PRICE':<40} {cost.sale_price:>14.2f} {currency}",
            ]
        )


class AssemblyFormatter:
    """Formats numbered assembly steps."""

    def format(self, steps: Sequence[AssemblyStep]) -> str:
        lines = ["ASSEMBLY", "=" * 70]
        for step in steps:
            lines.append(f"{step.step_number}. {step.title}")
            lines.append(f"   {step.description}")
            if step.part_codes:
                lines.append(f"   Parts: {', '.join(step.part_codes)}")
            if step.hardware_used:
                used = ", ".join(
                    f"{h.quantity}x {h.hardware_type_id}" for h in step.hardware_used
                )
                lines.append(f"   Hardware: {used}")
        return "\n".join(lines)


class ReportFormatter:
    """Combines the section formatters into full text reports."""

    def __init__(self) -> None:
        self.parts = PartListFormatter()
        self.hardware = HardwareFormatter()
        self.bom = BomFormatter()
        self.cut_list = CutListFormatter()
        self.cost = CostFormatter()
        self.assembly = AssemblyFormatter()

    def format_result(self, result: FurnitureResult, currency: str = "USD") -> str:
        """Format every section of one furniture result."""
        header = f"{result.name} [{result.family}]"
        sections = [
            header,
            "#" * len(header),
            self.parts.format(result.parts),
            self.hardware.format(result.bom.hardware),
            self.bom.format(result.bom, currency),
            self.cut_list.format(result.cut_list),
            self.cost.format(result.cost, currency),
            self.assembly.format(result.assembly_steps),
        ]
        if result.warnings:
            sections.append("\n".join(["WARNINGS", *(f"  - {w}" for w in result.warnings)]))
        return "\n\n".join(sections)

    def format_quote(self, quote: ProjectQuote) -> str:
        """Format a project: each furniture, errors, then project totals."""
        sections = [self.format_result(r, quote.currency) for r in quote.results]
        for furniture_id, error in quote.errors:
            sections.append(f"ERROR in '{furniture_id}':\n{error.message}")
        if len(quote.results) > 1:
            sections.append(f"PROJECT TOTAL: {quote.name}\n{'=' * 70}")
            sections.append(self.cut_list.format(quote.cut_list))
            sections.append(self.cost.format(quote.cost, quote.currency))
        return "\n\n".join(sections)


class JsonExporter:
    """Exports furniture results and project quotes as JSON."""

    def export_result(self, result: FurnitureResult) -> str:
        """Export one furniture result as a JSON string."""
        return json.dumps(self.result_to_dict(result), indent=2)

    def export_quote(self, quote: ProjectQuote) -> str:
        """Export a project quote as a JSON string."""
        return json.dumps(self.quote_to_dict(quote), indent=2)

    def result_to_dict(self, result: FurnitureResult) -> dict[str, Any]:
        return {
            "furniture_id": result.furniture_id,
            "name": result.name,
            "family": result.family,
            "parts": [self._part(p) for p in result.parts],
            "hardware": [
                {
                    "id": item.id,
                    "hardware_type_id": item.hardware_type_id,
                    "quantity": item.quantity,
                    "module_id": item.module_id,
                }
                for item in result.hardware
            ],
            "bom": self._bom(result.bom),
            "cut_list": self._cut_list(result.cut_list),
            "cost": self._cost(result.cost),
            "assembly_steps": [
                {
                    "step_number": step.step_number,
                    "title": step.title,
                    "description": step.description,
                    "part_codes": list(step.part_codes),
                    "hardware_used": [
                        {"hardware_type_id": h.hardware_type_id, "quantity": h.quantity}
                        for h in step.hardware_used
                    ],
                }
                for step in result.assembly_steps
            ],
            "warnings": list(result.warnings),
        }

    def quote_to_dict(self, quote: ProjectQuote) -> dict[str, Any]:
        return {
            "name": quote.name,
            "currency": quote.currency,
            "furnitures": [self.result_to_dict(r) for r in quote.results],
            "errors": [
                {
                    "furniture_id": furniture_id,
                    "error": error.message,
                    "error_type": error.error_type,
                    "details": error.details,
                }
                for furniture_id, error in quote.errors
            ],
            "bom": self._bom(quote.bom),
            "cut_list": self._cut_list(quote.cut_list),
            "cost": self._cost(quote.cost),
        }

    def _part(self, part: Part) -> dict[str, Any]:
        return {
            "id": part.id,
            "code": part.code,
            "label": part.label,
            "length": part.length,
            "width": part.width,
            "thickness": part.thickness,
            "quantity": part.quantity,
            "material_id": part.material_id,
            "finish_id": part.finish_id,
            "grain": part.grain.value,
            "panel_type": part.panel_type.value,
            "module_id": part.module_id,
            "position": part.position,
        }

    def _bom(self, bom: Bom) -> dict[str, Any]:
        return {
            "parts": [
                {
                    "part_id": line.part_id,
                    "code": line.code,
                    "label": line.label,
                    "material_id": line.material_id,
                    "finish_id": line.finish_id,
                    "quantity": line.quantity,
                    "area_sqm": line.area_sqm,
                    "price_per_sqm": line.price_per_sqm,
                    "subtotal": line.subtotal,
                }
                for line in bom.parts
            ],
            "hardware": [
                {
                    "hardware_id": line.hardware_id,
                    "hardware_type_id": line.hardware_type_id,
                    "name": line.name,
                    "unit": line.unit,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                    "subtotal": line.subtotal,
                }
                for line in bom.hardware
            ],
            "total_materials": bom.total_materials,
            "total_hardware": bom.total_hardware,
            "grand_total": bom.grand_total,
            "issues": [issue.message for issue in bom.issues],
        }

    def _cut_list(self, cut_list: CutList) -> dict[str, Any]:
        return {
            "groups": [
                {
                    "material_id": group.material_id,
                    "thickness": group.thickness,
                    "items": [
                        {
                            "part_id": item.part_id,
                            "code": item.code,
                            "label": item.label,
                            "length": item.length,
                            "width": item.width,
                            "quantity": item.quantity,
                            "grain": item.grain.value,
                        }
                        for item in group.items
                    ],
                    "total_area_sqm": group.total_area_sqm,
                    "sheets_needed": group.sheets_needed,
                    "weight_kg": group.weight_kg,
                }
                for group in cut_list.groups
            ],
            "total_sheets": cut_list.total_sheets,
            "warnings": list(cut_list.warnings),
        }

    def _cost(self, cost: CostSummary) -> dict[str, Any]:
        return {
            "materials_cost": cost.materials_cost,
            "hardware_cost": cost.hardware_cost,
            "subtotal": cost.subtotal,
            "margin_percent": cost.margin_percent,
            "sale_price": cost.sale_price,
        }
