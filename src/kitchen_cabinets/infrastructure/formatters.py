"""Text formatters for cut lists, materials, templates and drill patterns."""

from __future__ import annotations

from typing import Sequence

from kitchen_cabinets.domain import (
    CabinetTemplate,
    CutListItem,
    DrillPattern,
    LengthUnit,
    MaterialEstimate,
)
from kitchen_cabinets.domain.services import SheetStock
from kitchen_cabinets.domain.value_objects import DrillHole

from .costing import CostBreakdown, PricingConfig
from .nesting import NestingSheet


def format_length(value: float, unit: LengthUnit) -> str:
    """Format a length with up to four decimals and the unit suffix.

    Examples:
        >>> format_length(720.0, LengthUnit.MILLIMETER)
        '720mm'
        >>> format_length(22.5, LengthUnit.INCH)
        '22.5in'
    """
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return f"{text}{unit.suffix}"


def format_edges(item: CutListItem) -> str:
    """Banded edges of an item, comma-joined in top/bottom/left/right order."""
    return ",".join(edge.value for edge in item.banded_edges)


class CutListFormatter:
    """Formats cut lists for display."""

    def format(self, cut_list: Sequence[CutListItem]) -> str:
        """Format cut list as a table."""
        if not cut_list:
            return "No pieces in cut list."

        unit = cut_list[0].unit
        lines = [
            "CUT LIST",
            "=" * 96,
            f"{'Part':<18} {'Width':<11} {'Height':<11} {'Thick':<9} "
            f"{'Qty':<4} {'Material':<15} {'Banding':<24}",
            "-" * 96,
        ]

        for item in cut_list:
            banding = format_edges(item) or "-"
            if item.drill_patterns:
                banding = f"{banding}  [{', '.join(item.drill_patterns)}]"
            lines.append(
                f"{item.name:<18} {format_length(item.width, item.unit):<11} "
                f"{format_length(item.height, item.unit):<11} "
                f"{format_length(item.thickness, item.unit):<9} "
                f"{item.quantity:<4} {item.material.value:<15} {banding}"
            )

        total_area = sum(item.area for item in cut_list)
        total_parts = sum(item.quantity for item in cut_list)
        lines.append("-" * 96)
        lines.append(
            f"{'TOTAL':<18} {total_parts} parts, "
            f"{total_area:.1f} sq {unit.suffix} of panel"
        )
        return "\n".join(lines)


class MaterialReportFormatter:
    """Formats material estimate reports."""

    def format(
        self,
        estimates: dict[SheetStock, MaterialEstimate],
        total: MaterialEstimate,
    ) -> str:
        """Format material estimates as a report."""
        lines = [
            "MATERIAL ESTIMATE",
            "=" * 60,
            "",
        ]

        for stock, estimate in estimates.items():
            lines.append(f'{stock.material.value.title()} ({stock.thickness:g}" thick)')
            lines.append(f"  Area needed: {estimate.total_area_sqft:.2f} sq ft")
            lines.append(
                f"  4x8 sheets:  {estimate.sheet_count_4x8} "
                f"(with {estimate.waste_percentage:.0%} waste)"
            )
            lines.append(f"  5x5 sheets:  {estimate.sheet_count_5x5}")
            lines.append("")

        lines.append("-" * 60)
        lines.append("TOTAL (all materials)")
        lines.append(f"  Area: {total.total_area_sqft:.2f} sq ft")
        lines.append(f"  4x8 sheets: {total.sheet_count_4x8}")
        lines.append(f"  Edge banding: {total.edge_banding_feet:.1f} linear ft")
        lines.append(f"  (Includes {total.waste_percentage:.0%} waste factor)")

        return "\n".join(lines)


class CostFormatter:
    """Formats a cost breakdown."""

    def format(self, cost: CostBreakdown, pricing: PricingConfig) -> str:
        lines = [
            "COST ESTIMATE",
            "=" * 60,
            f"  Sheets:   {cost.sheet_count} "
            f"(avg {cost.waste_percentage:.1f}% waste, "
            f"{pricing.price_per_square_meter:.2f}/m²)",
            f"  Material: {cost.material_cost:>10.2f}",
            f"  Hardware: {cost.hardware_cost:>10.2f} "
            f"({cost.hinge_count} hinges, {cost.handle_count} handles)",
            "-" * 60,
            f"  Total:    {cost.total_cost:>10.2f}",
        ]
        return "\n".join(lines)


class TemplateFormatter:
    """Formats the template catalog."""

    def format(self, templates: Sequence[CabinetTemplate]) -> str:
        if not templates:
            return "No templates."

        lines = [
            f"{'Id':<16} {'Type':<6} {'W x H x D (in)':<20} {'Doors':<6} {'Shelves':<8} Name",
            "-" * 90,
        ]
        for t in templates:
            d = t.dimensions
            size = f"{d.width:g} x {d.height:g} x {d.depth:g}"
            lines.append(
                f"{t.id:<16} {t.type.value:<6} {size:<20} "
                f"{t.door_count:<6} {t.shelf_count:<8} {t.name}"
            )
        return "\n".join(lines)


class DrillPatternFormatter:
    """Formats drill patterns and their holes."""

    def format_list(self, patterns: Sequence[DrillPattern]) -> str:
        if not patterns:
            return "No drill patterns."

        lines = [
            f"{'Id':<28} {'Category':<18} {'Type':<8} {'Tool':<10} {'Level':<13} Name",
            "-" * 100,
        ]
        for p in patterns:
            tool = f"{p.drill_settings.tool_diameter:g}mm"
            lines.append(
                f"{p.id:<28} {p.category.value:<18} {p.type.value:<8} "
                f"{tool:<10} {p.difficulty.value:<13} {p.name}"
            )
        return "\n".join(lines)

    def format_detail(self, pattern: DrillPattern) -> str:
        s = pattern.drill_settings
        lines = [
            pattern.name,
            "=" * 60,
            pattern.description,
            "",
            f"  Id:           {pattern.id}",
            f"  Category:     {pattern.category.value}",
            f"  Type:         {pattern.type.value}",
            f"  Spacing:      {pattern.spacing.x:g} x {pattern.spacing.y:g} mm",
            f"  Pattern size: {pattern.pattern_size.width:g} x {pattern.pattern_size.height:g} mm",
            f"  Tool:         {s.tool_type}, {s.tool_diameter:g}mm",
            f"  Spindle:      {s.spindle_speed} rpm",
            f"  Feed rate:    {s.feed_rate:g} mm/min",
        ]
        if s.peck_depth is not None:
            lines.append(f"  Peck depth:   {s.peck_depth:g} mm")
        lines.append(f"  Coolant:      {s.coolant.value}")
        lines.append(f"  Difficulty:   {pattern.difficulty.value}")
        lines.append(f"  Est. time:    {pattern.estimated_time:g} min")
        if pattern.tags:
            lines.append(f"  Tags:         {', '.join(pattern.tags)}")
        return "\n".join(lines)

    def format_holes(self, holes: Sequence[DrillHole], unit: LengthUnit = LengthUnit.MILLIMETER) -> str:
        if not holes:
            return "No holes."

        lines = [
            f"{'Hole':<20} {'X':>10} {'Y':>10} {'Diameter':>10} {'Depth':>8}",
            "-" * 62,
        ]
        for hole in holes:
            lines.append(
                f"{hole.id:<20} {hole.position.x:>10.2f} {hole.position.y:>10.2f} "
                f"{hole.diameter:>10.2f} {hole.depth:>8.2f}"
            )
        lines.append(f"{len(holes)} holes ({unit.suffix})")
        return "\n".join(lines)


class SheetLayoutFormatter:
    """Formats sheet layouts as a placement list per sheet."""

    def format(self, sheets: Sequence[NestingSheet], title: str | None = None) -> str:
        if not sheets:
            return "No sheets."

        lines = []
        if title:
            lines.extend([title, "=" * 70])
        for sheet in sheets:
            unit = sheet.unit
            lines.append(
                f"{sheet.id}: {format_length(sheet.width, unit)} x "
                f"{format_length(sheet.height, unit)}, {len(sheet.parts)} parts, "
                f"{sheet.waste_percentage:.1f}% waste"
            )
            for part in sheet.parts:
                rotated = " (rotated)" if part.rotation else ""
                lines.append(
                    f"  {part.id:<32} at ({part.x:.1f}, {part.y:.1f})  "
                    f"{format_length(part.placed_width, unit)} x "
                    f"{format_length(part.placed_height, unit)}{rotated}"
                )
        return "\n".join(lines)
