"""JSON exporter for cabinets, cut lists, drill patterns and estimates."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, ClassVar

from kitchen_cabinets import __version__
from kitchen_cabinets.domain import (
    Cabinet,
    CutListItem,
    DrillPattern,
    MaterialEstimate,
)
from kitchen_cabinets.domain.services import generate_holes

from .base import ExporterRegistry, ExportInput, as_outputs

logger = logging.getLogger(__name__)


def cabinet_to_dict(cabinet: Cabinet) -> dict[str, Any]:
    d = cabinet.dimensions
    return {
        "id": cabinet.id,
        "type": cabinet.cabinet_type.value,
        "template_id": cabinet.template_id,
        "unit": d.unit.value,
        "width": d.width,
        "height": d.height,
        "depth": d.depth,
        "thickness": d.thickness,
        "style": cabinet.style.value,
        "door_style": cabinet.door_style.value,
        "material": cabinet.material.value,
        "door_count": cabinet.door_count,
        "door_thickness": cabinet.effective_door_thickness,
        "shelf_count": cabinet.shelf_count,
        "include_back": cabinet.include_back,
    }


def cut_list_item_to_dict(item: CutListItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "panel_type": item.panel_type.value,
        "width": item.width,
        "height": item.height,
        "thickness": item.thickness,
        "unit": item.unit.value,
        "quantity": item.quantity,
        "material": item.material.value,
        "edge_banding": [edge.value for edge in item.banded_edges],
        "drill_patterns": list(item.drill_patterns),
    }


def drill_pattern_to_dict(pattern: DrillPattern, include_holes: bool = True) -> dict[str, Any]:
    """Serialize a drill pattern; sizes and positions are in millimeters."""
    s = pattern.drill_settings
    data: dict[str, Any] = {
        "id": pattern.id,
        "name": pattern.name,
        "description": pattern.description,
        "category": pattern.category.value,
        "type": pattern.type.value,
        "spacing": {"x": pattern.spacing.x, "y": pattern.spacing.y},
        "pattern_size": {
            "width": pattern.pattern_size.width,
            "height": pattern.pattern_size.height,
        },
        "drill_settings": {
            "spindle_speed": s.spindle_speed,
            "feed_rate": s.feed_rate,
            "coolant": s.coolant.value,
            "tool_type": s.tool_type,
            "tool_diameter": s.tool_diameter,
            "peck_depth": s.peck_depth,
            "plunge_rate": s.plunge_rate,
        },
        "tags": list(pattern.tags),
        "difficulty": pattern.difficulty.value,
        "estimated_time": pattern.estimated_time,
    }
    if include_holes:
        data["holes"] = [
            {
                "id": hole.id,
                "x": hole.position.x,
                "y": hole.position.y,
                "diameter": hole.diameter,
                "depth": hole.depth,
            }
            for hole in generate_holes(pattern)
        ]
    return data


def estimate_to_dict(estimate: MaterialEstimate) -> dict[str, Any]:
    return {
        "total_area_sqft": round(estimate.total_area_sqft, 4),
        "sheet_count_4x8": estimate.sheet_count_4x8,
        "sheet_count_5x5": estimate.sheet_count_5x5,
        "waste_percentage": estimate.waste_percentage,
        "edge_banding_feet": round(estimate.edge_banding_feet, 4),
    }


@ExporterRegistry.register("json")
class JsonProjectExporter:
    """Exports cabinets with their cut lists, drill patterns and estimates.

    Args:
        indent: JSON indentation (None for compact output).
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, output: ExportInput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported project JSON to {path}")

    def export_string(self, output: ExportInput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: ExportInput) -> dict[str, Any]:
        outputs = as_outputs(output)
        if not outputs:
            logger.warning("Exporting a project with no cabinets")

        patterns: dict[str, DrillPattern] = {}
        cabinets = []
        for o in outputs:
            patterns.update(o.drill_patterns)
            cabinets.append(
                {
                    "cabinet": cabinet_to_dict(o.cabinet),
                    "cut_list": [cut_list_item_to_dict(item) for item in o.cut_list],
                    "part_count": sum(item.quantity for item in o.cut_list),
                    "material_estimate": estimate_to_dict(o.total_estimate),
                }
            )

        return {
            "generator": {"name": "kitchen-cabinets", "version": __version__},
            "cabinets": cabinets,
            "drill_patterns": [
                drill_pattern_to_dict(p) for _, p in sorted(patterns.items())
            ],
        }
