"""Exporter framework for generated cabinets.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- csv: Cut list table, one row per cut list item
- dxf: Sheet cutting layouts with shelf pin and hinge holes
- json: Cabinets with cut lists, drill patterns and material estimates

Usage:
    from kitchen_cabinets.infrastructure.exporters import (
        ExportManager,
        ExporterRegistry,
    )

    formats = ExporterRegistry.available_formats()

    dxf_exporter_cls = ExporterRegistry.get("dxf")
    dxf_exporter = dxf_exporter_cls(sheet=SheetSize(2440, 1220, kerf=3))

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["csv", "json", "dxf"], outputs, project_name="kitchen")
"""

from kitchen_cabinets.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportInput,
    ExportManager,
    as_outputs,
)
from kitchen_cabinets.infrastructure.exporters.cutlist_csv import (
    CSV_HEADER,
    CsvCutListExporter,
    cut_list_rows,
    cut_list_to_csv,
)
from kitchen_cabinets.infrastructure.exporters.dxf import LAYERS, DxfExporter
from kitchen_cabinets.infrastructure.exporters.project_json import (
    JsonProjectExporter,
    cabinet_to_dict,
    cut_list_item_to_dict,
    drill_pattern_to_dict,
    estimate_to_dict,
)

__all__ = [
    # Framework
    "ExportInput",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "as_outputs",
    # CSV
    "CSV_HEADER",
    "CsvCutListExporter",
    "cut_list_rows",
    "cut_list_to_csv",
    # DXF
    "LAYERS",
    "DxfExporter",
    # JSON
    "JsonProjectExporter",
    "cabinet_to_dict",
    "cut_list_item_to_dict",
    "drill_pattern_to_dict",
    "estimate_to_dict",
]
