"""Infrastructure layer - formatters, sheet layout, costing and exporters."""

from .costing import CostBreakdown, CostEstimator, PricingConfig
from .formatters import (
    CostFormatter,
    CutListFormatter,
    DrillPatternFormatter,
    MaterialReportFormatter,
    SheetLayoutFormatter,
    TemplateFormatter,
    format_edges,
    format_length,
)
from .nesting import NestingPart, NestingSheet, RowSheetLayout, SheetSize

from .exporters import (
    CsvCutListExporter,
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonProjectExporter,
)

__all__ = [
    # Costing
    "CostBreakdown",
    "CostEstimator",
    "PricingConfig",
    # Formatters
    "CostFormatter",
    "CutListFormatter",
    "DrillPatternFormatter",
    "MaterialReportFormatter",
    "SheetLayoutFormatter",
    "TemplateFormatter",
    "format_edges",
    "format_length",
    # Sheet layout
    "NestingPart",
    "NestingSheet",
    "RowSheetLayout",
    "SheetSize",
    # Exporters
    "CsvCutListExporter",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonProjectExporter",
]
