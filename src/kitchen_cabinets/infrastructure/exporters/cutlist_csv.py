"""CSV cut list exporter."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import ClassVar, Sequence

from kitchen_cabinets.domain import CutListItem

from ..formatters import format_edges, format_length
from .base import ExporterRegistry, ExportInput, as_outputs

logger = logging.getLogger(__name__)

CSV_HEADER = (
    "Part Name",
    "Width",
    "Height",
    "Thickness",
    "Qty",
    "Material",
    "Edge Banding",
)


def cut_list_rows(cut_list: Sequence[CutListItem]) -> list[list[str]]:
    """One CSV row per cut list item, dimensions suffixed with the unit."""
    return [
        [
            item.name,
            format_length(item.width, item.unit),
            format_length(item.height, item.unit),
            format_length(item.thickness, item.unit),
            str(item.quantity),
            item.material.value,
            format_edges(item),
        ]
        for item in cut_list
    ]


def cut_list_to_csv(cut_list: Sequence[CutListItem]) -> str:
    """Render a cut list as CSV text with a header row.

    Fields containing commas (multi-edge banding) are quoted.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(cut_list_rows(cut_list))
    return buffer.getvalue()


@ExporterRegistry.register("csv")
class CsvCutListExporter:
    """Exports the cut lists of one or more cabinets as a single CSV table.

    Rows follow cabinet order, and within a cabinet the cut list order.
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: ExportInput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported cut list CSV to {path}")

    def export_string(self, output: ExportInput) -> str:
        items = [item for o in as_outputs(output) for item in o.cut_list]
        if not items:
            logger.warning("Exporting an empty cut list")
        return cut_list_to_csv(items)
