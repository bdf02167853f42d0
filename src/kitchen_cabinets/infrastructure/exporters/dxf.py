"""DXF exporter for sheet cutting layouts.

Generates 2D DXF files (R2010 format) with one drawing per sheet, laid out
side by side and grouped by material and thickness. Each sheet shows its
outline, the placed part outlines with labels, shelf pin holes on side
panels and hinge cup holes on doors.
"""

from __future__ import annotations

import logging
from collections import Counter
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from kitchen_cabinets.domain import CutListItem, PanelType
from kitchen_cabinets.domain.services import hinge_count_for, hinge_holes, shelf_pin_holes
from kitchen_cabinets.domain.value_objects import DrillHole

from ..nesting import NestingPart, NestingSheet, RowSheetLayout, SheetSize
from .base import ExporterRegistry, ExportInput, as_outputs

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "SHEETS": 8,  # Grey - sheet outlines
    "OUTLINE": 7,  # White - part outlines
    "HOLES": 3,  # Green - drilled holes
    "LABELS": 5,  # Blue - text labels
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports sheet cutting layouts to DXF.

    Coordinates are written in the cut list's unit.

    Args:
        sheet: Sheet stock and kerf used for the layout.
        sheet_spacing: Gap between sheet drawings, in the sheet's unit.
        include_holes: Whether to draw shelf pin and hinge holes.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(
        self,
        sheet: SheetSize | None = None,
        sheet_spacing: float = 100.0,
        include_holes: bool = True,
    ) -> None:
        if sheet_spacing < 0:
            raise ValueError("Sheet spacing must be non-negative")
        self.sheet = sheet or SheetSize()
        self.sheet_spacing = sheet_spacing
        self.include_holes = include_holes
        self.layout = RowSheetLayout(self.sheet)

    def export(self, output: ExportInput, path: Path) -> None:
        doc = self.build_document(output)
        doc.saveas(path)
        logger.info(f"Exported sheet layout DXF to {path}")

    def export_string(self, output: ExportInput) -> str:
        stream = StringIO()
        self.build_document(output).write(stream)
        return stream.getvalue()

    def build_document(self, output: ExportInput) -> Drawing:
        """Lay out all cut lists and draw the sheets.

        Raises:
            ValueError: If a panel does not fit the sheet, or two cut list
                items share an id (holes are looked up by item id).
        """
        items = [item for o in as_outputs(output) for item in o.cut_list]
        doc = ezdxf.new("R2010")
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)

        if not items:
            logger.warning("No cut list items to lay out")
            return doc

        by_id = {item.id: item for item in items}
        if len(by_id) != len(items):
            counts = Counter(item.id for item in items)
            duplicates = sorted(item_id for item_id, n in counts.items() if n > 1)
            raise ValueError(
                f"Duplicate cut list item ids: {', '.join(duplicates)}. "
                "Give each cabinet a unique id."
            )
        msp = doc.modelspace()
        offset_y = 0.0
        for stock, sheets in self.layout.layout_by_stock(items).items():
            offset_x = 0.0
            row_height = 0.0
            for sheet in sheets:
                spacing = self.sheet.unit.convert(self.sheet_spacing, sheet.unit)
                self._draw_sheet(msp, sheet, by_id, offset_x, offset_y, f"{stock.label} {sheet.id}")
                offset_x += sheet.width + spacing
                row_height = max(row_height, sheet.height + spacing)
            offset_y -= row_height

        return doc

    def _draw_sheet(
        self,
        msp: Modelspace,
        sheet: NestingSheet,
        items: dict[str, CutListItem],
        x: float,
        y: float,
        title: str,
    ) -> None:
        self._draw_rect(msp, x, y, sheet.width, sheet.height, "SHEETS")
        text_height = min(sheet.width, sheet.height) / 40
        msp.add_text(
            f"{title} ({sheet.waste_percentage:.1f}% waste)",
            dxfattribs={
                "layer": "LABELS",
                "height": text_height,
                "insert": (x, y + sheet.height + text_height),
            },
        )

        for part in sheet.parts:
            px, py = x + part.x, y + part.y
            self._draw_rect(msp, px, py, part.placed_width, part.placed_height, "OUTLINE")
            label_height = max(min(part.placed_width, part.placed_height) / 12, text_height / 4)
            msp.add_mtext(
                f"{part.name}\\P{part.width:g} x {part.height:g}",
                dxfattribs={
                    "layer": "LABELS",
                    "char_height": label_height,
                    "insert": (px + part.placed_width / 2, py + part.placed_height / 2),
                    "attachment_point": 5,  # MIDDLE_CENTER
                },
            )
            item = items.get(part.item_id)
            if self.include_holes and item is not None:
                for hole, u, v in self._panel_holes(item):
                    cx, cy = self._to_sheet(part, u, v)
                    msp.add_circle(
                        (px + cx, py + cy),
                        hole.diameter / 2,
                        dxfattribs={"layer": "HOLES"},
                    )

    def _panel_holes(self, item: CutListItem) -> list[tuple[DrillHole, float, float]]:
        """Holes of a panel as (hole, u, v) in panel coordinates.

        u runs along the panel width (front edge), v along its height.
        """
        if item.panel_type is PanelType.SIDE:
            # Side panels are height x depth; pins run up the height
            holes = shelf_pin_holes(item.height, item.width, unit=item.unit)
            return [(h, h.position.y, h.position.x) for h in holes]
        if item.panel_type is PanelType.DOOR:
            holes = hinge_holes(
                item.height, hinge_count_for(item.height, item.unit), unit=item.unit
            )
            return [(h, h.position.x, h.position.y) for h in holes]
        return []

    def _to_sheet(self, part: NestingPart, u: float, v: float) -> tuple[float, float]:
        if part.rotation == 90:
            return v, u
        return u, v

    def _draw_rect(
        self, msp: Modelspace, x: float, y: float, width: float, height: float, layer: str
    ) -> None:
        points = [
            (x, y),
            (x + width, y),
            (x + width, y + height),
            (x, y + height),
            (x, y),
        ]
        msp.add_lwpolyline(points, dxfattribs={"layer": layer})
