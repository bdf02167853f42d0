"""Tests for the DXF sheet layout exporter."""

from __future__ import annotations

from pathlib import Path

import ezdxf
import pytest

from kitchen_cabinets.application import (
    CabinetRequest,
    GenerateCabinetCommand,
    GenerationOutput,
)
from kitchen_cabinets.domain import LengthUnit
from kitchen_cabinets.domain.services import hinge_count_for
from kitchen_cabinets.infrastructure.exporters import LAYERS, DxfExporter, ExporterRegistry
from kitchen_cabinets.infrastructure.nesting import RowSheetLayout, SheetSize


# --- Fixtures ---


@pytest.fixture
def output(generate_command: GenerateCabinetCommand) -> GenerationOutput:
    return generate_command.execute(
        CabinetRequest(cabinet_type="base", width=24, unit="mm")
    )


def _entities(doc, dxftype: str, layer: str) -> list:
    return [
        e for e in doc.modelspace().query(dxftype) if e.dxf.layer == layer
    ]


class TestHingeCount:
    @pytest.mark.parametrize(
        ("height", "count"), [(30, 2), (40, 2), (41, 3), (60, 3), (75, 4)]
    )
    def test_by_height(self, height: float, count: int) -> None:
        assert hinge_count_for(height, LengthUnit.INCH) == count

    def test_metric(self) -> None:
        assert hinge_count_for(2000, LengthUnit.MILLIMETER) == 4


class TestDxfExporter:
    def test_registered(self) -> None:
        assert ExporterRegistry.get("dxf") is DxfExporter

    def test_negative_spacing_rejected(self) -> None:
        with pytest.raises(ValueError):
            DxfExporter(sheet_spacing=-1)

    def test_layers(self, output: GenerationOutput) -> None:
        doc = DxfExporter().build_document(output)
        for name in LAYERS:
            assert name in doc.layers

    def test_sheet_and_part_outlines(self, output: GenerationOutput) -> None:
        doc = DxfExporter().build_document(output)
        by_stock = RowSheetLayout().layout_by_stock(output.cut_list)

        sheet_count = sum(len(sheets) for sheets in by_stock.values())
        assert len(_entities(doc, "LWPOLYLINE", "SHEETS")) == sheet_count
        assert len(_entities(doc, "TEXT", "LABELS")) == sheet_count
        assert len(_entities(doc, "LWPOLYLINE", "OUTLINE")) == 8
        assert len(_entities(doc, "MTEXT", "LABELS")) == 8

    def test_holes_on_sides_and_doors(self, output: GenerationOutput) -> None:
        doc = DxfExporter().build_document(output)
        holes = _entities(doc, "CIRCLE", "HOLES")

        hinge_radius = 1.375 * 25.4 / 2
        hinges = [c for c in holes if c.dxf.radius == pytest.approx(hinge_radius)]
        pins = [c for c in holes if c.dxf.radius == pytest.approx(0.197 * 25.4 / 2)]

        # Two doors with two hinges each
        assert len(hinges) == 4
        # Two side panels, two rows each
        assert len(pins) > 0
        assert len(pins) % 4 == 0
        assert len(hinges) + len(pins) == len(holes)

    def test_holes_can_be_disabled(self, output: GenerationOutput) -> None:
        doc = DxfExporter(include_holes=False).build_document(output)
        assert _entities(doc, "CIRCLE", "HOLES") == []

    def test_holes_inside_part_outlines(self, output: GenerationOutput) -> None:
        doc = DxfExporter().build_document(output)
        boxes = []
        for outline in _entities(doc, "LWPOLYLINE", "OUTLINE"):
            xs = [p[0] for p in outline.get_points("xy")]
            ys = [p[1] for p in outline.get_points("xy")]
            boxes.append((min(xs), min(ys), max(xs), max(ys)))

        for circle in _entities(doc, "CIRCLE", "HOLES"):
            x, y = circle.dxf.center.x, circle.dxf.center.y
            assert any(
                x0 < x < x1 and y0 < y < y1 for x0, y0, x1, y1 in boxes
            ), f"hole at ({x:.1f}, {y:.1f}) is outside every part"

    def test_empty_output(self) -> None:
        doc = DxfExporter().build_document([])
        assert len(doc.modelspace()) == 0

    def test_panel_too_big_for_sheet(self, output: GenerationOutput) -> None:
        with pytest.raises(ValueError):
            DxfExporter(sheet=SheetSize(300, 300)).build_document(output)

    def test_duplicate_item_ids_rejected(self, output: GenerationOutput) -> None:
        with pytest.raises(ValueError, match="Duplicate cut list item ids"):
            DxfExporter().build_document([output, output])

    def test_same_size_batch_draws_every_part(
        self, generate_command: GenerateCabinetCommand
    ) -> None:
        outputs = generate_command.execute_batch(
            [
                CabinetRequest(cabinet_type="base", width=24, unit="mm"),
                CabinetRequest(cabinet_type="base", width=24, depth=12, unit="mm"),
            ]
        )
        doc = DxfExporter().build_document(outputs)

        parts = sum(item.quantity for o in outputs for item in o.cut_list)
        assert len(_entities(doc, "LWPOLYLINE", "OUTLINE")) == parts

    def test_export_file(self, output: GenerationOutput, tmp_path: Path) -> None:
        path = tmp_path / "layout.dxf"
        DxfExporter().export(output, path)

        doc = ezdxf.readfile(path)
        assert len(_entities(doc, "LWPOLYLINE", "OUTLINE")) == 8

    def test_export_string(self, output: GenerationOutput) -> None:
        content = DxfExporter().export_string(output)
        assert "SECTION" in content
        assert "HOLES" in content
