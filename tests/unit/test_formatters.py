"""Tests for the text formatters used by the CLI."""

from __future__ import annotations

from kitchen_cabinets.domain import (
    Cabinet,
    LengthUnit,
    MaterialEstimator,
    build_cut_list,
    get_pattern,
    list_templates,
)
from kitchen_cabinets.domain.services import generate_holes
from kitchen_cabinets.infrastructure import (
    CutListFormatter,
    DrillPatternFormatter,
    MaterialReportFormatter,
    RowSheetLayout,
    SheetLayoutFormatter,
    TemplateFormatter,
    format_edges,
    format_length,
)


class TestFormatLength:
    def test_whole_millimeters(self) -> None:
        assert format_length(720.0, LengthUnit.MILLIMETER) == "720mm"

    def test_fractional_inches(self) -> None:
        assert format_length(22.5, LengthUnit.INCH) == "22.5in"

    def test_rounds_to_four_decimals(self) -> None:
        assert format_length(11.842519685, LengthUnit.INCH) == "11.8425in"


class TestFormatEdges:
    def test_edges_in_fixed_order(self, base_cabinet: Cabinet) -> None:
        items = {item.name: item for item in build_cut_list(base_cabinet)}
        assert format_edges(items["Door Panel"]) == "top,bottom,left,right"
        assert format_edges(items["Side Panel"]) == "top"
        assert format_edges(items["Back Panel"]) == ""


class TestCutListFormatter:
    def test_table(self, mm_cabinet: Cabinet) -> None:
        output = CutListFormatter().format(build_cut_list(mm_cabinet))

        assert "CUT LIST" in output
        assert "Side Panel" in output
        assert "720mm" in output
        assert "TOTAL" in output
        assert "8 parts" in output

    def test_empty(self) -> None:
        assert CutListFormatter().format([]) == "No pieces in cut list."


class TestMaterialReportFormatter:
    def test_report(self, base_cabinet: Cabinet) -> None:
        estimator = MaterialEstimator()
        items = build_cut_list(base_cabinet)
        output = MaterialReportFormatter().format(
            estimator.estimate(items), estimator.estimate_total(items)
        )

        assert "MATERIAL ESTIMATE" in output
        assert 'Plywood (0.75" thick)' in output
        assert "Edge banding" in output
        assert "15% waste" in output


class TestTemplateFormatter:
    def test_lists_templates(self) -> None:
        output = TemplateFormatter().format(list_templates("wall"))
        assert "W3030" in output
        assert "30 x 30 x 12" in output

    def test_empty(self) -> None:
        assert TemplateFormatter().format([]) == "No templates."


class TestDrillPatternFormatter:
    def test_detail(self) -> None:
        output = DrillPatternFormatter().format_detail(get_pattern("hinge-european-35mm"))
        assert "European Hinge 35mm" in output
        assert "forstner-bit, 35mm" in output
        assert "Peck depth:   8 mm" in output

    def test_list(self) -> None:
        pattern = get_pattern("shelf-pins-32mm")
        output = DrillPatternFormatter().format_list([pattern])
        assert "shelf-pins-32mm" in output
        assert "5mm" in output

    def test_holes(self) -> None:
        holes = generate_holes(get_pattern("handle-knob-standard"))
        output = DrillPatternFormatter().format_holes(holes)
        assert "knob-center" in output
        assert "1 holes (mm)" in output


class TestSheetLayoutFormatter:
    def test_layout(self, mm_cabinet: Cabinet) -> None:
        sheets = RowSheetLayout().layout(build_cut_list(mm_cabinet))
        output = SheetLayoutFormatter().format(sheets, title="18mm plywood")

        assert output.startswith("18mm plywood")
        assert "sheet-1: 2440mm x 1220mm" in output
        assert "mm-base-sides-0" in output

    def test_empty(self) -> None:
        assert SheetLayoutFormatter().format([]) == "No sheets."
