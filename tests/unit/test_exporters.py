"""Tests for the exporter framework and the CSV and JSON exporters."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import ClassVar

import pytest

from kitchen_cabinets.application import (
    CabinetRequest,
    GenerateCabinetCommand,
    GenerationOutput,
)
from kitchen_cabinets.domain import Cabinet, build_cut_list
from kitchen_cabinets.infrastructure.exporters import (
    CSV_HEADER,
    CsvCutListExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonProjectExporter,
    as_outputs,
    cut_list_to_csv,
)


# --- Fixtures ---


@pytest.fixture
def output(generate_command: GenerateCabinetCommand) -> GenerationOutput:
    return generate_command.execute(
        CabinetRequest(
            cabinet_type="base",
            width=24,
            drill_patterns={"side": ["shelf-pins-32mm"]},
        )
    )


@pytest.fixture
def failed_output() -> GenerationOutput:
    return GenerationOutput(
        request=CabinetRequest(cabinet_type="base", width=25),
        cabinet=None,
        errors=["Width 25 is not a standard size."],
    )


class TestRegistry:
    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["csv", "dxf", "json"]

    def test_get(self) -> None:
        assert ExporterRegistry.get("csv") is CsvCutListExporter

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="Available formats: csv, dxf, json"):
            ExporterRegistry.get("pdf")

    def test_exporters_satisfy_protocol(self) -> None:
        for name in ExporterRegistry.available_formats():
            assert isinstance(ExporterRegistry.get(name)(), Exporter)

    def test_register_new_format(self) -> None:
        @ExporterRegistry.register("test-format")
        class TestFormatExporter:
            format_name: ClassVar[str] = "test-format"
            file_extension: ClassVar[str] = "txt"

            def export(self, output, path: Path) -> None:
                path.write_text("ok")

        try:
            assert ExporterRegistry.is_registered("test-format")
            assert ExporterRegistry.get("test-format") is TestFormatExporter
        finally:
            ExporterRegistry._exporters.pop("test-format")


class TestAsOutputs:
    def test_single_output(self, output: GenerationOutput) -> None:
        assert as_outputs(output) == [output]

    def test_skips_failed_outputs(
        self, output: GenerationOutput, failed_output: GenerationOutput
    ) -> None:
        assert as_outputs([failed_output, output]) == [output]


class TestCsvExport:
    def test_metric_row(self, mm_cabinet: Cabinet) -> None:
        lines = cut_list_to_csv(build_cut_list(mm_cabinet)).splitlines()

        assert lines[0] == "Part Name,Width,Height,Thickness,Qty,Material,Edge Banding"
        assert lines[1] == "Side Panel,720mm,600mm,18mm,2,plywood,top"

    def test_multi_edge_banding_is_quoted(self, mm_cabinet: Cabinet) -> None:
        lines = cut_list_to_csv(build_cut_list(mm_cabinet)).splitlines()
        door = next(line for line in lines if line.startswith("Door Panel"))
        assert door == 'Door Panel,296mm,712mm,18mm,2,plywood,"top,bottom,left,right"'

    def test_empty_banding_is_empty_field(self, mm_cabinet: Cabinet) -> None:
        lines = cut_list_to_csv(build_cut_list(mm_cabinet)).splitlines()
        back = next(line for line in lines if line.startswith("Back Panel"))
        assert back == "Back Panel,564mm,684mm,9mm,1,plywood,"

    def test_parses_back(self, output: GenerationOutput) -> None:
        content = CsvCutListExporter().export_string(output)
        rows = list(csv.reader(io.StringIO(content)))

        assert tuple(rows[0]) == CSV_HEADER
        assert len(rows) == 1 + len(output.cut_list)
        assert all(len(row) == 7 for row in rows)

    def test_multiple_outputs_in_order(
        self, generate_command: GenerateCabinetCommand, output: GenerationOutput
    ) -> None:
        wall = generate_command.execute(CabinetRequest(cabinet_type="wall", width=30, height=30))
        content = CsvCutListExporter().export_string([output, wall])
        assert len(content.splitlines()) == 1 + len(output.cut_list) + len(wall.cut_list)

    def test_empty(self) -> None:
        assert CsvCutListExporter().export_string([]) == ",".join(CSV_HEADER) + "\n"

    def test_export_file(self, output: GenerationOutput, tmp_path: Path) -> None:
        path = tmp_path / "cut.csv"
        CsvCutListExporter().export(output, path)
        assert path.read_text(encoding="utf-8").startswith("Part Name,")


class TestJsonExport:
    def test_structure(self, output: GenerationOutput) -> None:
        data = json.loads(JsonProjectExporter().export_string(output))

        assert data["generator"]["name"] == "kitchen-cabinets"
        cabinet = data["cabinets"][0]
        assert cabinet["cabinet"]["id"] == "base-cabinet-24"
        assert cabinet["cabinet"]["style"] == "euro"
        assert cabinet["part_count"] == 8
        assert len(cabinet["cut_list"]) == 6
        assert cabinet["material_estimate"]["sheet_count_4x8"] >= 1

    def test_attached_patterns_serialized_with_holes(self, output: GenerationOutput) -> None:
        data = JsonProjectExporter().to_dict(output)

        assert [p["id"] for p in data["drill_patterns"]] == ["shelf-pins-32mm"]
        pattern = data["drill_patterns"][0]
        assert pattern["category"] == "shelf-holes"
        assert pattern["drill_settings"]["tool_diameter"] == 5
        assert len(pattern["holes"]) == 25

        side = next(i for i in data["cabinets"][0]["cut_list"] if i["panel_type"] == "side")
        assert side["drill_patterns"] == ["shelf-pins-32mm"]
        assert side["edge_banding"] == ["top"]

    def test_compact(self, output: GenerationOutput) -> None:
        assert "\n" not in JsonProjectExporter(indent=None).export_string(output)

    def test_failed_outputs_skipped(self, failed_output: GenerationOutput) -> None:
        assert JsonProjectExporter().to_dict([failed_output])["cabinets"] == []


class TestExportManager:
    def test_export_all(self, output: GenerationOutput, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path / "out")
        files = manager.export_all(["csv", "json"], output, project_name="kitchen")

        assert files == {
            "csv": tmp_path / "out" / "kitchen_csv.csv",
            "json": tmp_path / "out" / "kitchen_json.json",
        }
        assert all(path.exists() for path in files.values())

    def test_export_single(self, output: GenerationOutput, tmp_path: Path) -> None:
        path = ExportManager(tmp_path).export_single("json", output)
        assert path.name == "cabinets_json.json"

    def test_exporter_options(self, output: GenerationOutput, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path, exporter_options={"json": {"indent": None}})
        path = manager.export_single("json", output)
        assert "\n" not in path.read_text(encoding="utf-8")

    def test_unknown_format(self, output: GenerationOutput, tmp_path: Path) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["pdf"], output)
