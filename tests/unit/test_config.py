"""Tests for project file schema, loading and adaptation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from kitchen_cabinets.application.config import (
    CabinetSpecConfig,
    ConfigError,
    ProjectConfiguration,
    cabinet_config_to_request,
    config_to_formats,
    config_to_pricing,
    config_to_requests,
    config_to_sheet,
    load_config,
    load_config_from_dict,
)
from kitchen_cabinets.application.config.loader import field_path
from kitchen_cabinets.domain import LengthUnit, PanelType

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _project(**overrides) -> dict:
    data = {
        "schema_version": "1.0",
        "cabinets": [{"type": "base", "width": 24}],
    }
    data.update(overrides)
    return data


class TestSchema:
    def test_minimal_project(self) -> None:
        config = load_config_from_dict(_project())

        assert config.unit is LengthUnit.INCH
        assert config.sheet.width == 2440
        assert config.output.formats == ["csv"]
        assert config.cabinets[0].include_back is True

    def test_template_only_cabinet(self) -> None:
        spec = CabinetSpecConfig(template="W3030")
        assert spec.type is None

    def test_cabinet_needs_template_or_type_and_width(self) -> None:
        with pytest.raises(PydanticValidationError):
            CabinetSpecConfig(type="base")

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_project(colour="white"))
        assert exc_info.value.error_type == "validation"

    def test_drill_patterns_keyed_by_panel_type(self) -> None:
        spec = CabinetSpecConfig(
            type="base", width=24, drill_patterns={"side": ["shelf-pins-32mm"]}
        )
        assert spec.drill_patterns == {PanelType.SIDE: ["shelf-pins-32mm"]}

    def test_unknown_panel_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            CabinetSpecConfig(type="base", width=24, drill_patterns={"lid": []})

    @pytest.mark.parametrize("version", ["1.0", "1.1", "1.7"])
    def test_supported_versions(self, version: str) -> None:
        assert load_config_from_dict(_project(schema_version=version)).schema_version == version

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_project(schema_version="2.0"))
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_invalid_format(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict(_project(output={"formats": ["pdf"]}))

    def test_no_cabinets(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict(_project(cabinets=[]))

    def test_error_paths_point_at_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_project(cabinets=[{"type": "base", "width": -1}]))
        paths = [d["path"] for d in exc_info.value.details]
        assert "cabinets[0].width" in paths

    def test_door_count_limit(self) -> None:
        with pytest.raises(PydanticValidationError):
            CabinetSpecConfig(type="base", width=24, door_count=5)


class TestLoadConfig:
    def test_load_fixture(self) -> None:
        config = load_config(FIXTURES_PATH / "kitchen.json")

        assert isinstance(config, ProjectConfiguration)
        assert config.unit is LengthUnit.MILLIMETER
        assert [c.id for c in config.cabinets] == ["sink-base", "upper-left", "pantry"]

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 4

    def test_validation_error_carries_path(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(_project(unit="cm")))
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert "unit" in str(exc_info.value)

    def test_validation_message_lists_each_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                _project(cabinets=[{"type": "base", "width": -1, "depth": 0}])
            )
        lines = str(exc_info.value).splitlines()

        assert lines[0] == "Configuration validation failed:"
        assert any(
            line.startswith("  - cabinets[0].width:") and line.endswith("(got: -1)")
            for line in lines
        )
        assert any(line.startswith("  - cabinets[0].depth:") for line in lines)
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)

    @pytest.mark.parametrize(
        ("loc", "expected"),
        [
            (("schema_version",), "schema_version"),
            (("output", "formats", 1), "output.formats[1]"),
            (("cabinets", 0, "drill_patterns", "side"), "cabinets[0].drill_patterns.side"),
            ((0,), "[0]"),
        ],
    )
    def test_field_path(self, loc: tuple, expected: str) -> None:
        assert field_path(loc) == expected


class TestAdapter:
    def test_requests_in_file_order(self) -> None:
        requests = config_to_requests(load_config(FIXTURES_PATH / "kitchen.json"))

        assert [r.cabinet_id for r in requests] == ["sink-base", "upper-left", "pantry"]
        assert all(r.unit == "mm" for r in requests)
        assert requests[0].cabinet_type == "base"
        assert requests[0].shelf_count == 0
        assert requests[0].drill_patterns == {"door": ["hinge-european-35mm"]}
        assert requests[1].template == "W3030"
        assert requests[1].style == "inset"
        assert requests[2].height == 85.5

    def test_request_validates(self) -> None:
        spec = CabinetSpecConfig(type="wall", width=30, height=30)
        assert cabinet_config_to_request(spec).validate() == []

    def test_unset_style_left_to_template(self) -> None:
        request = cabinet_config_to_request(CabinetSpecConfig(template="W3030"))
        assert request.style is None

    def test_sheet_in_millimeters(self) -> None:
        config = load_config_from_dict(_project(sheet={"width": 2800, "height": 2070, "kerf": 4}))
        sheet = config_to_sheet(config)

        assert (sheet.width, sheet.height, sheet.kerf) == (2800, 2070, 4)
        assert sheet.unit is LengthUnit.MILLIMETER

    def test_pricing_defaults(self) -> None:
        pricing = config_to_pricing(load_config_from_dict(_project()))
        assert (pricing.price_per_square_meter, pricing.hinge_price, pricing.handle_price) == (
            25.50,
            12.99,
            8.50,
        )

    def test_pricing_section(self) -> None:
        config = load_config_from_dict(
            _project(pricing={"price_per_square_meter": 40, "hinge_price": 5})
        )
        pricing = config_to_pricing(config)

        assert pricing.price_per_square_meter == 40
        assert pricing.hinge_price == 5
        assert pricing.handle_price == 8.50

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_project(pricing={"handle_price": -1}))
        assert exc_info.value.details[0]["path"] == "pricing.handle_price"

    def test_formats_all_expanded(self) -> None:
        config = load_config_from_dict(_project(output={"formats": ["all"]}))
        assert config_to_formats(config) == ["csv", "dxf", "json"]

    def test_formats_deduplicated(self) -> None:
        config = load_config_from_dict(_project(output={"formats": ["json", "csv", "json"]}))
        assert config_to_formats(config) == ["json", "csv"]
