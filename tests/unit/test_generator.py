"""Tests for cabinet generation and patching."""

from __future__ import annotations

import pytest

from kitchen_cabinets.domain import (
    STANDARD_SIZES,
    Cabinet,
    CabinetError,
    CabinetGenerator,
    CabinetStyle,
    CabinetType,
    DegenerateConfigurationError,
    InvalidDimensionError,
    LengthUnit,
    MaterialType,
    apply_patch,
    generate,
    get_template,
)
from kitchen_cabinets.domain.services import available_heights, available_widths


class TestGenerate:
    def test_base_cabinet_defaults(self) -> None:
        cabinet = generate("base", 24)

        assert cabinet.id == "base-cabinet-24"
        assert cabinet.cabinet_type is CabinetType.BASE
        assert cabinet.dimensions.height == 30
        assert cabinet.dimensions.depth == 24
        assert cabinet.dimensions.thickness == 0.75
        assert cabinet.unit is LengthUnit.INCH
        assert cabinet.door_count == 2
        assert cabinet.shelf_count == 1
        assert cabinet.door_thickness == 0.75
        assert cabinet.material is MaterialType.PLYWOOD

    def test_narrow_cabinet_gets_one_door(self) -> None:
        assert generate("base", 21).door_count == 1
        assert generate("base", 24).door_count == 2

    def test_wall_cabinet(self) -> None:
        cabinet = generate(CabinetType.WALL, 30, 36)

        assert cabinet.id == "wall-cabinet-30x36"
        assert cabinet.dimensions.depth == 12
        assert cabinet.shelf_count == 3
        assert cabinet.door_thickness == 0.875

    def test_tall_cabinet_box_height_and_shelves(self) -> None:
        cabinet = generate("tall", 24, 85.5)

        assert cabinet.id == "tall-cabinet-24x85.5"
        assert cabinet.dimensions.height == 81
        assert cabinet.shelf_count == 5

    def test_explicit_values_override_defaults(self) -> None:
        cabinet = generate(
            "base", 36, depth=21, style="inset", material="mdf",
            door_count=0, shelf_count=3, include_back=False, cabinet_id="island-1",
        )

        assert cabinet.id == "island-1"
        assert cabinet.dimensions.depth == 21
        assert cabinet.style is CabinetStyle.INSET
        assert cabinet.material is MaterialType.MDF
        assert cabinet.door_count == 0
        assert cabinet.shelf_count == 3
        assert cabinet.include_back is False

    @pytest.mark.parametrize("width", [0, 10, 25, 37, 24.5])
    def test_non_standard_width_rejected(self, width: float) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            generate("base", width)
        assert exc_info.value.dimension == "width"
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize("cabinet_type", ["wall", "tall"])
    def test_height_required(self, cabinet_type: str) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            generate(cabinet_type, 24)
        assert str(exc_info.value) == f"Height is required for {cabinet_type} cabinets"
        assert exc_info.value.value is None

    @pytest.mark.parametrize("depth", [0, -1.0])
    def test_non_positive_depth_rejected(self, depth: float) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            generate("wall", 30, 30, depth)
        assert exc_info.value.dimension == "depth"
        assert str(exc_info.value) == f"Depth {depth:g} must be positive"
        assert isinstance(exc_info.value, CabinetError)

    def test_depth_too_shallow_for_material(self) -> None:
        with pytest.raises(DegenerateConfigurationError, match="thickness 0.75"):
            generate("wall", 30, 30, 1.0)

    def test_non_standard_height_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            generate("wall", 30, 31)
        assert exc_info.value.dimension == "height"
        assert exc_info.value.allowed == STANDARD_SIZES[CabinetType.WALL].heights

    def test_base_accepts_only_standard_height(self) -> None:
        assert generate("base", 24, 30).dimensions.height == 30
        with pytest.raises(InvalidDimensionError):
            generate("base", 24, 34.5)

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            generate("island", 24)

    def test_generation_is_deterministic(self, generator: CabinetGenerator) -> None:
        assert generator.generate("wall", 18, 30) == generator.generate("wall", 18, 30)


class TestFromTemplate:
    def test_builds_from_template(self, generator: CabinetGenerator) -> None:
        template = get_template("W2430")
        cabinet = generator.from_template(template)

        assert cabinet.id == "W2430"
        assert cabinet.template_id == "W2430"
        assert cabinet.dimensions == template.dimensions
        assert cabinet.door_count == template.door_count
        assert cabinet.shelf_count == template.shelf_count
        assert cabinet.door_thickness == 0.875

    def test_template_with_non_enumerated_size(self, generator: CabinetGenerator) -> None:
        cabinet = generator.from_template(get_template("base-36x24x12"))
        assert cabinet.dimensions.height == 24

    def test_injected_id(self, generator: CabinetGenerator) -> None:
        cabinet = generator.from_template(get_template("B24"), cabinet_id="sink")
        assert cabinet.id == "sink"


class TestApplyPatch:
    def test_returns_new_cabinet_and_leaves_input_unchanged(
        self, base_cabinet: Cabinet
    ) -> None:
        before = base_cabinet
        patched = apply_patch(base_cabinet, {"shelf_count": 3, "style": "faceframe"})

        assert patched is not base_cabinet
        assert patched.shelf_count == 3
        assert patched.style is CabinetStyle.FACEFRAME
        assert base_cabinet == before
        assert base_cabinet.shelf_count == 1

    def test_dimension_keys_patch_dimensions(self, base_cabinet: Cabinet) -> None:
        patched = apply_patch(base_cabinet, {"depth": 21, "thickness": 0.5})
        assert patched.dimensions.depth == 21
        assert patched.dimensions.thickness == 0.5
        assert patched.dimensions.width == 24

    def test_unknown_key_raises(self, base_cabinet: Cabinet) -> None:
        with pytest.raises(ValueError, match="colour"):
            apply_patch(base_cabinet, {"colour": "white"})

    def test_invalid_value_raises(self, base_cabinet: Cabinet) -> None:
        with pytest.raises(ValueError):
            apply_patch(base_cabinet, {"door_count": -1})

    @pytest.mark.parametrize("depth", [0, -1])
    def test_non_positive_dimension_raises(
        self, base_cabinet: Cabinet, depth: float
    ) -> None:
        with pytest.raises(InvalidDimensionError) as exc_info:
            apply_patch(base_cabinet, {"depth": depth})
        assert exc_info.value.dimension == "depth"

    def test_too_shallow_raises(self, base_cabinet: Cabinet) -> None:
        with pytest.raises(DegenerateConfigurationError):
            apply_patch(base_cabinet, {"depth": 1})

    def test_empty_patch_gives_equal_cabinet(self, base_cabinet: Cabinet) -> None:
        assert apply_patch(base_cabinet, {}) == base_cabinet


class TestAvailableSizes:
    def test_widths(self) -> None:
        assert available_widths("tall")[0] == 12
        assert 36 in available_widths(CabinetType.WALL)

    def test_heights(self) -> None:
        assert available_heights("base") == (30,)
        assert available_heights("tall") == (79.5, 85.5, 91.5)
