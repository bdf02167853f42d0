"""Tests for cut list generation."""

from __future__ import annotations

import dataclasses

import pytest

from kitchen_cabinets.domain import (
    STANDARD_SIZES,
    Cabinet,
    CabinetStyle,
    CabinetType,
    CutListBuilder,
    DegenerateConfigurationError,
    Dimensions,
    Edge,
    LengthUnit,
    PanelType,
    apply_patch,
    build_cut_list,
    generate,
    total_part_count,
)
from kitchen_cabinets.domain.services import door_clearance

MM = 1 / 25.4


def _by_type(items):
    return {item.panel_type: item for item in items}


def _standard_cabinets():
    for cabinet_type, sizes in STANDARD_SIZES.items():
        heights = (None,) if cabinet_type is CabinetType.BASE else sizes.heights
        for width in sizes.widths:
            for height in heights:
                yield generate(cabinet_type, width, height)


class TestCutListPanels:
    def test_base_cabinet_panels(self, base_cabinet: Cabinet) -> None:
        items = _by_type(build_cut_list(base_cabinet))

        side = items[PanelType.SIDE]
        assert (side.width, side.height, side.quantity) == (30, 24, 2)
        assert side.edge_banding == frozenset({Edge.TOP})

        for panel in (PanelType.TOP, PanelType.BOTTOM):
            assert items[panel].width == 22.5
            assert items[panel].height == 24
            assert items[panel].quantity == 1

        back = items[PanelType.BACK]
        assert (back.width, back.height) == (22.5, 28.5)
        assert back.thickness == 0.375
        assert back.edge_banding == frozenset()

        shelf = items[PanelType.SHELF]
        assert shelf.width == pytest.approx(22.5 - 4 * MM)
        assert shelf.height == pytest.approx(24 - 4 * MM)
        assert shelf.quantity == 1

    def test_euro_doors_for_two_door_cabinet(self, base_cabinet: Cabinet) -> None:
        door = _by_type(build_cut_list(base_cabinet))[PanelType.DOOR]

        assert door.quantity == 2
        assert door.width == pytest.approx(12 - 4 * MM)
        assert door.height == pytest.approx(30 - 8 * MM)
        assert door.thickness == 0.75
        assert door.edge_banding == frozenset(Edge)

    @pytest.mark.parametrize(
        ("style", "width_mm", "height_mm"),
        [
            (CabinetStyle.EURO, 4, 8),
            (CabinetStyle.INSET, 6, 4),
            (CabinetStyle.FACEFRAME, 6, 8),
        ],
    )
    def test_style_clearances(
        self, style: CabinetStyle, width_mm: float, height_mm: float
    ) -> None:
        clearance = door_clearance(style)
        assert (clearance.width, clearance.height) == (width_mm, height_mm)

        cabinet = generate("base", 18, style=style)
        door = _by_type(build_cut_list(cabinet))[PanelType.DOOR]
        assert door.width == pytest.approx(18 - width_mm * MM)
        assert door.height == pytest.approx(30 - height_mm * MM)

    @pytest.mark.parametrize("unit", list(LengthUnit))
    @pytest.mark.parametrize("door_count", [1, 2, 3, 4])
    @pytest.mark.parametrize("style", list(CabinetStyle))
    def test_doors_and_gaps_fit_cabinet_width(
        self, style: CabinetStyle, door_count: int, unit: LengthUnit
    ) -> None:
        cabinet = generate("wall", 36, 30, style=style, door_count=door_count)
        cabinet = dataclasses.replace(
            cabinet,
            dimensions=cabinet.dimensions.converted(unit),
            door_thickness=cabinet.unit.convert(cabinet.effective_door_thickness, unit),
        )
        door = _by_type(build_cut_list(cabinet))[PanelType.DOOR]
        gap = unit.from_mm(door_clearance(style).width)

        assert door.quantity == door_count
        occupied = door.width * door.quantity + door_count * gap
        assert occupied <= cabinet.dimensions.width + 1e-9
        assert occupied == pytest.approx(cabinet.dimensions.width)

    def test_zero_doors_omits_door_panel(self) -> None:
        cabinet = generate("base", 24, door_count=0)
        items = build_cut_list(cabinet)

        assert PanelType.DOOR not in _by_type(items)
        assert total_part_count(items) == 2 + 2 + 1 + 1

    def test_zero_shelves_omits_shelf_panel(self) -> None:
        cabinet = generate("base", 24, shelf_count=0)
        assert PanelType.SHELF not in _by_type(build_cut_list(cabinet))

    def test_no_back(self) -> None:
        cabinet = generate("base", 24, include_back=False)
        assert PanelType.BACK not in _by_type(build_cut_list(cabinet))

    def test_item_ids_derive_from_cabinet_id(self, base_cabinet: Cabinet) -> None:
        ids = [item.id for item in build_cut_list(base_cabinet)]
        assert ids == [
            "base-cabinet-24-sides",
            "base-cabinet-24-top",
            "base-cabinet-24-bottom",
            "base-cabinet-24-back",
            "base-cabinet-24-shelves",
            "base-cabinet-24-doors",
        ]

    def test_door_thickness_from_cabinet(self) -> None:
        cabinet = generate("wall", 30, 30)
        door = _by_type(build_cut_list(cabinet))[PanelType.DOOR]
        assert door.thickness == 0.875

    def test_metric_cabinet(self, mm_cabinet: Cabinet) -> None:
        items = _by_type(build_cut_list(mm_cabinet))

        assert items[PanelType.SIDE].unit is LengthUnit.MILLIMETER
        assert items[PanelType.SIDE].width == 720
        assert items[PanelType.TOP].width == 564
        assert items[PanelType.SHELF].width == 560
        assert items[PanelType.DOOR].width == 296
        assert items[PanelType.DOOR].height == 712


class TestPartCount:
    @pytest.mark.parametrize("cabinet", list(_standard_cabinets()), ids=lambda c: c.id)
    def test_part_count_for_every_standard_size(self, cabinet: Cabinet) -> None:
        items = build_cut_list(cabinet)
        expected = 2 + 2 + cabinet.shelf_count + cabinet.door_count + 1
        assert total_part_count(items) == expected == cabinet.expected_part_count

    @pytest.mark.parametrize("doors", [0, 1, 2, 3, 4])
    @pytest.mark.parametrize("shelves", [0, 1, 5])
    @pytest.mark.parametrize("back", [True, False])
    def test_part_count_for_counts(self, doors: int, shelves: int, back: bool) -> None:
        cabinet = generate(
            "base", 36, door_count=doors, shelf_count=shelves, include_back=back
        )
        expected = 4 + shelves + doors + (1 if back else 0)
        assert total_part_count(build_cut_list(cabinet)) == expected


class TestIdempotence:
    def test_same_cabinet_same_cut_list(self, base_cabinet: Cabinet) -> None:
        assert build_cut_list(base_cabinet) == build_cut_list(base_cabinet)

    def test_separate_builders_agree(self, base_cabinet: Cabinet) -> None:
        assert CutListBuilder().build(base_cabinet) == CutListBuilder().build(base_cabinet)

    def test_regenerated_after_patch(self, base_cabinet: Cabinet) -> None:
        patched = apply_patch(base_cabinet, {"shelf_count": 4})
        assert total_part_count(build_cut_list(patched)) == 2 + 2 + 4 + 2 + 1
        assert total_part_count(build_cut_list(base_cabinet)) == 2 + 2 + 1 + 2 + 1


class TestDegenerateConfigurations:
    def test_too_many_doors_for_width(self) -> None:
        cabinet = Cabinet(
            id="tiny",
            cabinet_type=CabinetType.BASE,
            dimensions=Dimensions(20, 200, 200, 4, unit=LengthUnit.MILLIMETER),
            door_count=8,
        )
        with pytest.raises(DegenerateConfigurationError) as exc_info:
            build_cut_list(cabinet)
        assert exc_info.value.panel == "Door Panel"

    def test_shelf_narrower_than_clearance(self) -> None:
        cabinet = Cabinet(
            id="sliver",
            cabinet_type=CabinetType.WALL,
            dimensions=Dimensions(10, 300, 300, 3, unit=LengthUnit.MILLIMETER),
            door_count=0,
            shelf_count=1,
        )
        with pytest.raises(DegenerateConfigurationError):
            build_cut_list(cabinet)


class TestSortingAndArea:
    def test_sort_by_size_largest_first(
        self, builder: CutListBuilder, base_cabinet: Cabinet
    ) -> None:
        items = builder.sort_by_size(builder.build(base_cabinet))
        areas = [item.area for item in items]
        assert areas == sorted(areas, reverse=True)

    def test_total_area(self, builder: CutListBuilder, mm_cabinet: Cabinet) -> None:
        items = builder.build(mm_cabinet)
        assert builder.total_area(items) == pytest.approx(sum(i.area for i in items))
