"""Material estimation service."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..entities import CutListItem
from ..value_objects import LengthUnit, MaterialType

__all__ = ["MaterialEstimate", "MaterialEstimator", "SheetStock", "estimate_materials"]

SQIN_PER_SQFT = 144


@dataclass(frozen=True)
class SheetStock:
    """A sheet material at a given thickness (in inches)."""

    material: MaterialType
    thickness: float

    @classmethod
    def for_item(cls, item: CutListItem) -> SheetStock:
        return cls(
            material=item.material,
            thickness=round(item.unit.convert(item.thickness, LengthUnit.INCH), 4),
        )

    @property
    def label(self) -> str:
        return f'{self.thickness:g}" {self.material.value}'


@dataclass
class MaterialEstimate:
    """Estimate of materials needed for a cut list."""

    total_area_sqin: float
    total_area_sqft: float
    sheet_count_4x8: int
    sheet_count_5x5: int
    waste_percentage: float
    edge_banding_feet: float = 0.0

    @property
    def description(self) -> str:
        """Human-readable description of material needs."""
        return (
            f"{self.total_area_sqft:.1f} sq ft total "
            f"({self.sheet_count_4x8} sheets of 4x8, "
            f"assuming {self.waste_percentage:.0%} waste)"
        )


class MaterialEstimator:
    """Estimates sheet goods and edge banding for cut lists.

    Areas are computed in square inches whatever unit the cut list uses.
    Edge banding is the total banded edge length plus a fixed allowance
    for trimming.
    """

    SHEET_4X8_SQIN = 48 * 96  # 4608 sq in
    SHEET_5X5_SQIN = 60 * 60  # 3600 sq in
    BANDING_ALLOWANCE = 0.15

    def __init__(self, waste_factor: float = 0.15) -> None:
        """Initialize with waste factor (default 15%)."""
        if waste_factor < 0:
            raise ValueError("Waste factor cannot be negative")
        self.waste_factor = waste_factor

    def estimate(
        self, cut_list: Iterable[CutListItem]
    ) -> dict[SheetStock, MaterialEstimate]:
        """Estimate materials needed, grouped by material and thickness."""
        groups: dict[SheetStock, list[CutListItem]] = {}
        for item in cut_list:
            groups.setdefault(SheetStock.for_item(item), []).append(item)

        return {stock: self.estimate_total(items) for stock, items in groups.items()}

    def estimate_total(self, cut_list: Iterable[CutListItem]) -> MaterialEstimate:
        """Estimate total materials needed (all types combined)."""
        total_area = 0.0
        banding_in = 0.0
        for item in cut_list:
            to_inches = item.unit.convert(1.0, LengthUnit.INCH)
            total_area += item.area * to_inches * to_inches
            banding_in += item.banding_length * to_inches

        area_with_waste = total_area * (1 + self.waste_factor)
        return MaterialEstimate(
            total_area_sqin=total_area,
            total_area_sqft=total_area / SQIN_PER_SQFT,
            sheet_count_4x8=math.ceil(area_with_waste / self.SHEET_4X8_SQIN),
            sheet_count_5x5=math.ceil(area_with_waste / self.SHEET_5X5_SQIN),
            waste_percentage=self.waste_factor,
            edge_banding_feet=banding_in / 12 * (1 + self.BANDING_ALLOWANCE),
        )


def estimate_materials(
    cut_list: Iterable[CutListItem], waste_factor: float = 0.15
) -> MaterialEstimate:
    return MaterialEstimator(waste_factor).estimate_total(cut_list)
