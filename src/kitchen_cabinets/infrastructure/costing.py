"""Cost estimation from sheet layouts and door hardware.

Material cost is charged per whole sheet used by the row layout, so the
waste left on each sheet is paid for. Hardware cost covers hinges and one
handle per door; the hinge count per door follows its height, the same
rule used when drilling hinge cups.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from kitchen_cabinets.domain import CutListItem, PanelType
from kitchen_cabinets.domain.services import hinge_count_for
from kitchen_cabinets.infrastructure.nesting import NestingSheet, RowSheetLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingConfig:
    """Unit prices used for a cost estimate.

    Attributes:
        price_per_square_meter: Sheet material price per square meter.
        hinge_price: Price of one hinge.
        handle_price: Price of one handle.
    """

    price_per_square_meter: float = 25.50
    hinge_price: float = 12.99
    handle_price: float = 8.50

    def __post_init__(self) -> None:
        for name in ("price_per_square_meter", "hinge_price", "handle_price"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name.replace('_', ' ').capitalize()} cannot be negative")


@dataclass(frozen=True)
class CostBreakdown:
    """Estimated cost of one cut list.

    Attributes:
        material_cost: Whole sheets used times sheet area times price.
        hardware_cost: Hinges and handles for every door.
        total_cost: Material plus hardware.
        sheet_count: Number of sheets in the layout.
        waste_percentage: Mean unused share of the sheets, 0-100.
        hinge_count: Hinges priced.
        handle_count: Handles priced.
    """

    material_cost: float
    hardware_cost: float
    total_cost: float
    sheet_count: int
    waste_percentage: float
    hinge_count: int = 0
    handle_count: int = 0


class CostEstimator:
    """Prices a cut list using a sheet layout and door hardware counts.

    Example:
        estimator = CostEstimator(PricingConfig(price_per_square_meter=30))
        breakdown = estimator.estimate(output.cut_list)
        print(f"{breakdown.total_cost:.2f}")
    """

    def __init__(
        self,
        pricing: PricingConfig | None = None,
        layout: RowSheetLayout | None = None,
    ) -> None:
        self.pricing = pricing or PricingConfig()
        self.layout = layout or RowSheetLayout()

    def estimate(self, cut_list: Sequence[CutListItem]) -> CostBreakdown:
        """Lay out the cut list by stock and price the result.

        Raises:
            ValueError: If a panel does not fit the sheet.
        """
        sheets = [
            sheet
            for stock_sheets in self.layout.layout_by_stock(cut_list).values()
            for sheet in stock_sheets
        ]
        return self.estimate_sheets(sheets, cut_list)

    def estimate_sheets(
        self, sheets: Sequence[NestingSheet], cut_list: Sequence[CutListItem]
    ) -> CostBreakdown:
        """Price an existing layout plus the doors in a cut list."""
        material_cost = sum(
            sheet.unit.to_mm(sheet.width) * sheet.unit.to_mm(sheet.height) / 1_000_000
            for sheet in sheets
        ) * self.pricing.price_per_square_meter

        doors = [item for item in cut_list if item.panel_type is PanelType.DOOR]
        hinge_count = sum(
            item.quantity * hinge_count_for(item.height, item.unit) for item in doors
        )
        handle_count = sum(item.quantity for item in doors)
        hardware_cost = (
            hinge_count * self.pricing.hinge_price
            + handle_count * self.pricing.handle_price
        )

        waste = (
            sum(sheet.waste_percentage for sheet in sheets) / len(sheets) if sheets else 0.0
        )
        logger.debug(
            f"Priced {len(sheets)} sheets, {hinge_count} hinges, {handle_count} handles"
        )
        return CostBreakdown(
            material_cost=material_cost,
            hardware_cost=hardware_cost,
            total_cost=material_cost + hardware_cost,
            sheet_count=len(sheets),
            waste_percentage=waste,
            hinge_count=hinge_count,
            handle_count=handle_count,
        )
