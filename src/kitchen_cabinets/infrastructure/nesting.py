"""Sheet layout of cut list panels for display and export.

Panels are placed in rows, largest first, left to right with a saw kerf
between them. A part that does not fit the current row starts a new row;
a row that does not fit the sheet starts a new sheet. The layout is
deterministic and makes no attempt to minimize sheet count.

All dataclasses are frozen (immutable).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from kitchen_cabinets.domain import CutListItem, LengthUnit
from kitchen_cabinets.domain.services import SheetStock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetSize:
    """Sheet stock dimensions and saw kerf.

    Attributes:
        width: Sheet width (default 2440mm).
        height: Sheet height (default 1220mm).
        kerf: Saw blade kerf between parts (default 3mm).
        unit: Unit of width, height and kerf.
    """

    width: float = 2440.0
    height: float = 1220.0
    kerf: float = 3.0
    unit: LengthUnit = LengthUnit.MILLIMETER

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Sheet dimensions must be positive")
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")

    def converted(self, unit: LengthUnit) -> SheetSize:
        if unit is self.unit:
            return self
        return SheetSize(
            width=self.unit.convert(self.width, unit),
            height=self.unit.convert(self.height, unit),
            kerf=self.unit.convert(self.kerf, unit),
            unit=unit,
        )


@dataclass(frozen=True)
class NestingPart:
    """One physical panel placed on a sheet.

    Attributes:
        id: "<item id>-<index>", one per piece of the cut list item.
        item_id: Id of the cut list item the piece comes from.
        name: Part name.
        x: Left edge on the sheet.
        y: Bottom edge on the sheet.
        width: Panel width before rotation.
        height: Panel height before rotation.
        rotation: 0, or 90 when the panel is turned to fit the sheet.
    """

    id: str
    item_id: str
    name: str
    x: float
    y: float
    width: float
    height: float
    rotation: int = 0

    @property
    def placed_width(self) -> float:
        return self.height if self.rotation == 90 else self.width

    @property
    def placed_height(self) -> float:
        return self.width if self.rotation == 90 else self.height

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class NestingSheet:
    """A sheet with its placed parts.

    Attributes:
        id: "sheet-<n>", numbered from 1.
        width: Sheet width.
        height: Sheet height.
        parts: Parts placed on the sheet.
        unit: Unit of all coordinates and sizes.
    """

    id: str
    width: float
    height: float
    parts: tuple[NestingPart, ...] = field(default_factory=tuple)
    unit: LengthUnit = LengthUnit.MILLIMETER

    @property
    def used_area(self) -> float:
        return sum(part.area for part in self.parts)

    @property
    def waste_percentage(self) -> float:
        """Unused share of the sheet area, 0-100."""
        sheet_area = self.width * self.height
        return (sheet_area - self.used_area) / sheet_area * 100


class RowSheetLayout:
    """Places cut list panels on sheets in rows.

    Example:
        layout = RowSheetLayout(SheetSize(2440, 1220, kerf=3))
        for sheet in layout.layout(cut_list):
            print(sheet.id, f"{sheet.waste_percentage:.1f}% waste")
    """

    def __init__(self, sheet: SheetSize | None = None) -> None:
        self.sheet = sheet or SheetSize()

    def layout(self, items: Sequence[CutListItem]) -> list[NestingSheet]:
        """Lay out every piece of a cut list.

        All items must share one unit; the sheet is converted to it.

        Raises:
            ValueError: If the items use different units, or a panel does not
                fit the sheet in either orientation.
        """
        if not items:
            return []
        units = {item.unit for item in items}
        if len(units) > 1:
            raise ValueError("Cut list items must share a unit to be laid out together")
        unit = units.pop()
        sheet = self.sheet.converted(unit)

        pieces = self._expand(items, sheet)
        pieces.sort(key=lambda p: p.area, reverse=True)

        sheets: list[NestingSheet] = []
        current: list[NestingPart] = []
        x = y = row_height = 0.0

        for piece in pieces:
            w, h = piece.placed_width, piece.placed_height
            if x > 0 and x + w > sheet.width:
                # Next row
                x = 0.0
                y += row_height + sheet.kerf
                row_height = 0.0
            if y > 0 and y + h > sheet.height:
                sheets.append(self._sheet(len(sheets) + 1, sheet, current))
                current = []
                x = y = row_height = 0.0

            current.append(
                NestingPart(
                    id=piece.id,
                    item_id=piece.item_id,
                    name=piece.name,
                    x=x,
                    y=y,
                    width=piece.width,
                    height=piece.height,
                    rotation=piece.rotation,
                )
            )
            x += w + sheet.kerf
            row_height = max(row_height, h)

        if current:
            sheets.append(self._sheet(len(sheets) + 1, sheet, current))

        logger.debug(f"Laid out {len(pieces)} parts on {len(sheets)} sheets")
        return sheets

    def layout_by_stock(
        self, items: Iterable[CutListItem]
    ) -> dict[SheetStock, list[NestingSheet]]:
        """Lay out each material and thickness on its own sheets."""
        groups: dict[SheetStock, list[CutListItem]] = {}
        for item in items:
            groups.setdefault(SheetStock.for_item(item), []).append(item)
        return {stock: self.layout(group) for stock, group in groups.items()}

    def _expand(self, items: Sequence[CutListItem], sheet: SheetSize) -> list[NestingPart]:
        pieces = []
        for item in items:
            rotation = self._orientation(item, sheet)
            for i in range(item.quantity):
                pieces.append(
                    NestingPart(
                        id=f"{item.id}-{i}",
                        item_id=item.id,
                        name=item.name,
                        x=0.0,
                        y=0.0,
                        width=item.width,
                        height=item.height,
                        rotation=rotation,
                    )
                )
        return pieces

    def _orientation(self, item: CutListItem, sheet: SheetSize) -> int:
        if item.width <= sheet.width and item.height <= sheet.height:
            return 0
        if item.height <= sheet.width and item.width <= sheet.height:
            return 90
        raise ValueError(
            f"{item.name} ({item.width:g} x {item.height:g}{item.unit.suffix}) "
            f"does not fit a {sheet.width:g} x {sheet.height:g}{sheet.unit.suffix} sheet"
        )

    def _sheet(
        self, number: int, sheet: SheetSize, parts: list[NestingPart]
    ) -> NestingSheet:
        return NestingSheet(
            id=f"sheet-{number}",
            width=sheet.width,
            height=sheet.height,
            parts=tuple(parts),
            unit=sheet.unit,
        )
