"""Cut list generation service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..entities import Cabinet, CutListItem
from ..errors import DegenerateConfigurationError
from ..value_objects import CabinetStyle, Edge, PanelType

__all__ = [
    "SHELF_CLEARANCE_MM",
    "CutListBuilder",
    "DoorClearance",
    "build_cut_list",
    "door_clearance",
    "total_part_count",
]

SHELF_CLEARANCE_MM = 4.0

FRONT_EDGE = frozenset({Edge.TOP})
ALL_EDGES = frozenset(Edge)


@dataclass(frozen=True)
class DoorClearance:
    """Door reveal for a construction style, in millimeters.

    Attributes:
        width: Subtracted from each door's share of the cabinet width.
        height: Subtracted from the cabinet height.
    """

    width: float
    height: float


def door_clearance(style: CabinetStyle) -> DoorClearance:
    """Door clearance for a construction style."""
    match style:
        case CabinetStyle.EURO:
            return DoorClearance(width=4.0, height=8.0)
        case CabinetStyle.INSET:
            return DoorClearance(width=6.0, height=4.0)
        case CabinetStyle.FACEFRAME:
            return DoorClearance(width=6.0, height=8.0)
    raise ValueError(f"Unknown cabinet style: {style!r}")


def total_part_count(cut_list: Iterable[CutListItem]) -> int:
    """Number of physical panels in a cut list (sum of quantities)."""
    return sum(item.quantity for item in cut_list)


class CutListBuilder:
    """Decomposes a cabinet into the panels needed to build it.

    The list always holds the side pair, the top and the bottom; shelves,
    doors and the back appear only when the cabinet has them. Each call
    returns a new list; nothing is cached between cabinets.
    """

    def build(self, cabinet: Cabinet) -> list[CutListItem]:
        """Generate the cut list for a cabinet.

        Raises:
            DegenerateConfigurationError: If the cabinet is too small for its
                shelf or door count and a panel would have no area.
        """
        dims = cabinet.dimensions
        unit = dims.unit
        t = dims.thickness
        shelf_clearance = unit.from_mm(SHELF_CLEARANCE_MM)

        items = [
            self._item(
                cabinet, "sides", "Side Panel", PanelType.SIDE,
                dims.height, dims.depth, t, 2, FRONT_EDGE,
            ),
            self._item(
                cabinet, "top", "Top Panel", PanelType.TOP,
                dims.interior_width, dims.depth, t, 1, FRONT_EDGE,
            ),
            self._item(
                cabinet, "bottom", "Bottom Panel", PanelType.BOTTOM,
                dims.interior_width, dims.depth, t, 1, FRONT_EDGE,
            ),
        ]

        if cabinet.include_back:
            items.append(
                self._item(
                    cabinet, "back", "Back Panel", PanelType.BACK,
                    dims.interior_width, dims.interior_height, t / 2, 1, frozenset(),
                )
            )

        if cabinet.shelf_count > 0:
            items.append(
                self._item(
                    cabinet, "shelves", "Adjustable Shelf", PanelType.SHELF,
                    dims.interior_width - shelf_clearance,
                    dims.depth - shelf_clearance,
                    t, cabinet.shelf_count, FRONT_EDGE,
                )
            )

        if cabinet.door_count > 0:
            clearance = door_clearance(cabinet.style)
            door_width = dims.width / cabinet.door_count - unit.from_mm(clearance.width)
            door_height = dims.height - unit.from_mm(clearance.height)
            items.append(
                self._item(
                    cabinet, "doors", "Door Panel", PanelType.DOOR,
                    door_width, door_height, cabinet.effective_door_thickness,
                    cabinet.door_count, ALL_EDGES,
                )
            )

        return items

    def sort_by_size(self, cut_list: list[CutListItem]) -> list[CutListItem]:
        """Sort cut list by area (largest first) for efficient cutting."""
        return sorted(cut_list, key=lambda item: item.area, reverse=True)

    def total_area(self, cut_list: Iterable[CutListItem]) -> float:
        """Total face area of all panels, in the cut list's square unit."""
        return sum(item.area for item in cut_list)

    def _item(
        self,
        cabinet: Cabinet,
        key: str,
        name: str,
        panel_type: PanelType,
        width: float,
        height: float,
        thickness: float,
        quantity: int,
        edge_banding: frozenset[Edge],
    ) -> CutListItem:
        if width <= 0 or height <= 0:
            raise DegenerateConfigurationError(name, width, height)
        return CutListItem(
            id=f"{cabinet.id}-{key}",
            name=name,
            panel_type=panel_type,
            width=width,
            height=height,
            thickness=thickness,
            quantity=quantity,
            material=cabinet.material,
            edge_banding=edge_banding,
            unit=cabinet.unit,
        )


_builder = CutListBuilder()


def build_cut_list(cabinet: Cabinet) -> list[CutListItem]:
    """Generate the cut list for a cabinet."""
    return _builder.build(cabinet)
