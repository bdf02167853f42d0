"""Domain records for cabinet templates, cabinets and cut lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import (
    EDGE_ORDER,
    CabinetStyle,
    CabinetType,
    Dimensions,
    DoorStyle,
    Edge,
    LengthUnit,
    MaterialType,
    PanelType,
)


@dataclass(frozen=True)
class CabinetTemplate:
    """A catalog entry describing a standard cabinet.

    Attributes:
        id: Catalog id (e.g. "W3030").
        name: Display name.
        type: Cabinet family.
        style: Construction style.
        dimensions: Box dimensions.
        door_count: Number of doors (0 for open cabinets).
        shelf_count: Number of adjustable shelves.
    """

    id: str
    name: str
    type: CabinetType
    style: CabinetStyle
    dimensions: Dimensions
    door_count: int
    shelf_count: int

    def __post_init__(self) -> None:
        if self.door_count < 0:
            raise ValueError("Door count cannot be negative")
        if self.shelf_count < 0:
            raise ValueError("Shelf count cannot be negative")


@dataclass(frozen=True)
class Cabinet:
    """A fully specified cabinet design.

    Cabinets are values: updates go through ``apply_patch`` and produce a
    new Cabinet, and the cut list is regenerated from the new value.

    Attributes:
        id: Cabinet id, injected by the caller or derived from the size.
        cabinet_type: Cabinet family.
        dimensions: Box dimensions and carcass thickness.
        style: Construction style, which sets door clearances.
        door_style: Door profile.
        material: Sheet material for all panels.
        door_count: Number of doors; 0 means an open cabinet.
        shelf_count: Number of adjustable shelves.
        include_back: Whether a back panel is cut.
        door_thickness: Thickness of the door panels.
        template_id: Catalog template this cabinet was built from, if any.
    """

    id: str
    cabinet_type: CabinetType
    dimensions: Dimensions
    style: CabinetStyle = CabinetStyle.EURO
    door_style: DoorStyle = DoorStyle.SLAB
    material: MaterialType = MaterialType.PLYWOOD
    door_count: int = 1
    shelf_count: int = 1
    include_back: bool = True
    door_thickness: float | None = None
    template_id: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Cabinet id must not be empty")
        if self.door_count < 0:
            raise ValueError("Door count cannot be negative")
        if self.shelf_count < 0:
            raise ValueError("Shelf count cannot be negative")
        if self.door_thickness is not None and self.door_thickness <= 0:
            raise ValueError("Door thickness must be positive")

    @property
    def unit(self) -> LengthUnit:
        return self.dimensions.unit

    @property
    def effective_door_thickness(self) -> float:
        """Door thickness, falling back to the carcass thickness."""
        if self.door_thickness is None:
            return self.dimensions.thickness
        return self.door_thickness

    @property
    def expected_part_count(self) -> int:
        """Number of physical panels the cut list must contain."""
        return (
            2  # sides
            + 2  # top and bottom
            + self.shelf_count
            + self.door_count
            + (1 if self.include_back else 0)
        )


@dataclass(frozen=True)
class CutListItem:
    """A line of the cut list: one panel shape and how many to cut.

    Attributes:
        id: Item id, unique within its cabinet's cut list.
        name: Part name as printed on the cut list.
        panel_type: Role of the panel.
        width: Panel width, along its front edge.
        height: Panel height.
        thickness: Panel thickness.
        quantity: Number of identical panels.
        material: Sheet material.
        edge_banding: Banded edges.
        unit: Unit of width, height and thickness.
        drill_patterns: Ids of drill patterns associated with this panel.
    """

    id: str
    name: str
    panel_type: PanelType
    width: float
    height: float
    thickness: float
    quantity: int
    material: MaterialType
    edge_banding: frozenset[Edge] = field(default_factory=frozenset)
    unit: LengthUnit = LengthUnit.INCH
    drill_patterns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.thickness <= 0:
            raise ValueError("Cut list item dimensions must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def area(self) -> float:
        """Total face area of all pieces of this item."""
        return self.width * self.height * self.quantity

    @property
    def banded_edges(self) -> list[Edge]:
        """Banded edges in top, bottom, left, right order."""
        return [edge for edge in EDGE_ORDER if edge in self.edge_banding]

    @property
    def banding_length(self) -> float:
        """Edge banding needed for all pieces of this item."""
        per_piece = 0.0
        for edge in self.edge_banding:
            per_piece += self.width if edge in (Edge.TOP, Edge.BOTTOM) else self.height
        return per_piece * self.quantity
