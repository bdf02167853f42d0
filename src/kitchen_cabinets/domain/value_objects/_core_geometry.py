"""Core geometry, material and cabinet classification value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._units import LengthUnit


class CabinetType(str, Enum):
    """Kitchen cabinet families with their own standard size tables."""

    BASE = "base"
    WALL = "wall"
    TALL = "tall"


class CabinetStyle(str, Enum):
    """Construction styles, each with its own door-to-box clearance."""

    EURO = "euro"
    INSET = "inset"
    FACEFRAME = "faceframe"


class DoorStyle(str, Enum):
    """Door panel profiles."""

    SLAB = "slab"
    SHAKER = "shaker"
    RAISED_PANEL = "raised-panel"


class MaterialType(str, Enum):
    """Sheet materials used for cabinet boxes and doors."""

    PLYWOOD = "plywood"
    MDF = "mdf"
    PARTICLE_BOARD = "particle-board"


class PanelType(str, Enum):
    """Role of a cut-list panel in the cabinet."""

    SIDE = "side"
    TOP = "top"
    BOTTOM = "bottom"
    BACK = "back"
    SHELF = "shelf"
    DOOR = "door"


class Edge(str, Enum):
    """Panel edges that can receive edge banding.

    A cut-list panel is described with its width running along the front
    edge, which is the TOP edge.
    """

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


EDGE_ORDER: tuple[Edge, ...] = (Edge.TOP, Edge.BOTTOM, Edge.LEFT, Edge.RIGHT)


@dataclass(frozen=True)
class Dimensions:
    """Immutable cabinet box dimensions in a single declared unit.

    Attributes:
        width: Overall width.
        height: Overall box height.
        depth: Overall box depth.
        thickness: Carcass material thickness.
        unit: Unit all four values are expressed in.
    """

    width: float
    height: float
    depth: float
    thickness: float
    unit: LengthUnit = LengthUnit.INCH

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")
        if self.thickness >= min(self.width, self.height, self.depth) / 2:
            raise ValueError(
                "Material thickness must be less than half the smallest dimension"
            )

    @property
    def interior_width(self) -> float:
        """Width between the two side panels."""
        return self.width - 2 * self.thickness

    @property
    def interior_height(self) -> float:
        """Height between the top and bottom panels."""
        return self.height - 2 * self.thickness

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def converted(self, unit: LengthUnit) -> Dimensions:
        """Return the same box expressed in another unit."""
        if unit is self.unit:
            return self
        return Dimensions(
            width=self.unit.convert(self.width, unit),
            height=self.unit.convert(self.height, unit),
            depth=self.unit.convert(self.depth, unit),
            thickness=self.unit.convert(self.thickness, unit),
            unit=unit,
        )


@dataclass(frozen=True)
class Point2D:
    """2D point on a panel or pattern, from its bottom-left corner."""

    x: float
    y: float
