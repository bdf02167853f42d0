"""Drill pattern value objects.

All pattern dimensions, spacings and hole sizes are in millimeters, the
unit CNC boring tables are specified in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import Point2D


class PatternCategory(str, Enum):
    """Groups of drill patterns by the hardware they serve."""

    CABINET_HARDWARE = "cabinet-hardware"
    SHELF_HOLES = "shelf-holes"
    HANDLE_MOUNTS = "handle-mounts"
    HINGE_PLATES = "hinge-plates"
    DRAWER_SLIDES = "drawer-slides"
    ASSEMBLY = "assembly"
    CUSTOM = "custom"


class PatternType(str, Enum):
    """How a pattern's hole positions are laid out.

    Attributes:
        LINEAR: A single line of holes at a fixed spacing.
        GRID: Rows and columns of holes.
        CIRCULAR: Eight holes on a circle inside the pattern area.
        CUSTOM: Hardware-specific positions defined per pattern.
    """

    LINEAR = "linear"
    GRID = "grid"
    CIRCULAR = "circular"
    CUSTOM = "custom"


class Coolant(str, Enum):
    OFF = "off"
    MIST = "mist"
    FLOOD = "flood"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class Spacing:
    """Hole pitch along each axis in mm (0 when unused)."""

    x: float
    y: float


@dataclass(frozen=True)
class PatternSize:
    """Extent of a pattern's working area in mm."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Pattern size must be positive")


@dataclass(frozen=True)
class DrillSettings:
    """Machine settings for boring a pattern.

    Attributes:
        spindle_speed: Spindle speed in RPM.
        feed_rate: Feed rate in mm/min.
        coolant: Coolant mode.
        tool_type: Tool used for the pattern (e.g. "drill-bit").
        tool_diameter: Tool diameter in mm.
        peck_depth: Peck depth in mm for deep holes, if pecking.
        plunge_rate: Plunge rate in mm/min, if different from the feed rate.
    """

    spindle_speed: int
    feed_rate: float
    coolant: Coolant
    tool_type: str
    tool_diameter: float
    peck_depth: float | None = None
    plunge_rate: float | None = None

    def __post_init__(self) -> None:
        if self.spindle_speed <= 0:
            raise ValueError("Spindle speed must be positive")
        if self.feed_rate <= 0:
            raise ValueError("Feed rate must be positive")
        if self.tool_diameter <= 0:
            raise ValueError("Tool diameter must be positive")


@dataclass(frozen=True)
class HoleTolerance:
    """Symmetric tolerances for a drilled hole, in mm."""

    diameter: float
    depth: float
    position: float


@dataclass(frozen=True)
class DrillHole:
    """A single hole of a drill pattern.

    Attributes:
        id: Hole id, unique within its pattern.
        position: Center of the hole from the pattern origin, in mm.
        diameter: Hole diameter in mm.
        depth: Hole depth in mm.
        tolerance: Allowed deviation, if specified.
    """

    id: str
    position: Point2D
    diameter: float
    depth: float
    tolerance: HoleTolerance | None = None

    def __post_init__(self) -> None:
        if self.diameter <= 0 or self.depth <= 0:
            raise ValueError("Hole diameter and depth must be positive")


@dataclass(frozen=True)
class DrillPattern:
    """A named, reusable hole layout with its machine settings.

    ``holes`` is empty for catalog entries; hole positions are computed on
    demand from the pattern type. ``estimated_time`` is in minutes.
    """

    id: str
    name: str
    description: str
    category: PatternCategory
    type: PatternType
    spacing: Spacing
    pattern_size: PatternSize
    drill_settings: DrillSettings
    tags: tuple[str, ...] = ()
    difficulty: Difficulty = Difficulty.BEGINNER
    estimated_time: float = 0.0
    holes: tuple[DrillHole, ...] = ()
