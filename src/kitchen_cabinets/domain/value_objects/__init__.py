"""Value objects for the cabinet domain.

This module provides immutable data types used throughout the cabinet
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Units and drafting scales
from ._units import (
    DEFAULT_SCALE,
    INCHES_PER_FOOT,
    MM_PER_INCH,
    SCALE_OPTIONS,
    LengthUnit,
    Scale,
    feet_to_inches,
    feet_to_pixels,
    format_dimension,
    get_scale,
    inches_to_feet,
    inches_to_mm,
    mm_to_inches,
    pixels_to_feet,
    to_inches,
    to_pixels,
)

# Core geometry and materials
from ._core_geometry import (
    EDGE_ORDER,
    CabinetStyle,
    CabinetType,
    Dimensions,
    DoorStyle,
    Edge,
    MaterialType,
    PanelType,
    Point2D,
)

# Drill patterns
from ._drilling import (
    Coolant,
    Difficulty,
    DrillHole,
    DrillPattern,
    DrillSettings,
    HoleTolerance,
    PatternCategory,
    PatternSize,
    PatternType,
    Spacing,
)

__all__ = [
    # Units
    "DEFAULT_SCALE",
    "INCHES_PER_FOOT",
    "MM_PER_INCH",
    "SCALE_OPTIONS",
    "LengthUnit",
    "Scale",
    "feet_to_inches",
    "feet_to_pixels",
    "format_dimension",
    "get_scale",
    "inches_to_feet",
    "inches_to_mm",
    "mm_to_inches",
    "pixels_to_feet",
    "to_inches",
    "to_pixels",
    # Core geometry
    "EDGE_ORDER",
    "CabinetStyle",
    "CabinetType",
    "Dimensions",
    "DoorStyle",
    "Edge",
    "MaterialType",
    "PanelType",
    "Point2D",
    # Drilling
    "Coolant",
    "Difficulty",
    "DrillHole",
    "DrillPattern",
    "DrillSettings",
    "HoleTolerance",
    "PatternCategory",
    "PatternSize",
    "PatternType",
    "Spacing",
]
