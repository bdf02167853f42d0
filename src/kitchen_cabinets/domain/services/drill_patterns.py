"""Drill pattern catalog and hole position generation.

Catalog patterns are defined in millimeters and carry no hole positions;
``generate_holes`` computes them from the pattern type (and, for custom
patterns, the pattern id). The panel helpers ``shelf_pin_holes`` and
``hinge_holes`` lay out holes on an actual panel in the panel's unit.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Sequence

from ..entities import CutListItem
from ..errors import NotFoundError
from ..value_objects import (
    Coolant,
    Difficulty,
    DrillHole,
    DrillPattern,
    DrillSettings,
    HoleTolerance,
    LengthUnit,
    PatternCategory,
    PatternSize,
    PatternType,
    Point2D,
    Spacing,
)

__all__ = [
    "CATEGORIES",
    "PATTERNS",
    "CategoryInfo",
    "DrillPatternLibrary",
    "attach_pattern",
    "generate_holes",
    "get_pattern",
    "hinge_count_for",
    "hinge_holes",
    "list_by_category",
    "require_pattern",
    "search_by_tags",
    "shelf_pin_holes",
]

# Offset of the first hole from the pattern's lower-left corner
EDGE_OFFSET_MM = 25.0

# Panel hardware layout, in inches
SHELF_PIN_SPACING_IN = 32 / 25.4
SHELF_PIN_DIAMETER_IN = 0.197
SHELF_PIN_DEPTH_IN = 0.5
HINGE_DIAMETER_IN = 1.375
HINGE_EDGE_OFFSET_IN = 0.875
HINGE_END_OFFSET_IN = 3.5
HINGE_DEPTH_IN = 0.5

# Door height limits for 2 and 3 hinges, in inches; taller doors get 4
TWO_HINGE_MAX_HEIGHT_IN = 40.0
THREE_HINGE_MAX_HEIGHT_IN = 60.0


@dataclass(frozen=True)
class CategoryInfo:
    category: PatternCategory
    name: str
    description: str


CATEGORIES: Mapping[PatternCategory, CategoryInfo] = MappingProxyType(
    {
        info.category: info
        for info in (
            CategoryInfo(
                PatternCategory.CABINET_HARDWARE,
                "Cabinet Hardware",
                "Patterns for cabinet hinges, handles, and fittings",
            ),
            CategoryInfo(
                PatternCategory.SHELF_HOLES,
                "Shelf Support Holes",
                "Adjustable shelf pin and support hole patterns",
            ),
            CategoryInfo(
                PatternCategory.HANDLE_MOUNTS,
                "Handle Mounts",
                "Mounting patterns for cabinet handles and knobs",
            ),
            CategoryInfo(
                PatternCategory.HINGE_PLATES,
                "Hinge Plates",
                "European and traditional hinge mounting patterns",
            ),
            CategoryInfo(
                PatternCategory.DRAWER_SLIDES,
                "Drawer Slides",
                "Mounting patterns for drawer slides and guides",
            ),
            CategoryInfo(
                PatternCategory.ASSEMBLY,
                "Assembly",
                "Hole patterns for cabinet assembly and construction",
            ),
            CategoryInfo(
                PatternCategory.CUSTOM,
                "Custom",
                "User-defined and specialized patterns",
            ),
        )
    }
)


def _settings(
    spindle_speed: int,
    feed_rate: float,
    coolant: Coolant,
    tool_diameter: float,
    peck_depth: float | None = None,
    tool_type: str = "drill-bit",
) -> DrillSettings:
    return DrillSettings(
        spindle_speed=spindle_speed,
        feed_rate=feed_rate,
        coolant=coolant,
        tool_type=tool_type,
        tool_diameter=tool_diameter,
        peck_depth=peck_depth,
    )


def _pattern(
    pattern_id: str,
    name: str,
    description: str,
    category: PatternCategory,
    pattern_type: PatternType,
    spacing: tuple[float, float],
    size: tuple[float, float],
    settings: DrillSettings,
    tags: tuple[str, ...],
    difficulty: Difficulty,
    estimated_time: float,
) -> DrillPattern:
    return DrillPattern(
        id=pattern_id,
        name=name,
        description=description,
        category=category,
        type=pattern_type,
        spacing=Spacing(*spacing),
        pattern_size=PatternSize(*size),
        drill_settings=settings,
        tags=tags,
        difficulty=difficulty,
        estimated_time=estimated_time,
    )


PATTERNS: Mapping[str, DrillPattern] = MappingProxyType(
    {
        p.id: p
        for p in (
            _pattern(
                "shelf-pins-32mm", "32mm Shelf Pin Pattern",
                "Standard 32mm spaced shelf pin holes",
                PatternCategory.SHELF_HOLES, PatternType.LINEAR,
                (32, 32), (600, 800),
                _settings(3000, 300, Coolant.OFF, 5, peck_depth=5),
                ("shelf", "adjustable", "32mm"), Difficulty.BEGINNER, 10,
            ),
            _pattern(
                "shelf-pins-25mm", "25mm Shelf Pin Pattern",
                "25mm spaced shelf pin holes for tighter spacing",
                PatternCategory.SHELF_HOLES, PatternType.LINEAR,
                (25, 25), (500, 700),
                _settings(3000, 300, Coolant.OFF, 5, peck_depth=5),
                ("shelf", "adjustable", "25mm"), Difficulty.BEGINNER, 10,
            ),
            _pattern(
                "hinge-european-35mm", "European Hinge 35mm",
                "Standard 35mm European concealed hinge mounting",
                PatternCategory.HINGE_PLATES, PatternType.CUSTOM,
                (0, 0), (50, 80),
                _settings(2500, 250, Coolant.MIST, 35, peck_depth=8, tool_type="forstner-bit"),
                ("hinge", "european", "concealed", "35mm"), Difficulty.INTERMEDIATE, 8,
            ),
            _pattern(
                "hinge-european-26mm", "European Hinge 26mm",
                "26mm European hinge for smaller doors",
                PatternCategory.HINGE_PLATES, PatternType.CUSTOM,
                (0, 0), (40, 60),
                _settings(3000, 300, Coolant.MIST, 26, peck_depth=6, tool_type="forstner-bit"),
                ("hinge", "european", "concealed", "26mm"), Difficulty.INTERMEDIATE, 6,
            ),
            _pattern(
                "handle-bar-128mm", "Bar Handle 128mm",
                "Standard 128mm bar handle mounting pattern",
                PatternCategory.HANDLE_MOUNTS, PatternType.CUSTOM,
                (128, 0), (150, 30),
                _settings(3500, 400, Coolant.OFF, 3, peck_depth=8),
                ("handle", "bar", "128mm", "mounting"), Difficulty.BEGINNER, 5,
            ),
            _pattern(
                "handle-knob-standard", "Standard Knob Mount",
                "Single knob mounting pattern",
                PatternCategory.HANDLE_MOUNTS, PatternType.CUSTOM,
                (0, 0), (20, 20),
                _settings(3500, 400, Coolant.OFF, 3, peck_depth=6),
                ("handle", "knob", "single"), Difficulty.BEGINNER, 3,
            ),
            _pattern(
                "drawer-slide-side-mount", "Side Mount Drawer Slide",
                "Standard side mount drawer slide pattern",
                PatternCategory.DRAWER_SLIDES, PatternType.CUSTOM,
                (0, 32), (30, 400),
                _settings(3000, 350, Coolant.MIST, 4, peck_depth=10),
                ("drawer", "slide", "side-mount"), Difficulty.INTERMEDIATE, 12,
            ),
            _pattern(
                "drawer-slide-bottom-mount", "Bottom Mount Drawer Slide",
                "Bottom mount drawer slide pattern",
                PatternCategory.DRAWER_SLIDES, PatternType.CUSTOM,
                (0, 0), (60, 30),
                _settings(3000, 350, Coolant.MIST, 4, peck_depth=8),
                ("drawer", "slide", "bottom-mount"), Difficulty.INTERMEDIATE, 8,
            ),
            _pattern(
                "assembly-dowel-8mm", "8mm Dowel Assembly",
                "8mm dowel hole pattern for cabinet assembly",
                PatternCategory.ASSEMBLY, PatternType.CUSTOM,
                (0, 0), (40, 40),
                _settings(2500, 200, Coolant.MIST, 8, peck_depth=12),
                ("assembly", "dowel", "8mm", "construction"), Difficulty.INTERMEDIATE, 15,
            ),
            _pattern(
                "assembly-confirmat-screw", "Confirmat Screw Pattern",
                "Confirmat screw pattern for panel assembly",
                PatternCategory.ASSEMBLY, PatternType.CUSTOM,
                (0, 0), (30, 30),
                _settings(2000, 150, Coolant.MIST, 7, peck_depth=15, tool_type="step-drill"),
                ("assembly", "confirmat", "screw", "panel"), Difficulty.ADVANCED, 10,
            ),
            _pattern(
                "kitchen-sink-mount", "Kitchen Sink Mount",
                "Standard undermount kitchen sink mounting pattern",
                PatternCategory.CABINET_HARDWARE, PatternType.CUSTOM,
                (0, 0), (800, 600),
                _settings(2500, 300, Coolant.MIST, 4, peck_depth=15),
                ("sink", "kitchen", "undermount", "mounting"), Difficulty.ADVANCED, 20,
            ),
            _pattern(
                "countertop-fastener", "Countertop Fastener Pattern",
                "Countertop to cabinet fastening pattern",
                PatternCategory.CABINET_HARDWARE, PatternType.CUSTOM,
                (200, 150), (1000, 600),
                _settings(2000, 250, Coolant.MIST, 6, peck_depth=20),
                ("countertop", "fastener", "mounting"), Difficulty.INTERMEDIATE, 25,
            ),
        )
    }
)


# ---------------------------------------------------------------------------
# Hole generators
# ---------------------------------------------------------------------------


def _hole(
    hole_id: str,
    x: float,
    y: float,
    diameter: float,
    depth: float,
    tolerance: HoleTolerance | None = None,
) -> DrillHole:
    return DrillHole(
        id=hole_id,
        position=Point2D(x, y),
        diameter=diameter,
        depth=depth,
        tolerance=tolerance,
    )


_PIN_TOLERANCE = HoleTolerance(diameter=0.1, depth=1.0, position=0.5)
_SCREW_TOLERANCE = HoleTolerance(diameter=0.1, depth=1.0, position=0.3)


def _linear_holes(pattern: DrillPattern) -> list[DrillHole]:
    spacing = pattern.spacing.x or pattern.spacing.y
    count = math.floor(pattern.pattern_size.height / spacing)
    return [
        _hole(f"hole-{i}", EDGE_OFFSET_MM, EDGE_OFFSET_MM + i * spacing, 5, 15, _PIN_TOLERANCE)
        for i in range(count)
    ]


def _grid_holes(pattern: DrillPattern) -> list[DrillHole]:
    sx, sy = pattern.spacing.x, pattern.spacing.y
    if sx <= 0 or sy <= 0:
        raise ValueError(f"Grid pattern {pattern.id} needs positive spacing on both axes")
    cols = math.floor(pattern.pattern_size.width / sx)
    rows = math.floor(pattern.pattern_size.height / sy)
    return [
        _hole(
            f"hole-{col}-{row}",
            EDGE_OFFSET_MM + col * sx,
            EDGE_OFFSET_MM + row * sy,
            5,
            15,
            _PIN_TOLERANCE,
        )
        for col in range(cols)
        for row in range(rows)
    ]


def _circular_holes(pattern: DrillPattern) -> list[DrillHole]:
    cx = pattern.pattern_size.width / 2
    cy = pattern.pattern_size.height / 2
    radius = min(cx, cy) - EDGE_OFFSET_MM
    holes = []
    for i in range(8):
        angle = i / 8 * 2 * math.pi
        holes.append(
            _hole(f"hole-{i}", cx + radius * math.cos(angle), cy + radius * math.sin(angle), 5, 15)
        )
    return holes


def _european_hinge(cup_diameter: float) -> list[DrillHole]:
    cup_depth = 13 if cup_diameter == 35 else 11.5
    screw_offset = 22.5 if cup_diameter == 35 else 16
    return [
        _hole(
            "hinge-cup", 25, 25, cup_diameter, cup_depth,
            HoleTolerance(diameter=0.2, depth=0.5, position=0.2),
        ),
        _hole("mount-screw-1", 25 + screw_offset, 25, 3, 12, _SCREW_TOLERANCE),
        _hole("mount-screw-2", 25 - screw_offset, 25, 3, 12, _SCREW_TOLERANCE),
    ]


def _bar_handle(length: float) -> list[DrillHole]:
    # 16mm from each end of the bar
    screw_spacing = length - 32
    center_x = 75
    return [
        _hole("handle-1", center_x - screw_spacing / 2, 15, 3, 10, _SCREW_TOLERANCE),
        _hole("handle-2", center_x + screw_spacing / 2, 15, 3, 10, _SCREW_TOLERANCE),
    ]


def _knob() -> list[DrillHole]:
    return [_hole("knob-center", 10, 10, 3, 12, _SCREW_TOLERANCE)]


def _side_slide() -> list[DrillHole]:
    return [
        _hole(f"slide-hole-{i}", 15, y, 4, 12, _SCREW_TOLERANCE)
        for i, y in enumerate((32, 96, 160, 224, 288, 352))
    ]


def _bottom_slide() -> list[DrillHole]:
    return [
        _hole(f"slide-hole-{i}", x, y, 4, 10, _SCREW_TOLERANCE)
        for i, (x, y) in enumerate(((10, 10), (50, 10), (10, 20), (50, 20)))
    ]


def _dowel(diameter: float) -> list[DrillHole]:
    return [
        _hole(f"dowel-{i}", x, y, diameter, diameter * 2)
        for i, (x, y) in enumerate(((10, 10), (30, 10), (10, 30), (30, 30)))
    ]


def _confirmat() -> list[DrillHole]:
    return [
        _hole("confirmat-main", 15, 15, 7, 12, _SCREW_TOLERANCE),
        _hole("confirmat-pilot", 15, 15, 3, 25, _SCREW_TOLERANCE),
    ]


def _sink_mount() -> list[DrillHole]:
    clips = ((100, 100), (700, 100), (100, 500), (700, 500), (400, 100), (400, 500))
    return [_hole(f"sink-clip-{i}", x, y, 4, 15) for i, (x, y) in enumerate(clips)]


def _countertop() -> list[DrillHole]:
    return [
        _hole(f"fastener-{x}-{y}", x, y, 6, 20)
        for x in range(100, 901, 200)
        for y in range(100, 501, 150)
    ]


_CUSTOM_GENERATORS: Mapping[str, Callable[[], list[DrillHole]]] = MappingProxyType(
    {
        "hinge-european-35mm": lambda: _european_hinge(35),
        "hinge-european-26mm": lambda: _european_hinge(26),
        "handle-bar-128mm": lambda: _bar_handle(128),
        "handle-knob-standard": _knob,
        "drawer-slide-side-mount": _side_slide,
        "drawer-slide-bottom-mount": _bottom_slide,
        "assembly-dowel-8mm": lambda: _dowel(8),
        "assembly-confirmat-screw": _confirmat,
        "kitchen-sink-mount": _sink_mount,
        "countertop-fastener": _countertop,
    }
)


def generate_holes(pattern: DrillPattern) -> list[DrillHole]:
    """Compute the hole positions of a pattern, in millimeters.

    Patterns that already carry holes (user-defined patterns) return them
    unchanged. Custom catalog patterns use the hardware layout registered
    for their id; a custom pattern with neither holes nor a layout has no
    holes.
    """
    if pattern.holes:
        return list(pattern.holes)

    match pattern.type:
        case PatternType.LINEAR:
            return _linear_holes(pattern)
        case PatternType.GRID:
            return _grid_holes(pattern)
        case PatternType.CIRCULAR:
            return _circular_holes(pattern)
        case PatternType.CUSTOM:
            generator = _CUSTOM_GENERATORS.get(pattern.id)
            return generator() if generator else []
    raise ValueError(f"Unknown pattern type: {pattern.type!r}")


# ---------------------------------------------------------------------------
# Panel hardware layout
# ---------------------------------------------------------------------------


def _from_inches(value: float, unit: LengthUnit) -> float:
    return LengthUnit.INCH.convert(value, unit)


def shelf_pin_holes(
    depth: float,
    height: float,
    *,
    unit: LengthUnit = LengthUnit.INCH,
    start_from_bottom: float = 3.0,
    end_from_top: float = 3.0,
    from_front: float = 2.0,
    from_back: float = 2.0,
) -> list[DrillHole]:
    """Two rows of 32mm-pitch shelf pin holes on a side panel.

    ``depth`` and ``height`` are the side panel's size in ``unit``; the
    offsets are in inches. Holes run from ``start_from_bottom`` up to
    ``end_from_top`` below the top edge, one row ``from_front`` the front
    edge and one ``from_back`` the back edge. Positions are returned in
    ``unit``.
    """
    depth_in = unit.convert(depth, LengthUnit.INCH)
    height_in = unit.convert(height, LengthUnit.INCH)
    available = height_in - start_from_bottom - end_from_top
    if available < 0:
        return []

    count = math.floor(available / SHELF_PIN_SPACING_IN)
    holes = []
    for i in range(count + 1):
        y = start_from_bottom + i * SHELF_PIN_SPACING_IN
        for side, x in (("front", from_front), ("back", depth_in - from_back)):
            holes.append(
                _hole(
                    f"shelf-pin-{side}-{i}",
                    _from_inches(x, unit),
                    _from_inches(y, unit),
                    _from_inches(SHELF_PIN_DIAMETER_IN, unit),
                    _from_inches(SHELF_PIN_DEPTH_IN, unit),
                )
            )
    return holes


def hinge_count_for(door_height: float, unit: LengthUnit = LengthUnit.INCH) -> int:
    """Number of hinges for a door of the given height."""
    height_in = unit.convert(door_height, LengthUnit.INCH)
    if height_in <= TWO_HINGE_MAX_HEIGHT_IN:
        return 2
    if height_in <= THREE_HINGE_MAX_HEIGHT_IN:
        return 3
    return 4


def hinge_holes(
    height: float, hinge_count: int = 2, *, unit: LengthUnit = LengthUnit.INCH
) -> list[DrillHole]:
    """Hinge cup holes along a door's hinge edge, bottom to top.

    Two hinges sit 3.5" from each end; a third goes in the middle; four
    hinges use the ends and the thirds.

    Raises:
        ValueError: If hinge_count is not 2, 3 or 4.
    """
    if hinge_count not in (2, 3, 4):
        raise ValueError(f"Hinge count must be 2, 3 or 4, got {hinge_count}")

    height_in = unit.convert(height, LengthUnit.INCH)
    ys = [HINGE_END_OFFSET_IN, height_in - HINGE_END_OFFSET_IN]
    if hinge_count == 3:
        ys.append(height_in / 2)
    elif hinge_count == 4:
        ys.extend((height_in / 3, height_in * 2 / 3))

    return [
        _hole(
            f"hinge-{i}",
            _from_inches(HINGE_EDGE_OFFSET_IN, unit),
            _from_inches(y, unit),
            _from_inches(HINGE_DIAMETER_IN, unit),
            _from_inches(HINGE_DEPTH_IN, unit),
        )
        for i, y in enumerate(sorted(ys))
    ]


# ---------------------------------------------------------------------------
# Library
# ---------------------------------------------------------------------------


class DrillPatternLibrary:
    """Read-only catalog of drill patterns.

    Example:
        library = DrillPatternLibrary()
        pattern = library.require_pattern("shelf-pins-32mm")
        holes = library.generate_holes(pattern)
    """

    def __init__(self, patterns: Mapping[str, DrillPattern] = PATTERNS) -> None:
        self._patterns = patterns

    def list_patterns(self) -> list[DrillPattern]:
        return list(self._patterns.values())

    def get_pattern(self, pattern_id: str) -> DrillPattern | None:
        """Look up a pattern, returning None when the id is absent."""
        if not isinstance(pattern_id, str):
            return None
        return self._patterns.get(pattern_id)

    def require_pattern(self, pattern_id: str) -> DrillPattern:
        """Look up a pattern.

        Raises:
            NotFoundError: If the id is not in the library.
        """
        pattern = self.get_pattern(pattern_id)
        if pattern is None:
            raise NotFoundError("drill pattern", str(pattern_id))
        return pattern

    def list_by_category(self, category: PatternCategory | str) -> list[DrillPattern]:
        try:
            wanted = PatternCategory(category)
        except ValueError:
            return []
        return [p for p in self._patterns.values() if p.category is wanted]

    def search_by_tags(self, tags: Iterable[str]) -> list[DrillPattern]:
        """Patterns having at least one of the given tags."""
        wanted = set(tags)
        return [p for p in self._patterns.values() if wanted.intersection(p.tags)]

    def categories(self) -> list[CategoryInfo]:
        return list(CATEGORIES.values())

    def generate_holes(self, pattern: DrillPattern | str) -> list[DrillHole]:
        """Compute hole positions for a pattern or a pattern id."""
        if isinstance(pattern, str):
            pattern = self.require_pattern(pattern)
        return generate_holes(pattern)

    def create_custom_pattern(
        self,
        pattern_id: str,
        name: str,
        category: PatternCategory | str,
        holes: Sequence[DrillHole],
        settings: DrillSettings | None = None,
    ) -> DrillPattern:
        """Build a user-defined pattern from explicit holes.

        The pattern area extends 50mm past the furthest hole on each axis.
        Estimated time is two minutes per hole. The new pattern is returned,
        not added to the library.

        Raises:
            ValueError: If no holes are given.
        """
        if not holes:
            raise ValueError("A custom pattern needs at least one hole")
        if settings is None:
            settings = DrillSettings(
                spindle_speed=3000,
                feed_rate=300,
                coolant=Coolant.OFF,
                tool_type="drill-bit",
                tool_diameter=5,
            )
        return DrillPattern(
            id=pattern_id,
            name=name,
            description=f"Custom pattern with {len(holes)} holes",
            category=PatternCategory(category),
            type=PatternType.CUSTOM,
            spacing=Spacing(0, 0),
            pattern_size=PatternSize(
                width=max(h.position.x for h in holes) + 50,
                height=max(h.position.y for h in holes) + 50,
            ),
            drill_settings=settings,
            tags=("custom",),
            difficulty=Difficulty.INTERMEDIATE,
            estimated_time=len(holes) * 2,
            holes=tuple(holes),
        )

    def attach_pattern(self, item: CutListItem, pattern_id: str) -> CutListItem:
        """Return a copy of a cut list item with a pattern associated.

        Attaching a pattern the item already has returns an equal item.

        Raises:
            NotFoundError: If the pattern id is unknown.
        """
        pattern = self.require_pattern(pattern_id)
        if pattern.id in item.drill_patterns:
            return item
        return dataclasses.replace(
            item, drill_patterns=item.drill_patterns + (pattern.id,)
        )

    def __contains__(self, pattern_id: object) -> bool:
        return isinstance(pattern_id, str) and pattern_id in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)


_library = DrillPatternLibrary()

get_pattern = _library.get_pattern
require_pattern = _library.require_pattern
list_by_category = _library.list_by_category
search_by_tags = _library.search_by_tags
attach_pattern = _library.attach_pattern
