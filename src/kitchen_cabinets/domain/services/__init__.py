"""Domain services for cabinet generation and fabrication data.

This package provides:
- Parametric cabinet generation from standard sizes and templates
- Cut list decomposition with style-dependent door clearances
- The drill pattern catalog and hole layout
- Sheet material and edge banding estimates
"""

from .cut_list import (
    CutListBuilder,
    DoorClearance,
    build_cut_list,
    door_clearance,
    total_part_count,
)
from .drill_patterns import (
    CATEGORIES,
    PATTERNS,
    CategoryInfo,
    DrillPatternLibrary,
    attach_pattern,
    generate_holes,
    get_pattern,
    hinge_count_for,
    hinge_holes,
    list_by_category,
    require_pattern,
    search_by_tags,
    shelf_pin_holes,
)
from .generator import (
    CabinetGenerator,
    apply_patch,
    available_heights,
    available_widths,
    checked_dimensions,
    generate,
)
from .material_estimator import (
    MaterialEstimate,
    MaterialEstimator,
    SheetStock,
    estimate_materials,
)

__all__ = [
    # Generation
    "CabinetGenerator",
    "apply_patch",
    "available_heights",
    "available_widths",
    "checked_dimensions",
    "generate",
    # Cut list
    "CutListBuilder",
    "DoorClearance",
    "build_cut_list",
    "door_clearance",
    "total_part_count",
    # Drill patterns
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
    # Materials
    "MaterialEstimate",
    "MaterialEstimator",
    "SheetStock",
    "estimate_materials",
]
