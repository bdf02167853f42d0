"""Domain layer - core business logic."""

from .catalog import (
    STANDARD_SIZES,
    TEMPLATES,
    StandardSizes,
    TemplateCatalog,
    get_template,
    list_templates,
    require_template,
)
from .entities import Cabinet, CabinetTemplate, CutListItem
from .errors import (
    CabinetError,
    DegenerateConfigurationError,
    InvalidDimensionError,
    NotFoundError,
)
from .services import (
    CabinetGenerator,
    CutListBuilder,
    DrillPatternLibrary,
    MaterialEstimate,
    MaterialEstimator,
    apply_patch,
    build_cut_list,
    generate,
    get_pattern,
    list_by_category,
    total_part_count,
)
from .value_objects import (
    CabinetStyle,
    CabinetType,
    Dimensions,
    DoorStyle,
    DrillPattern,
    Edge,
    LengthUnit,
    MaterialType,
    PanelType,
    PatternCategory,
)

__all__ = [
    "STANDARD_SIZES",
    "TEMPLATES",
    "Cabinet",
    "CabinetError",
    "CabinetGenerator",
    "CabinetStyle",
    "CabinetTemplate",
    "CabinetType",
    "CutListBuilder",
    "CutListItem",
    "DegenerateConfigurationError",
    "Dimensions",
    "DoorStyle",
    "DrillPattern",
    "DrillPatternLibrary",
    "Edge",
    "InvalidDimensionError",
    "LengthUnit",
    "MaterialEstimate",
    "MaterialEstimator",
    "MaterialType",
    "NotFoundError",
    "PanelType",
    "PatternCategory",
    "StandardSizes",
    "TemplateCatalog",
    "apply_patch",
    "build_cut_list",
    "generate",
    "get_pattern",
    "get_template",
    "list_by_category",
    "list_templates",
    "require_template",
    "total_part_count",
]
