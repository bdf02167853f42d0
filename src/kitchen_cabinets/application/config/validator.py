"""Validation structures and catalog checks for project files.

Schema validation only checks shapes and ranges. This module checks a
parsed project against the catalogs (templates, standard sizes, drill
patterns) and adds cabinetmaking advisories that do not block generation.
"""

from dataclasses import dataclass, field
from typing import Any

from kitchen_cabinets.application.config.schema import (
    CabinetSpecConfig,
    ProjectConfiguration,
)
from kitchen_cabinets.domain import STANDARD_SIZES, DrillPatternLibrary, TemplateCatalog
from kitchen_cabinets.domain.value_objects import CabinetType

# Widest door that still hangs well on two hinges, in inches
MAX_SINGLE_DOOR_WIDTH = 24.0

# Tightest comfortable spacing between adjustable shelves, in inches
MIN_SHELF_SPACING = 6.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "cabinets[0].width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking advisory about the configuration.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors, 2 with only warnings, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _resolved_size(
    spec: CabinetSpecConfig, catalog: TemplateCatalog
) -> tuple[CabinetType, float, float] | None:
    """Type, width and box height a cabinet spec will generate, if known."""
    if spec.template is not None:
        template = catalog.get_template(spec.template)
        if template is None:
            return None
        return template.type, template.dimensions.width, template.dimensions.height
    sizes = STANDARD_SIZES[spec.type]
    height = spec.height if spec.height is not None else sizes.heights[0]
    if spec.type is CabinetType.TALL:
        height -= sizes.toe_kick_height
    return spec.type, spec.width, height


def check_catalog_references(
    config: ProjectConfiguration,
    catalog: TemplateCatalog | None = None,
    library: DrillPatternLibrary | None = None,
) -> ValidationResult:
    """Check templates, standard sizes, pattern ids and cabinet id uniqueness."""
    catalog = catalog or TemplateCatalog()
    library = library or DrillPatternLibrary()
    result = ValidationResult()
    seen_ids: dict[str, int] = {}

    for index, spec in enumerate(config.cabinets):
        path = f"cabinets[{index}]"

        if spec.id is not None:
            if spec.id in seen_ids:
                result.add_error(
                    f"{path}.id",
                    f"Duplicate cabinet id (also used by cabinets[{seen_ids[spec.id]}])",
                    spec.id,
                )
            else:
                seen_ids[spec.id] = index

        if spec.template is not None:
            if spec.template not in catalog:
                result.add_error(f"{path}.template", "Unknown template", spec.template)
        else:
            sizes = STANDARD_SIZES[spec.type]
            if spec.width not in sizes.widths:
                result.add_error(
                    f"{path}.width",
                    f"Not a standard {spec.type.value} cabinet width",
                    spec.width,
                )
            if spec.height is None and spec.type is not CabinetType.BASE:
                result.add_error(
                    f"{path}.height",
                    f"Height is required for {spec.type.value} cabinets",
                )
            elif spec.height is not None and spec.height not in sizes.heights:
                result.add_error(
                    f"{path}.height",
                    f"Not a standard {spec.type.value} cabinet height",
                    spec.height,
                )

        for panel, pattern_ids in spec.drill_patterns.items():
            for pattern_id in pattern_ids:
                if pattern_id not in library:
                    result.add_error(
                        f"{path}.drill_patterns.{panel.value}",
                        "Unknown drill pattern",
                        pattern_id,
                    )

    return result


def check_cabinetmaking_advisories(
    config: ProjectConfiguration, catalog: TemplateCatalog | None = None
) -> ValidationResult:
    """Check door widths and shelf spacing.

    Cabinets whose size cannot be resolved (unknown template) are skipped;
    check_catalog_references reports those.
    """
    catalog = catalog or TemplateCatalog()
    result = ValidationResult()

    for index, spec in enumerate(config.cabinets):
        path = f"cabinets[{index}]"
        resolved = _resolved_size(spec, catalog)
        if resolved is None:
            continue
        _, width, box_height = resolved

        if spec.door_count == 1 and width > MAX_SINGLE_DOOR_WIDTH:
            result.add_warning(
                f"{path}.door_count",
                f'Single door is wider than {MAX_SINGLE_DOOR_WIDTH:g}"',
                "Use two doors for cabinets this wide",
            )

        if spec.shelf_count and box_height / (spec.shelf_count + 1) < MIN_SHELF_SPACING:
            result.add_warning(
                f"{path}.shelf_count",
                f'Shelves would be less than {MIN_SHELF_SPACING:g}" apart',
                "Reduce the shelf count",
            )

    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Perform full semantic validation of a parsed project."""
    result = check_catalog_references(config)
    result.merge(check_cabinetmaking_advisories(config))
    return result
