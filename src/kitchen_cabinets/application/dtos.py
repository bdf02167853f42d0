"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchen_cabinets.domain import (
    Cabinet,
    CabinetStyle,
    CabinetType,
    CutListItem,
    DoorStyle,
    DrillPattern,
    LengthUnit,
    MaterialEstimate,
    MaterialType,
    PanelType,
)
from kitchen_cabinets.domain.services import SheetStock


def _choices(enum_type: type) -> list[str]:
    return [member.value for member in enum_type]


@dataclass
class CabinetRequest:
    """Input DTO describing one cabinet to generate.

    Either ``template`` names a catalog template, or ``cabinet_type`` and
    ``width`` (plus ``height`` for wall and tall cabinets) pick a standard
    size. Sizes are in inches; ``unit`` selects the unit of the output.
    Leaving ``style`` unset keeps a template's style, or euro otherwise.
    ``drill_patterns`` maps a panel type to pattern ids to associate with
    the panels of that type.
    """

    cabinet_type: str | None = None
    width: float | None = None
    height: float | None = None
    depth: float | None = None
    style: str | None = None
    door_style: str = "slab"
    material: str = "plywood"
    door_count: int | None = None
    shelf_count: int | None = None
    include_back: bool = True
    template: str | None = None
    cabinet_id: str | None = None
    unit: str = "in"
    drill_patterns: dict[str, list[str]] = field(default_factory=dict)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.template is None:
            if self.cabinet_type is None:
                errors.append("Either a template or a cabinet type is required")
            elif self.cabinet_type not in _choices(CabinetType):
                errors.append(
                    f"Cabinet type must be one of: {', '.join(_choices(CabinetType))}"
                )
            if self.width is None:
                errors.append("Width is required when no template is given")
            elif self.width <= 0:
                errors.append("Width must be positive")
        if self.height is not None and self.height <= 0:
            errors.append("Height must be positive")
        if self.depth is not None and self.depth <= 0:
            errors.append("Depth must be positive")
        if self.door_count is not None and self.door_count < 0:
            errors.append("Door count cannot be negative")
        if self.shelf_count is not None and self.shelf_count < 0:
            errors.append("Shelf count cannot be negative")

        for name, value, enum_type in (
            ("Style", self.style, CabinetStyle),
            ("Door style", self.door_style, DoorStyle),
            ("Material type", self.material, MaterialType),
            ("Unit", self.unit, LengthUnit),
        ):
            if value is not None and value not in _choices(enum_type):
                errors.append(f"{name} must be one of: {', '.join(_choices(enum_type))}")

        for panel in self.drill_patterns:
            if panel not in _choices(PanelType):
                errors.append(
                    f"Unknown panel type for drill patterns: {panel}. "
                    f"Expected one of: {', '.join(_choices(PanelType))}"
                )
        return errors


@dataclass
class GenerationOutput:
    """Output DTO containing a generated cabinet and its fabrication data.

    Attributes:
        request: The request this output answers.
        cabinet: Generated cabinet, or None if generation failed.
        cut_list: Cut list items, largest first.
        material_estimates: Material estimates grouped by sheet stock.
        total_estimate: Total material estimate across all stock.
        drill_patterns: Patterns attached to the cut list, by id.
        errors: List of error messages if generation failed.
    """

    request: CabinetRequest
    cabinet: Cabinet | None
    cut_list: list[CutListItem] = field(default_factory=list)
    material_estimates: dict[SheetStock, MaterialEstimate] = field(default_factory=dict)
    total_estimate: MaterialEstimate | None = None
    drill_patterns: dict[str, DrillPattern] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the cabinet was generated successfully."""
        return len(self.errors) == 0
