"""Pydantic models for kitchen cabinet project files.

A project file lists the cabinets to generate, the sheet stock used for
layouts and the output formats to write. Cabinet sizes are in inches; the
sheet is in millimeters, as panel saws and stock lists quote it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kitchen_cabinets.domain.value_objects import (
    CabinetStyle,
    CabinetType,
    DoorStyle,
    LengthUnit,
    MaterialType,
    PanelType,
)

# Supported schema versions for project files
# Version 1.0: Cabinets, output formats
# Version 1.1: Sheet stock and per-panel drill patterns
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

EXPORT_FORMATS: frozenset[str] = frozenset({"csv", "json", "dxf"})


class CabinetSpecConfig(BaseModel):
    """Configuration for one cabinet.

    Either ``template`` or both ``type`` and ``width`` must be given.
    Values set alongside a template override the template's.

    Attributes:
        id: Cabinet id; derived from the size or template when omitted.
        template: Catalog template id (e.g. "W3030").
        type: Cabinet family.
        width: Width in inches.
        height: Height in inches (overall height for tall cabinets).
        depth: Box depth in inches.
        style: Construction style; defaults to the template's, else euro.
        door_style: Door profile.
        material: Sheet material.
        door_count: Number of doors; 0 for an open cabinet.
        shelf_count: Number of adjustable shelves.
        include_back: Whether a back panel is cut.
        drill_patterns: Drill pattern ids keyed by panel type.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    template: str | None = None
    type: CabinetType | None = None
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    depth: float | None = Field(default=None, gt=0)
    style: CabinetStyle | None = None
    door_style: DoorStyle = DoorStyle.SLAB
    material: MaterialType = MaterialType.PLYWOOD
    door_count: int | None = Field(default=None, ge=0, le=4)
    shelf_count: int | None = Field(default=None, ge=0, le=12)
    include_back: bool = True
    drill_patterns: dict[PanelType, list[str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_template_or_size(self) -> "CabinetSpecConfig":
        """Require a template, or a type and width."""
        if self.template is None and (self.type is None or self.width is None):
            raise ValueError(
                "Specify either 'template' or both 'type' and 'width'"
            )
        return self


class SheetConfig(BaseModel):
    """Sheet stock used for cutting layouts, in millimeters."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=2440.0, gt=0)
    height: float = Field(default=1220.0, gt=0)
    kerf: float = Field(default=3.0, ge=0, le=10)


class PriceListConfig(BaseModel):
    """Unit prices for cost estimates."""

    model_config = ConfigDict(extra="forbid")

    price_per_square_meter: float = Field(default=25.50, ge=0)
    hinge_price: float = Field(default=12.99, ge=0)
    handle_price: float = Field(default=8.50, ge=0)


class OutputConfig(BaseModel):
    """Configuration for output formats and file paths.

    Attributes:
        formats: Output formats to generate ("all" for every format).
        directory: Directory for output files.
        project_name: Base name for output files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["csv"])
    directory: str = "output"
    project_name: str = Field(default="cabinets", min_length=1)

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate format names in the formats list."""
        invalid = set(v) - EXPORT_FORMATS - {"all"}
        if invalid:
            raise ValueError(
                f"Invalid formats: {sorted(invalid)}. "
                f"Valid formats: {sorted(EXPORT_FORMATS)}"
            )
        return v


class ProjectConfiguration(BaseModel):
    """Root configuration model for a kitchen cabinet project.

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     cabinets=[CabinetSpecConfig(type="base", width=24)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    unit: LengthUnit = LengthUnit.INCH
    cabinets: list[CabinetSpecConfig] = Field(..., min_length=1)
    sheet: SheetConfig = Field(default_factory=SheetConfig)
    pricing: PriceListConfig = Field(default_factory=PriceListConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
