"""Adapter to convert ProjectConfiguration into command DTOs.

The command layer works on CabinetRequest objects; this module maps each
configured cabinet onto one. The sheet and pricing sections map onto
the layout's sheet stock and the cost estimator's prices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kitchen_cabinets.application.config.schema import (
    EXPORT_FORMATS,
    CabinetSpecConfig,
    ProjectConfiguration,
)
from kitchen_cabinets.application.dtos import CabinetRequest
from kitchen_cabinets.domain.value_objects import LengthUnit

if TYPE_CHECKING:
    from kitchen_cabinets.infrastructure.costing import PricingConfig
    from kitchen_cabinets.infrastructure.nesting import SheetSize


def cabinet_config_to_request(
    spec: CabinetSpecConfig, unit: LengthUnit = LengthUnit.INCH
) -> CabinetRequest:
    """Convert one configured cabinet to a CabinetRequest."""
    return CabinetRequest(
        cabinet_type=spec.type.value if spec.type is not None else None,
        width=spec.width,
        height=spec.height,
        depth=spec.depth,
        style=spec.style.value if spec.style is not None else None,
        door_style=spec.door_style.value,
        material=spec.material.value,
        door_count=spec.door_count,
        shelf_count=spec.shelf_count,
        include_back=spec.include_back,
        template=spec.template,
        cabinet_id=spec.id,
        unit=unit.value,
        drill_patterns={
            panel.value: list(ids) for panel, ids in spec.drill_patterns.items()
        },
    )


def config_to_requests(config: ProjectConfiguration) -> list[CabinetRequest]:
    """Convert every configured cabinet to a CabinetRequest, in file order."""
    return [cabinet_config_to_request(spec, config.unit) for spec in config.cabinets]


def config_to_sheet(config: ProjectConfiguration) -> "SheetSize":
    """Convert the sheet section to the layout's SheetSize (millimeters)."""
    # Lazy import to keep the application layer importable without exporters
    from kitchen_cabinets.infrastructure.nesting import SheetSize

    return SheetSize(
        width=config.sheet.width,
        height=config.sheet.height,
        kerf=config.sheet.kerf,
        unit=LengthUnit.MILLIMETER,
    )


def config_to_pricing(config: ProjectConfiguration) -> "PricingConfig":
    """Convert the pricing section to the cost estimator's PricingConfig."""
    from kitchen_cabinets.infrastructure.costing import PricingConfig

    return PricingConfig(**config.pricing.model_dump())


def config_to_formats(config: ProjectConfiguration) -> list[str]:
    """Resolve the configured output formats, expanding "all"."""
    if "all" in config.output.formats:
        return sorted(EXPORT_FORMATS)
    return list(dict.fromkeys(config.output.formats))
