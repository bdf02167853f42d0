"""Parametric cabinet generation from standard sizes and templates."""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from ..catalog import STANDARD_SIZES, STANDARD_THICKNESS, StandardSizes
from ..entities import Cabinet, CabinetTemplate
from ..errors import DegenerateConfigurationError, InvalidDimensionError
from ..value_objects import (
    CabinetStyle,
    CabinetType,
    Dimensions,
    DoorStyle,
    LengthUnit,
    MaterialType,
)

__all__ = [
    "CabinetGenerator",
    "apply_patch",
    "available_heights",
    "available_widths",
    "checked_dimensions",
    "generate",
]

TWO_DOOR_MIN_WIDTH = 21.0

_DIMENSION_FIELDS = frozenset({"width", "height", "depth", "thickness"})
_CABINET_FIELDS = frozenset(f.name for f in dataclasses.fields(Cabinet))


def available_widths(cabinet_type: CabinetType | str) -> tuple[float, ...]:
    """Standard widths for a cabinet type, in inches."""
    return STANDARD_SIZES[CabinetType(cabinet_type)].widths


def available_heights(cabinet_type: CabinetType | str) -> tuple[float, ...]:
    """Standard heights for a cabinet type, in inches.

    Base cabinets have a single box height; wall heights are box heights;
    tall heights are overall heights including the toe kick.
    """
    return STANDARD_SIZES[CabinetType(cabinet_type)].heights


def _fmt(value: float) -> str:
    return f"{value:g}"


def checked_dimensions(
    width: float,
    height: float,
    depth: float,
    thickness: float,
    unit: LengthUnit = LengthUnit.INCH,
) -> Dimensions:
    """Build Dimensions, raising domain errors for unusable sizes.

    Raises:
        InvalidDimensionError: If a size is zero or negative.
        DegenerateConfigurationError: If the material is too thick for the box.
    """
    for name, value in (
        ("width", width),
        ("height", height),
        ("depth", depth),
        ("thickness", thickness),
    ):
        if value <= 0:
            raise InvalidDimensionError(name, value, reason=f"{value:g} must be positive")

    smallest = min(width, height, depth)
    if thickness >= smallest / 2:
        raise DegenerateConfigurationError(
            "Cabinet box",
            width,
            depth,
            reason=(
                f"Material thickness {thickness:g} must be less than half "
                f"the smallest box dimension ({smallest:g})"
            ),
        )
    return Dimensions(float(width), float(height), float(depth), float(thickness), unit)


class CabinetGenerator:
    """Builds Cabinet records from standard sizes or catalog templates.

    Generation is referentially transparent: the same arguments always give
    an equal Cabinet. Ids are injected by the caller; when omitted a
    deterministic id is derived from the type and size.
    """

    def generate(
        self,
        cabinet_type: CabinetType | str,
        width: float,
        height: float | None = None,
        depth: float | None = None,
        *,
        style: CabinetStyle | str = CabinetStyle.EURO,
        door_style: DoorStyle | str = DoorStyle.SLAB,
        material: MaterialType | str = MaterialType.PLYWOOD,
        door_count: int | None = None,
        shelf_count: int | None = None,
        include_back: bool = True,
        cabinet_id: str | None = None,
    ) -> Cabinet:
        """Generate a cabinet of a standard size.

        Args:
            cabinet_type: Base, wall or tall.
            width: Width in inches; must be a standard width for the type.
            height: Height in inches. Required for wall and tall cabinets
                (tall heights include the toe kick); base cabinets only
                accept their single standard box height.
            depth: Box depth in inches; defaults to the type's standard depth.
            style: Construction style.
            door_style: Door profile.
            material: Sheet material.
            door_count: Doors; defaults to two above 21" wide, otherwise one.
            shelf_count: Shelves; defaults per type from the box height.
            include_back: Whether to cut a back panel.
            cabinet_id: Id for the cabinet; derived from the size if omitted.

        Returns:
            The generated Cabinet.

        Raises:
            InvalidDimensionError: If width or height is not a standard size,
                a wall or tall height is missing, or depth is not positive.
            DegenerateConfigurationError: If the depth is too shallow for the
                material thickness.
        """
        cabinet_type = CabinetType(cabinet_type)
        sizes = STANDARD_SIZES[cabinet_type]

        if width not in sizes.widths:
            raise InvalidDimensionError("width", width, sizes.widths)

        if height is None:
            if cabinet_type is not CabinetType.BASE:
                raise InvalidDimensionError(
                    "height",
                    None,
                    sizes.heights,
                    reason=f"is required for {cabinet_type.value} cabinets",
                )
            height = sizes.heights[0]
        elif height not in sizes.heights:
            raise InvalidDimensionError("height", height, sizes.heights)

        box_height = height - (
            sizes.toe_kick_height if cabinet_type is CabinetType.TALL else 0.0
        )
        dimensions = checked_dimensions(
            width,
            box_height,
            depth if depth is not None else sizes.depth,
            STANDARD_THICKNESS,
        )

        if door_count is None:
            door_count = 2 if width > TWO_DOOR_MIN_WIDTH else 1
        if shelf_count is None:
            shelf_count = self._default_shelf_count(sizes, box_height)
        if cabinet_id is None:
            cabinet_id = self._default_id(cabinet_type, width, height)

        return Cabinet(
            id=cabinet_id,
            cabinet_type=cabinet_type,
            dimensions=dimensions,
            style=CabinetStyle(style),
            door_style=DoorStyle(door_style),
            material=MaterialType(material),
            door_count=door_count,
            shelf_count=shelf_count,
            include_back=include_back,
            door_thickness=sizes.door_thickness,
        )

    def from_template(
        self,
        template: CabinetTemplate,
        *,
        door_style: DoorStyle | str = DoorStyle.SLAB,
        material: MaterialType | str = MaterialType.PLYWOOD,
        include_back: bool = True,
        cabinet_id: str | None = None,
    ) -> Cabinet:
        """Build a cabinet from a catalog template.

        The template's dimensions are used as-is; they are already a
        standard configuration, so no size table check is made.
        """
        sizes = STANDARD_SIZES[template.type]
        return Cabinet(
            id=cabinet_id or template.id,
            cabinet_type=template.type,
            dimensions=template.dimensions,
            style=template.style,
            door_style=DoorStyle(door_style),
            material=MaterialType(material),
            door_count=template.door_count,
            shelf_count=template.shelf_count,
            include_back=include_back,
            door_thickness=LengthUnit.INCH.convert(
                sizes.door_thickness, template.dimensions.unit
            ),
            template_id=template.id,
        )

    def _default_shelf_count(self, sizes: StandardSizes, box_height: float) -> int:
        if sizes.shelf_spacing is None:
            return 1
        return int(box_height // sizes.shelf_spacing)

    def _default_id(
        self, cabinet_type: CabinetType, width: float, height: float
    ) -> str:
        if cabinet_type is CabinetType.BASE:
            return f"base-cabinet-{_fmt(width)}"
        return f"{cabinet_type.value}-cabinet-{_fmt(width)}x{_fmt(height)}"


def apply_patch(cabinet: Cabinet, patch: Mapping[str, Any]) -> Cabinet:
    """Merge a partial update into a cabinet, returning a new cabinet.

    Keys may be any Cabinet field, or one of width, height, depth and
    thickness to patch the dimensions. The input cabinet is not
    modified.

    Raises:
        ValueError: If the patch names an unknown field or produces an
            invalid cabinet.
        InvalidDimensionError: If a patched size is not positive.
        DegenerateConfigurationError: If the patched box is too small for
            its material thickness.
    """
    unknown = set(patch) - _CABINET_FIELDS - _DIMENSION_FIELDS
    if unknown:
        raise ValueError(f"Unknown cabinet fields: {', '.join(sorted(unknown))}")

    changes = {k: v for k, v in patch.items() if k in _CABINET_FIELDS}
    dimension_changes = {k: v for k, v in patch.items() if k in _DIMENSION_FIELDS}
    if dimension_changes:
        base = changes.get("dimensions", cabinet.dimensions)
        fields = {name: getattr(base, name) for name in _DIMENSION_FIELDS}
        changes["dimensions"] = checked_dimensions(
            **(fields | dimension_changes), unit=base.unit
        )

    for key, enum_type in (
        ("cabinet_type", CabinetType),
        ("style", CabinetStyle),
        ("door_style", DoorStyle),
        ("material", MaterialType),
    ):
        if key in changes:
            changes[key] = enum_type(changes[key])

    return dataclasses.replace(cabinet, **changes)


_generator = CabinetGenerator()

generate = _generator.generate
