"""Standard cabinet size tables and the read-only template catalog.

All sizes are in inches. Tables are built once at import and exposed as
read-only mappings; there is no API to add or change entries at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .entities import CabinetTemplate
from .errors import NotFoundError
from .value_objects import CabinetStyle, CabinetType, Dimensions

__all__ = [
    "STANDARD_SIZES",
    "TEMPLATES",
    "StandardSizes",
    "TemplateCatalog",
    "list_templates",
    "get_template",
    "require_template",
]

STANDARD_THICKNESS = 0.75


@dataclass(frozen=True)
class StandardSizes:
    """Enumerated sizes and fixed constants for one cabinet family.

    Attributes:
        widths: Allowed widths.
        heights: Allowed box heights.
        depth: Box depth.
        door_thickness: Door panel thickness.
        toe_kick_height: Toe kick height below the box (0 for wall cabinets).
        shelf_spacing: Box height per adjustable shelf when none is requested.
        toe_kick_depth: Depth of the toe kick platform.
    """

    widths: tuple[float, ...]
    heights: tuple[float, ...]
    depth: float
    door_thickness: float
    toe_kick_height: float = 0.0
    shelf_spacing: float | None = None
    toe_kick_depth: float = 0.0


_THREE_INCH_WIDTHS = tuple(float(w) for w in range(9, 37, 3))

STANDARD_SIZES: Mapping[CabinetType, StandardSizes] = MappingProxyType(
    {
        CabinetType.BASE: StandardSizes(
            widths=_THREE_INCH_WIDTHS,
            heights=(30.0,),
            depth=24.0,
            door_thickness=0.75,
            toe_kick_height=4.5,
            toe_kick_depth=21.0,
        ),
        CabinetType.WALL: StandardSizes(
            widths=_THREE_INCH_WIDTHS,
            heights=tuple(float(h) for h in range(12, 43, 3)),
            depth=12.0,
            door_thickness=0.875,
            shelf_spacing=12.0,
        ),
        CabinetType.TALL: StandardSizes(
            widths=tuple(float(w) for w in range(12, 37, 3)),
            heights=(79.5, 85.5, 91.5),
            depth=24.0,
            door_thickness=0.875,
            toe_kick_height=4.5,
            shelf_spacing=15.0,
            toe_kick_depth=21.0,
        ),
    }
)


def _template(
    template_id: str,
    name: str,
    cabinet_type: CabinetType,
    width: float,
    height: float,
    depth: float,
    door_count: int,
    shelf_count: int,
) -> CabinetTemplate:
    return CabinetTemplate(
        id=template_id,
        name=name,
        type=cabinet_type,
        style=CabinetStyle.EURO,
        dimensions=Dimensions(width, height, depth, STANDARD_THICKNESS),
        door_count=door_count,
        shelf_count=shelf_count,
    )


def _doors_for(width: float) -> int:
    return 2 if width > 21 else 1


def _build_templates() -> dict[str, CabinetTemplate]:
    templates = [
        _template("base-36x24x12", 'Base Cabinet 36" x 24" x 12"', CabinetType.BASE, 36, 24, 12, 2, 1),
        _template("wall-30x12x12", 'Wall Cabinet 30" x 12" x 12"', CabinetType.WALL, 30, 12, 12, 1, 2),
        _template("tall-24x84x12", 'Tall Cabinet 24" x 84" x 12"', CabinetType.TALL, 24, 84, 12, 2, 4),
    ]

    base = STANDARD_SIZES[CabinetType.BASE]
    for width in base.widths:
        templates.append(
            _template(
                f"B{int(width):02d}",
                f'{width:g}" Wide Base Cabinet',
                CabinetType.BASE,
                width,
                base.heights[0],
                base.depth,
                _doors_for(width),
                1,
            )
        )

    wall = STANDARD_SIZES[CabinetType.WALL]
    for template_id, width, height in (
        ("W1230", 12, 30),
        ("W1836", 18, 36),
        ("W2430", 24, 30),
        ("W3030", 30, 30),
        ("W3642", 36, 42),
        ("W0912", 9, 12),
    ):
        templates.append(
            _template(
                template_id,
                f'{width}" Wide × {height}" Tall Wall Cabinet',
                CabinetType.WALL,
                width,
                height,
                wall.depth,
                _doors_for(width),
                height // 12,
            )
        )

    tall = STANDARD_SIZES[CabinetType.TALL]
    for template_id, width, height, kind in (
        ("T1879", 18, 79.5, "Pantry"),
        ("T2479", 24, 79.5, "Pantry"),
        ("T2485", 24, 85.5, "Pantry"),
        ("T3085", 30, 85.5, "Utility"),
        ("T3691", 36, 91.5, "Pantry"),
        ("T1285", 12, 85.5, "Narrow"),
    ):
        templates.append(
            _template(
                template_id,
                f'{width}" Wide × {height:g}" Tall {kind} Cabinet',
                CabinetType.TALL,
                width,
                height - tall.toe_kick_height,
                tall.depth,
                _doors_for(width),
                int((height - tall.toe_kick_height) // tall.shelf_spacing),
            )
        )

    return {t.id: t for t in templates}


TEMPLATES: Mapping[str, CabinetTemplate] = MappingProxyType(_build_templates())


class TemplateCatalog:
    """Read-only access to the cabinet template table.

    Example:
        catalog = TemplateCatalog()
        for template in catalog.list_templates(CabinetType.WALL):
            print(template.id, template.name)
    """

    def __init__(self, templates: Mapping[str, CabinetTemplate] = TEMPLATES) -> None:
        self._templates = templates

    def list_templates(
        self, cabinet_type: CabinetType | str | None = None
    ) -> list[CabinetTemplate]:
        """List templates, optionally only those of one cabinet type."""
        if cabinet_type is None:
            return list(self._templates.values())
        try:
            wanted = CabinetType(cabinet_type)
        except ValueError:
            return []
        return [t for t in self._templates.values() if t.type is wanted]

    def get_template(self, template_id: str) -> CabinetTemplate | None:
        """Look up a template, returning None when the id is absent."""
        if not isinstance(template_id, str):
            return None
        return self._templates.get(template_id)

    def require_template(self, template_id: str) -> CabinetTemplate:
        """Look up a template.

        Raises:
            NotFoundError: If the id is not in the catalog.
        """
        template = self.get_template(template_id)
        if template is None:
            raise NotFoundError("template", str(template_id))
        return template

    def __contains__(self, template_id: object) -> bool:
        return isinstance(template_id, str) and template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)


_catalog = TemplateCatalog()

list_templates = _catalog.list_templates
get_template = _catalog.get_template
require_template = _catalog.require_template
