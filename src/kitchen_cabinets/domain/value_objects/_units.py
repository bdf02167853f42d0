"""Length units, drafting scales and unit conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..errors import NotFoundError

MM_PER_INCH = 25.4
INCHES_PER_FOOT = 12


class LengthUnit(str, Enum):
    """Unit a set of dimensions is declared in."""

    INCH = "in"
    MILLIMETER = "mm"

    @property
    def suffix(self) -> str:
        """Suffix used when printing a value in this unit."""
        return self.value

    def to_mm(self, value: float) -> float:
        """Convert a value in this unit to millimeters."""
        if self is LengthUnit.INCH:
            return value * MM_PER_INCH
        return value

    def from_mm(self, value_mm: float) -> float:
        """Convert a value in millimeters to this unit."""
        if self is LengthUnit.INCH:
            return value_mm / MM_PER_INCH
        return value_mm

    def convert(self, value: float, target: LengthUnit) -> float:
        """Convert a value in this unit to the target unit."""
        if target is self:
            return value
        return target.from_mm(self.to_mm(value))


@dataclass(frozen=True)
class Scale:
    """A drafting scale mapping real inches to screen pixels.

    Attributes:
        option: Scale name as drawn on plans, e.g. '1/2"=12"'.
        ratio: Real inches per drawn inch.
        label: Display label, e.g. '1/2" = 1''.
        pixels_per_inch: Pixels per real inch; must be positive.
    """

    option: str
    ratio: float
    label: str
    pixels_per_inch: float

    def __post_init__(self) -> None:
        if self.pixels_per_inch <= 0:
            raise ValueError("pixels_per_inch must be positive")
        if self.ratio <= 0:
            raise ValueError("Scale ratio must be positive")


SCALE_OPTIONS: Mapping[str, Scale] = MappingProxyType(
    {
        s.option: s
        for s in (
            Scale('1/4"=12"', 48, "1/4\" = 1'", 2),
            Scale('1/2"=12"', 24, "1/2\" = 1'", 4),
            Scale('3/4"=12"', 16, "3/4\" = 1'", 6),
            Scale('1"=12"', 12, "1\" = 1'", 8),
            Scale('1-1/4"=12"', 9.6, "1-1/4\" = 1'", 10),
            Scale('1-1/2"=12"', 8, "1-1/2\" = 1'", 12),
            Scale('1-3/4"=12"', 6.857, "1-3/4\" = 1'", 14),
            Scale('2"=12"', 6, "2\" = 1'", 16),
        )
    }
)

DEFAULT_SCALE = '1/2"=12"'


def get_scale(option: str = DEFAULT_SCALE) -> Scale:
    """Look up a drafting scale by its option name.

    Raises:
        NotFoundError: If the option is not a known scale.
    """
    try:
        return SCALE_OPTIONS[option]
    except KeyError:
        raise NotFoundError("scale", option) from None


def _resolve(scale: Scale | str) -> Scale:
    return scale if isinstance(scale, Scale) else get_scale(scale)


def to_pixels(value_inches: float, scale: Scale | str = DEFAULT_SCALE) -> float:
    """Convert real inches to pixels at the given scale."""
    return value_inches * _resolve(scale).pixels_per_inch


def to_inches(pixels: float, scale: Scale | str = DEFAULT_SCALE) -> float:
    """Convert pixels back to real inches at the given scale."""
    return pixels / _resolve(scale).pixels_per_inch


def feet_to_inches(feet: float) -> float:
    return feet * INCHES_PER_FOOT


def inches_to_feet(inches: float) -> float:
    return inches / INCHES_PER_FOOT


def feet_to_pixels(feet: float, scale: Scale | str = DEFAULT_SCALE) -> float:
    return to_pixels(feet_to_inches(feet), scale)


def pixels_to_feet(pixels: float, scale: Scale | str = DEFAULT_SCALE) -> float:
    return inches_to_feet(to_inches(pixels, scale))


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def format_dimension(inches: float, show_feet: bool = True) -> str:
    """Format inches for display, using feet and inches at 12" and above.

    Examples:
        >>> format_dimension(9)
        '9"'
        >>> format_dimension(48)
        "4'"
        >>> format_dimension(54)
        '4\\'-6"'
    """
    if not show_feet or inches < INCHES_PER_FOOT:
        return f'{inches:g}"'

    feet, remaining = divmod(inches, INCHES_PER_FOOT)
    if remaining == 0:
        return f"{int(feet)}'"
    return f"{int(feet)}'-{remaining:g}\""
