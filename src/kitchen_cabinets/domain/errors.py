"""Domain exceptions for cabinet generation."""

from __future__ import annotations

__all__ = [
    "CabinetError",
    "DegenerateConfigurationError",
    "InvalidDimensionError",
    "NotFoundError",
]


class CabinetError(Exception):
    """Base class for all cabinet generation errors."""


class NotFoundError(CabinetError, LookupError):
    """Raised when a template, pattern or scale id is not in its catalog.

    Attributes:
        kind: What was looked up (e.g. "template", "drill pattern").
        key: The id that was not found.
    """

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} not found: {key}")


class InvalidDimensionError(CabinetError, ValueError):
    """Raised when a requested size is missing, non-positive or not standard.

    Attributes:
        dimension: Name of the offending dimension ("width", "height", ...).
        value: The requested value, or None when it was required but missing.
        allowed: The standard values for the cabinet type, if any.
    """

    def __init__(
        self,
        dimension: str,
        value: float | None,
        allowed: tuple[float, ...] = (),
        reason: str | None = None,
    ) -> None:
        self.dimension = dimension
        self.value = value
        self.allowed = allowed
        if reason is None:
            allowed_text = ", ".join(f"{v:g}" for v in allowed)
            reason = f"{value:g} is not a standard size. Allowed: {allowed_text}"
        super().__init__(f"{dimension.capitalize()} {reason}")


class DegenerateConfigurationError(CabinetError, ValueError):
    """Raised when a cabinet is too small for its configuration.

    Either a shelf or door count would leave a panel with no area, or the
    box is too shallow for its material thickness.
    """

    def __init__(
        self, panel: str, width: float, height: float, reason: str | None = None
    ) -> None:
        self.panel = panel
        self.width = width
        self.height = height
        super().__init__(
            reason
            or f"{panel} would be {width:g} x {height:g}; "
            "cabinet is too small for the requested configuration"
        )
