"""Project file loader with error reporting.

Loads JSON project files and turns file system, JSON syntax and schema
problems into a single ConfigError type carrying the error category and
per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from kitchen_cabinets.application.config.schema import ProjectConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the project file (if applicable)
        details: Additional error details. A json_parse error has one entry
            with line, column and message; a validation error has one entry
            per failing field with path, message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_validation(
        cls, error: PydanticValidationError, path: Path | None = None
    ) -> "ConfigError":
        """Build a validation ConfigError listing every failing field."""
        details = [
            {
                "path": field_path(issue["loc"]),
                "message": issue["msg"],
                "value": issue.get("input"),
                "error_type": issue["type"],
            }
            for issue in error.errors()
        ]
        summary = "\n".join(
            ["Configuration validation failed:"] + [_issue_line(d) for d in details]
        )
        return cls(summary, error_type="validation", path=path, details=details)


def field_path(loc: tuple[str | int, ...]) -> str:
    """Render a validation location as a dotted path with list indexes.

    >>> field_path(("cabinets", 0, "width"))
    'cabinets[0].width'
    """
    rendered = "".join(
        f"[{part}]" if isinstance(part, int) else f".{part}" for part in loc
    )
    return rendered.removeprefix(".")


def _issue_line(detail: dict[str, Any]) -> str:
    line = f"  - {detail['path']}: {detail['message']}"
    value = detail["value"]
    if isinstance(value, (str, int, float, bool)):
        line += f" (got: {value!r})"
    return line


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e


def _validate(data: Any, path: Path | None = None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation(e, path) from e


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project configuration from a JSON file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated ProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which.
    """
    content = _read_text(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Load and validate a project configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
