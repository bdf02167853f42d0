"""Validate command for checking project files.

Checks a JSON project file for syntax and schema errors, references to
unknown templates, sizes or drill patterns, and cabinetmaking advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from kitchen_cabinets.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a kitchen project file.

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors (cannot be generated)
        2 - Project is valid but has warnings

    Example:
        kitchen-cabinets validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Print a project loading error to stderr."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(line, err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _load_error_lines(error: ConfigError) -> list[str]:
    match error.error_type:
        case "file_not_found":
            return [f"  File not found: {error.path}"]
        case "json_parse":
            return ["  Invalid JSON syntax"] + [
                f"    Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
                f"{d.get('message', 'Unknown error')}"
                for d in error.details
            ]
        case "validation":
            lines = []
            for d in error.details:
                lines.append(f"  {d.get('path', 'unknown')}: {d.get('message', 'Unknown error')}")
                if d.get("value") is not None:
                    lines.append(f"    Value: {d['value']!r}")
            return lines
    return [f"  {error.message}"]


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Project is valid.")
