"""CLI command implementations for the kitchen-cabinets application.

This package contains subcommands for the kitchen-cabinets CLI, including:
- validate: Validate a project file
- templates: Browse the cabinet template catalog
- patterns: Browse drill patterns and their hole layouts
"""

from kitchen_cabinets.cli.commands.patterns import patterns_app
from kitchen_cabinets.cli.commands.templates import templates_app
from kitchen_cabinets.cli.commands.validate import validate_command

__all__ = ["patterns_app", "templates_app", "validate_command"]
