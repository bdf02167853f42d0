"""Patterns commands for browsing drill patterns and hole layouts."""

from typing import Annotated

import typer

from kitchen_cabinets.domain import DrillPatternLibrary, PatternCategory
from kitchen_cabinets.infrastructure import DrillPatternFormatter

patterns_app = typer.Typer(
    name="patterns",
    help="Browse drill patterns and their hole layouts.",
)


def _require(library: DrillPatternLibrary, pattern_id: str):
    pattern = library.get_pattern(pattern_id)
    if pattern is None:
        typer.echo(f"Error: Drill pattern not found: {pattern_id}", err=True)
        typer.echo("Use 'kitchen-cabinets patterns list' to see all patterns.", err=True)
        raise typer.Exit(code=1)
    return pattern


@patterns_app.command(name="list")
def list_patterns(
    category: Annotated[
        PatternCategory | None,
        typer.Option("--category", "-c", help="Only list patterns in this category"),
    ] = None,
    tags: Annotated[
        list[str] | None,
        typer.Option("--tag", help="Only list patterns with this tag (repeatable)"),
    ] = None,
) -> None:
    """List drill patterns.

    Examples:
        kitchen-cabinets patterns list --category hinge-plates
        kitchen-cabinets patterns list --tag drawer
    """
    library = DrillPatternLibrary()
    if category is not None:
        patterns = library.list_by_category(category)
    else:
        patterns = library.list_patterns()
    if tags:
        tagged = {p.id for p in library.search_by_tags(tags)}
        patterns = [p for p in patterns if p.id in tagged]
    typer.echo(DrillPatternFormatter().format_list(patterns))


@patterns_app.command(name="categories")
def list_categories() -> None:
    """List drill pattern categories."""
    for info in DrillPatternLibrary().categories():
        typer.echo(f"  {info.category.value:<18} {info.name} - {info.description}")


@patterns_app.command(name="show")
def show_pattern(
    pattern_id: Annotated[str, typer.Argument(help="Pattern id, e.g. shelf-pins-32mm")],
) -> None:
    """Show a drill pattern's settings."""
    pattern = _require(DrillPatternLibrary(), pattern_id)
    typer.echo(DrillPatternFormatter().format_detail(pattern))


@patterns_app.command(name="holes")
def show_holes(
    pattern_id: Annotated[str, typer.Argument(help="Pattern id, e.g. hinge-european-35mm")],
) -> None:
    """Print the hole positions of a drill pattern, in millimeters."""
    library = DrillPatternLibrary()
    pattern = _require(library, pattern_id)
    typer.echo(DrillPatternFormatter().format_holes(library.generate_holes(pattern)))
