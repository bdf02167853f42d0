"""Templates commands for browsing the cabinet template catalog."""

from typing import Annotated

import typer

from kitchen_cabinets.domain import CabinetType, TemplateCatalog
from kitchen_cabinets.domain.value_objects import format_dimension
from kitchen_cabinets.infrastructure import TemplateFormatter

templates_app = typer.Typer(
    name="templates",
    help="Browse the cabinet template catalog.",
)


@templates_app.command(name="list")
def list_templates(
    cabinet_type: Annotated[
        CabinetType | None,
        typer.Option("--type", "-t", help="Only list templates of this type"),
    ] = None,
) -> None:
    """List catalog templates, optionally filtered by cabinet type.

    Example:
        kitchen-cabinets templates list --type wall
    """
    templates = TemplateCatalog().list_templates(cabinet_type)
    typer.echo(TemplateFormatter().format(templates))
    typer.echo()
    typer.echo(f"{len(templates)} templates")


@templates_app.command(name="show")
def show_template(
    template_id: Annotated[str, typer.Argument(help="Template id, e.g. B24")],
) -> None:
    """Show one template in detail."""
    template = TemplateCatalog().get_template(template_id)
    if template is None:
        typer.echo(f"Error: Template not found: {template_id}", err=True)
        typer.echo("Use 'kitchen-cabinets templates list' to see the catalog.", err=True)
        raise typer.Exit(code=1)

    d = template.dimensions
    typer.echo(template.name)
    typer.echo("=" * 60)
    typer.echo(f"  Id:        {template.id}")
    typer.echo(f"  Type:      {template.type.value}")
    typer.echo(f"  Style:     {template.style.value}")
    typer.echo(
        f"  Size:      {format_dimension(d.width, show_feet=False)} W x "
        f"{format_dimension(d.height, show_feet=False)} H x "
        f"{format_dimension(d.depth, show_feet=False)} D"
    )
    typer.echo(f"  Thickness: {format_dimension(d.thickness)}")
    typer.echo(f"  Doors:     {template.door_count}")
    typer.echo(f"  Shelves:   {template.shelf_count}")
