"""Typer CLI for kitchen cabinet generation."""

import dataclasses
import logging
from pathlib import Path
from typing import Annotated

import typer

from kitchen_cabinets.application import (
    CabinetRequest,
    GenerateCabinetCommand,
    GenerationOutput,
)
from kitchen_cabinets.application.config import (
    ConfigError,
    config_to_formats,
    config_to_pricing,
    config_to_requests,
    config_to_sheet,
    load_config,
)
from kitchen_cabinets.cli.commands import patterns_app, templates_app, validate_command
from kitchen_cabinets.cli.commands.validate import display_load_error
from kitchen_cabinets.domain import (
    CabinetStyle,
    CabinetType,
    DoorStyle,
    LengthUnit,
    MaterialType,
)
from kitchen_cabinets.domain.services import available_heights, available_widths
from kitchen_cabinets.infrastructure import (
    CostEstimator,
    CostFormatter,
    CutListFormatter,
    MaterialReportFormatter,
    PricingConfig,
    RowSheetLayout,
    SheetLayoutFormatter,
    SheetSize,
)
from kitchen_cabinets.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
    JsonProjectExporter,
    cut_list_to_csv,
)

app = typer.Typer(
    name="kitchen-cabinets",
    help="Generate kitchen cabinets, cut lists and drill patterns from standard sizes.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")
app.add_typer(patterns_app, name="patterns")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug messages to stderr")
    ] = False,
) -> None:
    """Generate kitchen cabinets, cut lists and drill patterns from standard sizes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Cabinet options shared by the generation commands
TypeOption = Annotated[
    CabinetType | None, typer.Option("--type", "-t", help="Cabinet type")
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Standard width in inches")
]
HeightOption = Annotated[
    float | None,
    typer.Option("--height", "-h", help="Standard height in inches (wall and tall)"),
]
DepthOption = Annotated[
    float | None, typer.Option("--depth", "-d", help="Box depth in inches")
]
StyleOption = Annotated[
    CabinetStyle | None,
    typer.Option("--style", help="Construction style (default: euro, or the template's)"),
]
DoorStyleOption = Annotated[
    DoorStyle, typer.Option("--door-style", help="Door style")
]
MaterialOption = Annotated[
    MaterialType, typer.Option("--material", "-m", help="Sheet material")
]
DoorsOption = Annotated[
    int | None, typer.Option("--doors", help="Number of doors (default by width)")
]
ShelvesOption = Annotated[
    int | None, typer.Option("--shelves", help="Number of adjustable shelves")
]
BackOption = Annotated[
    bool, typer.Option("--back/--no-back", help="Include a back panel")
]
TemplateOption = Annotated[
    str | None, typer.Option("--template", help="Catalog template id, e.g. B24")
]
UnitOption = Annotated[
    LengthUnit, typer.Option("--unit", "-u", help="Unit of the output")
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="JSON project file with one or more cabinets"),
]


def _request(
    cabinet_type: CabinetType | None,
    width: float | None,
    height: float | None,
    depth: float | None,
    style: CabinetStyle | None,
    door_style: DoorStyle,
    material: MaterialType,
    doors: int | None,
    shelves: int | None,
    back: bool,
    template: str | None,
    unit: LengthUnit,
) -> CabinetRequest:
    return CabinetRequest(
        cabinet_type=cabinet_type.value if cabinet_type is not None else None,
        width=width,
        height=height,
        depth=depth,
        style=style.value if style is not None else None,
        door_style=door_style.value,
        material=material.value,
        door_count=doors,
        shelf_count=shelves,
        include_back=back,
        template=template,
        unit=unit.value,
    )


def _load_project(config_file: Path):
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _generate(requests: list[CabinetRequest]) -> list[GenerationOutput]:
    """Generate every request, exiting with code 1 if any fails."""
    command = GenerateCabinetCommand()
    results = command.execute_batch(requests)

    failed = False
    for request, result in zip(requests, results):
        if not result.is_valid:
            failed = True
            label = request.cabinet_id or request.template or request.cabinet_type
            for error in result.errors:
                typer.echo(f"Error: {label}: {error}" if label else f"Error: {error}", err=True)
    if failed:
        raise typer.Exit(code=1)
    return results


def _outputs(
    config_file: Path | None,
    request: CabinetRequest,
) -> list[GenerationOutput]:
    if config_file is not None:
        return _generate(config_to_requests(_load_project(config_file)))
    return _generate([request])


def _describe(result: GenerationOutput) -> str:
    cabinet = result.cabinet
    d = cabinet.dimensions
    suffix = d.unit.suffix
    lines = [
        f"{cabinet.id} ({cabinet.cabinet_type.value}, {cabinet.style.value})",
        "=" * 60,
        f"  Size:     {d.width:g} x {d.height:g} x {d.depth:g}{suffix} "
        f"({d.thickness:g}{suffix} {cabinet.material.value})",
        f"  Doors:    {cabinet.door_count} {cabinet.door_style.value}",
        f"  Shelves:  {cabinet.shelf_count}",
        f"  Back:     {'yes' if cabinet.include_back else 'no'}",
    ]
    if cabinet.template_id:
        lines.append(f"  Template: {cabinet.template_id}")
    return "\n".join(lines)


@app.command()
def generate(
    cabinet_type: TypeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    style: StyleOption = None,
    door_style: DoorStyleOption = DoorStyle.SLAB,
    material: MaterialOption = MaterialType.PLYWOOD,
    doors: DoorsOption = None,
    shelves: ShelvesOption = None,
    back: BackOption = True,
    template: TemplateOption = None,
    unit: UnitOption = LengthUnit.INCH,
    config_file: ConfigOption = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write output to this file")
    ] = None,
) -> None:
    """Generate cabinets with their cut lists and material estimates.

    Examples:
        kitchen-cabinets generate --type base --width 24
        kitchen-cabinets generate --template W3030 --unit mm --format json
        kitchen-cabinets generate --config kitchen.json
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Error: Unknown format '{output_format}'. Use text or json.", err=True)
        raise typer.Exit(code=1)

    request = _request(
        cabinet_type, width, height, depth, style, door_style,
        material, doors, shelves, back, template, unit,
    )
    results = _outputs(config_file, request)

    if output_format == "json":
        content = JsonProjectExporter().export_string(results)
    else:
        blocks = []
        for result in results:
            blocks.append(_describe(result))
            blocks.append(CutListFormatter().format(result.cut_list))
            blocks.append(
                MaterialReportFormatter().format(
                    result.material_estimates, result.total_estimate
                )
            )
        content = "\n\n".join(blocks)

    if output is not None:
        output.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output}")
    else:
        typer.echo(content)


@app.command()
def cutlist(
    cabinet_type: TypeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    style: StyleOption = None,
    door_style: DoorStyleOption = DoorStyle.SLAB,
    material: MaterialOption = MaterialType.PLYWOOD,
    doors: DoorsOption = None,
    shelves: ShelvesOption = None,
    back: BackOption = True,
    template: TemplateOption = None,
    unit: UnitOption = LengthUnit.INCH,
    config_file: ConfigOption = None,
    csv_output: Annotated[
        bool, typer.Option("--csv", help="Print the cut list as CSV")
    ] = False,
) -> None:
    """Display the cut list for a cabinet."""
    request = _request(
        cabinet_type, width, height, depth, style, door_style,
        material, doors, shelves, back, template, unit,
    )
    results = _outputs(config_file, request)

    if csv_output:
        items = [item for result in results for item in result.cut_list]
        typer.echo(cut_list_to_csv(items), nl=False)
        return

    formatter = CutListFormatter()
    typer.echo("\n\n".join(formatter.format(result.cut_list) for result in results))


@app.command()
def materials(
    cabinet_type: TypeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    style: StyleOption = None,
    door_style: DoorStyleOption = DoorStyle.SLAB,
    material: MaterialOption = MaterialType.PLYWOOD,
    doors: DoorsOption = None,
    shelves: ShelvesOption = None,
    back: BackOption = True,
    template: TemplateOption = None,
    unit: UnitOption = LengthUnit.INCH,
    config_file: ConfigOption = None,
    price_per_m2: Annotated[
        float | None,
        typer.Option("--price-per-m2", min=0, help="Sheet price per square meter"),
    ] = None,
    hinge_price: Annotated[
        float | None, typer.Option("--hinge-price", min=0, help="Price per hinge")
    ] = None,
    handle_price: Annotated[
        float | None, typer.Option("--handle-price", min=0, help="Price per handle")
    ] = None,
) -> None:
    """Show the material estimate and cost for a cabinet.

    Prices come from the project's pricing section with --config, and the
    price options override them.
    """
    if config_file is not None:
        project = _load_project(config_file)
        sheet, pricing = config_to_sheet(project), config_to_pricing(project)
        results = _generate(config_to_requests(project))
    else:
        sheet, pricing = SheetSize(), PricingConfig()
        results = _outputs(None, _request(
            cabinet_type, width, height, depth, style, door_style,
            material, doors, shelves, back, template, unit,
        ))
    overrides = {
        name: value
        for name, value in (
            ("price_per_square_meter", price_per_m2),
            ("hinge_price", hinge_price),
            ("handle_price", handle_price),
        )
        if value is not None
    }
    pricing = dataclasses.replace(pricing, **overrides)
    estimator = CostEstimator(pricing, RowSheetLayout(sheet))

    formatter = MaterialReportFormatter()
    cost_formatter = CostFormatter()
    for result in results:
        try:
            cost = estimator.estimate(result.cut_list)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        if len(results) > 1:
            typer.echo(result.cabinet.id)
        typer.echo(formatter.format(result.material_estimates, result.total_estimate))
        typer.echo()
        typer.echo(cost_formatter.format(cost, pricing))


@app.command()
def layout(
    cabinet_type: TypeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    style: StyleOption = None,
    door_style: DoorStyleOption = DoorStyle.SLAB,
    material: MaterialOption = MaterialType.PLYWOOD,
    doors: DoorsOption = None,
    shelves: ShelvesOption = None,
    back: BackOption = True,
    template: TemplateOption = None,
    unit: UnitOption = LengthUnit.INCH,
    config_file: ConfigOption = None,
    sheet_width: Annotated[
        float, typer.Option("--sheet-width", help="Sheet width in mm")
    ] = 2440.0,
    sheet_height: Annotated[
        float, typer.Option("--sheet-height", help="Sheet height in mm")
    ] = 1220.0,
    kerf: Annotated[float, typer.Option("--kerf", help="Saw kerf in mm")] = 3.0,
) -> None:
    """Lay out the cut list panels on sheets.

    With --config, the project's sheet section is used instead of the
    sheet options.
    """
    try:
        if config_file is not None:
            project = _load_project(config_file)
            sheet = config_to_sheet(project)
            results = _generate(config_to_requests(project))
        else:
            sheet = SheetSize(sheet_width, sheet_height, kerf)
            results = _outputs(None, _request(
                cabinet_type, width, height, depth, style, door_style,
                material, doors, shelves, back, template, unit,
            ))
        items = [item for result in results for item in result.cut_list]
        by_stock = RowSheetLayout(sheet).layout_by_stock(items)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    formatter = SheetLayoutFormatter()
    blocks = [formatter.format(sheets, title=stock.label) for stock, sheets in by_stock.items()]
    total = sum(len(sheets) for sheets in by_stock.values())
    typer.echo("\n\n".join(blocks))
    typer.echo()
    typer.echo(f"{total} sheet(s) of {sheet.width:g} x {sheet.height:g}{sheet.unit.suffix}")


@app.command()
def export(
    cabinet_type: TypeOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    depth: DepthOption = None,
    style: StyleOption = None,
    door_style: DoorStyleOption = DoorStyle.SLAB,
    material: MaterialOption = MaterialType.PLYWOOD,
    doors: DoorsOption = None,
    shelves: ShelvesOption = None,
    back: BackOption = True,
    template: TemplateOption = None,
    unit: UnitOption = LengthUnit.INCH,
    config_file: ConfigOption = None,
    formats: Annotated[
        str | None,
        typer.Option(
            "--formats",
            help="Comma-separated formats (csv, json, dxf) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output-dir", "-o", help="Output directory")
    ] = None,
    project_name: Annotated[
        str | None, typer.Option("--project-name", help="Base name of exported files")
    ] = None,
) -> None:
    """Export cabinets to CSV, JSON and DXF files.

    With --config, formats, directory, project name and sheet size default
    to the project's output and sheet sections.

    Examples:
        kitchen-cabinets export --type base --width 24 --formats csv,dxf
        kitchen-cabinets export --config kitchen.json --formats all
    """
    sheet = SheetSize()
    default_formats = ["csv"]
    default_dir = Path(".")
    default_name = "cabinets"
    if config_file is not None:
        project = _load_project(config_file)
        results = _generate(config_to_requests(project))
        sheet = config_to_sheet(project)
        default_formats = config_to_formats(project)
        default_dir = Path(project.output.directory)
        default_name = project.output.project_name
    else:
        results = _outputs(None, _request(
            cabinet_type, width, height, depth, style, door_style,
            material, doors, shelves, back, template, unit,
        ))

    available = ExporterRegistry.available_formats()
    if formats is None:
        selected = default_formats
    elif formats.lower() == "all":
        selected = available
    else:
        selected = [f.strip().lower() for f in formats.split(",") if f.strip()]

    invalid = [f for f in selected if f not in available]
    if invalid:
        typer.echo(f"Error: Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(
        output_dir or default_dir,
        exporter_options={"dxf": {"sheet": sheet}},
    )
    try:
        files = manager.export_all(selected, results, project_name or default_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Error: Export failed: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def widths(
    cabinet_type: Annotated[CabinetType, typer.Argument(help="Cabinet type")],
) -> None:
    """List the standard widths (and heights) for a cabinet type."""
    typer.echo(f"Widths:  {', '.join(f'{w:g}' for w in available_widths(cabinet_type))}")
    heights = available_heights(cabinet_type)
    typer.echo(f"Heights: {', '.join(f'{h:g}' for h in heights)}")


if __name__ == "__main__":
    app()
