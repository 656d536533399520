"""Typer CLI for kitchen planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from kitchen_planner.application import AutoFillCommand, GenerateReportCommand
from kitchen_planner.application.config import (
    ConfigError,
    config_to_project,
    dump_config,
    load_config,
    project_to_config,
    save_config,
)
from kitchen_planner.cli.commands import display_load_error, validate_command
from kitchen_planner.domain import Project, ZoneId, ZoneLayoutService
from kitchen_planner.infrastructure import (
    BOM_FORMATS,
    BomExporter,
    ExporterRegistry,
    ExportManager,
    PlacementTableFormatter,
    ZoneElevationFormatter,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LAYOUT_FORMATS = ("table", "diagram")

logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kitchen-planner",
    help="Lay out kitchen cabinets around wall obstacles and build a bill of materials.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages to stderr"),
    ] = False,
) -> None:
    """Lay out kitchen cabinets around wall obstacles and build a bill of materials."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


app.command(name="validate")(validate_command)


def _load_project(project_file: Path) -> Project:
    """Load a project file, exiting with code 1 on any loading error."""
    try:
        config = load_config(project_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    logger.debug(f"Loaded project '{config.name}' from {project_file}")
    return config_to_project(config)


def _save_project(project: Project, output_file: Path) -> None:
    try:
        save_config(project_to_config(project), output_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _parse_zone(zone: str) -> ZoneId:
    try:
        return ZoneId(zone.upper())
    except ValueError:
        available = ", ".join(z.value for z in ZoneId)
        typer.echo(f"Unknown zone: {zone}", err=True)
        typer.echo(f"Available zones: {available}", err=True)
        raise typer.Exit(code=1)


def _auto_fill(project: Project, zones: list[str] | None) -> Project:
    zone_ids = [_parse_zone(z) for z in zones] if zones else None
    return AutoFillCommand().execute(project, zone_ids)


@app.command()
def new(
    output_file: Annotated[
        Path,
        typer.Argument(help="Path of the project file to create"),
    ],
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Project name"),
    ] = "New Project",
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create a project file with default settings and zones."""
    if output_file.exists() and not force:
        typer.echo(f"Error: {output_file} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)

    _save_project(Project.new(name), output_file)
    typer.echo(f"Created {output_file}")


@app.command()
def layout(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    zone: Annotated[
        str | None,
        typer.Option("--zone", "-z", help="Show only this zone (default: all active zones)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, diagram"),
    ] = "table",
) -> None:
    """Show where each cabinet lands on its wall."""
    if output_format not in LAYOUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(LAYOUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    project = _load_project(project_file)
    zones = [project.zone(_parse_zone(zone))] if zone else project.active_zones
    if not zones:
        typer.echo("Project has no active zones.", err=True)
        raise typer.Exit(code=1)

    formatter = (
        PlacementTableFormatter() if output_format == "table" else ZoneElevationFormatter()
    )
    service = ZoneLayoutService()
    blocks = []
    for z in zones:
        zone_layout = service.layout(z)
        blocks.append(formatter.format(zone_layout))
        if not zone_layout.fits:
            typer.echo(
                f"Warning: {z.id.value} cabinets run to "
                f"{zone_layout.occupied_length:g}mm, past the wall end "
                f"({z.total_length:g}mm)",
                err=True,
            )
    typer.echo("\n\n".join(blocks))


@app.command()
def autofill(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    zones: Annotated[
        list[str] | None,
        typer.Option("--zone", "-z", help="Zone to fill; repeatable (default: all active zones)"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the filled project here instead of stdout"),
    ] = None,
) -> None:
    """Fill the gaps between obstacles and manual cabinets with standard units."""
    project = _auto_fill(_load_project(project_file), zones)

    if output_file is None:
        typer.echo(dump_config(project_to_config(project)))
        return

    _save_project(project, output_file)
    filled = sum(len(z.auto_cabinets) for z in project.zones)
    typer.echo(f"Wrote {output_file} ({filled} auto-filled cabinet(s))")


@app.command()
def bom(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the BOM here instead of stdout"),
    ] = None,
    fill: Annotated[
        bool,
        typer.Option("--autofill", help="Auto-fill active zones before building the BOM"),
    ] = False,
) -> None:
    """Build the bill of materials of the active zones."""
    if output_format not in BOM_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(BOM_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    project = _load_project(project_file)
    if fill:
        project = _auto_fill(project, None)

    result = GenerateReportCommand().execute(project)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    exporter = BomExporter(output_format=output_format)
    if output_file is None:
        typer.echo(exporter.export_string(result))
        return

    exporter.export(result, output_file)
    typer.echo(f"Wrote {output_file}")


@app.command()
def export(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    formats: Annotated[
        str,
        typer.Option("--formats", help="Comma-separated formats, or 'all'"),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Directory for exported files"),
    ] = Path("."),
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name of exported files (default: project file name)"),
    ] = None,
    fill: Annotated[
        bool,
        typer.Option("--autofill", help="Auto-fill active zones before exporting"),
    ] = False,
) -> None:
    """Export the project report to one or more file formats."""
    if formats.lower() == "all":
        format_list = ExporterRegistry.available_formats()
    else:
        format_list = [f.strip().lower() for f in formats.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in format_list if f not in available]
    if invalid or not format_list:
        typer.echo(f"Unknown formats: {', '.join(invalid) or formats}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    project = _load_project(project_file)
    if fill:
        project = _auto_fill(project, None)

    result = GenerateReportCommand().execute(project)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir)
    try:
        paths = manager.export_all(format_list, result, project_name or project_file.stem)
    except OSError as e:
        typer.echo(f"Error: export failed: {e}", err=True)
        raise typer.Exit(code=1)

    for format_name, path in paths.items():
        typer.echo(f"{format_name}: {path}")


if __name__ == "__main__":
    app()
