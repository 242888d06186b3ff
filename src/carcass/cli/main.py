"""Typer CLI for the cabinet geometry engine."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from carcass.application import DesignCommands, DesignState, assemble_output
from carcass.application.config import (
    ConfigError,
    design_to_json,
    document_to_state,
    load_design,
    state_to_document,
)
from carcass.cli.commands import validate_command
from carcass.domain import ConnectorPattern, TemplateConfig
from carcass.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
    output_to_dict,
)

app = typer.Typer(
    name="carcass",
    help="Generate and analyze cabinet carcasses: spaces, connectors and drill points.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Cabinet geometry engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_state(design_file: Path) -> DesignState:
    try:
        document = load_design(design_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return document_to_state(document)


def _parse_formats(formats_str: str) -> list[str]:
    available = ExporterRegistry.available_formats()
    if formats_str.strip().lower() == "all":
        return available

    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    invalid = [f for f in formats if f not in available]
    if invalid or not formats:
        typer.echo(f"Unknown formats: {', '.join(invalid) or formats_str}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


@app.command()
def generate(
    width: Annotated[
        float, typer.Option("--width", "-w", help="Cabinet width in mm")
    ] = 600.0,
    height: Annotated[
        float, typer.Option("--height", "-h", help="Cabinet height in mm")
    ] = 720.0,
    depth: Annotated[
        float, typer.Option("--depth", "-d", help="Cabinet depth in mm")
    ] = 560.0,
    compartments: Annotated[
        int, typer.Option("--compartments", "-c", help="Side-by-side compartments")
    ] = 1,
    shelves: Annotated[
        int, typer.Option("--shelves", "-s", help="Shelves per compartment")
    ] = 1,
    separate_walls: Annotated[
        bool,
        typer.Option(
            "--separate-walls", help="Do not share dividers between compartments"
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the design document to this file"),
    ] = None,
) -> None:
    """Generate a cabinet design document from template parameters.

    Without --output the document is printed to stdout.
    """
    config = TemplateConfig(
        width=width,
        height=height,
        depth=depth,
        compartments=compartments,
        shelves_per_compartment=shelves,
        share_walls=not separate_walls,
    )
    errors = config.validate()
    if errors:
        for error in errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    result = DesignCommands().apply_template(DesignState.initial(), config)
    content = design_to_json(state_to_document(result.state))

    if output is None:
        typer.echo(content)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    summary = assemble_output(result.state).summary()
    typer.echo(f"Generated '{result.state.design_name}' -> {output}")
    typer.echo(
        f"  {summary['parts']} parts, {summary['spaces']} spaces, "
        f"{summary['connectors']} connectors"
    )


@app.command()
def analyze(
    design_file: Annotated[
        Path, typer.Argument(help="Path to the JSON design document")
    ],
    spacing: Annotated[
        float | None,
        typer.Option("--spacing", help="Override connector spacing in mm"),
    ] = None,
    edge_offset: Annotated[
        float | None,
        typer.Option("--edge-offset", help="Override connector edge offset in mm"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the full analysis as JSON")
    ] = False,
) -> None:
    """Analyze a design: spaces, connectors, boreholes and collisions.

    Exits with code 2 when parts collide.
    """
    state = _load_state(design_file)

    if spacing is not None or edge_offset is not None:
        try:
            pattern = ConnectorPattern(
                spacing=spacing if spacing is not None else state.pattern.spacing,
                edge_offset=(
                    edge_offset if edge_offset is not None else state.pattern.edge_offset
                ),
                offset_x=state.pattern.offset_x,
                offset_y=state.pattern.offset_y,
            )
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        state = DesignCommands().set_pattern(state, pattern).state

    result = assemble_output(state)

    if as_json:
        typer.echo(json.dumps(output_to_dict(result), indent=2))
    else:
        typer.echo(f"Design: {state.design_name}")
        for name, count in result.summary().items():
            typer.echo(f"  {name.capitalize()}: {count}")
        for record in result.collisions:
            typer.echo(f"  ! {record.part_a}: {record.describe(record.part_a)}")

    if result.has_conflicts:
        raise typer.Exit(code=2)


@app.command()
def export(
    design_file: Annotated[
        Path, typer.Argument(help="Path to the JSON design document")
    ],
    formats: Annotated[
        str,
        typer.Option(
            "--formats", "-f", help="Comma-separated formats (json, drill) or 'all'"
        ),
    ] = "all",
    output_dir: Annotated[
        Path, typer.Option("--output-dir", help="Directory for exported files")
    ] = Path("."),
    project_name: Annotated[
        str, typer.Option("--project-name", help="Base name for exported files")
    ] = "cabinet",
) -> None:
    """Export the analysis of a design to one or more formats."""
    format_list = _parse_formats(formats)
    state = _load_state(design_file)

    manager = ExportManager(output_dir)
    results = manager.export_all(format_list, assemble_output(state), project_name)
    for format_name, path in results.items():
        typer.echo(f"  {format_name}: {path}")


if __name__ == "__main__":
    app()
