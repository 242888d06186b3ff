"""Validate command for checking design documents.

This module provides the `validate` command that checks a JSON design
document for syntax and schema errors and reports conflicting collisions
between its parts.
"""

from pathlib import Path
from typing import Annotated

import typer

from carcass.application import DesignOutput, assemble_output
from carcass.application.config import ConfigError, document_to_state, load_design


def validate_command(
    design_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON design document to validate"),
    ],
) -> None:
    """Validate a design document.

    Checks the design document for:
    - JSON syntax errors
    - Schema validation errors (missing fields, non-positive sizes, etc.)
    - Conflicting collisions between parts

    Exit codes:
        0 - Design is valid with no collisions
        1 - Design has errors (cannot be used)
        2 - Design is valid but has conflicting collisions

    Example:
        carcass validate my-cabinet.json
    """
    typer.echo(f"Validating {design_file}...")
    typer.echo()

    try:
        document = load_design(design_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    output = assemble_output(document_to_state(document))
    _display_collisions(output)

    raise typer.Exit(code=2 if output.has_conflicts else 0)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_collisions(output: DesignOutput) -> None:
    if not output.collisions:
        typer.echo(f"Validation passed. {len(output.parts)} parts, no collisions.")
        return

    typer.echo("Warnings:")
    for record in output.collisions:
        typer.echo(f"  {record.part_a}: {record.describe(record.part_a)}")
    typer.echo()
    typer.echo(
        f"Validation passed with {len(output.collisions)} collision(s) "
        "between parts"
    )
