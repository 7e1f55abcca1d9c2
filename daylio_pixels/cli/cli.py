"""
Main CLI application using Typer.

Entry point: python -m daylio_pixels.cli
CLI Name: daylio-pixels
"""
from pathlib import Path
from typing import Annotated, Optional

import typer

from daylio_pixels import __version__ as app_version
from daylio_pixels.cli.commands.convert import run_conversion
from daylio_pixels.core.config import TimestampUnit

app = typer.Typer(
    name="daylio-pixels",
    help=(
        "Convert mood journal backups between Daylio (.daylio) and "
        "Year in Pixels (.json)."
    ),
    invoke_without_command=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    ctx: typer.Context,
    daylio: Annotated[
        Optional[Path],
        typer.Option(
            "--daylio",
            "-d",
            help=(
                "Daylio backup to convert to a Year in Pixels JSON file, "
                "written to <path>-converted.json."
            ),
            dir_okay=False,
        ),
    ] = None,
    pixels: Annotated[
        Optional[Path],
        typer.Option(
            "--pixels",
            "-p",
            help=(
                "Year in Pixels backup to convert to a Daylio backup, "
                "written to <path>-converted.daylio."
            ),
            dir_okay=False,
        ),
    ] = None,
    timestamp_unit: Annotated[
        TimestampUnit,
        typer.Option(
            "--timestamp-unit",
            case_sensitive=False,
            help="Epoch unit for timestamps in generated Daylio backups.",
        ),
    ] = TimestampUnit.MILLISECONDS,
    pretty_dump: Annotated[
        bool,
        typer.Option(
            "--pretty-dump",
            help="Also write the source backup as indented JSON to <path>-pretty.json.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show progress logs")
    ] = False,
):
    """
    Examples:

      daylio-pixels -d mybackup.daylio

      daylio-pixels -p pixels-backup.json
    """
    if ctx.invoked_subcommand is not None:
        return
    run_conversion(
        daylio=daylio,
        pixels=pixels,
        timestamp_unit=timestamp_unit,
        pretty_dump=pretty_dump,
        verbose=verbose,
    )


@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"daylio-pixels version {app_version}")
