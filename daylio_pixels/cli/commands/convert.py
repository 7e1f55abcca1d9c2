"""
Conversion command: Daylio backup <-> Year in Pixels backup.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from daylio_pixels import __version__ as app_version
from daylio_pixels.cli.logging import setup_cli_logging
from daylio_pixels.core.config import ConversionDirection, ConversionSettings, TimestampUnit
from daylio_pixels.core.exceptions import ConversionError
from daylio_pixels.core.logging_config import log_error
from daylio_pixels.schemas.conversion import ConversionResult
from daylio_pixels.services.conversion_service import ConversionService

console = Console()

DIRECTION_LABELS = {
    ConversionDirection.DAYLIO_TO_PIXELS: ("Daylio", "Year in Pixels"),
    ConversionDirection.PIXELS_TO_DAYLIO: ("Year in Pixels", "Daylio"),
}


def resolve_direction(
    daylio: Optional[Path], pixels: Optional[Path]
) -> tuple[ConversionDirection, Path]:
    """
    Pick the conversion direction from the two mutually exclusive inputs.

    Raises:
        typer.BadParameter: If both or neither input path is given
    """
    if (daylio is None) == (pixels is None):
        raise typer.BadParameter(
            "Pass the path to your Daylio backup file *or* your Year in Pixels "
            "backup file - not both!",
            param_hint="'--daylio' / '--pixels'",
        )
    if daylio is not None:
        return ConversionDirection.DAYLIO_TO_PIXELS, daylio
    return ConversionDirection.PIXELS_TO_DAYLIO, pixels


def run_conversion(
    daylio: Optional[Path],
    pixels: Optional[Path],
    timestamp_unit: TimestampUnit = TimestampUnit.MILLISECONDS,
    pretty_dump: bool = False,
    verbose: bool = False,
) -> ConversionResult:
    direction, input_path = resolve_direction(daylio, pixels)

    logger = setup_cli_logging("convert", verbose=verbose)
    logger.info(f"Starting conversion (app version {app_version})")

    settings = ConversionSettings(timestamp_unit=timestamp_unit, pretty_dump=pretty_dump)
    service = ConversionService(settings)
    source_label, target_label = DIRECTION_LABELS[direction]

    console.print(
        f"Converting {source_label} backup [cyan]{escape(str(input_path))}[/cyan] "
        f"to {target_label}..."
    )
    console.print("[bold]CONVERSION NOTES:[/bold]")
    for note in service.notes_for(direction):
        console.print(f"- {escape(note)}")

    try:
        result = service.convert(direction, input_path)
    except ConversionError as e:
        log_error(e, direction=direction.value, input_path=str(input_path))
        console.print(f"[red]Conversion failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    _print_summary(result, source_label, target_label)
    console.print(
        f"[green]Successfully converted from {source_label} backup data to "
        f"{target_label} backup data![/green]"
    )
    return result


def _print_summary(result: ConversionResult, source_label: str, target_label: str) -> None:
    summary = Table(title="Conversion Results")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Input", escape(str(result.input_path)))
    summary.add_row("Output", escape(str(result.output_path)))
    summary.add_row(f"{source_label} records read", str(result.source_records))
    summary.add_row(f"{target_label} records written", str(result.output_records))
    summary.add_row("Bytes written", str(result.bytes_written))
    if result.pretty_dump_path is not None:
        summary.add_row("Pretty-printed source", escape(str(result.pretty_dump_path)))
    console.print(summary)
