"""
Conversion service.

Runs the Daylio <-> Year in Pixels pipelines end to end: read the input file,
decode and validate it, map the records, encode the result and write it next
to the input.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

from daylio_pixels.core.config import (
    DAYLIO_OUTPUT_SUFFIX,
    PIXELS_OUTPUT_SUFFIX,
    PRETTY_DUMP_SUFFIX,
    ConversionDirection,
    ConversionSettings,
)
from daylio_pixels.core.exceptions import BackupIOError, ConversionError, EncodingError
from daylio_pixels.core.logging_config import log_info
from daylio_pixels.core.time_utils import to_epoch, utc_now
from daylio_pixels.data_transfer.daylio import (
    DaylioArchiveCodec,
    DaylioParser,
    DaylioTemplateBuilder,
    DaylioToPixelsMapper,
)
from daylio_pixels.data_transfer.pixels import PixelsParser, PixelsToDaylioMapper
from daylio_pixels.schemas.conversion import ConversionResult
from daylio_pixels.utils.import_export import (
    atomic_write_bytes,
    atomic_write_text,
    dump_pretty,
    read_input_bytes,
)

DAYLIO_TO_PIXELS_NOTES = [
    'Year in Pixels "mood" values are clamped between 1 (worst) and 5 (best).',
    "If you made multiple Daylio entries in one day, their mood values are averaged, "
    "then rounded, then clamped.",
    "Notes from the same day are joined with line breaks.",
    "Neither tags nor moods are included in the resulting Year in Pixels data.",
]

PIXELS_TO_DAYLIO_NOTES = [
    "Year in Pixels has no time of day: every Daylio entry is placed at 20:00.",
    "Only the first mood of each Year in Pixels day is converted.",
    "Neither tags nor moods are included in the resulting Daylio data.",
]


class ConversionService:
    """Service for converting backups between Daylio and Year in Pixels."""

    def __init__(
        self,
        settings: Optional[ConversionSettings] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize conversion service.

        Args:
            settings: Run toggles (defaults to milliseconds, no pretty dump)
            clock: Source of the creation time stamped into generated backups
        """
        self.settings = settings or ConversionSettings()
        self.clock = clock
        self.codec = DaylioArchiveCodec(
            entry_name=self.settings.archive_entry_name,
            line_width=self.settings.base64_line_width,
        )

    @staticmethod
    def output_path_for(input_path: Path, direction: ConversionDirection) -> Path:
        """Converted files are written alongside the input under a suffixed name."""
        if direction == ConversionDirection.DAYLIO_TO_PIXELS:
            return Path(f"{input_path}{PIXELS_OUTPUT_SUFFIX}")
        return Path(f"{input_path}{DAYLIO_OUTPUT_SUFFIX}")

    @staticmethod
    def pretty_dump_path_for(input_path: Path) -> Path:
        return Path(f"{input_path}{PRETTY_DUMP_SUFFIX}")

    @staticmethod
    def notes_for(direction: ConversionDirection) -> list[str]:
        if direction == ConversionDirection.DAYLIO_TO_PIXELS:
            return list(DAYLIO_TO_PIXELS_NOTES)
        return list(PIXELS_TO_DAYLIO_NOTES)

    def convert(self, direction: ConversionDirection, input_path: Path) -> ConversionResult:
        if direction == ConversionDirection.DAYLIO_TO_PIXELS:
            return self.convert_daylio_to_pixels(input_path)
        return self.convert_pixels_to_daylio(input_path)

    def convert_daylio_to_pixels(self, input_path: Path) -> ConversionResult:
        """
        Convert a Daylio ``.daylio`` backup to a Year in Pixels JSON file.

        Args:
            input_path: Daylio backup file

        Returns:
            ConversionResult describing the written file

        Raises:
            ConversionError: Any failure; nothing is written in that case
        """
        direction = ConversionDirection.DAYLIO_TO_PIXELS
        output_path = self.output_path_for(input_path, direction)
        log_info("Converting Daylio backup", input_path=str(input_path))

        archive_bytes = read_input_bytes(input_path)
        try:
            backup, document = DaylioParser.parse_archive(archive_bytes, self.codec)
        except ConversionError as e:
            e.path = e.path or str(input_path)
            raise

        days = DaylioToPixelsMapper.map_entries(backup.day_entries)
        payload = PixelsParser.dump(days).encode("utf-8")
        bytes_written, pretty_path = self._write_outputs(
            input_path, output_path, payload, document
        )

        log_info(
            "Converted Daylio entries to Year in Pixels days",
            entries=len(backup.day_entries),
            days=len(days),
            output_path=str(output_path),
        )
        return ConversionResult(
            direction=direction,
            input_path=input_path,
            output_path=output_path,
            source_records=len(backup.day_entries),
            output_records=len(days),
            bytes_written=bytes_written,
            pretty_dump_path=pretty_path,
            notes=self.notes_for(direction),
        )

    def convert_pixels_to_daylio(self, input_path: Path) -> ConversionResult:
        """
        Convert a Year in Pixels JSON backup to a Daylio ``.daylio`` file.

        Args:
            input_path: Year in Pixels backup file

        Returns:
            ConversionResult describing the written file

        Raises:
            ConversionError: Any failure; nothing is written in that case
        """
        direction = ConversionDirection.PIXELS_TO_DAYLIO
        output_path = self.output_path_for(input_path, direction)
        log_info("Converting Year in Pixels backup", input_path=str(input_path))

        raw = read_input_bytes(input_path)
        try:
            try:
                text = raw.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise EncodingError(f"Year in Pixels backup is not UTF-8: {e}") from e
            days, source_data = PixelsParser.parse_json(text)
            day_entries = PixelsToDaylioMapper.map_days(days, self.settings.timestamp_unit)
        except ConversionError as e:
            e.path = e.path or str(input_path)
            raise

        now = to_epoch(self.clock(), self.settings.timestamp_unit)
        document = DaylioTemplateBuilder.build(day_entries, now)
        payload = DaylioParser.dump(document, self.codec)
        bytes_written, pretty_path = self._write_outputs(
            input_path, output_path, payload, source_data
        )

        log_info(
            "Converted Year in Pixels days to Daylio entries",
            days=len(days),
            entries=len(day_entries),
            output_path=str(output_path),
        )
        return ConversionResult(
            direction=direction,
            input_path=input_path,
            output_path=output_path,
            source_records=len(days),
            output_records=len(day_entries),
            bytes_written=bytes_written,
            pretty_dump_path=pretty_path,
            notes=self.notes_for(direction),
        )

    def _write_outputs(
        self, input_path: Path, output_path: Path, payload: bytes, source_data: Any
    ) -> Tuple[int, Optional[Path]]:
        """
        Write the optional pretty dump, then the converted file.

        If the converted file cannot be written the pretty dump is removed
        again, so a failed run leaves no output behind.

        Returns:
            Tuple of (bytes written to the converted file, pretty dump path)
        """
        pretty_path = self._write_pretty_dump(input_path, source_data)
        try:
            bytes_written = atomic_write_bytes(output_path, payload)
        except BackupIOError:
            if pretty_path is not None:
                pretty_path.unlink(missing_ok=True)
            raise
        return bytes_written, pretty_path

    def _write_pretty_dump(self, input_path: Path, data: Any) -> Optional[Path]:
        if not self.settings.pretty_dump:
            return None
        pretty_path = self.pretty_dump_path_for(input_path)
        atomic_write_text(pretty_path, dump_pretty(data))
        log_info("Wrote pretty-printed source backup", file_path=str(pretty_path))
        return pretty_path

