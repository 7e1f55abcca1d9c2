"""
Converter configuration.

There is no environment or file based configuration: the CLI maps its options
onto ``ConversionSettings`` and hands that to the conversion service.
"""
from enum import Enum

from pydantic import BaseModel, Field

# Name of the single member inside a Daylio ``.daylio`` zip archive.
DAYLIO_ARCHIVE_ENTRY = "backup.daylio"

# Daylio's own exporter wraps the base64 payload at 76 characters per line.
BASE64_LINE_WIDTH = 76

PIXELS_OUTPUT_SUFFIX = "-converted.json"
DAYLIO_OUTPUT_SUFFIX = "-converted.daylio"
PRETTY_DUMP_SUFFIX = "-pretty.json"


class TimestampUnit(str, Enum):
    """Unit used for epoch timestamps written into generated Daylio backups."""
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"


class ConversionDirection(str, Enum):
    DAYLIO_TO_PIXELS = "daylio_to_pixels"
    PIXELS_TO_DAYLIO = "pixels_to_daylio"


class ConversionSettings(BaseModel):
    """Toggles for a single conversion run."""
    timestamp_unit: TimestampUnit = Field(
        default=TimestampUnit.MILLISECONDS,
        description="Epoch unit for datetime, createdAt and metadata.created_at",
    )
    pretty_dump: bool = Field(
        default=False,
        description="Also write the source backup as indented JSON next to the input",
    )
    archive_entry_name: str = Field(
        default=DAYLIO_ARCHIVE_ENTRY,
        min_length=1,
        description="Member name of the base64 payload inside the Daylio zip",
    )
    base64_line_width: int = Field(
        default=BASE64_LINE_WIDTH,
        gt=0,
        description="Characters per line in the archived base64 payload",
    )
