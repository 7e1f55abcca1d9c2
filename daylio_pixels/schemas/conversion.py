"""
Conversion result schemas.
"""
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from daylio_pixels.core.config import ConversionDirection


class ConversionResult(BaseModel):
    """Summary of a finished conversion run."""
    direction: ConversionDirection = Field(..., description="Which way the backup was converted")
    input_path: Path = Field(..., description="Backup file that was read")
    output_path: Path = Field(..., description="Converted file that was written")
    source_records: int = Field(0, description="Entries or days read from the input")
    output_records: int = Field(0, description="Entries or days written to the output")
    bytes_written: int = Field(0, description="Size of the output file")
    pretty_dump_path: Optional[Path] = Field(
        None, description="Indented JSON copy of the source, when requested"
    )
    notes: List[str] = Field(default_factory=list, description="What the conversion drops or approximates")
