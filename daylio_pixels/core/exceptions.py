"""
Custom exceptions for the converter.

Every failure of a conversion run is raised as a ``ConversionError`` subclass
so the CLI can report it uniformly and exit non-zero.
"""
from pathlib import Path
from typing import Optional, Union


class ConversionError(Exception):
    """Base exception for conversion failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class BackupIOError(ConversionError, OSError):
    """Raised when an input file cannot be read or an output file cannot be written."""


class ArchiveFormatError(ConversionError):
    """Raised when a Daylio archive is not a zip or lacks the backup entry."""


class EncodingError(ConversionError):
    """Raised when the archived payload is not valid base64 or UTF-8."""


class ParseError(ConversionError):
    """Raised when a backup payload is not well-formed JSON of the expected shape."""


class ValidationError(ConversionError):
    """Raised when a backup record is missing required data or has an unparseable date."""
