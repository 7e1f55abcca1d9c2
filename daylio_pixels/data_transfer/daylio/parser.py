"""
Daylio backup parser.

Turns ``.daylio`` archive bytes into a validated ``DaylioBackup`` and backup
documents back into archive bytes.
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from daylio_pixels.core.exceptions import ParseError, ValidationError
from daylio_pixels.core.logging_config import log_info
from daylio_pixels.utils.import_export import (
    dump_compact,
    parse_json_text,
    summarize_validation_error,
)

from .archive import DaylioArchiveCodec
from .models import DaylioBackup


class DaylioParser:
    """Parser for Daylio backup archives."""

    @staticmethod
    def parse_archive(
        archive_bytes: bytes, codec: Optional[DaylioArchiveCodec] = None
    ) -> Tuple[DaylioBackup, Dict[str, Any]]:
        """
        Decode and validate a Daylio backup archive.

        Args:
            archive_bytes: Raw ``.daylio`` file content
            codec: Archive codec (defaults to the standard Daylio layout)

        Returns:
            Tuple of (validated backup, raw backup document)

        Raises:
            ArchiveFormatError: If the archive is malformed
            EncodingError: If the payload cannot be decoded
            ParseError: If the payload is not a JSON object
            ValidationError: If a day entry is missing required fields
        """
        codec = codec or DaylioArchiveCodec()
        text = codec.decode(archive_bytes)
        document = parse_json_text(text, source="Daylio backup")
        if not isinstance(document, dict):
            raise ParseError("Expected the Daylio backup to be a JSON object")

        try:
            backup = DaylioBackup.model_validate(document)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid Daylio backup: {summarize_validation_error(e)}"
            ) from e

        log_info(
            "Parsed Daylio backup",
            day_entries=len(backup.day_entries),
            version=document.get("version"),
        )
        return backup, document

    @staticmethod
    def dump(document: Dict[str, Any], codec: Optional[DaylioArchiveCodec] = None) -> bytes:
        """Serialize a backup document to ``.daylio`` archive bytes."""
        codec = codec or DaylioArchiveCodec()
        return codec.encode(dump_compact(document))
