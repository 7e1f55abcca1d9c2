"""
Year in Pixels backup parser.
"""
from typing import Any, List, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError

from daylio_pixels.core.exceptions import ParseError, ValidationError
from daylio_pixels.core.logging_config import log_info
from daylio_pixels.utils.import_export import (
    dump_compact,
    parse_json_text,
    summarize_validation_error,
)

from .models import PixelsDay


class PixelsParser:
    """Parser for Year in Pixels JSON backups."""

    @staticmethod
    def parse_json(text: str) -> Tuple[List[PixelsDay], List[Any]]:
        """
        Parse and validate a Year in Pixels backup.

        Returns:
            Tuple of (validated days, raw backup array)

        Raises:
            ParseError: If the text is not a JSON array
            ValidationError: If a day is malformed; the message names its index
        """
        data = parse_json_text(text, source="Year in Pixels backup")
        return PixelsParser.parse_days(data), data

    @staticmethod
    def parse_days(data: Any) -> List[PixelsDay]:
        if not isinstance(data, list):
            raise ParseError("Expected the Year in Pixels backup to be a JSON array")

        days: List[PixelsDay] = []
        for index, raw_day in enumerate(data):
            try:
                days.append(PixelsDay.model_validate(raw_day))
            except PydanticValidationError as e:
                raise ValidationError(
                    f"Invalid Year in Pixels day #{index}: {summarize_validation_error(e)}"
                ) from e

        log_info("Parsed Year in Pixels backup", days=len(days))
        return days

    @staticmethod
    def dump(days: Sequence[PixelsDay]) -> str:
        """Serialize days to a compact JSON array."""
        return dump_compact([day.to_backup_dict() for day in days])
