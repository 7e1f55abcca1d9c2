"""
JSON helpers for backup payloads.
"""
import json
from typing import Any

from daylio_pixels.core.exceptions import ParseError


def parse_json_text(text: str, source: str = "backup") -> Any:
    """
    Parse a complete JSON document held in memory.

    Args:
        text: JSON document
        source: Human readable name of the payload, used in error messages

    Raises:
        ParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {source}: {e}") from e


def dump_compact(data: Any) -> str:
    """Serialize without whitespace, keeping non-ASCII characters as-is."""
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def dump_pretty(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=4)
