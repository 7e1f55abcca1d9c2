"""
Shared fixtures for the test suite.
"""
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from daylio_pixels.data_transfer.daylio import DaylioParser
from tests.helpers import daylio_document

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
FIXED_NOW_MS = 1709294400000


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def write_daylio_backup(tmp_path: Path) -> Callable[..., Path]:
    """Write a ``.daylio`` archive holding the given raw day entries."""

    def _write(entries: List[Dict[str, Any]], name: str = "backup.daylio") -> Path:
        path = tmp_path / name
        path.write_bytes(DaylioParser.dump(daylio_document(entries)))
        return path

    return _write
