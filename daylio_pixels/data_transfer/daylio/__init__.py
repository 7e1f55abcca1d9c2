"""
Daylio backup module.

Handles decoding, encoding and mapping of Daylio ``.daylio`` backups.
"""
from .archive import DaylioArchiveCodec
from .mappers import DaylioToPixelsMapper
from .models import DaylioBackup, DaylioDayEntry
from .parser import DaylioParser
from .skeleton import DaylioTemplateBuilder

__all__ = [
    "DaylioArchiveCodec",
    "DaylioBackup",
    "DaylioDayEntry",
    "DaylioParser",
    "DaylioTemplateBuilder",
    "DaylioToPixelsMapper",
]
