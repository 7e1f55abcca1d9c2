"""
Year in Pixels backup module.

Handles parsing, serializing and mapping of Year in Pixels JSON backups.
"""
from .mappers import PixelsToDaylioMapper
from .models import PixelsDay, PixelsMoodEntry
from .parser import PixelsParser

__all__ = [
    "PixelsDay",
    "PixelsMoodEntry",
    "PixelsParser",
    "PixelsToDaylioMapper",
]
