"""
Daylio data models.

These models represent the JSON payload stored (base64 encoded) inside a
Daylio ``.daylio`` backup archive. Only ``dayEntries`` is modelled field by
field; every other top-level key is carried through as an extra attribute.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class DaylioDayEntry(BaseModel):
    """
    One logged moment in a Daylio backup.

    Daylio allows several entries per calendar day. ``month`` is 0-based
    (January is 0) while ``day`` is the 1-based day of the month. ``mood``
    refers to one of the five default moods, where 1 is the best mood and 5
    the worst.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    year: int
    month: int = Field(..., ge=0, le=11)
    day: int = Field(..., ge=1, le=31)
    hour: int = 0
    minute: int = 0
    datetime: int = 0
    time_zone_offset: int = Field(-1, alias="timeZoneOffset")
    note_title: str = ""
    note: str = ""
    mood: int
    assets: List[Any] = Field(default_factory=list)
    tags: List[Any] = Field(default_factory=list)

    @property
    def date_key(self) -> tuple[int, int, int]:
        """Calendar day this entry belongs to as ``(year, month, day)``."""
        return self.year, self.month, self.day

    def to_backup_dict(self) -> Dict[str, Any]:
        """Serialize with Daylio's key names, in Daylio's key order."""
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "datetime": self.datetime,
            "timeZoneOffset": self.time_zone_offset,
            "note_title": self.note_title,
            "note": self.note,
            "mood": self.mood,
            "assets": list(self.assets),
            "tags": list(self.tags),
        }


class DaylioBackup(BaseModel):
    """
    Decoded Daylio backup.

    Achievements, tags, custom moods, templates, preferences and metadata are
    not used by the converter and are kept untouched as extra fields.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    day_entries: List[DaylioDayEntry] = Field(default_factory=list, alias="dayEntries")
