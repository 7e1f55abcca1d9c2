"""
Year in Pixels data models.

A Year in Pixels backup is a JSON array with one object per calendar day:

    [
        {
            "date": "2023-01-05",
            "entries": [
                {"type": "Mood", "value": 4, "notes": "...", "isHighlighted": false, "tags": []}
            ]
        }
    ]

``value`` runs from 1 (worst) to 5 (best), the reverse of Daylio's ``mood``.
"""
import datetime as dt
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

PIXELS_DATE_FORMAT = "%Y-%m-%d"


class PixelsMoodEntry(BaseModel):
    """Mood value recorded for one day."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str = "Mood"
    value: int = Field(..., ge=1, le=5)
    notes: str = ""
    is_highlighted: bool = Field(False, alias="isHighlighted")
    tags: List[Any] = Field(default_factory=list)

    @field_validator("notes", mode="before")
    @classmethod
    def normalize_notes(cls, v):
        """Year in Pixels omits or nulls notes on days without text."""
        if v is None:
            return ""
        return v

    def to_backup_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "value": self.value,
            "notes": self.notes,
            "isHighlighted": self.is_highlighted,
            "tags": list(self.tags),
        }


class PixelsDay(BaseModel):
    """One calendar day of a Year in Pixels backup."""
    model_config = ConfigDict(extra="allow")

    date: str
    entries: List[PixelsMoodEntry] = Field(..., min_length=1)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Require ``YYYY-MM-DD`` naming a real calendar day."""
        try:
            dt.datetime.strptime(v, PIXELS_DATE_FORMAT)
        except ValueError as e:
            raise ValueError(f"Invalid date '{v}', expected YYYY-MM-DD") from e
        return v

    @property
    def calendar_date(self) -> dt.date:
        return dt.datetime.strptime(self.date, PIXELS_DATE_FORMAT).date()

    def to_backup_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "entries": [entry.to_backup_dict() for entry in self.entries],
        }
