"""
Builders for raw backup records shared across the test suite.
"""
from typing import Any, Dict, List


def daylio_entry(
    year: int,
    month: int,
    day: int,
    mood: int,
    note: str = "",
    **extra: Any,
) -> Dict[str, Any]:
    """Raw Daylio day entry as it appears inside a backup."""
    entry = {
        "id": extra.pop("id", 1),
        "year": year,
        "month": month,
        "day": day,
        "hour": extra.pop("hour", 9),
        "minute": extra.pop("minute", 30),
        "datetime": extra.pop("datetime", 0),
        "timeZoneOffset": extra.pop("timeZoneOffset", 3600000),
        "mood": mood,
        "note": note,
        "note_title": extra.pop("note_title", ""),
        "tags": extra.pop("tags", [3, 7]),
        "assets": extra.pop("assets", []),
        "isFavorite": extra.pop("isFavorite", False),
    }
    entry.update(extra)
    return entry


def daylio_document(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "version": 15,
        "dayEntries": entries,
        "tags": [{"id": 3, "name": "work"}, {"id": 7, "name": "sport"}],
        "customMoods": [],
        "metadata": {"number_of_entries": len(entries)},
    }


def pixels_day(date: str, value: int, notes: str = "") -> Dict[str, Any]:
    return {
        "date": date,
        "entries": [
            {"type": "Mood", "value": value, "notes": notes, "isHighlighted": False, "tags": []}
        ],
    }
