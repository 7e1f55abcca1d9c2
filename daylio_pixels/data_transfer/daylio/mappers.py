"""
Daylio to Year in Pixels mapper.

Folds Daylio's many-entries-per-day model into Year in Pixels' one value per
day. Tags and the individual mood of each entry are lost.
"""
from typing import Dict, List, Sequence, Tuple

from daylio_pixels.data_transfer.daylio.models import DaylioDayEntry
from daylio_pixels.data_transfer.mood_scale import clamp, invert_mood, round_half_up
from daylio_pixels.data_transfer.pixels.models import PixelsDay, PixelsMoodEntry

DateKey = Tuple[int, int, int]


def format_date_key(key: DateKey) -> str:
    """Format ``(year, 0-based month, day)`` as ``YYYY-MM-DD``."""
    year, month, day = key
    return f"{year}-{month + 1:02d}-{day:02d}"


class DaylioToPixelsMapper:
    """
    Maps Daylio day entries to Year in Pixels days.

    Handles:
    - Grouping entries by calendar day, in order of first occurrence
    - Averaging, rounding and clamping the day's mood
    - Mood polarity inversion
    - Joining the day's notes
    """

    @staticmethod
    def map_entries(entries: Sequence[DaylioDayEntry]) -> List[PixelsDay]:
        """
        Map Daylio entries to one Pixels day per distinct calendar day.

        Args:
            entries: Daylio day entries in backup order

        Returns:
            Pixels days ordered by first appearance of their date in ``entries``
        """
        groups: Dict[DateKey, List[DaylioDayEntry]] = {}
        for entry in entries:
            groups.setdefault(entry.date_key, []).append(entry)

        return [
            DaylioToPixelsMapper.map_day(key, day_entries)
            for key, day_entries in groups.items()
        ]

    @staticmethod
    def map_day(key: DateKey, day_entries: Sequence[DaylioDayEntry]) -> PixelsDay:
        """Collapse all entries of one calendar day into a single Pixels day."""
        average = sum(entry.mood for entry in day_entries) / len(day_entries)
        mood = clamp(round_half_up(average))
        notes = "\n".join(entry.note for entry in day_entries)

        return PixelsDay(
            date=format_date_key(key),
            entries=[
                PixelsMoodEntry(
                    type="Mood",
                    value=invert_mood(mood),
                    notes=notes,
                    is_highlighted=False,
                    tags=[],
                )
            ],
        )
