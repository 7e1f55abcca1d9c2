"""
Year in Pixels to Daylio mapper.

Each Pixels day becomes exactly one Daylio entry. Year in Pixels has no time
of day, so every entry is placed at 20:00 with an unknown time zone.
"""
from typing import List, Sequence

from daylio_pixels.core.config import TimestampUnit
from daylio_pixels.core.exceptions import ValidationError
from daylio_pixels.core.time_utils import date_to_epoch
from daylio_pixels.data_transfer.daylio.models import DaylioDayEntry
from daylio_pixels.data_transfer.mood_scale import invert_mood
from daylio_pixels.data_transfer.pixels.models import PixelsDay

DEFAULT_ENTRY_HOUR = 20
DEFAULT_ENTRY_MINUTE = 0
UNKNOWN_TIME_ZONE_OFFSET = -1


class PixelsToDaylioMapper:
    """Maps Year in Pixels days to Daylio day entries."""

    @staticmethod
    def map_days(
        days: Sequence[PixelsDay],
        timestamp_unit: TimestampUnit = TimestampUnit.MILLISECONDS,
    ) -> List[DaylioDayEntry]:
        """
        Map Pixels days to Daylio entries, one to one and in input order.

        Args:
            days: Parsed Year in Pixels days
            timestamp_unit: Unit of the generated ``datetime`` values

        Returns:
            Daylio day entries

        Raises:
            ValidationError: If a day has no entries or an unparseable date
        """
        return [
            PixelsToDaylioMapper.map_day(day, timestamp_unit, index=index)
            for index, day in enumerate(days)
        ]

    @staticmethod
    def map_day(
        day: PixelsDay,
        timestamp_unit: TimestampUnit = TimestampUnit.MILLISECONDS,
        index: int = 0,
    ) -> DaylioDayEntry:
        if not day.entries:
            raise ValidationError(f"Year in Pixels day #{index} ({day.date}) has no entries")
        try:
            calendar_date = day.calendar_date
        except ValueError as e:
            raise ValidationError(
                f"Year in Pixels day #{index} has an invalid date '{day.date}'"
            ) from e

        first = day.entries[0]
        return DaylioDayEntry(
            year=calendar_date.year,
            month=calendar_date.month - 1,
            day=calendar_date.day,
            hour=DEFAULT_ENTRY_HOUR,
            minute=DEFAULT_ENTRY_MINUTE,
            datetime=date_to_epoch(calendar_date, timestamp_unit),
            time_zone_offset=UNKNOWN_TIME_ZONE_OFFSET,
            note_title="",
            note=first.notes or "",
            mood=invert_mood(first.value),
            assets=[],
            tags=[],
        )
