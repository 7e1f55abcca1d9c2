"""
Time helpers.
"""
from datetime import date, datetime, time, timezone

from daylio_pixels.core.config import TimestampUnit


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_epoch(value: datetime, unit: TimestampUnit = TimestampUnit.MILLISECONDS) -> int:
    """
    Convert a datetime to an integer epoch timestamp.

    Args:
        value: Datetime to convert (naive values are taken as UTC)
        unit: Whether to return milliseconds or seconds

    Returns:
        Epoch timestamp truncated to an int in the requested unit
    """
    seconds = ensure_utc(value).timestamp()
    if unit == TimestampUnit.SECONDS:
        return int(seconds)
    return int(round(seconds * 1000))


def date_to_epoch(value: date, unit: TimestampUnit = TimestampUnit.MILLISECONDS) -> int:
    """Epoch timestamp of midnight UTC on the given calendar date."""
    return to_epoch(datetime.combine(value, time.min, tzinfo=timezone.utc), unit)
