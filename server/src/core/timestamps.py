"""
Conversions between epoch milliseconds and stored birthday timestamps.

Birthdays travel over the wire as epoch milliseconds and are stored as
naive UTC datetimes.
"""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1)


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to a naive UTC datetime."""
    return EPOCH + timedelta(milliseconds=millis)


def to_naive_utc(value: datetime) -> datetime:
    """Shift an aware datetime to UTC and drop its offset; naive values pass through."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime (naive values are read as UTC) to epoch milliseconds."""
    return (to_naive_utc(value) - EPOCH) // timedelta(milliseconds=1)
