from datetime import date, datetime, timezone
from typing import Union


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_timestamp(value: Union[str, date, datetime]) -> datetime:
    """
    Normalizes client supplied dates to timezone-aware UTC datetimes.

    Accepts ISO-8601 strings with or without a time part ('2023-10-01',
    '2023-10-01T08:30:00Z'), ``date`` and ``datetime`` objects. Date-only
    values become midnight UTC, values without an offset are read as UTC.
    Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"Invalid date value: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
