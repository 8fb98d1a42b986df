import re
import pandas as pd
from datetime import datetime, date as dt_date, time, timedelta, timezone, tzinfo
from typing import Any, Optional
from exceptions.custom_errors import ComputationError
from utils.constants import UTC_OFFSET_MINUTES

"""
Local-day arithmetic in a fixed UTC-offset civil calendar (no daylight saving).

Reservations are stored as instants, but every rule compares calendar days as
seen in the business timezone (America/Panama, UTC-5 by default). All helpers
here are pure functions.
"""

_ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def local_timezone(offset_minutes: int = UTC_OFFSET_MINUTES) -> tzinfo:
    """Fixed-offset tzinfo for the civil calendar."""
    return timezone(timedelta(minutes=offset_minutes))


def to_local_day(value: Any, offset_minutes: int = UTC_OFFSET_MINUTES) -> dt_date:
    """
    Convert an instant or a civil day into the local calendar day.

    Supports:
      - datetime.date: already a civil day, returned unchanged.
      - datetime.datetime / pd.Timestamp: an instant; naive values are read as UTC.
      - 'YYYY-MM-DD' strings: a civil day.
      - any other string pandas can parse, e.g. '2025-07-07T04:30:00Z': an instant.

    Raises:
        ComputationError: if the value is missing, unparseable or of an unsupported type.
    """
    if value is None or value is pd.NaT:
        raise ComputationError("Cannot convert a missing instant to a local day.")

    if isinstance(value, datetime):
        instant = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
        try:
            return instant.astimezone(local_timezone(offset_minutes)).date()
        except (OverflowError, ValueError) as e:
            raise ComputationError(f"Invalid instant {value!r}: {e}") from e

    if isinstance(value, dt_date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if _ISO_DAY.match(text):
            try:
                return dt_date.fromisoformat(text)
            except ValueError as e:
                raise ComputationError(f"Invalid calendar day '{value}': {e}") from e
        try:
            # pandas handles all common formats using dateutil.parser under the hood
            parsed = pd.to_datetime(text, errors="raise", utc=True)
        except (ValueError, TypeError, OverflowError) as e:
            raise ComputationError(f"Could not parse date string '{value}': {e}") from e
        return to_local_day(parsed.to_pydatetime(), offset_minutes)

    raise ComputationError(f"Unsupported date type: {type(value)}")


def local_day_start(day: dt_date, offset_minutes: int = UTC_OFFSET_MINUTES) -> datetime:
    """UTC instant of 00:00:00.000 local time on `day`."""
    local = datetime.combine(day, time.min, tzinfo=local_timezone(offset_minutes))
    return local.astimezone(timezone.utc)


def local_day_end(day: dt_date, offset_minutes: int = UTC_OFFSET_MINUTES) -> datetime:
    """UTC instant of 23:59:59.999 local time on `day`."""
    local = datetime.combine(
        day, time(23, 59, 59, 999000), tzinfo=local_timezone(offset_minutes)
    )
    return local.astimezone(timezone.utc)


def today_local(
    offset_minutes: int = UTC_OFFSET_MINUTES, now: Optional[datetime] = None
) -> dt_date:
    """Current civil day; `now` pins the clock."""
    if now is None:
        now = datetime.now(timezone.utc)
    return to_local_day(now, offset_minutes)


def add_days(day: dt_date, days: int) -> dt_date:
    return day + timedelta(days=days)


def days_between(start: dt_date, end: dt_date) -> int:
    """Whole days from `start` to `end` (negative when `end` is earlier)."""
    return (end - start).days
