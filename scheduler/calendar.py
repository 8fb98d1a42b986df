from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Tuple
from core.category_tree import CategoryTree
from core.config_store import BookingSettings
from core.models import DailyStatus, Reservation, SearchRequest
from exceptions.custom_errors import BookingValidationError, SearchExhaustedError
from scheduler.engine import search
from scheduler.rules import count_launches_on, daily_limit_status
from scheduler.setup import build_spans
from utils.category_key import build_category_key
from utils.local_day import add_days, days_between, to_local_day
from utils.logger import get_logger

logger = get_logger(__name__)

# calendar views never span more than this many days
MAX_CALENDAR_DAYS = 366


@dataclass(frozen=True)
class DayStatus:
    day: date
    launches: int
    status: DailyStatus


@dataclass(frozen=True)
class CategoryAvailability:
    category_path: Tuple[str, ...]
    category_key: str
    next_available_date: Optional[date]
    lead_time_days: Optional[int]
    error: Optional[str] = None


def daily_status_range(
    reservations: Iterable[Reservation],
    start: Any,
    end: Any,
    settings: BookingSettings,
) -> List[DayStatus]:
    """Launch count and capacity status for every local day in [start, end]."""
    offset = settings.utc_offset_minutes
    first = to_local_day(start, offset)
    last = to_local_day(end, offset)
    if first > last:
        raise BookingValidationError(f"Start date {first} is after end date {last}.")
    if days_between(first, last) + 1 > MAX_CALENDAR_DAYS:
        raise BookingValidationError(f"Calendar range is limited to {MAX_CALENDAR_DAYS} days.")

    spans = build_spans(reservations, offset)
    statuses = []
    day = first
    while day <= last:
        count = count_launches_on(day, spans)
        statuses.append(DayStatus(day, count, daily_limit_status(count, settings.capacity)))
        day = add_days(day, 1)
    return statuses


def category_availability(
    tree: CategoryTree,
    reservations: Iterable[Reservation],
    settings: BookingSettings,
    *,
    now: Optional[datetime] = None,
) -> List[CategoryAvailability]:
    """
    Next available launch date for every leaf category of the catalog.

    Categories with no date inside the search bound are kept, with the error text,
    at the end of the list; the others are sorted soonest first.
    """
    snapshot = list(reservations)
    results = []
    for path in tree.paths():
        key = build_category_key(path)
        try:
            found = search(SearchRequest(category_path=path), snapshot, settings, now=now)
        except SearchExhaustedError as e:
            logger.info(f"No availability for '{key}': {e}")
            results.append(CategoryAvailability(path, key, None, None, str(e)))
            continue
        results.append(CategoryAvailability(path, key, found.date, found.lead_time_days))

    return sorted(
        results,
        key=lambda r: (r.next_available_date is None, r.next_available_date or date.max, r.category_key),
    )
