from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Tuple


class DailyStatus(str, Enum):
    """Position of a day's launch count within the capacity band."""

    UNDER = "under"
    OK = "ok"
    OVER = "over"


@dataclass(frozen=True)
class Reservation:
    """
    An existing booking as supplied by the reservation repository.
    """

    id: str
    """Primary key of the reservation."""
    start_date: Any
    """Launch instant or civil day (datetime, pd.Timestamp, date or ISO string)."""
    end_date: Any
    """Last instant or civil day of the run."""
    category_path: Tuple[str, ...] = ()
    """Parent category followed by up to four subcategories."""
    legacy_category: Optional[str] = None
    """Free-text category from before the hierarchy existed, e.g. "HOTELES > Hotel Ciudad"."""
    entity_id: Optional[str] = None
    """Business identifier, used for the merchant cool-down."""
    entity_name: Optional[str] = None
    """Merchant / business name, used when no identifier is available."""
    status: str = "booked"
    """Booking status; only blocking statuses are kept by the repository adapter."""


@dataclass(frozen=True)
class ReservationSpan:
    """
    A reservation projected onto local calendar days, built once per search.
    """

    reservation_id: str
    category_key: Optional[str]
    entity_id: Optional[str]
    entity_name: Optional[str]
    start_day: date
    end_day: date


@dataclass(frozen=True)
class CapacityPolicy:
    """How many reservations may launch on the same local day."""

    min_per_day: int
    max_per_day: int


@dataclass(frozen=True)
class SearchRequest:
    """
    Input of a search or of a standalone validation.
    """

    category_path: Tuple[str, ...]
    """Category of the new reservation (1-5 segments)."""
    entity_id: Optional[str] = None
    """Business identifier of the new reservation."""
    entity_name: Optional[str] = None
    """Merchant name; also the lookup key for entity exceptions."""
    requested_duration: Optional[int] = None
    """Run length in days; resolved from configuration when missing."""
    search_from: Any = None
    """Earliest acceptable start (date or instant); today when missing."""
    exclude_reservation_id: Optional[str] = None
    """Reservation being edited, ignored by every rule."""

    @property
    def has_entity(self) -> bool:
        return bool(self.entity_id or self.entity_name)

    @property
    def exception_key(self) -> Optional[str]:
        """Name used to look up entity exceptions."""
        return self.entity_name or self.entity_id


@dataclass(frozen=True)
class SearchResult:
    """
    Earliest valid start date found by the search engine.
    """

    date: date
    """Local start day."""
    end_date: date
    """Local end day (date + duration - 1)."""
    lead_time_days: int
    """Days between today (local) and the start day."""
    duration_days: int
    """Effective duration used for the search."""
    attempts: int
    """Rejected candidates before the result was found."""
    starts_at: datetime
    """UTC instant of the local start of `date`."""
    ends_at: datetime
    """UTC instant of the local end of `end_date`."""


@dataclass(frozen=True)
class RuleResult:
    """
    Outcome of one rule evaluation for a candidate range.
    """

    rule: str
    violated: bool = False
    advance_days: int = 0
    """How far the search must move the candidate when violated."""
    conflicting: Optional[ReservationSpan] = None
    message: str = ""
    details: dict = field(default_factory=dict)

    @classmethod
    def ok(cls, rule: str) -> "RuleResult":
        return cls(rule=rule)
