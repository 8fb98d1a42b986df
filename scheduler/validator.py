from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Optional
from core.config_store import BookingSettings
from core.models import DailyStatus, Reservation, RuleResult, SearchRequest
from exceptions.custom_errors import BookingValidationError, ComputationError, SchedulerError
from scheduler.engine import build_rule_chain
from scheduler.rules import count_launches_on, daily_limit_status
from scheduler.setup import setup_search
from utils.local_day import days_between, to_local_day
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ValidationReport:
    """Result of checking a proposed date range against every rule."""

    start_date: date
    end_date: date
    duration_days: int
    violations: List[RuleResult] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    launches_on_start: int = 0
    """Launches on the start day, the proposed reservation included."""
    daily_status: DailyStatus = DailyStatus.OK

    @property
    def is_valid(self) -> bool:
        return not self.violations


def validate_booking(
    request: SearchRequest,
    start: Any,
    end: Any,
    reservations: Iterable[Reservation],
    settings: BookingSettings,
    *,
    now: Optional[datetime] = None,
) -> ValidationReport:
    """
    Check a human-entered range against exclusivity, cool-down and capacity.

    Unlike the search, every rule is evaluated so that all problems can be shown
    together. Warnings never make the report invalid.
    """
    try:
        return _run_validation(request, start, end, reservations, settings, now)
    except SchedulerError:
        raise
    except Exception as e:
        logger.exception(
            f"Booking validation failed: request={request!r}, start={start!r}, end={end!r}, now={now!r}"
        )
        raise ComputationError(f"Failed to validate booking dates: {e}") from e


def _run_validation(request, start, end, reservations, settings, now) -> ValidationReport:
    offset = settings.utc_offset_minutes
    start_day = to_local_day(start, offset)
    end_day = to_local_day(end, offset)
    if start_day > end_day:
        raise BookingValidationError(f"Start date {start_day} is after end date {end_day}.")

    duration = days_between(start_day, end_day) + 1
    state = setup_search(request, list(reservations), settings, now)

    report = ValidationReport(start_date=start_day, end_date=end_day, duration_days=duration)
    report.violations = [
        r for r in build_rule_chain(state).evaluate_all(start_day, end_day) if r.violated
    ]

    report.launches_on_start = count_launches_on(start_day, state.spans) + 1
    report.daily_status = daily_limit_status(report.launches_on_start, state.policy)

    if duration > state.max_duration_days:
        report.warnings.append(
            f"'{state.category_key}' runs for at most {state.max_duration_days} days; "
            f"the proposed range is {duration} days."
        )
    if start_day < state.today:
        report.warnings.append(f"Start date {start_day} is in the past.")
    if report.daily_status is DailyStatus.UNDER:
        report.warnings.append(
            f"{start_day}: {report.launches_on_start} offers (min {state.policy.min_per_day})."
        )
    return report
