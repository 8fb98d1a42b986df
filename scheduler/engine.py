from datetime import datetime
from typing import Iterable, Optional
from core.config_store import BookingSettings
from core.constraint_manager import ConstraintManager
from core.models import Reservation, SearchRequest, SearchResult
from core.state import SearchState
from exceptions.custom_errors import ComputationError, SchedulerError, SearchExhaustedError
from scheduler.rules import *
from scheduler.setup import setup_search
from utils.local_day import add_days, days_between, local_day_end, local_day_start, to_local_day
from utils.logger import get_logger

logger = get_logger(__name__)


def build_rule_chain(state: SearchState) -> ConstraintManager:
    """Rules in evaluation order: exclusivity, cool-down, capacity."""
    manager = ConstraintManager(state)
    manager.add_rule(check_category_exclusivity)
    manager.add_rule(check_merchant_cooldown, condition=state.has_entity)
    manager.add_rule(check_daily_capacity, condition=not state.daily_limit_exempt)
    return manager


def search(
    request: SearchRequest,
    reservations: Iterable[Reservation],
    settings: BookingSettings,
    *,
    now: Optional[datetime] = None,
    max_attempts: Optional[int] = None,
) -> SearchResult:
    """
    Find the earliest local day on which a new reservation may start.

    Candidates start at max(search_from, today). Each candidate range is checked
    against the rules in order; the first violated rule moves the candidate by its
    own step (one day for exclusivity and capacity, the exact remaining gap for the
    cool-down) and the loop restarts. Every rejected candidate counts as one attempt.

    Args:
        request (SearchRequest): Category, entity, duration and starting point.
        reservations (Iterable[Reservation]): Snapshot of existing reservations.
        settings (BookingSettings): Capacity band, cool-down, durations and exceptions.
        now (Optional[datetime]): Pins the clock; defaults to the current time.
        max_attempts (Optional[int]): Overrides `settings.max_search_days`.

    Returns:
        SearchResult: The start day, its lead time and the effective duration.

    Raises:
        BookingValidationError: If the input is malformed; no search is performed.
        SearchExhaustedError: If no valid day is found within the bound.
        ComputationError: On any unexpected failure.
    """
    try:
        return _run_search(request, reservations, settings, now, max_attempts)
    except SchedulerError:
        raise
    except Exception as e:
        logger.exception(
            f"Availability search failed: request={request!r}, now={now!r}, max_attempts={max_attempts!r}"
        )
        raise ComputationError(f"Failed to calculate next available date: {e}") from e


def _run_search(request, reservations, settings, now, max_attempts) -> SearchResult:
    state = setup_search(request, list(reservations), settings, now, max_attempts)
    manager = build_rule_chain(state)
    offset = state.utc_offset_minutes

    candidate = state.today
    if request.search_from is not None:
        candidate = max(to_local_day(request.search_from, offset), state.today)

    logger.info(
        f"🔎 Searching from {candidate} for '{state.category_key}' "
        f"(entity={state.entity_id or state.entity_name}, duration={state.duration_days}d, "
        f"{len(state.spans)} reservations)"
    )

    attempts = 0
    while attempts < state.max_attempts:
        candidate_end = add_days(candidate, state.duration_days - 1)
        violation = manager.first_violation(candidate, candidate_end)

        if violation is None:
            lead_time = days_between(state.today, candidate)
            logger.info(
                f"✅ Next available date for '{state.category_key}': {candidate} "
                f"({lead_time} days lead time, {attempts} candidates rejected)"
            )
            return SearchResult(
                date=candidate,
                end_date=candidate_end,
                lead_time_days=lead_time,
                duration_days=state.duration_days,
                attempts=attempts,
                starts_at=local_day_start(candidate, offset),
                ends_at=local_day_end(candidate_end, offset),
            )

        logger.debug(
            f"{candidate} rejected by {violation.rule}; advancing {violation.advance_days} day(s)"
        )
        candidate = add_days(candidate, violation.advance_days)
        attempts += 1

    logger.info(
        f"⚠️ No available date for '{state.category_key}' within {state.max_attempts} attempts"
    )
    raise SearchExhaustedError(
        f"No available date found within {state.max_attempts} attempts.",
        attempts=attempts,
    )
