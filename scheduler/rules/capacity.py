from datetime import date
from typing import Iterable
from core.models import CapacityPolicy, DailyStatus, ReservationSpan, RuleResult
from core.state import SearchState

"""
This module contains the daily capacity rule: only so many reservations may launch
on the same local day.
"""

RULE_NAME = "capacity"


def count_launches_on(day: date, spans: Iterable[ReservationSpan]) -> int:
    """Reservations that START on `day`; running through it does not count."""
    return sum(1 for span in spans if span.start_day == day)


def daily_limit_status(count: int, policy: CapacityPolicy) -> DailyStatus:
    if count < policy.min_per_day:
        return DailyStatus.UNDER
    if count > policy.max_per_day:
        return DailyStatus.OVER
    return DailyStatus.OK


def check_daily_capacity(start: date, end: date, state: SearchState) -> RuleResult:
    """
    Check that launching on `start` keeps the day within the capacity band.

    The candidate counts toward its own launch day, so with a maximum of 13 a
    day that already has 13 launches is full. Only `over` blocks; `under` is
    informational. Exempt entities skip the rule.
    """
    if state.daily_limit_exempt:
        return RuleResult.ok(RULE_NAME)

    count = count_launches_on(start, state.spans) + 1
    status = daily_limit_status(count, state.policy)
    if status is not DailyStatus.OVER:
        return RuleResult(rule=RULE_NAME, details={"launches": count, "status": status})

    return RuleResult(
        rule=RULE_NAME,
        violated=True,
        advance_days=1,
        message=f"{start}: {count} offers (max {state.policy.max_per_day}).",
        details={"launches": count, "status": status},
    )
