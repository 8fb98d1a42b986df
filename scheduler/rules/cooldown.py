from datetime import date
from typing import Optional
from core.models import ReservationSpan, RuleResult
from core.state import SearchState

"""
This module contains the merchant cool-down rule: a business must wait a minimum
number of days after its previous reservation ends before launching again.
"""

RULE_NAME = "cooldown"


def shares_entity(
    span: ReservationSpan, entity_id: Optional[str], entity_name: Optional[str]
) -> bool:
    """Same business when both sides carry an id and the ids match, else when the names match."""
    if entity_id and span.entity_id:
        return span.entity_id == entity_id
    if entity_name and span.entity_name:
        return span.entity_name.strip().lower() == entity_name.strip().lower()
    return False


def check_merchant_cooldown(start: date, end: date, state: SearchState) -> RuleResult:
    """
    Check the cool-down between the entity's reservations and the candidate start.

    days_since = start - other.end_day, in whole local days. The reservation with
    the smallest days_since is the most restrictive; the rule is violated when it
    is below the required gap, and `days_since == required` is allowed. The next
    valid start is known exactly, so the advance is `required - days_since`.
    """
    if not state.has_entity:
        return RuleResult.ok(RULE_NAME)

    required = state.required_cooldown_days
    closest: Optional[ReservationSpan] = None
    closest_gap: Optional[int] = None
    for span in state.spans:
        if not shares_entity(span, state.entity_id, state.entity_name):
            continue
        days_since = (start - span.end_day).days
        if closest_gap is None or days_since < closest_gap:
            closest, closest_gap = span, days_since

    if closest is None or closest_gap >= required:
        return RuleResult.ok(RULE_NAME)

    wait = required - closest_gap
    who = state.entity_name or state.entity_id
    return RuleResult(
        rule=RULE_NAME,
        violated=True,
        advance_days=wait,
        conflicting=closest,
        message=(
            f"Business '{who}' had an offer ending {closest.end_day}, less than "
            f"{required} days before {start}. It must wait {wait} more days."
        ),
        details={"required_days": required, "days_since": closest_gap},
    )
