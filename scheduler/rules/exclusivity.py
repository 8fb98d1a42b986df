from datetime import date
from core.models import RuleResult
from core.state import SearchState
from utils.category_key import category_keys_match

"""
This module contains the category exclusivity rule: two reservations with the same
category key may not run on overlapping days.
"""

RULE_NAME = "exclusivity"


def check_category_exclusivity(start: date, end: date, state: SearchState) -> RuleResult:
    """
    Check that no other reservation of the same category overlaps [start, end].

    Overlap is inclusive on both ends: a reservation ending on `start` still
    conflicts. There is nothing to learn about the next free day from a conflict,
    so the search advances one day at a time.

    :param start: First local day of the candidate.
    :param end: Last local day of the candidate.
    :param state: The SearchState holding the reservation spans and the category key.
    """
    for span in state.spans:
        if not category_keys_match(span.category_key, state.category_key):
            continue
        if start <= span.end_day and end >= span.start_day:
            return RuleResult(
                rule=RULE_NAME,
                violated=True,
                advance_days=1,
                conflicting=span,
                message=(
                    f"Another offer for '{state.category_key}' is active on these dates "
                    f"(reservation {span.reservation_id}, {span.start_day} to {span.end_day})."
                ),
            )
    return RuleResult.ok(RULE_NAME)
