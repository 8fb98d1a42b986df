from typing import List, Optional
from core.models import CapacityPolicy


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_search_params(
    requested_duration: Optional[int],
    policy: CapacityPolicy,
    max_attempts: int,
    merchant_repeat_days: int,
) -> List[str]:
    """
    Validate the numeric parameters of a search.

    Returns:
        List[str]: Human-readable problems, prefixed with a header line; empty when all is well.
    """
    errors = []

    if requested_duration is not None and (
        not _is_int(requested_duration) or requested_duration < 1
    ):
        errors.append(
            f" • Duration must be a positive number of days, got {requested_duration!r}.\n"
        )

    if not _is_int(policy.min_per_day) or policy.min_per_day < 0:
        errors.append(" • Minimum daily launches must be a non-negative integer.\n")

    if not _is_int(policy.max_per_day) or policy.max_per_day < 0:
        errors.append(" • Maximum daily launches must be a non-negative integer.\n")
    elif _is_int(policy.min_per_day) and policy.min_per_day > policy.max_per_day:
        errors.append(
            f" • Minimum daily launches ({policy.min_per_day}) must be less than or equal to maximum ({policy.max_per_day}).\n"
        )

    if not _is_int(max_attempts) or max_attempts < 1:
        errors.append(f" • Search bound must be at least 1 day, got {max_attempts!r}.\n")

    if not _is_int(merchant_repeat_days) or merchant_repeat_days < 0:
        errors.append(" • Merchant repeat days must be a non-negative integer.\n")

    if errors:
        errors.insert(0, "Recheck your inputs:\n")

    return errors
