from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from core.models import CapacityPolicy, ReservationSpan


@dataclass
class SearchState:
    """
    A dataclass to hold everything resolved for one availability search or
    validation: the reservation snapshot projected onto local days and the
    effective rule parameters.
    """

    # snapshot
    spans: List[ReservationSpan]
    """Existing reservations as local-day spans, without the excluded reservation."""
    category_key: str
    """Canonical key of the new reservation's category."""
    entity_id: Optional[str]
    """Business identifier of the new reservation."""
    entity_name: Optional[str]
    """Merchant name of the new reservation."""

    # effective parameters
    duration_days: int
    """Resolved run length in days."""
    max_duration_days: int
    """Default duration for the category, used as the warning threshold when validating."""
    required_cooldown_days: int
    """Cool-down after the entity's previous reservation, exceptions applied."""
    policy: CapacityPolicy
    """Daily launch band."""
    daily_limit_exempt: bool
    """True when the entity is exempt from the daily capacity rule."""
    utc_offset_minutes: int
    """Fixed offset of the civil calendar."""
    today: date
    """Current local day."""
    max_attempts: int
    """Upper bound on candidates inspected."""

    @property
    def has_entity(self) -> bool:
        return bool(self.entity_id or self.entity_name)
