"""
scheduler.rules
---------------

Exposes the booking rules, evaluated in this order:

- `exclusivity`: One active offer per category key at a time.
- `cooldown`: Minimum gap between two offers of the same business.
- `capacity`: Daily launch band.

Allows unified access to all rule definitions via wildcard imports.
"""
from .exclusivity import check_category_exclusivity
from .cooldown import check_merchant_cooldown, shares_entity
from .capacity import check_daily_capacity, count_launches_on, daily_limit_status
