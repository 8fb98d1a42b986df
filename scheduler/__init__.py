"""
scheduler
---------

Booking availability scheduling. Initializes key components:

- `setup`: Reservation spans, duration resolution and search state.
- `engine`: Next-available-date search over the rule chain.
- `validator`: Full rule report for a proposed booking.
- `calendar`: Daily launch status and per-category availability.

Provides high-level access to core scheduling functionality.
"""
from . import setup, engine, validator, calendar
