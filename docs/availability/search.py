next_date_description = """
Find the earliest date on which a new offer may launch.

### Request Body

- `request` (`AvailabilityRequest` object):
    - `categoryPath`: Parent category followed by up to four subcategories, e.g. `["RESTAURANTES", "Comida Rápida"]`
    - `businessId`: Business identifier used for the merchant cool-down (Optional)
    - `business`: Business name; also used to look up business exceptions (Optional)
    - `duration`: Run length in days. Defaults to the category duration, then the business `duration` exception, then the global default (Optional)
    - `searchFrom`: Earliest acceptable launch date `YYYY-MM-DD`. Dates before today are moved to today (Optional)
    - `excludeReservationId`: Reservation being edited, ignored by every rule (Optional)
    - `maxAttempts`: Number of candidate dates to inspect before giving up (Optional)

- `reservations`: List of `ReservationItem` objects:
    - `id`: Primary key of the reservation
    - `startDate` / `endDate`: `YYYY-MM-DD` local days or ISO instants
    - `parentCategory`, `subCategory1`..`subCategory4`: Category path
    - `category`: Legacy category text, used only when no path is given
    - `businessId`, `business`: Owner of the reservation
    - `status`: Only `booked` and `pre-booked` reservations are considered

### Rules

1. Only one offer per category can be active on any day.
2. A business must wait `merchantRepeatDays` (or its `cooldownDays` exception) after its previous offer ends.
3. At most `maxDailyLaunches` offers may launch on the same day, the new one included.

### Response

`date`, `endDate`, `daysUntilLaunch`, `durationDays`, `attempts`, `startsAt`, `endsAt`.
A 422 is returned when no date is found within the search bound.
"""

validate_description = """
Check a proposed date range against every booking rule.

All rules are evaluated, so every conflict is reported at once. `warnings` never block
the booking: longer than the category's duration, start in the past, or a launch day under
the daily minimum.
"""

daily_status_description = """
Launch count and capacity status (`under`, `ok`, `over`) for every day of a range, as shown on the calendar.
"""

categories_description = """
Next available launch date for every category of the catalog, soonest first.
"""
