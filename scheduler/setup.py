from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional
from core.config_store import BookingSettings
from core.exception_resolver import ExceptionKind, resolve_exception, validate_exceptions
from core.models import Reservation, ReservationSpan, SearchRequest
from core.state import SearchState
from exceptions.custom_errors import BookingValidationError
from utils.category_key import build_category_key, category_key_prefixes, validate_category_path
from utils.local_day import today_local, to_local_day
from utils.validate import validate_search_params


def to_span(reservation: Reservation, offset_minutes: int) -> ReservationSpan:
    """Project a reservation onto local days."""
    start_day = to_local_day(reservation.start_date, offset_minutes)
    end_day = to_local_day(reservation.end_date, offset_minutes)
    if start_day > end_day:
        raise BookingValidationError(
            f"Reservation {reservation.id} starts ({start_day}) after it ends ({end_day})."
        )
    return ReservationSpan(
        reservation_id=str(reservation.id),
        category_key=build_category_key(reservation.category_path, reservation.legacy_category),
        entity_id=reservation.entity_id,
        entity_name=reservation.entity_name,
        start_day=start_day,
        end_day=end_day,
    )


def build_spans(
    reservations: Iterable[Reservation],
    offset_minutes: int,
    exclude_id: Optional[str] = None,
) -> List[ReservationSpan]:
    """Spans for every reservation except `exclude_id`."""
    return [
        to_span(r, offset_minutes)
        for r in reservations
        if exclude_id is None or str(r.id) != str(exclude_id)
    ]


def category_default_duration(category_path, settings: BookingSettings) -> Optional[int]:
    """Duration configured for the most specific prefix of the path, if any."""
    for key in category_key_prefixes(category_path):
        if key in settings.category_durations:
            return settings.category_durations[key]
    return None


def resolve_duration(request: SearchRequest, settings: BookingSettings) -> int:
    """
    Effective duration: the explicit request, else the category default, else the
    entity's duration exception, else the global default.
    """
    if request.requested_duration is not None:
        duration = request.requested_duration
    else:
        duration = category_default_duration(request.category_path, settings)
        if duration is None:
            duration = resolve_exception(
                request.exception_key,
                ExceptionKind.DURATION,
                None,
                settings.entity_exceptions,
            )
        if duration is None:
            duration = settings.default_duration_days

    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 1:
        raise BookingValidationError(f"Duration must be a positive number of days, got {duration!r}.")
    return duration


def setup_search(
    request: SearchRequest,
    reservations: Iterable[Reservation],
    settings: BookingSettings,
    now: Optional[datetime] = None,
    max_attempts: Optional[int] = None,
) -> SearchState:
    """
    Validate the inputs and resolve everything a search needs.

    Args:
        request (SearchRequest): Category, entity, duration and starting point of the new reservation.
        reservations (Iterable[Reservation]): Snapshot of existing reservations.
        settings (BookingSettings): Capacity band, cool-down, durations and exceptions.
        now (Optional[datetime]): Pins the clock; defaults to the current time.
        max_attempts (Optional[int]): Search bound; defaults to `settings.max_search_days`.

    Returns:
        SearchState: Spans, category key and the effective rule parameters.

    Raises:
        BookingValidationError: If the request, settings or a reservation is malformed.
        ComputationError: If an instant cannot be placed on a local day.
    """
    path = validate_category_path(request.category_path)
    attempts = settings.max_search_days if max_attempts is None else max_attempts

    errors = validate_search_params(
        requested_duration=request.requested_duration,
        policy=settings.capacity,
        max_attempts=attempts,
        merchant_repeat_days=settings.merchant_repeat_days,
    )
    if errors:
        raise BookingValidationError("".join(errors))
    validate_exceptions(settings.entity_exceptions)

    offset = settings.utc_offset_minutes
    required_cooldown = resolve_exception(
        request.exception_key,
        ExceptionKind.COOLDOWN_DAYS,
        settings.merchant_repeat_days,
        settings.entity_exceptions,
    )
    exempt = (
        resolve_exception(
            request.exception_key,
            ExceptionKind.DAILY_LIMIT_EXEMPT,
            0,
            settings.entity_exceptions,
        )
        == 1
    )
    default_duration = resolve_duration(replace(request, requested_duration=None), settings)

    return SearchState(
        spans=build_spans(reservations, offset, request.exclude_reservation_id),
        category_key=build_category_key(path),
        entity_id=request.entity_id,
        entity_name=request.entity_name,
        duration_days=resolve_duration(request, settings),
        max_duration_days=default_duration,
        required_cooldown_days=required_cooldown,
        policy=settings.capacity,
        daily_limit_exempt=exempt,
        utc_offset_minutes=offset,
        today=today_local(offset, now),
        max_attempts=attempts,
    )
