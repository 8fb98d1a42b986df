from typing import List
from fastapi import APIRouter, Body, Depends, HTTPException
from core.config_store import BookingSettings, ConfigurationStore, StaticConfigurationStore
from exceptions.custom_errors import *
from schemas.availability.search import AvailabilityRequest, DateRange, ReservationItem
from scheduler.calendar import category_availability, daily_status_range
from scheduler.engine import search
from scheduler.validator import validate_booking
from docs.availability.search import (
    categories_description,
    daily_status_description,
    next_date_description,
    validate_description,
)
from utils.helpers.booking_payload import (
    category_availability_to_dict,
    day_status_to_dict,
    report_to_dict,
    search_result_to_dict,
    to_reservations,
    to_search_request,
)
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/availability", tags=["Availability"])

_store: ConfigurationStore = StaticConfigurationStore()


def set_configuration_store(store: ConfigurationStore) -> None:
    """Called once by the application at startup."""
    global _store
    _store = store


def get_settings() -> BookingSettings:
    return _store.load()


def _raise_http(e: Exception):
    if type(e) in CUSTOM_ERRORS:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    logger.exception("Unhandled error in availability endpoint")
    raise HTTPException(status_code=500, detail=str(e))


# next available launch date
@router.post(
    "/next-date",
    response_model=dict,
    description=next_date_description,
    summary="Next Available Date",
)
async def next_available_date(
    request: AvailabilityRequest,
    reservations: List[ReservationItem],
    settings: BookingSettings = Depends(get_settings),
):
    try:
        result = search(
            to_search_request(request),
            to_reservations(reservations),
            settings,
            max_attempts=request.maxAttempts,
        )
        return search_result_to_dict(result)
    except Exception as e:
        _raise_http(e)


# validate a proposed range
@router.post(
    "/validate",
    response_model=dict,
    description=validate_description,
    summary="Validate Date Range",
)
async def validate_range(
    request: AvailabilityRequest,
    dates: DateRange,
    reservations: List[ReservationItem],
    settings: BookingSettings = Depends(get_settings),
):
    try:
        report = validate_booking(
            to_search_request(request),
            dates.startDate,
            dates.endDate,
            to_reservations(reservations),
            settings,
        )
        return report_to_dict(report)
    except Exception as e:
        _raise_http(e)


# calendar view
@router.post(
    "/daily-status",
    response_model=dict,
    description=daily_status_description,
    summary="Daily Launch Status",
)
async def daily_status(
    dates: DateRange,
    reservations: List[ReservationItem],
    settings: BookingSettings = Depends(get_settings),
):
    try:
        days = daily_status_range(
            to_reservations(reservations), dates.startDate, dates.endDate, settings
        )
        return {
            "minDailyLaunches": settings.capacity.min_per_day,
            "maxDailyLaunches": settings.capacity.max_per_day,
            "days": [day_status_to_dict(d) for d in days],
        }
    except Exception as e:
        _raise_http(e)


# availability per category
@router.post(
    "/categories",
    response_model=dict,
    description=categories_description,
    summary="Category Availability",
)
async def categories(
    reservations: List[ReservationItem] = Body(..., embed=True),
    settings: BookingSettings = Depends(get_settings),
):
    try:
        if settings.categories is None:
            raise BookingValidationError("No category catalog is configured.")
        items = category_availability(settings.categories, to_reservations(reservations), settings)
        return {"categories": [category_availability_to_dict(i) for i in items]}
    except Exception as e:
        _raise_http(e)
