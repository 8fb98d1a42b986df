import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union
from pydantic import ValidationError
from core.category_tree import CategoryTree
from core.exception_resolver import EntityException, validate_exceptions
from core.models import CapacityPolicy
from exceptions.custom_errors import BookingValidationError, FileReadingError
from schemas.availability.settings import BookingSettingsPayload
from utils.constants import *
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BookingSettings:
    """
    Snapshot of every configurable input of the scheduler.
    """

    capacity: CapacityPolicy
    """Daily launch band."""
    merchant_repeat_days: int = MERCHANT_REPEAT_DAYS
    """Default cool-down between two reservations of the same business."""
    default_duration_days: int = DEFAULT_DURATION_DAYS
    """Duration used when neither the request, the category nor an exception sets one."""
    category_durations: Dict[str, int] = field(default_factory=dict)
    """Category key → default duration."""
    entity_exceptions: Tuple[EntityException, ...] = ()
    """Per-business overrides."""
    utc_offset_minutes: int = UTC_OFFSET_MINUTES
    """Fixed offset of the civil calendar."""
    max_search_days: int = MAX_DATE_SEARCH_DAYS
    """Upper bound on candidates inspected by one search."""
    categories: Optional[CategoryTree] = None
    """Catalog the category durations were seeded from."""

    def with_overrides(self, **changes) -> "BookingSettings":
        return replace(self, **changes)


def default_category_tree() -> CategoryTree:
    return CategoryTree.from_raw(CATEGORY_HIERARCHY)


def default_settings() -> BookingSettings:
    """Settings built from config/constants.json and the seed catalog."""
    tree = default_category_tree()
    return BookingSettings(
        capacity=CapacityPolicy(MIN_DAILY_LAUNCHES, MAX_DAILY_LAUNCHES),
        category_durations=tree.default_durations(
            LONG_DURATION_CATEGORIES, LONG_DURATION_DAYS, DEFAULT_DURATION_DAYS
        ),
        categories=tree,
    )


def settings_from_payload(
    payload: BookingSettingsPayload, base: Optional[BookingSettings] = None
) -> BookingSettings:
    """Merge a saved settings document over `base` (defaults when omitted)."""
    base = base or default_settings()
    exceptions = tuple(
        EntityException(ex.businessName, ex.exceptionType, ex.exceptionValue)
        for ex in payload.businessExceptions
    )
    validate_exceptions(exceptions)

    min_daily = (
        payload.minDailyLaunches
        if payload.minDailyLaunches is not None
        else base.capacity.min_per_day
    )
    max_daily = (
        payload.maxDailyLaunches
        if payload.maxDailyLaunches is not None
        else base.capacity.max_per_day
    )
    if min_daily > max_daily:
        raise BookingValidationError(
            f"Minimum daily launches ({min_daily}) must not exceed maximum ({max_daily})."
        )

    changes = {
        "capacity": CapacityPolicy(min_daily, max_daily),
        "category_durations": {**base.category_durations, **payload.categoryDurations},
        "entity_exceptions": exceptions or base.entity_exceptions,
    }
    if payload.merchantRepeatDays is not None:
        changes["merchant_repeat_days"] = payload.merchantRepeatDays
    if payload.defaultDurationDays is not None:
        changes["default_duration_days"] = payload.defaultDurationDays
    if payload.utcOffsetMinutes is not None:
        changes["utc_offset_minutes"] = payload.utcOffsetMinutes
    if payload.maxSearchDays is not None:
        changes["max_search_days"] = payload.maxSearchDays
    return base.with_overrides(**changes)


class ConfigurationStore(ABC):
    """Source of BookingSettings handed to the scheduler by the caller."""

    @abstractmethod
    def load(self) -> BookingSettings:
        ...


class StaticConfigurationStore(ConfigurationStore):
    def __init__(self, settings: Optional[BookingSettings] = None):
        self._settings = settings or default_settings()

    def load(self) -> BookingSettings:
        return self._settings


class JsonConfigurationStore(ConfigurationStore):
    """Reads the settings document from a JSON file on every load."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> BookingSettings:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileReadingError(f"Error loading booking settings from {self.path}: {e}")

        try:
            payload = BookingSettingsPayload.model_validate(raw)
        except ValidationError as e:
            raise BookingValidationError(f"Invalid booking settings in {self.path}:\n{e}")

        logger.info(f"Loaded booking settings from {self.path}")
        return settings_from_payload(payload)
