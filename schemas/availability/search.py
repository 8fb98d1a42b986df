from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from exceptions.custom_errors import ComputationError
from utils.constants import MAX_CATEGORY_DEPTH
from utils.local_day import to_local_day


def check_date_text(value: Optional[str]) -> Optional[str]:
    """
    Dates travel as strings: 'YYYY-MM-DD' is a local calendar day, anything with a
    time of day ('2025-07-07T04:30:00Z') is an instant. Reject what cannot be
    placed on the calendar before it reaches the scheduler.
    """
    if value is None:
        return value
    try:
        to_local_day(value)
    except ComputationError as e:
        raise ValueError(str(e))
    return value


# Define data models
class ReservationItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    startDate: str
    endDate: str
    parentCategory: Optional[str] = None
    subCategory1: Optional[str] = None
    subCategory2: Optional[str] = None
    subCategory3: Optional[str] = None
    subCategory4: Optional[str] = None
    category: Optional[str] = None  # legacy "A > B > C" text
    businessId: Optional[str] = None
    business: Optional[str] = None
    status: str = "booked"

    @field_validator("startDate", "endDate")
    @classmethod
    def check_dates(cls, v: str) -> str:
        return check_date_text(v)


class AvailabilityRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    categoryPath: List[str] = Field(min_length=1, max_length=MAX_CATEGORY_DEPTH)
    businessId: Optional[str] = None
    business: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=1)
    searchFrom: Optional[str] = None
    excludeReservationId: Optional[str] = None
    maxAttempts: Optional[int] = Field(default=None, ge=1, le=3650)

    @field_validator("searchFrom")
    @classmethod
    def check_search_from(cls, v: Optional[str]) -> Optional[str]:
        return check_date_text(v)

    @model_validator(mode="after")
    def check_category_path(self) -> "AvailabilityRequest":
        if not self.categoryPath[0].strip():
            raise ValueError("categoryPath must start with a parent category.")
        return self


class DateRange(BaseModel):
    startDate: str
    endDate: str

    @field_validator("startDate", "endDate")
    @classmethod
    def check_dates(cls, v: str) -> str:
        return check_date_text(v)
