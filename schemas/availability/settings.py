from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, List, Optional


class BusinessException(BaseModel):
    model_config = ConfigDict(extra="allow")

    businessName: str
    exceptionType: str
    exceptionValue: int = Field(ge=0)


class BookingSettingsPayload(BaseModel):
    """
    Booking settings document as saved by the admin settings page.

    Every field is optional; missing fields fall back to the defaults in
    config/constants.json and categoryDurations is merged key by key.
    """

    model_config = ConfigDict(extra="ignore")

    minDailyLaunches: Optional[int] = Field(default=None, ge=0)
    maxDailyLaunches: Optional[int] = Field(default=None, ge=0)
    merchantRepeatDays: Optional[int] = Field(default=None, ge=0)
    defaultDurationDays: Optional[int] = Field(default=None, ge=1)
    categoryDurations: Dict[str, int] = Field(default_factory=dict)
    businessExceptions: List[BusinessException] = Field(default_factory=list)
    utcOffsetMinutes: Optional[int] = Field(default=None, ge=-14 * 60, le=14 * 60)
    maxSearchDays: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_daily_band(self) -> "BookingSettingsPayload":
        if (
            self.minDailyLaunches is not None
            and self.maxDailyLaunches is not None
            and self.minDailyLaunches > self.maxDailyLaunches
        ):
            raise ValueError("minDailyLaunches must be less than or equal to maxDailyLaunches.")
        for key, days in self.categoryDurations.items():
            if days < 1:
                raise ValueError(f"Duration for category '{key}' must be at least 1 day.")
        return self
