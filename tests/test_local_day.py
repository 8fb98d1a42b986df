from datetime import date, datetime, timedelta, timezone
import pandas as pd
import pytest
from exceptions.custom_errors import ComputationError
from utils.local_day import (
    add_days,
    days_between,
    local_day_end,
    local_day_start,
    to_local_day,
    today_local,
)


def test_day_boundaries_round_trip_over_ten_years():
    day = date(2020, 1, 1)
    for _ in range(3653):
        assert to_local_day(local_day_start(day)) == day
        assert to_local_day(local_day_end(day)) == day
        day = add_days(day, 1)


def test_local_day_boundaries_are_utc_instants():
    assert local_day_start(date(2025, 7, 7)) == datetime(2025, 7, 7, 5, 0, tzinfo=timezone.utc)
    assert local_day_end(date(2025, 7, 7)) == datetime(
        2025, 7, 8, 4, 59, 59, 999000, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(2025, 7, 7, 4, 30), date(2025, 7, 6)),  # naive read as UTC
        (datetime(2025, 7, 7, 5, 0, tzinfo=timezone.utc), date(2025, 7, 7)),
        (datetime(2025, 7, 7, 23, 0, tzinfo=timezone(timedelta(hours=-5))), date(2025, 7, 7)),
        (pd.Timestamp("2025-07-07T04:59:59Z"), date(2025, 7, 6)),
        (date(2025, 7, 7), date(2025, 7, 7)),
        ("2025-07-07", date(2025, 7, 7)),
        (" 2025-07-07 ", date(2025, 7, 7)),
        ("2025-07-07T04:30:00Z", date(2025, 7, 6)),
        ("2025-07-07T12:00:00-05:00", date(2025, 7, 7)),
    ],
)
def test_to_local_day(value, expected):
    assert to_local_day(value) == expected


def test_to_local_day_is_idempotent():
    for value in ("2025-07-07T04:30:00Z", datetime(2025, 1, 1, 3, 0), date(2024, 2, 29)):
        once = to_local_day(value)
        assert to_local_day(once) == once


def test_to_local_day_respects_offset():
    instant = datetime(2025, 7, 7, 2, 0, tzinfo=timezone.utc)
    assert to_local_day(instant, 0) == date(2025, 7, 7)
    assert to_local_day(instant, -300) == date(2025, 7, 6)
    assert to_local_day(instant, 540) == date(2025, 7, 7)


@pytest.mark.parametrize("value", [None, pd.NaT, "not a date", 42, ["2025-07-07"], "2025-02-30"])
def test_to_local_day_rejects_invalid_input(value):
    with pytest.raises(ComputationError):
        to_local_day(value)


def test_today_local_uses_pinned_clock():
    assert today_local(now=datetime(2025, 7, 2, 3, 0, tzinfo=timezone.utc)) == date(2025, 7, 1)
    assert today_local(0, now=datetime(2025, 7, 2, 3, 0, tzinfo=timezone.utc)) == date(2025, 7, 2)


def test_days_between_and_add_days():
    assert days_between(date(2025, 7, 1), date(2025, 7, 31)) == 30
    assert days_between(date(2025, 7, 31), date(2025, 7, 1)) == -30
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
