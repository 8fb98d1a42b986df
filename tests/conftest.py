from datetime import date, datetime, timezone
import pytest
from core.config_store import default_settings
from core.models import Reservation

# 12:00 local time in Panama (UTC-5)
NOW = datetime(2025, 7, 1, 17, 0, tzinfo=timezone.utc)
TODAY = date(2025, 7, 1)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def settings():
    return default_settings()


@pytest.fixture
def make_reservation():
    counter = {"n": 0}

    def _make(start, end, path=("SERVICIOS", "Hogar"), **kwargs):
        counter["n"] += 1
        kwargs.setdefault("id", f"r{counter['n']}")
        return Reservation(start_date=start, end_date=end, category_path=tuple(path), **kwargs)

    return _make
