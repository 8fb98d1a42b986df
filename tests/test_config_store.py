import json
import pytest
from core.config_store import (
    JsonConfigurationStore,
    StaticConfigurationStore,
    default_settings,
    settings_from_payload,
)
from exceptions.custom_errors import BookingValidationError, FileReadingError
from schemas.availability.settings import BookingSettingsPayload


def test_defaults_come_from_constants():
    settings = default_settings()
    assert settings.capacity.min_per_day == 5
    assert settings.capacity.max_per_day == 13
    assert settings.merchant_repeat_days == 30
    assert settings.utc_offset_minutes == -300
    assert settings.max_search_days == 730
    assert settings.category_durations["RESTAURANTES:Comida Rápida"] == 7
    assert settings.category_durations["CURSOS"] == 5
    assert settings.categories is not None


def test_static_store_returns_its_settings():
    settings = default_settings().with_overrides(merchant_repeat_days=12)
    assert StaticConfigurationStore(settings).load() is settings
    assert StaticConfigurationStore().load().merchant_repeat_days == 30


def test_json_store_merges_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "minDailyLaunches": 2,
                "maxDailyLaunches": 4,
                "merchantRepeatDays": 15,
                "categoryDurations": {"HOTELES": 3},
                "businessExceptions": [
                    {"businessName": "Hotel Sol", "exceptionType": "cooldownDays", "exceptionValue": 10}
                ],
            }
        ),
        encoding="utf-8",
    )
    settings = JsonConfigurationStore(path).load()
    assert (settings.capacity.min_per_day, settings.capacity.max_per_day) == (2, 4)
    assert settings.merchant_repeat_days == 15
    assert settings.category_durations["HOTELES"] == 3
    assert settings.category_durations["HOTELES:Hotel Ciudad"] == 7
    assert settings.entity_exceptions[0].entity_name == "Hotel Sol"
    assert settings.default_duration_days == 5


def test_json_store_unreadable(tmp_path):
    with pytest.raises(FileReadingError):
        JsonConfigurationStore(tmp_path / "missing.json").load()
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileReadingError):
        JsonConfigurationStore(bad).load()


@pytest.mark.parametrize(
    "raw",
    [
        {"minDailyLaunches": 9, "maxDailyLaunches": 3},
        {"categoryDurations": {"HOTELES": 0}},
        {"businessExceptions": [{"businessName": "A", "exceptionType": "duration", "exceptionValue": -1}]},
        {"maxSearchDays": 0},
    ],
)
def test_json_store_invalid_documents(tmp_path, raw):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    with pytest.raises(BookingValidationError):
        JsonConfigurationStore(path).load()


def test_payload_band_checked_against_base():
    payload = BookingSettingsPayload(minDailyLaunches=20)
    with pytest.raises(BookingValidationError):
        settings_from_payload(payload)


def test_payload_duplicate_exceptions():
    payload = BookingSettingsPayload(
        businessExceptions=[
            {"businessName": "Hotel Sol", "exceptionType": "duration", "exceptionValue": 3},
            {"businessName": "HOTEL SOL", "exceptionType": "duration", "exceptionValue": 4},
        ]
    )
    with pytest.raises(BookingValidationError):
        settings_from_payload(payload)


def test_json_store_accepts_repeat_days_exceptions(tmp_path, now):
    from core.models import SearchRequest
    from core.exception_resolver import ExceptionKind, resolve_exception
    from scheduler.setup import setup_search

    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "businessExceptions": [
                    {"businessName": "Spa Luna", "exceptionType": "repeatDays", "exceptionValue": 5}
                ]
            }
        ),
        encoding="utf-8",
    )
    settings = JsonConfigurationStore(path).load()
    assert resolve_exception("spa luna", ExceptionKind.COOLDOWN_DAYS, 30, settings.entity_exceptions) == 5

    state = setup_search(SearchRequest(("CURSOS",), entity_name="Spa Luna"), [], settings, now)
    assert state.required_cooldown_days == 5
