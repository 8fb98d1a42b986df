from datetime import timedelta
import pytest
from fastapi.testclient import TestClient
import main
from api.availability import get_settings
from core.config_store import default_settings
from utils.local_day import today_local


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", None)
    monkeypatch.setattr(main, "MAX_BODY_BYTES", 0)
    main.app.dependency_overrides[get_settings] = default_settings
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


@pytest.fixture
def today():
    return today_local()


def day(today, offset=0):
    return (today + timedelta(days=offset)).isoformat()


def item(id, start, end, parent="HOTELES", sub1="Hotel Ciudad", **extra):
    return {
        "id": id,
        "startDate": start,
        "endDate": end,
        "parentCategory": parent,
        "subCategory1": sub1,
        **extra,
    }


def test_healthcheck(client, today):
    response = client.get("/api/health/check")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "today": today.isoformat()}


def test_next_date_on_empty_calendar(client, today):
    response = client.post(
        "/api/availability/next-date",
        json={"request": {"categoryPath": ["HOTELES", "Hotel Ciudad"]}, "reservations": []},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["date"] == today.isoformat()
    assert body["daysUntilLaunch"] == 0
    assert body["durationDays"] == 7
    assert body["endDate"] == day(today, 6)


def test_next_date_skips_blocked_days(client, today):
    reservations = [
        item("1", day(today), day(today, 4)),
        item("2", day(today), day(today, 30), status="cancelled"),
    ]
    response = client.post(
        "/api/availability/next-date",
        json={"request": {"categoryPath": ["HOTELES", "Hotel Ciudad"]}, "reservations": reservations},
    )
    assert response.status_code == 200
    assert response.json()["date"] == day(today, 5)


def test_next_date_exhausted_is_422(client, today):
    response = client.post(
        "/api/availability/next-date",
        json={
            "request": {"categoryPath": ["HOTELES", "Hotel Ciudad"], "maxAttempts": 2},
            "reservations": [item("1", day(today), day(today, 10))],
        },
    )
    assert response.status_code == 422
    assert "2 attempts" in response.json()["detail"]


@pytest.mark.parametrize(
    "request_body",
    [
        {"categoryPath": []},
        {"categoryPath": ["  "]},
        {"categoryPath": ["HOTELES"], "duration": 0},
        {"categoryPath": ["HOTELES"], "searchFrom": "not a date"},
    ],
)
def test_next_date_rejects_malformed_requests(client, request_body):
    response = client.post(
        "/api/availability/next-date", json={"request": request_body, "reservations": []}
    )
    assert response.status_code == 422


def test_reservation_ending_before_it_starts_is_400(client, today):
    response = client.post(
        "/api/availability/next-date",
        json={
            "request": {"categoryPath": ["HOTELES"]},
            "reservations": [item("1", day(today, 3), day(today))],
        },
    )
    assert response.status_code == 400


def test_validate_reports_conflicts(client, today):
    response = client.post(
        "/api/availability/validate",
        json={
            "request": {"categoryPath": ["HOTELES", "Hotel Ciudad"], "business": "Hotel Sol"},
            "dates": {"startDate": day(today, 2), "endDate": day(today, 6)},
            "reservations": [item("1", day(today), day(today, 4), business="Hotel Sol")],
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert [v["rule"] for v in body["violations"]] == ["exclusivity", "cooldown"]
    assert body["violations"][0]["conflictingReservationId"] == "1"
    assert body["durationDays"] == 5


def test_daily_status(client, today):
    reservations = [
        item("1", day(today, 1), day(today, 3)),
        item("2", day(today, 1), day(today, 1), parent="CURSOS", sub1=None),
    ]
    response = client.post(
        "/api/availability/daily-status",
        json={"dates": {"startDate": day(today), "endDate": day(today, 2)}, "reservations": reservations},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["maxDailyLaunches"] == 13
    assert [d["launches"] for d in body["days"]] == [0, 2, 0]
    assert [d["status"] for d in body["days"]] == ["under", "under", "under"]


def test_categories(client, today):
    response = client.post(
        "/api/availability/categories",
        json={"reservations": [item("1", day(today), day(today, 4), sub1="Hotel de Playa", subCategory2="Todo Incluido")]},
    )
    assert response.status_code == 200
    categories = response.json()["categories"]
    assert len(categories) == len(default_settings().categories.paths())
    assert categories[0]["daysUntilLaunch"] == 0
    assert categories[-1]["categoryKey"] == "HOTELES:Hotel de Playa:Todo Incluido"
    assert categories[-1]["nextAvailableDate"] == day(today, 5)


def test_api_key_guard(client, monkeypatch):
    monkeypatch.setattr(main, "API_KEY", "secret")
    body = {"request": {"categoryPath": ["HOTELES"]}, "reservations": []}

    assert client.post("/api/availability/next-date", json=body).status_code == 401
    response = client.post(
        "/api/availability/next-date", json=body, headers={"x-api-key": "secret"}
    )
    assert response.status_code == 200
    assert client.get("/api/health/check").status_code == 200


def test_healthcheck_uses_the_configured_offset(client):
    far_east = default_settings().with_overrides(utc_offset_minutes=14 * 60)
    main.app.dependency_overrides[get_settings] = lambda: far_east
    response = client.get("/api/health/check")
    assert response.status_code == 200
    assert response.json()["today"] == today_local(14 * 60).isoformat()
