from datetime import date, time

import pytest

from achievement_system.attendance.model import AttendanceRecord
from achievement_system.container import assemble
from achievement_system.main import create_app
from achievement_system.records.model import PerformanceRecord


@pytest.fixture
def client(monkeypatch, records, targets, profiles, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(assemble(records=records, targets=targets, profiles=profiles, clock=clock))
    return app.test_client()


def test_day_status(client, records):
    records.attendance = [AttendanceRecord(owner_id="u1", work_date=date(2025, 1, 15), punch_in=time(10, 0), punch_out=time(19, 0))]
    resp = client.get("/api/attendance/u1/status?date=2025-01-15")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "date": "2025-01-15", "status": "Half Day"}


def test_bad_date_is_400(client):
    resp = client.get("/api/attendance/u1/status?date=15-01-2025")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_classify_endpoint(client):
    resp = client.post("/api/attendance/classify", json={"userId": "u1", "date": "2025-01-15", "punchIn": "09:30", "punchOut": "18:30"})
    body = resp.get_json()
    assert body["status"] == "Present"
    assert body["total_hours"] == 9.0


def test_source_outage_is_503(client, records):
    records.down = True
    resp = client.get("/api/achievement/u1?start=2025-01-13&end=2025-01-19")
    assert resp.status_code == 503
    assert resp.get_json()["success"] is False


def test_achievement_for_window(client, records):
    records.performance = [
        PerformanceRecord(
            owner_id="u1",
            report_date=date(2025, 1, 14),
            meetings_held=30,
            meetings_attended=30,
            total_duration_seconds=72000,
            total_closing_amount=50000,
        )
    ]
    body = client.get("/api/achievement/u1?start=2025-01-13&end=2025-01-19").get_json()
    assert body["percentage_achieved"] == 100.0
    assert body["start"] == "2025-01-13"


def test_series_endpoint(client):
    body = client.get("/api/achievement/u1/series/week?count=5").get_json()
    assert len(body["labels"]) == 5
    assert body["data"] == [0.0] * 5

    assert client.get("/api/achievement/u1/series/decade").status_code == 400
    assert client.get("/api/achievement/u1/series/week?count=0").status_code == 400


def test_leaderboard_endpoint(client, records, profiles):
    records.performance = [
        PerformanceRecord(owner_id="a", report_date=date(2025, 1, 1), percentage_achieved=70),
        PerformanceRecord(owner_id="b", report_date=date(2025, 1, 2), percentage_achieved=70),
    ]
    profiles.docs = {"a": {"name": "Asha"}}
    body = client.get("/api/leaderboard?n=5").get_json()
    assert [(e["user_id"], e["name"]) for e in body["entries"]] == [("b", "Unknown User"), ("a", "Asha")]


def test_targets_endpoint(client):
    body = client.get("/api/targets/u1").get_json()
    assert body["is_default"] is True
    assert body["num_meetings"] == 30


def test_full_month_range_uses_monthly_targets(client, records):
    records.performance = [
        PerformanceRecord(
            owner_id="u1",
            report_date=date(2025, 1, 14),
            meetings_held=30,
            meetings_attended=30,
            total_duration_seconds=72000,
            total_closing_amount=50000,
        )
    ]
    body = client.get("/api/achievement/u1?start=2025-01-01&end=2025-01-31").get_json()
    assert body["percentage_achieved"] == 25.0
    assert body["period_label"] == "Jan"


def test_reversed_range_is_400(client):
    assert client.get("/api/achievement/u1?start=2025-01-31&end=2025-01-01").status_code == 400
