import asyncio
from datetime import date, time

from achievement_system.attendance.model import AttendanceRecord
from achievement_system.attendance.service import AttendanceService
from achievement_system.core.enums import AttendanceStatus, PunchAction


def _record(day: date, punch_in=None, punch_out=None, owner_id="u1") -> AttendanceRecord:
    return AttendanceRecord(owner_id=owner_id, work_date=day, punch_in=punch_in, punch_out=punch_out)


def test_day_status_without_record_is_on_leave(records):
    service = AttendanceService(records)
    assert asyncio.run(service.get_day_status("u1", date(2025, 1, 15))) == AttendanceStatus.ON_LEAVE


def test_day_status_prefers_complete_duplicate(records):
    day = date(2025, 1, 15)
    records.attendance = [_record(day, time(9, 0)), _record(day, time(9, 0), time(18, 30))]
    service = AttendanceService(records)
    assert asyncio.run(service.get_day_status("u1", day)) == AttendanceStatus.PRESENT


def test_monthly_summary_skips_sundays_and_counts_missing_days_as_leave(records):
    records.attendance = [
        _record(date(2025, 1, 2), time(9, 30), time(18, 30)),
        _record(date(2025, 1, 3), time(9, 30)),
        _record(date(2025, 1, 2), time(9, 0), time(18, 30), owner_id="other"),
    ]
    service = AttendanceService(records)

    summary = asyncio.run(service.monthly_summary("u1", 2025, 1, today=date(2025, 1, 8)))

    assert summary.present == 1
    assert summary.half_day == 1
    assert summary.on_leave == 5
    assert summary.total_days == 7
    assert "2025-01-05" not in summary.dates


def test_monthly_summary_for_future_month_is_empty(records):
    service = AttendanceService(records)
    summary = asyncio.run(service.monthly_summary("u1", 2025, 3, today=date(2025, 1, 8)))
    assert summary.total_days == 0
    assert records.calls == []


def test_week_strip(records, fixed_now):
    records.attendance = [_record(date(2025, 1, 13), time(9, 30), time(18, 30))]
    service = AttendanceService(records)

    strip = asyncio.run(service.week_strip("u1", today=fixed_now.date()))

    assert [d.day for d in strip] == ["M", "T", "W", "T", "F", "S"]
    assert [d.status for d in strip] == [
        AttendanceStatus.PRESENT,
        AttendanceStatus.ON_LEAVE,
        AttendanceStatus.ON_LEAVE,
        None,
        None,
        None,
    ]


def test_punch_gate_reads_today_and_yesterday(records, fixed_now):
    records.attendance = [_record(fixed_now.date(), time(8, 50))]
    service = AttendanceService(records)

    decision = asyncio.run(service.punch_gate("u1", now=fixed_now))

    assert decision.action == PunchAction.PUNCH_OUT
    assert records.calls[0][2:] == (date(2025, 1, 14), date(2025, 1, 15))


def test_to_ui(records):
    service = AttendanceService(records)
    row = service.to_ui(_record(date(2025, 1, 15), time(10, 0), time(18, 30)))
    assert row == {
        "date": "2025-01-15",
        "punch_in": "10:00",
        "punch_out": "18:30",
        "status": "Half Day",
        "note": "late punch-in",
        "total_hours": 8.5,
    }
