from datetime import date, datetime, time, timedelta

from achievement_system.attendance.gate import PunchGate
from achievement_system.attendance.model import AttendanceRecord
from achievement_system.core.enums import PunchAction


def _record(day: date, punch_in=None, punch_out=None) -> AttendanceRecord:
    return AttendanceRecord(owner_id="u1", work_date=day, punch_in=punch_in, punch_out=punch_out)


def test_punch_in_open_before_deadline(fixed_now):
    decision = PunchGate().evaluate(today=None, previous=None, now=fixed_now)
    assert decision.action == PunchAction.PUNCH_IN
    assert decision.allowed


def test_punch_in_closed_after_deadline(fixed_now):
    now = fixed_now.replace(hour=9, minute=46)
    decision = PunchGate().evaluate(today=None, previous=None, now=now)
    assert not decision.allowed
    assert decision.reopens_at == datetime(2025, 1, 16, 8, 45)


def test_deadline_minute_itself_is_open(fixed_now):
    now = fixed_now.replace(hour=9, minute=45, second=59)
    assert PunchGate().evaluate(today=None, previous=None, now=now).allowed


def test_punch_out_offered_once_punched_in(fixed_now):
    today = _record(fixed_now.date(), time(9, 0))
    decision = PunchGate().evaluate(today=today, previous=None, now=fixed_now.replace(hour=20))
    assert decision.action == PunchAction.PUNCH_OUT
    assert decision.allowed


def test_blocked_after_punch_out_until_next_reopen(fixed_now):
    today = _record(fixed_now.date(), time(9, 0), time(18, 30))
    decision = PunchGate().evaluate(today=today, previous=None, now=fixed_now.replace(hour=19))
    assert not decision.allowed
    assert decision.reopens_at == datetime(2025, 1, 16, 8, 45)


def test_blocked_before_reopen_after_completed_previous_day(fixed_now):
    previous = _record(fixed_now.date() - timedelta(days=1), time(9, 0), time(18, 30))
    gate = PunchGate()

    early = gate.evaluate(today=None, previous=previous, now=fixed_now.replace(hour=8, minute=30))
    assert not early.allowed
    assert early.reopens_at == datetime(2025, 1, 15, 8, 45)

    assert gate.evaluate(today=None, previous=previous, now=fixed_now.replace(hour=8, minute=45)).allowed
