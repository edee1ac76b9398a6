from datetime import date, time

import pytest

from achievement_system.attendance.classifier import AttendanceClassifier, total_hours
from achievement_system.attendance.model import AttendanceRecord, AttendanceRules
from achievement_system.core.enums import AttendanceStatus
from achievement_system.core.exceptions import ParseError

DAY = date(2025, 1, 15)


def _record(punch_in=None, punch_out=None) -> AttendanceRecord:
    return AttendanceRecord(owner_id="u1", work_date=DAY, punch_in=punch_in, punch_out=punch_out)


@pytest.mark.parametrize(
    "punch_in, punch_out, expected",
    [
        (None, None, AttendanceStatus.ON_LEAVE),
        (time(9, 0), None, AttendanceStatus.HALF_DAY),
        (time(9, 30), time(18, 30), AttendanceStatus.PRESENT),
        (time(9, 45), time(18, 25), AttendanceStatus.PRESENT),
        (time(10, 0), time(19, 0), AttendanceStatus.HALF_DAY),
        (time(9, 0), time(17, 0), AttendanceStatus.HALF_DAY),
        (time(9, 0), time(8, 0), AttendanceStatus.HALF_DAY),
        (None, time(18, 30), AttendanceStatus.ON_LEAVE),
    ],
)
def test_classify(punch_in, punch_out, expected):
    assert AttendanceClassifier().classify(_record(punch_in, punch_out)) == expected


def test_classify_ignores_stored_status():
    record = AttendanceRecord(
        owner_id="u1",
        work_date=DAY,
        punch_in=time(11, 0),
        punch_out=time(19, 0),
        stored_status=AttendanceStatus.PRESENT,
    )
    assert AttendanceClassifier().classify(record) == AttendanceStatus.HALF_DAY


def test_decide_reports_reason():
    decision = AttendanceClassifier().decide(_record(time(10, 0), time(17, 0)))
    assert decision.status == AttendanceStatus.HALF_DAY
    assert decision.note == "late punch-in, early punch-out"


def test_custom_rules():
    rules = AttendanceRules(punch_in_deadline="10:30", punch_out_minimum="17:00")
    assert AttendanceClassifier(rules).classify(_record(time(10, 0), time(17, 0))) == AttendanceStatus.PRESENT


def test_rules_reject_malformed_deadline():
    with pytest.raises(ParseError):
        AttendanceRules(punch_in_deadline="9.45")


def test_total_hours():
    assert total_hours(_record(time(9, 30), time(18, 30))) == 9.0
    assert total_hours(_record(time(9, 30), None)) == 0.0
    assert total_hours(_record(time(9, 30), time(8, 0))) == 0.0


def test_from_document_drops_malformed_punch():
    record = AttendanceRecord.from_document({"userId": "u1", "date": "2025-01-15", "punchIn": "nine", "punchOut": "18:30"})
    assert record.punch_in is None
    assert record.punch_out == time(18, 30)
    assert AttendanceClassifier().classify(record) == AttendanceStatus.ON_LEAVE
