import pytest

from achievement_system.common.duration import duration_seconds, format_hours, parse_duration
from achievement_system.core.enums import DurationFormat
from achievement_system.core.exceptions import ParseError


def test_free_text_hours_and_minutes():
    assert duration_seconds("1h 20m") == 4800


def test_free_text_long_units():
    parsed = parse_duration("1 hr 20 mins")
    assert parsed.kind == DurationFormat.FREE_TEXT
    assert parsed.seconds == 4800


def test_colon_format():
    parsed = parse_duration("01:20:00")
    assert parsed.kind == DurationFormat.COLON
    assert parsed.seconds == 4800


def test_numeric_seconds():
    assert parse_duration(90).kind == DurationFormat.NUMERIC
    assert duration_seconds(90) == 90
    assert duration_seconds("3600") == 3600


def test_garbage_is_zero_and_tagged():
    parsed = parse_duration("garbage")
    assert parsed.kind == DurationFormat.UNPARSEABLE
    assert not parsed.ok
    assert duration_seconds("garbage") == 0


def test_none_and_negative_numbers():
    assert duration_seconds(None) == 0
    assert duration_seconds(-5) == 0


def test_malformed_colon_lenient_vs_strict():
    assert duration_seconds("01:75:00") == 0
    with pytest.raises(ParseError):
        parse_duration("01:75:00", strict=True)


def test_format_hours():
    assert format_hours(4800) == "01:20"
    assert format_hours(0) == "00:00"


@pytest.mark.parametrize("text", ["1hr20min", "1h20m", "1HR 20MIN", "1 hour 20 minutes"])
def test_compact_and_spelled_out_units(text):
    assert duration_seconds(text) == 4800


def test_unit_must_not_run_into_other_letters():
    assert duration_seconds("3 months") == 0


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "9" * 400, "9" * 400 + " hrs"])
def test_non_finite_numbers_are_unparseable(value):
    parsed = parse_duration(value)
    assert parsed.kind == DurationFormat.UNPARSEABLE
    assert parsed.seconds == 0
