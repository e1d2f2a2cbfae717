from datetime import date, datetime, timedelta, timezone

from terraai.utils.time import format_date_for_gibs, parse_date


def test_format_plain_date():
    assert format_date_for_gibs(date(2024, 1, 1)) == "2024-01-01"


def test_format_converts_aware_datetime_to_utc():
    local = datetime(2024, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=5)))
    assert format_date_for_gibs(local) == "2023-12-31"


def test_format_naive_datetime_taken_as_utc():
    assert format_date_for_gibs(datetime(2024, 7, 4, 23, 59)) == "2024-07-04"


def test_format_defaults_to_clock():
    fixed = datetime(2025, 2, 28, 18, 30, tzinfo=timezone.utc)
    assert format_date_for_gibs(clock=lambda: fixed) == "2025-02-28"


def test_parse_date_assumes_utc_for_bare_dates():
    dt = parse_date("2024-03-05")
    assert dt.tzinfo is not None
    assert dt.utcoffset() == timedelta(0)
    assert (dt.year, dt.month, dt.day) == (2024, 3, 5)


def test_parse_date_handles_zulu_suffix():
    dt = parse_date("2024-03-05T23:30:00Z")
    assert dt.hour == 23
    assert dt.utcoffset() == timedelta(0)
