"""Unit tests for SRS time helpers."""

from datetime import date, datetime, timedelta, timezone

from hifz.srs.time import add_days, date_to_iso, parse_iso_date, parse_iso_z, utc_date, utc_datetime_to_iso_z


def test_utc_datetime_to_iso_z_second_precision():
    dt = datetime(2025, 12, 13, 0, 0, 0, 999999, tzinfo=timezone.utc)
    assert utc_datetime_to_iso_z(dt) == "2025-12-13T00:00:00Z"


def test_utc_datetime_to_iso_z_converts_offsets():
    dt = datetime(2025, 12, 13, 1, 0, 0, tzinfo=timezone(timedelta(hours=3)))
    assert utc_datetime_to_iso_z(dt) == "2025-12-12T22:00:00Z"


def test_parse_iso_z_accepts_z_and_fractional_seconds():
    assert parse_iso_z("2025-12-13T00:00:00Z").tzinfo is not None
    assert parse_iso_z("2025-12-13T00:00:00.123456Z").tzinfo is not None


def test_utc_date():
    assert utc_date(datetime(2025, 12, 13, 23, 0, tzinfo=timezone(timedelta(hours=-2)))) == date(2025, 12, 14)
    assert utc_date(datetime(2025, 12, 13, 23, 0)) == date(2025, 12, 13)
    assert utc_date(date(2025, 12, 13)) == date(2025, 12, 13)


def test_parse_iso_date_accepts_dates_and_timestamps():
    assert parse_iso_date("2025-12-13") == date(2025, 12, 13)
    assert parse_iso_date("2025-12-13T23:30:00Z") == date(2025, 12, 13)


def test_add_days_rollover():
    assert add_days(date(2025, 12, 30), 4) == date(2026, 1, 3)
    assert date_to_iso(add_days(date(2024, 2, 28), 1)) == "2024-02-29"
