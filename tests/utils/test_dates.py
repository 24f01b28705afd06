"""Tests for UTC day helpers."""

from datetime import date, datetime, timedelta, timezone

from incident_intel.utils import as_utc, utc_day, window_start


def test_as_utc_naive_is_utc():
    assert as_utc(datetime(2025, 3, 20, 8, 0)) == datetime(2025, 3, 20, 8, 0, tzinfo=timezone.utc)


def test_as_utc_converts_offsets():
    local = datetime(2025, 3, 20, 1, 0, tzinfo=timezone(timedelta(hours=5)))

    assert as_utc(local) == datetime(2025, 3, 19, 20, 0, tzinfo=timezone.utc)
    assert utc_day(local) == date(2025, 3, 19)


def test_window_start_is_utc_midnight():
    now = datetime(2025, 3, 20, 15, 30, tzinfo=timezone.utc)

    assert window_start(7, now) == datetime(2025, 3, 13, tzinfo=timezone.utc)
    assert window_start(0, now) == datetime(2025, 3, 20, tzinfo=timezone.utc)
