"""tests/unit/test_frequency.py"""

from __future__ import annotations

from datetime import datetime

import numpy as np
import pandas as pd

from holtcast.features.frequency import DAILY, MONTHLY, UNKNOWN, WEEKLY, detect_frequency, gap_days

from conftest import iso_dates, monthly_dates


def test_three_daily_timestamps_are_daily() -> None:
    assert detect_frequency(iso_dates(3)) == DAILY
    assert DAILY.period == 7


def test_weekly_spacing() -> None:
    freq = detect_frequency(iso_dates(3, step_days=7))
    assert freq.kind == "weekly"
    assert freq.period == 52


def test_monthly_spacing() -> None:
    assert detect_frequency(iso_dates(3, step_days=30)) == MONTHLY
    assert detect_frequency(monthly_dates(24)) == MONTHLY


def test_irregular_gaps_are_unknown() -> None:
    # gaps {1, 45, 2} -> median 2 days, outside every band
    ts = ["2024-01-01", "2024-01-02", "2024-02-16", "2024-02-18"]
    freq = detect_frequency(ts)
    assert freq == UNKNOWN
    assert freq.period == 0
    assert not freq.is_seasonal


def test_fewer_than_three_timestamps_is_unknown() -> None:
    assert detect_frequency([]) == UNKNOWN
    assert detect_frequency(["2024-01-01"]) == UNKNOWN
    assert detect_frequency(["2024-01-01", "2024-01-02"]) == UNKNOWN


def test_weekday_only_series_still_daily() -> None:
    # business days: gaps of 1 with a 3-day jump every weekend
    ts = [d.date().isoformat() for d in pd.bdate_range("2024-01-01", periods=30)]
    assert detect_frequency(ts) == DAILY


def test_median_uses_middle_pair_for_even_gap_count() -> None:
    # gaps 1, 1, 13, 13 -> median (1 + 13) / 2 = 7 -> weekly
    ts = ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-16", "2024-01-29"]
    assert detect_frequency(ts) == WEEKLY


def test_unsorted_input_is_sorted_before_gaps() -> None:
    ts = ["2024-01-03", "2024-01-01", "2024-01-02", "2024-01-04"]
    assert np.allclose(gap_days(ts), [1.0, 1.0, 1.0])
    assert detect_frequency(ts) == DAILY


def test_unparseable_timestamps_are_dropped_not_raised() -> None:
    ts = ["not-a-date", "also bad", "nope"]
    assert gap_days(ts).size == 0
    assert detect_frequency(ts) == UNKNOWN

    mixed = ["2024-01-01", "garbage", "2024-01-02", "2024-01-03"]
    assert detect_frequency(mixed) == DAILY


def test_accepts_datetimes_and_timezones() -> None:
    ts = [datetime(2024, 3, d) for d in (1, 8, 15, 22)]
    assert detect_frequency(ts) == WEEKLY

    tz = ["2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z", "2024-01-03T00:00:00Z"]
    assert detect_frequency(tz) == DAILY


def test_band_edges_are_exclusive() -> None:
    # exactly 8 days is not weekly, exactly 25 days is not monthly
    assert detect_frequency(iso_dates(4, step_days=8)) == UNKNOWN
    assert detect_frequency(iso_dates(4, step_days=25)) == UNKNOWN
