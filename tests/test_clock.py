"""Tests for clocks and time-to-maturity helpers."""

from __future__ import annotations

import datetime as dt

import pytest

from sovyield.clock import FixedClock, SystemClock, days_to_maturity, years_to_maturity


def test_fixed_clock_is_utc():
    clock = FixedClock(dt.date(2024, 4, 1))
    assert clock.now() == dt.datetime(2024, 4, 1, tzinfo=dt.timezone.utc)


def test_system_clock_is_aware():
    assert SystemClock().now().tzinfo is not None


def test_whole_days():
    clock = FixedClock(dt.date(2024, 4, 1))
    assert days_to_maturity("2024-06-30", clock) == 90


def test_partial_day_rounds_up():
    clock = FixedClock(dt.datetime(2024, 4, 1, 12, 0))
    assert days_to_maturity(dt.date(2024, 4, 2), clock) == 1


def test_matured_is_negative():
    clock = FixedClock(dt.date(2024, 4, 3))
    assert days_to_maturity("2024-04-01", clock) == -2


def test_years_fraction():
    clock = FixedClock(dt.date(2025, 1, 1))
    assert years_to_maturity("2026-01-01", clock) == pytest.approx(1.0)
    assert years_to_maturity("2026-01-01", clock, days_per_year=360) == pytest.approx(365 / 360)
