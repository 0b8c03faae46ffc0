from datetime import date, datetime, time

import pytest

from src.payroll_engine.payroll_engine.core.exceptions import ConfigurationError
from src.payroll_engine.payroll_engine.shifts.model import ShiftPolicy


def test_half_day_must_be_below_full_day():
    with pytest.raises(ConfigurationError):
        ShiftPolicy(full_day_hours=5, half_day_hours=5)


def test_weekly_off_days_must_be_weekday_indexes():
    with pytest.raises(ConfigurationError):
        ShiftPolicy(weekly_off_days={7})


def test_unknown_time_zone_is_rejected():
    with pytest.raises(ConfigurationError):
        ShiftPolicy(time_zone="Mars/Olympus_Mons")


def test_negative_grace_is_rejected():
    with pytest.raises(ConfigurationError):
        ShiftPolicy(late_grace_period_minutes=-1)


def test_sunday_is_weekday_zero():
    policy = ShiftPolicy(weekly_off_days=[0])

    assert policy.is_weekly_off(date(2025, 3, 2))  # Sunday
    assert not policy.is_weekly_off(date(2025, 3, 3))  # Monday


def test_overnight_shift_ends_next_day():
    policy = ShiftPolicy(start_time=time(22, 0), end_time=time(6, 0))

    end = policy.shift_end_on(date(2025, 3, 3))

    assert end.replace(tzinfo=None) == datetime(2025, 3, 4, 6, 0)


def test_late_cutoff_adds_grace():
    policy = ShiftPolicy(start_time=time(9, 0), late_grace_period_minutes=15)

    assert policy.late_cutoff_on(date(2025, 3, 3)).time() == time(9, 15)
