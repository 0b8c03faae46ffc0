from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import FrozenSet, Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import get_zone, weekday_index
from ..core.constants import (
    DEFAULT_FULL_DAY_HOURS,
    DEFAULT_HALF_DAY_HOURS,
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_SHIFT_END,
    DEFAULT_SHIFT_START,
    DEFAULT_TIME_ZONE,
    DEFAULT_WEEKLY_OFF_DAYS,
)
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ShiftPolicy:
    """Domain entity: the shift window and thresholds applied to an employee's day.

    ``weekly_off_days`` uses 0 = Sunday ... 6 = Saturday.
    """

    start_time: time = DEFAULT_SHIFT_START
    end_time: time = DEFAULT_SHIFT_END
    time_zone: str = DEFAULT_TIME_ZONE
    late_grace_period_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    full_day_hours: float = DEFAULT_FULL_DAY_HOURS
    half_day_hours: float = DEFAULT_HALF_DAY_HOURS
    weekly_off_days: FrozenSet[int] = field(default_factory=lambda: DEFAULT_WEEKLY_OFF_DAYS)
    auto_extend: bool = True
    employee_id: Optional[str] = None
    is_default: bool = False
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekly_off_days", frozenset(int(d) for d in self.weekly_off_days))

        if any(d < 0 or d > 6 for d in self.weekly_off_days):
            raise ConfigurationError(f"Weekly off days must be within 0..6: {sorted(self.weekly_off_days)}")
        if self.late_grace_period_minutes < 0:
            raise ConfigurationError("Late grace period cannot be negative")
        if self.half_day_hours <= 0:
            raise ConfigurationError("Half-day hours must be greater than zero")
        if self.half_day_hours >= self.full_day_hours:
            raise ConfigurationError(
                f"Half-day hours ({self.half_day_hours}) must be below full-day hours ({self.full_day_hours})"
            )
        # fail fast on unknown zones
        get_zone(self.time_zone)

    @property
    def zone(self) -> ZoneInfo:
        return get_zone(self.time_zone)

    @property
    def full_day(self) -> timedelta:
        return timedelta(hours=self.full_day_hours)

    @property
    def half_day(self) -> timedelta:
        return timedelta(hours=self.half_day_hours)

    @property
    def grace(self) -> timedelta:
        return timedelta(minutes=self.late_grace_period_minutes)

    def shift_start_on(self, work_date: date) -> datetime:
        return datetime.combine(work_date, self.start_time, tzinfo=self.zone)

    def shift_end_on(self, work_date: date) -> datetime:
        """Shift end on ``work_date``; overnight shifts end on the following day."""
        end = datetime.combine(work_date, self.end_time, tzinfo=self.zone)
        if self.end_time <= self.start_time:
            end += timedelta(days=1)
        return end

    def late_cutoff_on(self, work_date: date) -> datetime:
        return self.shift_start_on(work_date) + self.grace

    def is_weekly_off(self, day: date) -> bool:
        return weekday_index(day) in self.weekly_off_days


def default_policy(
    employee_id: Optional[str] = None,
    *,
    half_day_hours: float = DEFAULT_HALF_DAY_HOURS,
    time_zone: str = DEFAULT_TIME_ZONE,
) -> ShiftPolicy:
    """System default shift: 09:00-18:00, 15 min grace, 9h full day, Sunday off."""
    return ShiftPolicy(
        employee_id=employee_id,
        time_zone=time_zone,
        half_day_hours=half_day_hours,
        is_default=True,
    )
