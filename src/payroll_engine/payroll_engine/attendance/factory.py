from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import AbstractSet

from ..core.enums import DayExclusion
from ..shifts.model import ShiftPolicy
from .model import DailyPunchRecord
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.completed_strategy import CompletedStrategy
from .strategies.in_progress_strategy import InProgressStrategy
from .strategies.missed_punch_out_strategy import MissedPunchOutStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the classification strategy for a punch day."""

    def for_record(
        self,
        *,
        record: DailyPunchRecord,
        policy: ShiftPolicy,
        today: date,
        holiday_dates: AbstractSet[date] = frozenset(),
    ) -> AttendanceStrategy:
        if record.punch_in is None:
            if policy.is_weekly_off(record.work_date):
                return AbsentStrategy(DayExclusion.WEEKLY_OFF)
            if record.work_date in holiday_dates:
                return AbsentStrategy(DayExclusion.HOLIDAY)
            if record.work_date > today:
                return AbsentStrategy(DayExclusion.UPCOMING)
            return AbsentStrategy()

        if record.punch_out is None:
            if record.work_date >= today:
                return InProgressStrategy()
            return MissedPunchOutStrategy()

        return CompletedStrategy()
