from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ...core.enums import DayExclusion, LoginStatus, WorkedCategory
from ...shifts.model import ShiftPolicy
from ..model import DailyPunchRecord
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """No punch-in. Weekly-off days, holidays and days after today are excluded instead of absent."""

    def __init__(self, exclusion: Optional[DayExclusion] = None):
        self.exclusion = exclusion

    def decide(self, *, record: DailyPunchRecord, policy: ShiftPolicy, now: Optional[datetime]) -> StatusDecision:
        category = WorkedCategory.NOT_APPLICABLE if self.exclusion else WorkedCategory.ABSENT
        return StatusDecision(
            worked_duration=timedelta(0),
            login_status=LoginStatus.NOT_APPLICABLE,
            worked_category=category,
            exclusion=self.exclusion,
        )
