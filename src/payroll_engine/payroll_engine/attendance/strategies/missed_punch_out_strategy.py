from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ...core.enums import WorkedCategory
from ...shifts.model import ShiftPolicy
from ..model import DailyPunchRecord
from .base import AttendanceStrategy, StatusDecision, login_status_for


class MissedPunchOutStrategy(AttendanceStrategy):
    """Punched in on a past day but never out; absent until a correction is approved."""

    def decide(self, *, record: DailyPunchRecord, policy: ShiftPolicy, now: Optional[datetime]) -> StatusDecision:
        login_status, late_by = login_status_for(record.punch_in, policy, record.work_date)
        return StatusDecision(
            worked_duration=timedelta(0),
            login_status=login_status,
            worked_category=WorkedCategory.ABSENT,
            late_by_minutes=late_by,
            missed_punch_out=True,
        )
