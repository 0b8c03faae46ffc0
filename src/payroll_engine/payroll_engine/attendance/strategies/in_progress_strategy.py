from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ...common.datetime_utils import to_utc
from ...core.enums import WorkedCategory
from ...shifts.model import ShiftPolicy
from ..model import DailyPunchRecord
from .base import AttendanceStrategy, StatusDecision, idle_time_within, login_status_for


class InProgressStrategy(AttendanceStrategy):
    """Punched in today and not yet out: "still working", never absent."""

    def decide(self, *, record: DailyPunchRecord, policy: ShiftPolicy, now: Optional[datetime]) -> StatusDecision:
        login_status, late_by = login_status_for(record.punch_in, policy, record.work_date)

        worked = timedelta(0)
        if now is not None:
            start = to_utc(record.punch_in, policy.zone)
            current = to_utc(now, policy.zone)
            if current > start:
                idle = idle_time_within(record.idle_intervals, span_start=start, span_end=current, policy=policy)
                worked = (current - start) - idle

        return StatusDecision(
            worked_duration=worked,
            login_status=login_status,
            worked_category=WorkedCategory.NOT_APPLICABLE,
            late_by_minutes=late_by,
            in_progress=True,
        )
