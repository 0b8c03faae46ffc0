from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ...common.datetime_utils import to_utc
from ...shifts.model import ShiftPolicy
from ..model import DailyPunchRecord
from .base import AttendanceStrategy, StatusDecision, category_for, idle_time_within, login_status_for


class CompletedStrategy(AttendanceStrategy):
    """Punched in and out: worked = span - idle, then thresholds decide the category.

    Without auto-extend, time after the shift end is not counted.
    Durations are measured on UTC instants so DST changeovers do not shift them.
    """

    def decide(self, *, record: DailyPunchRecord, policy: ShiftPolicy, now: Optional[datetime]) -> StatusDecision:
        start = to_utc(record.punch_in, policy.zone)
        end = to_utc(record.punch_out, policy.zone)
        if not policy.auto_extend:
            shift_end = policy.shift_end_on(record.work_date).astimezone(timezone.utc)
            end = max(start, min(end, shift_end))

        idle = idle_time_within(record.idle_intervals, span_start=start, span_end=end, policy=policy)
        worked = (end - start) - idle

        login_status, late_by = login_status_for(record.punch_in, policy, record.work_date)
        return StatusDecision(
            worked_duration=worked,
            login_status=login_status,
            worked_category=category_for(worked, policy),
            late_by_minutes=late_by,
        )
