from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Tuple

from ...common.datetime_utils import to_local, to_utc
from ...core.enums import DayExclusion, LoginStatus, WorkedCategory
from ...shifts.model import ShiftPolicy
from ..model import DailyPunchRecord, IdleInterval


@dataclass(frozen=True)
class StatusDecision:
    worked_duration: timedelta
    login_status: LoginStatus
    worked_category: WorkedCategory
    late_by_minutes: int = 0
    in_progress: bool = False
    missed_punch_out: bool = False
    exclusion: Optional[DayExclusion] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how one kind of punch day is classified."""

    @abstractmethod
    def decide(self, *, record: DailyPunchRecord, policy: ShiftPolicy, now: Optional[datetime]) -> StatusDecision:
        raise NotImplementedError


def login_status_for(punch_in: datetime, policy: ShiftPolicy, work_date: date) -> Tuple[LoginStatus, int]:
    """LATE when punch-in is after shift start + grace on ``work_date``; also returns minutes after start."""
    local_in = to_local(punch_in, policy.zone)
    if local_in <= policy.late_cutoff_on(work_date):
        return LoginStatus.ON_TIME, 0
    late_by = local_in - policy.shift_start_on(work_date)
    return LoginStatus.LATE, int(late_by.total_seconds() // 60)


def category_for(worked: timedelta, policy: ShiftPolicy) -> WorkedCategory:
    if worked >= policy.full_day:
        return WorkedCategory.FULL_DAY
    if worked >= policy.half_day:
        return WorkedCategory.HALF_DAY
    # worked but short of the half-day threshold still counts as absent
    return WorkedCategory.ABSENT


def idle_time_within(
    intervals: Iterable[IdleInterval],
    *,
    span_start: datetime,
    span_end: datetime,
    policy: ShiftPolicy,
) -> timedelta:
    """Total idle time inside ``[span_start, span_end]``; overlapping intervals are counted once.

    The span bounds are UTC instants; interval bounds are converted to UTC before clipping.
    """
    zone = policy.zone
    clipped = []
    for interval in intervals:
        start = max(to_utc(interval.start, zone), span_start)
        end = min(to_utc(interval.end, zone), span_end)
        if end > start:
            clipped.append((start, end))

    total = timedelta(0)
    current_start: Optional[datetime] = None
    current_end: Optional[datetime] = None
    for start, end in sorted(clipped):
        if current_end is None or start > current_end:
            if current_end is not None:
                total += current_end - current_start
            current_start, current_end = start, end
        elif end > current_end:
            current_end = end
    if current_end is not None:
        total += current_end - current_start
    return total
