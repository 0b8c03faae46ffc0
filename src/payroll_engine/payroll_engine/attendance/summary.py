from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import LoginStatus, WorkedCategory
from .model import DailyClassification


@dataclass(frozen=True)
class AttendanceSummary:
    """Per-employee attendance counts over a reporting period.

    Excluded days (weekly off, holidays, days after today) are counted apart and are neither
    working, present nor absent days.
    """

    employee_id: str
    working_days: int = 0
    present_days: int = 0
    on_time_days: int = 0
    late_days: int = 0
    full_days: int = 0
    half_days: int = 0
    absent_days: int = 0
    excluded_days: int = 0
    in_progress_days: int = 0


def summarize(employee_id: str, classifications: Iterable[DailyClassification]) -> AttendanceSummary:
    counts = {
        "working_days": 0,
        "present_days": 0,
        "on_time_days": 0,
        "late_days": 0,
        "full_days": 0,
        "half_days": 0,
        "absent_days": 0,
        "excluded_days": 0,
        "in_progress_days": 0,
    }
    for c in classifications:
        if c.employee_id != employee_id:
            continue
        if c.excluded:
            counts["excluded_days"] += 1
            continue

        counts["working_days"] += 1
        if c.login_status == LoginStatus.LATE:
            counts["late_days"] += 1
        elif c.login_status == LoginStatus.ON_TIME:
            counts["on_time_days"] += 1
        if c.is_present:
            counts["present_days"] += 1

        if c.in_progress:
            counts["in_progress_days"] += 1
        elif c.worked_category == WorkedCategory.FULL_DAY:
            counts["full_days"] += 1
        elif c.worked_category == WorkedCategory.HALF_DAY:
            counts["half_days"] += 1
        elif c.worked_category == WorkedCategory.ABSENT:
            counts["absent_days"] += 1

    return AttendanceSummary(employee_id=employee_id, **counts)
