from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, Optional

from ..common.datetime_utils import inclusive_days, iter_dates
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: str
    date_from: date
    date_to: date
    status: LeaveStatus
    leave_type: LeaveType = LeaveType.CASUAL
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if self.date_to < self.date_from:
            raise ValidationError(f"Leave {self.request_id}: end date must be on or after start date")

    @property
    def days(self) -> int:
        """Inclusive day count."""
        return inclusive_days(self.date_from, self.date_to)

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

    def dates(self) -> Iterable[date]:
        return iter_dates(self.date_from, self.date_to)


@dataclass(frozen=True)
class Holiday:
    name: str
    start_date: date
    end_date: date

    def dates(self) -> Iterable[date]:
        return iter_dates(self.start_date, self.end_date)


def holiday_dates(holidays: Iterable[Holiday]) -> FrozenSet[date]:
    return frozenset(day for holiday in holidays for day in holiday.dates())


@dataclass(frozen=True)
class LeaveYearWindow:
    """The 12-month leave cycle containing a reference date."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class LeaveAccounting:
    employee_id: str
    window: LeaveYearWindow
    earned: int
    used: int
    pending: int
    extra: int
    total_approved_days: int


@dataclass(frozen=True)
class SandwichLeaves:
    """Leave blocks that enclose a holiday or a weekend."""

    count: int = 0
    days: int = 0
