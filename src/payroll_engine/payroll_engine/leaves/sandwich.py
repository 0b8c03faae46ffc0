from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.constants import SANDWICH_DAYS_PER_BLOCK
from .model import Holiday, LeaveRequest, SandwichLeaves

SATURDAY = 5


def _touches_month(request: LeaveRequest, month: str) -> bool:
    return request.date_from.strftime("%Y-%m") == month or request.date_to.strftime("%Y-%m") == month


def calculate_sandwich_leaves(
    leave_requests: Iterable[LeaveRequest],
    holidays: Iterable[Holiday] = (),
    *,
    month: Optional[str] = None,
) -> SandwichLeaves:
    """Count leave blocks that sandwich a holiday or a weekend.

    A holiday block with approved leave on the day before and the day after
    counts once, always worth two days. An approved Saturday followed by an
    approved Monday counts as a weekend sandwich, also worth two days.
    ``month`` ("YYYY-MM") restricts to requests starting or ending in it.
    """
    approved = [r for r in leave_requests if r.is_approved and (month is None or _touches_month(r, month))]
    leave_dates: set[date] = {day for r in approved for day in r.dates()}
    if not leave_dates:
        return SandwichLeaves()

    blocks: set[tuple[str, date]] = set()
    for holiday in holidays:
        before = holiday.start_date - timedelta(days=1)
        after = holiday.end_date + timedelta(days=1)
        if before in leave_dates and after in leave_dates:
            blocks.add(("holiday", holiday.start_date))

    for day in leave_dates:
        if day.weekday() == SATURDAY and day + timedelta(days=2) in leave_dates:
            blocks.add(("weekend", day))

    return SandwichLeaves(count=len(blocks), days=len(blocks) * SANDWICH_DAYS_PER_BLOCK)
