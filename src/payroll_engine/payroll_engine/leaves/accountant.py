from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

from ..common.datetime_utils import months_between
from ..core.constants import FREE_LEAVE_DAYS, LEAVE_YEAR_START_MONTH
from ..core.exceptions import ConfigurationError
from .model import LeaveAccounting, LeaveRequest, LeaveYearWindow

logger = logging.getLogger(__name__)


class LeaveYearAccountant:
    """Leave entitlement over a fixed 12-month leave year.

    One leave day is earned per month of the leave year, the current month
    included. ``free_leave_days`` approved days are free over the employee's
    whole history; every approved day beyond that is "extra" and becomes a
    loss-of-pay deduction in payroll.
    """

    def __init__(self, *, start_month: int = LEAVE_YEAR_START_MONTH, free_leave_days: int = FREE_LEAVE_DAYS):
        if not 1 <= int(start_month) <= 12:
            raise ConfigurationError(f"Leave year start month must be 1..12 (got {start_month})")
        if int(free_leave_days) < 0:
            raise ConfigurationError("Free leave days cannot be negative")
        self._start_month = int(start_month)
        self._free_leave_days = int(free_leave_days)

    def window_for(self, as_of: date) -> LeaveYearWindow:
        start_year = as_of.year if as_of.month >= self._start_month else as_of.year - 1
        start = date(start_year, self._start_month, 1)
        next_start = date(start_year + 1, self._start_month, 1)
        return LeaveYearWindow(start=start, end=next_start - timedelta(days=1))

    def account(self, employee_id: str, leave_requests: Iterable[LeaveRequest], as_of: date) -> LeaveAccounting:
        window = self.window_for(as_of)
        approved = [r for r in leave_requests if r.employee_id == employee_id and r.is_approved]

        earned = max(0, months_between(window.start, as_of) + 1)
        used = sum(r.days for r in approved if window.contains(r.date_from))
        total_ever = sum(r.days for r in approved)

        accounting = LeaveAccounting(
            employee_id=employee_id,
            window=window,
            earned=earned,
            used=used,
            pending=max(0, earned - used),
            extra=max(0, total_ever - self._free_leave_days),
            total_approved_days=total_ever,
        )
        logger.debug(
            "[leaves] employee_id=%s window=%s..%s earned=%s used=%s extra=%s",
            employee_id, window.start, window.end, accounting.earned, accounting.used, accounting.extra,
        )
        return accounting
