from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import Holiday, LeaveRequest


class LeaveRepository(Protocol):
    def list_for_employee(self, employee_id: str, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        """All of the employee's requests (every leave year), optionally filtered by status."""

        raise NotImplementedError


class HolidayRepository(Protocol):
    def list_between(self, start: date, end: date) -> Sequence[Holiday]:
        """Holidays overlapping ``[start, end]``."""

        raise NotImplementedError
