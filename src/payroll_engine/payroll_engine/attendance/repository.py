from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import DailyPunchRecord, PunchOutCorrection


class PunchRecordRepository(Protocol):
    def list_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[DailyPunchRecord]:
        """Punch records with ``start <= work_date <= end``, one per date at most."""

        raise NotImplementedError


class PunchOutCorrectionRepository(Protocol):
    def list_approved_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[PunchOutCorrection]:
        """Admin-approved missed punch-out corrections with ``start <= work_date <= end``."""

        raise NotImplementedError


class OvertimeRepository(Protocol):
    def count_approved(self, employee_id: str, start: date, end: date) -> int:
        raise NotImplementedError
