from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from ..common.geo import GeoPoint
from ..core.enums import CorrectionStatus, DayExclusion, LoginStatus, WorkedCategory


@dataclass(frozen=True)
class IdleInterval:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class DailyPunchRecord:
    """Domain entity: one employee's punches for one local calendar date."""

    employee_id: str
    work_date: date
    punch_in: Optional[datetime] = None
    punch_out: Optional[datetime] = None
    punch_in_location: Optional[GeoPoint] = None
    punch_out_location: Optional[GeoPoint] = None
    idle_intervals: Tuple[IdleInterval, ...] = field(default_factory=tuple)
    admin_override_punch_out: bool = False


@dataclass(frozen=True)
class DailyClassification:
    """Derived read-model for one punch record under one shift policy.

    Recomputed on every query; never treated as ground truth once stored.
    """

    employee_id: str
    work_date: date
    worked_duration: timedelta
    login_status: LoginStatus
    worked_category: WorkedCategory
    late_by_minutes: int = 0
    in_progress: bool = False
    missed_punch_out: bool = False
    punch_out_overridden: bool = False
    exclusion: Optional[DayExclusion] = None
    punch_in_within_geofence: Optional[bool] = None
    punch_out_within_geofence: Optional[bool] = None

    @property
    def excluded(self) -> bool:
        return self.exclusion is not None

    @property
    def is_present(self) -> bool:
        return self.login_status != LoginStatus.NOT_APPLICABLE


@dataclass(frozen=True)
class ClassificationFailure:
    employee_id: str
    work_date: date
    message: str


@dataclass(frozen=True)
class RangeClassification:
    classifications: Tuple[DailyClassification, ...]
    failures: Tuple[ClassificationFailure, ...] = ()


@dataclass(frozen=True)
class PunchOutCorrection:
    """A "missed punch-out" request raised by the employee and decided by an admin."""

    request_id: int
    employee_id: str
    work_date: date
    requested_punch_out: datetime
    reason: str
    status: CorrectionStatus = CorrectionStatus.PENDING
