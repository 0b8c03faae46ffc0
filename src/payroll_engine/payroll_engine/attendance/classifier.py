from __future__ import annotations

import logging
from datetime import date, datetime
from typing import AbstractSet, Iterable, Optional

from ..common.datetime_utils import iter_dates, now_local, to_local, to_utc
from ..common.geo import OfficeGeofence
from ..core.exceptions import DataIntegrityError
from ..shifts.model import ShiftPolicy
from .factory import AttendanceStrategyFactory
from .model import ClassificationFailure, DailyClassification, DailyPunchRecord, RangeClassification

logger = logging.getLogger(__name__)


def validate_punch_record(record: DailyPunchRecord, policy: ShiftPolicy) -> None:
    """Reject malformed punch records instead of clamping them."""
    if record.punch_out is not None and record.punch_in is None:
        raise DataIntegrityError(f"{record.employee_id} {record.work_date}: punch-out without punch-in")

    if record.punch_in is None:
        if record.idle_intervals:
            raise DataIntegrityError(f"{record.employee_id} {record.work_date}: idle time recorded without punch-in")
        return

    zone = policy.zone
    start = to_utc(record.punch_in, zone)
    end = to_utc(record.punch_out, zone) if record.punch_out is not None else None
    if end is not None and end <= start:
        raise DataIntegrityError(
            f"{record.employee_id} {record.work_date}: punch-out {record.punch_out:%H:%M:%S}"
            f" is not after punch-in {record.punch_in:%H:%M:%S}"
        )

    for interval in record.idle_intervals:
        idle_start = to_utc(interval.start, zone)
        idle_end = to_utc(interval.end, zone)
        if idle_end <= idle_start:
            raise DataIntegrityError(f"{record.employee_id} {record.work_date}: idle interval ends before it starts")
        if idle_start < start or (end is not None and idle_end > end):
            raise DataIntegrityError(
                f"{record.employee_id} {record.work_date}: idle interval outside the punched span"
            )


class DailyAttendanceClassifier:
    """Turn a day's punches plus the resolved shift policy into a DailyClassification."""

    def __init__(
        self,
        *,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        geofence: Optional[OfficeGeofence] = None,
    ):
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._geofence = geofence

    def classify(
        self,
        record: DailyPunchRecord,
        policy: ShiftPolicy,
        *,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
        holiday_dates: AbstractSet[date] = frozenset(),
    ) -> DailyClassification:
        """Classify one record.

        ``today`` decides whether an open punch is still in progress; it
        defaults to the current date in the policy's zone. Pass it explicitly
        for reproducible results.

        Raises DataIntegrityError for malformed records.
        """
        validate_punch_record(record, policy)

        if today is None:
            now = now or now_local(policy.zone)
            today = to_local(now, policy.zone).date()

        strategy = self._factory.for_record(record=record, policy=policy, today=today, holiday_dates=holiday_dates)
        decision = strategy.decide(record=record, policy=policy, now=now)

        return DailyClassification(
            employee_id=record.employee_id,
            work_date=record.work_date,
            worked_duration=decision.worked_duration,
            login_status=decision.login_status,
            worked_category=decision.worked_category,
            late_by_minutes=decision.late_by_minutes,
            in_progress=decision.in_progress,
            missed_punch_out=decision.missed_punch_out,
            punch_out_overridden=record.admin_override_punch_out and record.punch_out is not None,
            exclusion=decision.exclusion,
            punch_in_within_geofence=self._within(record.punch_in_location),
            punch_out_within_geofence=self._within(record.punch_out_location),
        )

    def classify_range(
        self,
        *,
        employee_id: str,
        records: Iterable[DailyPunchRecord],
        policy: ShiftPolicy,
        start: date,
        end: date,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
        holiday_dates: AbstractSet[date] = frozenset(),
    ) -> RangeClassification:
        """One classification per calendar day in ``[start, end]``.

        Days without a stored record are classified as "no punch". A malformed
        record becomes a failure for its date and does not stop the range.
        """
        if today is None:
            now = now or now_local(policy.zone)
            today = to_local(now, policy.zone).date()

        by_date: dict[date, DailyPunchRecord] = {}
        failures: list[ClassificationFailure] = []
        duplicates: set[date] = set()
        for record in records:
            if record.employee_id != employee_id or not (start <= record.work_date <= end):
                continue
            if record.work_date in by_date:
                duplicates.add(record.work_date)
            by_date[record.work_date] = record

        classifications: list[DailyClassification] = []
        for day in iter_dates(start, end):
            if day in duplicates:
                failures.append(ClassificationFailure(employee_id, day, "more than one punch record for the date"))
                logger.warning("[attendance] duplicate punch records employee_id=%s date=%s", employee_id, day)
                continue

            record = by_date.get(day) or DailyPunchRecord(employee_id=employee_id, work_date=day)
            try:
                classifications.append(
                    self.classify(record, policy, today=today, now=now, holiday_dates=holiday_dates)
                )
            except DataIntegrityError as ex:
                logger.warning("[attendance] skipped malformed record employee_id=%s date=%s: %s", employee_id, day, ex)
                failures.append(ClassificationFailure(employee_id, day, str(ex)))

        return RangeClassification(classifications=tuple(classifications), failures=tuple(failures))

    def _within(self, point) -> Optional[bool]:
        if self._geofence is None:
            return None
        return self._geofence.contains(point)
