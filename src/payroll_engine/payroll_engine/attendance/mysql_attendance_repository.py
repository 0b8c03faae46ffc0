from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Any, Optional, Sequence

from ..common.geo import GeoPoint
from ..core.enums import CorrectionStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_datetime
from .model import DailyPunchRecord, IdleInterval, PunchOutCorrection
from .repository import OvertimeRepository, PunchOutCorrectionRepository, PunchRecordRepository


def _utc(value: Any) -> Optional[datetime]:
    """Punch timestamps are stored as naive UTC DATETIME columns."""
    value = normalize_mysql_datetime(value)
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _point(lat: Any, lng: Any) -> Optional[GeoPoint]:
    if lat is None or lng is None:
        return None
    return GeoPoint(latitude=float(lat), longitude=float(lng))


class MySQLPunchRecordRepository(PunchRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[DailyPunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, punch_in, punch_out,
                       punch_in_lat, punch_in_lng, punch_out_lat, punch_out_lng,
                       admin_override_punch_out
                FROM punch_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (employee_id, start, end),
            )
            rows = fetchall(cur)

            cur.execute(
                """
                SELECT work_date, idle_start, idle_end
                FROM idle_intervals
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY idle_start
                """,
                (employee_id, start, end),
            )
            idle_by_date: dict[date, list[IdleInterval]] = defaultdict(list)
            for r in fetchall(cur):
                idle_by_date[r["work_date"]].append(IdleInterval(start=_utc(r["idle_start"]), end=_utc(r["idle_end"])))

        return [
            DailyPunchRecord(
                employee_id=str(r["employee_id"]),
                work_date=r["work_date"],
                punch_in=_utc(r.get("punch_in")),
                punch_out=_utc(r.get("punch_out")),
                punch_in_location=_point(r.get("punch_in_lat"), r.get("punch_in_lng")),
                punch_out_location=_point(r.get("punch_out_lat"), r.get("punch_out_lng")),
                idle_intervals=tuple(idle_by_date.get(r["work_date"], ())),
                admin_override_punch_out=bool(r.get("admin_override_punch_out")),
            )
            for r in rows
        ]


class MySQLPunchOutCorrectionRepository(PunchOutCorrectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_for_employee(self, employee_id: str, start: date, end: date) -> Sequence[PunchOutCorrection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, work_date, requested_punch_out, reason, status
                FROM punch_out_corrections
                WHERE employee_id=%s AND status=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date, request_id
                """,
                (employee_id, CorrectionStatus.APPROVED.value, start, end),
            )
            return [
                PunchOutCorrection(
                    request_id=int(r["request_id"]),
                    employee_id=str(r["employee_id"]),
                    work_date=r["work_date"],
                    requested_punch_out=_utc(r["requested_punch_out"]),
                    reason=r.get("reason") or "",
                    status=CorrectionStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]


class MySQLOvertimeRepository(OvertimeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_approved(self, employee_id: str, start: date, end: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS approved
                FROM overtime_requests
                WHERE employee_id=%s AND status='APPROVED' AND work_date BETWEEN %s AND %s
                """,
                (employee_id, start, end),
            )
            row = cur.fetchone()
        return int(row["approved"]) if row else 0
