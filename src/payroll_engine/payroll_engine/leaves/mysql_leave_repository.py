from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday, LeaveRequest
from .repository import HolidayRepository, LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: str, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        sql = """
            SELECT request_id, employee_id, date_from, date_to, status, leave_type, reason
            FROM leave_requests
            WHERE employee_id=%s
        """
        params: list = [employee_id]
        if status is not None:
            sql += " AND status=%s"
            params.append(status.value)
        sql += " ORDER BY date_from"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                LeaveRequest(
                    request_id=int(r["request_id"]),
                    employee_id=str(r["employee_id"]),
                    date_from=r["date_from"],
                    date_to=r["date_to"],
                    status=LeaveStatus.parse(r["status"]),
                    leave_type=LeaveType(r.get("leave_type") or LeaveType.CASUAL.value),
                    reason=r.get("reason"),
                )
                for r in rows
            ]


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, start: date, end: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT name, start_date, end_date
                FROM holidays
                WHERE start_date <= %s AND end_date >= %s
                ORDER BY start_date
                """,
                (end, start),
            )
            return [Holiday(name=r["name"], start_date=r["start_date"], end_date=r["end_date"]) for r in fetchall(cur)]
