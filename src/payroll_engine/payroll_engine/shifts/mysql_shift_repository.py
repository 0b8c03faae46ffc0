from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time, parse_weekday_set
from .model import ShiftPolicy
from .repository import ShiftPolicyRepository


class MySQLShiftPolicyRepository(ShiftPolicyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_active_for_employee(self, employee_id: str) -> Optional[ShiftPolicy]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, shift_start_time, shift_end_time, timezone,
                       late_grace_period, full_day_hours, half_day_hours,
                       weekly_off_days, auto_extend_shift, updated_at
                FROM shift_policies
                WHERE employee_id=%s AND is_active=1
                ORDER BY updated_at DESC
                LIMIT 1
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return ShiftPolicy(
                employee_id=str(r["employee_id"]),
                start_time=normalize_mysql_time(r["shift_start_time"]),
                end_time=normalize_mysql_time(r["shift_end_time"]),
                time_zone=r.get("timezone") or "Asia/Kolkata",
                late_grace_period_minutes=int(r.get("late_grace_period") or 0),
                full_day_hours=float(r["full_day_hours"]),
                half_day_hours=float(r["half_day_hours"]),
                weekly_off_days=parse_weekday_set(r.get("weekly_off_days")),
                auto_extend=bool(r.get("auto_extend_shift")),
                updated_at=r.get("updated_at"),
            )
