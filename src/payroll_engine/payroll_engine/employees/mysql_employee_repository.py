from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_money
from .model import Employee
from .repository import EmployeeRepository

# current salary lives on the experience record still marked 'Present'
_SELECT = """
    SELECT e.employee_id, e.name, e.is_active,
           x.department, x.role, x.salary
    FROM employees e
    LEFT JOIN experience_records x
           ON x.employee_id = e.employee_id AND x.last_working_date = 'Present'
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=r["name"],
        base_salary=to_money(r.get("salary")),
        department=r.get("department"),
        role=r.get("role"),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.is_active=1 ORDER BY e.name")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None
