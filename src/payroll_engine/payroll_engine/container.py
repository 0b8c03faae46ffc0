from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.classifier import DailyAttendanceClassifier
from .attendance.mysql_attendance_repository import (
    MySQLOvertimeRepository,
    MySQLPunchOutCorrectionRepository,
    MySQLPunchRecordRepository,
)
from .common.geo import GeoPoint, OfficeGeofence
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.accountant import LeaveYearAccountant
from .leaves.mysql_leave_repository import MySQLHolidayRepository, MySQLLeaveRepository
from .payroll.model import PayrollRule
from .payroll.service import PayrollReportService
from .shifts.mysql_shift_repository import MySQLShiftPolicyRepository
from .shifts.resolver import ShiftPolicyResolver


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    punches_repo: MySQLPunchRecordRepository
    corrections_repo: MySQLPunchOutCorrectionRepository
    overtime_repo: MySQLOvertimeRepository
    shifts_repo: MySQLShiftPolicyRepository
    leaves_repo: MySQLLeaveRepository
    holidays_repo: MySQLHolidayRepository

    shift_resolver: ShiftPolicyResolver
    classifier: DailyAttendanceClassifier
    leave_accountant: LeaveYearAccountant
    payroll_report_service: PayrollReportService


def _geofence(values: Optional[dict]) -> Optional[OfficeGeofence]:
    if not values:
        return None
    return OfficeGeofence(
        center=GeoPoint(latitude=float(values["latitude"]), longitude=float(values["longitude"])),
        allowed_radius_m=float(values.get("allowed_radius_m", 200)),
    )


def build_container(*, settings: Any) -> Container:
    """Wire MySQL stores and engine services from a settings module."""
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(settings.DB_CONFIG))

    employees_repo = MySQLEmployeeRepository(conn)
    punches_repo = MySQLPunchRecordRepository(conn)
    corrections_repo = MySQLPunchOutCorrectionRepository(conn)
    overtime_repo = MySQLOvertimeRepository(conn)
    shifts_repo = MySQLShiftPolicyRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)

    shift_resolver = ShiftPolicyResolver(
        shifts_repo,
        default_half_day_hours=getattr(settings, "DEFAULT_HALF_DAY_HOURS", 5.0),
        default_time_zone=getattr(settings, "DEFAULT_TIME_ZONE", "Asia/Kolkata"),
    )
    classifier = DailyAttendanceClassifier(geofence=_geofence(getattr(settings, "OFFICE_GEOFENCE", None)))
    leave_accountant = LeaveYearAccountant(
        start_month=getattr(settings, "LEAVE_YEAR_START_MONTH", 11),
        free_leave_days=getattr(settings, "FREE_LEAVE_DAYS", 1),
    )
    rule_values = getattr(settings, "PAYROLL_RULE", None)
    payroll_report_service = PayrollReportService(
        employees_repo,
        punches_repo,
        leaves_repo,
        holidays_repo,
        shift_resolver,
        classifier=classifier,
        accountant=leave_accountant,
        monthly_working_days=getattr(settings, "MONTHLY_WORKING_DAYS", 26),
        payroll_rule=PayrollRule.from_mapping(rule_values) if rule_values else None,
        corrections=corrections_repo,
        overtime=overtime_repo,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        corrections_repo=corrections_repo,
        overtime_repo=overtime_repo,
        shifts_repo=shifts_repo,
        leaves_repo=leaves_repo,
        holidays_repo=holidays_repo,
        shift_resolver=shift_resolver,
        classifier=classifier,
        leave_accountant=leave_accountant,
        payroll_report_service=payroll_report_service,
    )
