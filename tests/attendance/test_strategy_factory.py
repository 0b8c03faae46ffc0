from datetime import date, datetime

from src.payroll_engine.payroll_engine.attendance.factory import AttendanceStrategyFactory
from src.payroll_engine.payroll_engine.attendance.model import DailyPunchRecord
from src.payroll_engine.payroll_engine.attendance.strategies.absent_strategy import AbsentStrategy
from src.payroll_engine.payroll_engine.attendance.strategies.completed_strategy import CompletedStrategy
from src.payroll_engine.payroll_engine.attendance.strategies.in_progress_strategy import InProgressStrategy
from src.payroll_engine.payroll_engine.attendance.strategies.missed_punch_out_strategy import MissedPunchOutStrategy
from src.payroll_engine.payroll_engine.core.enums import DayExclusion
from src.payroll_engine.payroll_engine.shifts.model import ShiftPolicy

MONDAY = date(2025, 3, 3)
SUNDAY = date(2025, 3, 2)


def test_factory_no_punch_on_weekly_off_is_excluded():
    record = DailyPunchRecord(employee_id="e1", work_date=SUNDAY)

    strategy = AttendanceStrategyFactory().for_record(record=record, policy=ShiftPolicy(), today=MONDAY)

    assert isinstance(strategy, AbsentStrategy)
    assert strategy.exclusion == DayExclusion.WEEKLY_OFF


def test_factory_no_punch_on_holiday_is_excluded():
    record = DailyPunchRecord(employee_id="e1", work_date=MONDAY)

    strategy = AttendanceStrategyFactory().for_record(
        record=record, policy=ShiftPolicy(), today=MONDAY, holiday_dates={MONDAY}
    )

    assert isinstance(strategy, AbsentStrategy)
    assert strategy.exclusion == DayExclusion.HOLIDAY


def test_factory_no_punch_on_working_day_is_absent():
    record = DailyPunchRecord(employee_id="e1", work_date=MONDAY)

    strategy = AttendanceStrategyFactory().for_record(record=record, policy=ShiftPolicy(), today=MONDAY)

    assert isinstance(strategy, AbsentStrategy)
    assert strategy.exclusion is None


def test_factory_open_punch_today_is_in_progress():
    record = DailyPunchRecord(employee_id="e1", work_date=MONDAY, punch_in=datetime(2025, 3, 3, 9, 0))

    strategy = AttendanceStrategyFactory().for_record(record=record, policy=ShiftPolicy(), today=MONDAY)

    assert isinstance(strategy, InProgressStrategy)


def test_factory_open_punch_on_past_day_is_missed_punch_out():
    record = DailyPunchRecord(employee_id="e1", work_date=MONDAY, punch_in=datetime(2025, 3, 3, 9, 0))

    strategy = AttendanceStrategyFactory().for_record(record=record, policy=ShiftPolicy(), today=date(2025, 3, 4))

    assert isinstance(strategy, MissedPunchOutStrategy)


def test_factory_closed_punch_is_completed():
    record = DailyPunchRecord(
        employee_id="e1",
        work_date=MONDAY,
        punch_in=datetime(2025, 3, 3, 9, 0),
        punch_out=datetime(2025, 3, 3, 18, 0),
    )

    strategy = AttendanceStrategyFactory().for_record(record=record, policy=ShiftPolicy(), today=MONDAY)

    assert isinstance(strategy, CompletedStrategy)


def test_factory_no_punch_after_today_is_upcoming_not_absent():
    record = DailyPunchRecord(employee_id="e1", work_date=date(2025, 3, 4))

    strategy = AttendanceStrategyFactory().for_record(record=record, policy=ShiftPolicy(), today=MONDAY)

    assert isinstance(strategy, AbsentStrategy)
    assert strategy.exclusion == DayExclusion.UPCOMING
