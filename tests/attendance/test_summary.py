from datetime import date, datetime, time, timedelta

from src.payroll_engine.payroll_engine.attendance.classifier import DailyAttendanceClassifier
from src.payroll_engine.payroll_engine.attendance.model import DailyPunchRecord
from src.payroll_engine.payroll_engine.attendance.summary import summarize
from src.payroll_engine.payroll_engine.shifts.model import ShiftPolicy


def _day(day: date, start=None, end=None) -> DailyPunchRecord:
    return DailyPunchRecord(
        employee_id="e1",
        work_date=day,
        punch_in=datetime.combine(day, start) if start else None,
        punch_out=datetime.combine(day, end) if end else None,
    )


def test_summary_counts_excluded_days_apart():
    records = [
        _day(date(2025, 3, 2)),  # Sunday, no punch
        _day(date(2025, 3, 3), time(8, 58), time(18, 5)),
        _day(date(2025, 3, 4), time(9, 20), time(14, 0)),
        _day(date(2025, 3, 5), time(9, 0), time(15, 0)),
        _day(date(2025, 3, 6)),
        _day(date(2025, 3, 7), time(9, 30)),  # today, still working
    ]
    ranged = DailyAttendanceClassifier().classify_range(
        employee_id="e1",
        records=records,
        policy=ShiftPolicy(),
        start=date(2025, 3, 2),
        end=date(2025, 3, 7),
        today=date(2025, 3, 7),
        now=datetime(2025, 3, 7, 12, 0),
    )

    summary = summarize("e1", ranged.classifications)

    assert summary.excluded_days == 1
    assert summary.working_days == 5
    assert summary.present_days == 4
    assert summary.on_time_days == 2
    assert summary.late_days == 2
    assert summary.full_days == 1
    assert summary.half_days == 1
    assert summary.absent_days == 2
    assert summary.in_progress_days == 1
    assert ranged.classifications[-1].worked_duration == timedelta(hours=2, minutes=30)


def test_summary_ignores_other_employees():
    record = _day(date(2025, 3, 3))
    other = DailyAttendanceClassifier().classify(
        DailyPunchRecord(employee_id="e2", work_date=date(2025, 3, 3)), ShiftPolicy(), today=date(2025, 3, 3)
    )
    own = DailyAttendanceClassifier().classify(record, ShiftPolicy(), today=date(2025, 3, 3))

    summary = summarize("e1", [own, other])

    assert summary.absent_days == 1
    assert summary.working_days == 1
