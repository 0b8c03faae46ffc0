from datetime import date

from src.payroll_engine.payroll_engine.core.enums import LeaveStatus
from src.payroll_engine.payroll_engine.leaves.model import Holiday, LeaveRequest
from src.payroll_engine.payroll_engine.leaves.sandwich import calculate_sandwich_leaves

HOLI = Holiday(name="Holi", start_date=date(2025, 3, 12), end_date=date(2025, 3, 12))


def _leave(request_id, start, end=None, status=LeaveStatus.APPROVED) -> LeaveRequest:
    return LeaveRequest(request_id=request_id, employee_id="e1", date_from=start, date_to=end or start, status=status)


def test_leave_around_a_holiday_is_one_sandwich():
    requests = [_leave(1, date(2025, 3, 11)), _leave(2, date(2025, 3, 13))]

    result = calculate_sandwich_leaves(requests, [HOLI])

    assert result.count == 1
    assert result.days == 2


def test_saturday_and_monday_leave_is_a_weekend_sandwich():
    requests = [_leave(1, date(2025, 3, 15)), _leave(2, date(2025, 3, 17))]

    result = calculate_sandwich_leaves(requests)

    assert result.count == 1
    assert result.days == 2


def test_holiday_and_weekend_sandwiches_add_up():
    requests = [_leave(1, date(2025, 3, 11)), _leave(2, date(2025, 3, 13), date(2025, 3, 17))]

    result = calculate_sandwich_leaves(requests, [HOLI])

    assert result.count == 2
    assert result.days == 4


def test_unapproved_leave_does_not_sandwich():
    requests = [_leave(1, date(2025, 3, 11)), _leave(2, date(2025, 3, 13), status=LeaveStatus.PENDING)]

    assert calculate_sandwich_leaves(requests, [HOLI]).count == 0


def test_month_filter_limits_requests():
    requests = [_leave(1, date(2025, 3, 15)), _leave(2, date(2025, 3, 17))]

    assert calculate_sandwich_leaves(requests, month="2025-04").count == 0
    assert calculate_sandwich_leaves(requests, month="2025-03").count == 1
