from __future__ import annotations

from enum import Enum


class LoginStatus(str, Enum):
    """Whether the employee punched in within the shift's grace period."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class WorkedCategory(str, Enum):
    """Worked-day category used for payroll counting."""

    FULL_DAY = "FULL_DAY"
    HALF_DAY = "HALF_DAY"
    ABSENT = "ABSENT"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class DayExclusion(str, Enum):
    """Reason a day counts neither as present nor as absent."""

    WEEKLY_OFF = "WEEKLY_OFF"
    HOLIDAY = "HOLIDAY"
    UPCOMING = "UPCOMING"


class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> "LeaveStatus":
        """Accept both 'Approved' and 'APPROVED' spellings found in stored data."""
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(f"Unknown leave status: {value!r}")


class LeaveType(str, Enum):
    CASUAL = "CASUAL"
    SICK = "SICK"
    PAID = "PAID"
    UNPAID = "UNPAID"
    HALFDAY = "HALFDAY"


class CorrectionStatus(str, Enum):
    """Approval state of a missed punch-out correction request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class PfCalculationMethod(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
