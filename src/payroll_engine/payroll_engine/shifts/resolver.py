from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..core.constants import DEFAULT_HALF_DAY_HOURS, DEFAULT_TIME_ZONE
from .model import ShiftPolicy, default_policy
from .repository import ShiftPolicyRepository

logger = logging.getLogger(__name__)


class ShiftPolicyResolver:
    """Resolve the shift policy applicable to an employee on a date.

    Known limitation: stored policies are not versioned by date, so
    ``work_date`` does not select between historical policies; the current
    active policy is used for every date.
    """

    def __init__(
        self,
        policies: ShiftPolicyRepository,
        *,
        default_half_day_hours: float = DEFAULT_HALF_DAY_HOURS,
        default_time_zone: str = DEFAULT_TIME_ZONE,
    ):
        self._policies = policies
        self._default_half_day_hours = float(default_half_day_hours)
        self._default_time_zone = default_time_zone

    def default_for(self, employee_id: Optional[str]) -> ShiftPolicy:
        return default_policy(
            employee_id,
            half_day_hours=self._default_half_day_hours,
            time_zone=self._default_time_zone,
        )

    def resolve(self, employee_id: str, work_date: date) -> ShiftPolicy:
        """Never raises: a missing or unreadable policy resolves to the default."""
        try:
            policy = self._policies.get_active_for_employee(employee_id)
        except Exception:
            logger.exception("[shifts] policy lookup failed for employee_id=%s, using default", employee_id)
            return self.default_for(employee_id)

        if policy is None:
            logger.debug("[shifts] no policy for employee_id=%s on %s, using default", employee_id, work_date)
            return self.default_for(employee_id)
        return policy

    def resolve_many(self, employee_ids: Iterable[str], work_date: date) -> dict[str, ShiftPolicy]:
        return {employee_id: self.resolve(employee_id, work_date) for employee_id in employee_ids}
