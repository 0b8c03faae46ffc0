from __future__ import annotations

from typing import Optional, Protocol

from .model import ShiftPolicy


class ShiftPolicyRepository(Protocol):
    def get_active_for_employee(self, employee_id: str) -> Optional[ShiftPolicy]:
        """Most recently updated active policy, or None when the employee has none."""

        raise NotImplementedError
