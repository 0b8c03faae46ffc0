from __future__ import annotations

from dataclasses import replace

from ..core.enums import CorrectionStatus
from ..core.exceptions import DataIntegrityError, ValidationError
from .model import DailyPunchRecord, PunchOutCorrection


def apply_punch_out_correction(record: DailyPunchRecord, correction: PunchOutCorrection) -> DailyPunchRecord:
    """Return a copy of ``record`` with the admin-approved punch-out applied.

    The stored record is never modified; callers persist the returned copy.
    """
    if correction.status != CorrectionStatus.APPROVED:
        raise ValidationError(f"Correction {correction.request_id} is not approved ({correction.status.value})")
    if correction.employee_id != record.employee_id or correction.work_date != record.work_date:
        raise ValidationError(f"Correction {correction.request_id} does not belong to this punch record")
    if record.punch_in is None:
        raise ValidationError(f"{record.employee_id} {record.work_date}: no punch-in to close")

    requested = correction.requested_punch_out
    punch_in = record.punch_in
    if (requested.tzinfo is None) != (punch_in.tzinfo is None):
        raise ValidationError("Requested punch-out and punch-in must both be naive or both be timezone-aware")
    if requested <= punch_in:
        raise DataIntegrityError(
            f"{record.employee_id} {record.work_date}: requested punch-out is not after punch-in"
        )

    return replace(record, punch_out=requested, admin_override_punch_out=True)
