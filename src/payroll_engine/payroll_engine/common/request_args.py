from __future__ import annotations

from datetime import date
from typing import Optional

from flask import request

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def date_arg(name: str, default: Optional[date] = None) -> date:
    """Read a YYYY-MM-DD query parameter."""
    raw = (request.args.get(name) or "").strip()
    if not raw:
        if default is None:
            raise ValidationError(f"Query parameter '{name}' is required (YYYY-MM-DD)")
        return default
    return parse_iso_date(raw)


def period_args(default_start: date, default_end: date) -> tuple[date, date]:
    start = date_arg("start", default_start)
    end = date_arg("end", default_end)
    if end < start:
        raise ValidationError("'end' must be on or after 'start'")
    return start, end
