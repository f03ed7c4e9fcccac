"""Calendar helpers for schedule dates."""

from __future__ import annotations

import calendar
from datetime import date, datetime

from ..errors import InvalidInput


def add_months(start: date, months: int) -> date:
    """Return ``start`` shifted by ``months`` calendar months.

    The day of month is kept; when the target month is shorter it is clamped to
    that month's last day (Jan 31 + 1 month -> Feb 28/29).
    """

    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def to_iso(value: date) -> str:
    return value.isoformat()


def coerce_date(value: date | datetime | str | None, *, today: date | None = None) -> date:
    """Accept a date, datetime, ISO string, or ``None`` (today)."""

    if value is None:
        return today or date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError as exc:
            raise InvalidInput(f"Start date {value!r} is not an ISO date.") from exc
    raise InvalidInput(f"Start date must be a date or ISO string, got {type(value).__name__}.")
