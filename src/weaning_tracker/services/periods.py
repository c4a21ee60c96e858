"""Date parsing and report period resolution."""

import calendar
import re
from datetime import date, timedelta
from enum import Enum

from weaning_tracker.domain.errors import InvalidInputError

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class ReportPeriod(str, Enum):
    """Named report periods."""

    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


def parse_iso_date(value: date | str) -> date:
    """Parse a YYYY-MM-DD string, passing dates through unchanged."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected an ISO date, got {value!r}")
    text = value.strip()
    if not _ISO_DATE.fullmatch(text):
        raise InvalidInputError(f"Invalid date: {value!r}")
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date: {value!r}") from exc


def date_range(start: date, end: date) -> list[date]:
    """Return every date from start to end inclusive; empty when inverted."""
    days = (end - start).days + 1
    return [start + timedelta(days=offset) for offset in range(max(days, 0))]


def period_label(start: date, end: date) -> str:
    """Format a period for display."""
    return f"{start.isoformat()} - {end.isoformat()}"


def subtract_month(day: date) -> date:
    """Return the same day one calendar month earlier, clamped to month end."""
    year, month = (day.year - 1, 12) if day.month == 1 else (day.year, day.month - 1)
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def resolve_period(
    period: ReportPeriod | str,
    as_of: date,
    custom_range: tuple[date | str, date | str] | None = None,
) -> tuple[date, date]:
    """Return the inclusive start and end dates for a report period."""
    try:
        resolved = ReportPeriod(period)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown report period: {period!r}") from exc

    if resolved is ReportPeriod.WEEK:
        return as_of - timedelta(days=7), as_of
    if resolved is ReportPeriod.MONTH:
        return subtract_month(as_of), as_of
    if custom_range is None or None in custom_range:
        raise InvalidInputError("A custom period needs both start and end dates")
    start, end = custom_range
    return parse_iso_date(start), parse_iso_date(end)
