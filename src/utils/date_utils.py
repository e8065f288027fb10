"""Calendar helpers shared by the analytics services."""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta


def as_date(value: date | datetime) -> date:
    """Return the calendar date of a date or timestamp."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_month(value: date) -> date:
    """Return the first day of the month containing value."""
    return value.replace(day=1)


def end_of_month(value: date) -> date:
    """Return the last day of the month containing value."""
    return start_of_month(value) + relativedelta(months=1, days=-1)


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping to the month's last day."""
    return value + relativedelta(months=months)


def months_between(start: date, end: date) -> int:
    """Return the number of full months from start to end (may be negative)."""
    delta = relativedelta(end, start)
    return delta.years * 12 + delta.months


__all__ = [
    "as_date",
    "start_of_month",
    "end_of_month",
    "add_months",
    "months_between",
]
