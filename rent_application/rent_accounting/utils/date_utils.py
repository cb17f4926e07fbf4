"""
Date utilities for rent scheduling
Calendar helpers for month-end and due-date arithmetic
"""

from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta
from typing import Union


def eomonth(d: date, months: int = 0) -> date:
    """
    Calculate end of month - same as Excel EOMONTH()
    Args:
        d: Starting date
        months: Number of months to add/subtract
    Returns:
        Last day of the month, adjusted by months
    """
    target_month = date(d.year, d.month, 1) + relativedelta(months=months)
    return target_month + relativedelta(months=1) - timedelta(days=1)


def days_in_month(d: date) -> int:
    """Number of days in the month containing d"""
    return eomonth(d, 0).day


def next_rent_due_date(d: date, day_of_month_rent_due: int) -> date:
    """
    Rent due date within the month containing d

    If rent is due after the last day of the month (e.g. the 31st in
    February), the due date is clamped to the last day of the month.
    """
    last_day = days_in_month(d)
    return date(d.year, d.month, min(day_of_month_rent_due, last_day))


def start_of_next_month(d: date) -> date:
    """First day of the month following d"""
    return date(d.year, d.month, 1) + relativedelta(months=1)


def same_month(a: date, b: date) -> bool:
    """True if a and b fall in the same calendar month"""
    return (a.year, a.month) == (b.year, b.month)


def month_index(d: date) -> int:
    """Months since year 0, used to compare dates at month granularity"""
    return d.year * 12 + (d.month - 1)


def months_between(start_date: date, end_date: date) -> int:
    """Calendar months covered from start_date's month to end_date's month, inclusive"""
    return month_index(end_date) - month_index(start_date) + 1


def to_date(value: Union[date, datetime, str]) -> date:
    """
    Normalize a date-like value to a calendar date
    Accepts date, datetime (time part dropped) or 'YYYY-MM-DD' strings
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip(), '%Y-%m-%d').date()
    raise TypeError(f"Expected a date or 'YYYY-MM-DD' string, got {type(value).__name__}")
