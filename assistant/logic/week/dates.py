"""Date and week arithmetic for the plan list and the week calendar.

All helpers work on calendar days: ``datetime`` inputs are reduced to their
``date`` first, so the time of day never changes a result. Weeks run Monday to
Sunday (ISO weekday numbering, Sunday = 7).
"""
from __future__ import annotations

from collections import namedtuple
from datetime import date, datetime, timedelta
from typing import Optional, Union

from assistant.utilities.constants import DATE_FORMAT

DateLike = Union[date, datetime, str]

Countdown = namedtuple("Countdown", ["days", "bucket"])

TODAY = "today"
FUTURE = "future"
PAST = "past"


def as_date(value: DateLike) -> date:
    """Normalize a date, datetime or YYYY-MM-DD string to a ``date`` (midnight)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_plan_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date (expected YYYY-MM-DD): {value!r}")
    return parsed


def parse_plan_date(value) -> Optional[date]:
    """Strict YYYY-MM-DD parse. Placeholders such as '待定' and malformed strings give None."""
    if not isinstance(value, str) or len(value.strip()) != 10:
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: DateLike) -> str:
    return as_date(value).strftime(DATE_FORMAT)


def countdown(plan_date: DateLike, today: Optional[DateLike] = None) -> Countdown:
    """Whole days from ``today`` to ``plan_date`` and the bucket they fall in."""
    start = as_date(today) if today is not None else date.today()
    days = (as_date(plan_date) - start).days
    if days == 0:
        bucket = TODAY
    elif days > 0:
        bucket = FUTURE
    else:
        bucket = PAST
    return Countdown(days, bucket)


def countdown_text(cd: Countdown) -> str:
    if cd.bucket == TODAY:
        return "today"
    if cd.bucket == FUTURE:
        return f"in {cd.days} day{'s' if cd.days != 1 else ''}"
    return "expired"


def monday_of(value: DateLike) -> date:
    d = as_date(value)
    return d - timedelta(days=d.isoweekday() - 1)


def last_week_monday(today: Optional[DateLike] = None) -> date:
    return monday_of(today if today is not None else date.today()) - timedelta(days=7)


def first_monday_of_month(value: DateLike) -> date:
    first = as_date(value).replace(day=1)
    return first + timedelta(days=(8 - first.isoweekday()) % 7)


def week_number_in_month(value: DateLike) -> int:
    """1-based week of the month, counted from the week holding the month's first Monday.

    Days of the month before that first Monday belong to week 1 as well.
    """
    d = as_date(value)
    first_monday = first_monday_of_month(d)
    if d < first_monday:
        return 1
    return (d - first_monday).days // 7 + 1


__all__ = [
    'Countdown', 'TODAY', 'FUTURE', 'PAST',
    'as_date', 'parse_plan_date', 'format_date', 'countdown', 'countdown_text',
    'monday_of', 'last_week_monday', 'first_monday_of_month', 'week_number_in_month',
]
