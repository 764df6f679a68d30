"""Week calendar: a Monday-to-Sunday grid of day cells holding plan items."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from assistant.domain.PlanEntry import PlanEntry
from assistant.logic.week.dates import DateLike, as_date, format_date, monday_of, week_number_in_month
from assistant.utilities.constants import DAY_NAMES


class DayCell:
    def __init__(self, day: date, is_today: bool = False, events: Optional[List[str]] = None):
        self.date = format_date(day)
        self.weekday = DAY_NAMES[day.isoweekday() - 1]
        self.day_number = day.day
        self.is_today = is_today
        self.events = events[:] if events else []

    def to_dict(self):
        return {
            "date": self.date,
            "weekday": self.weekday,
            "day_number": self.day_number,
            "isToday": self.is_today,
            "events": list(self.events),
        }


class WeekView:
    def __init__(self, start: date, days: List[DayCell]):
        self.start = start
        self.days = days
        self.year = start.year
        self.month = start.month
        self.week_number = week_number_in_month(start)

    @property
    def end(self) -> date:
        return self.start + timedelta(days=6)

    @property
    def label(self) -> str:
        # Titled after the Monday's month, even when the week runs into the next one.
        return f"{self.start.strftime('%B')} {self.year}, week {self.week_number}"

    def today_cell(self) -> Optional[DayCell]:
        return next((c for c in self.days if c.is_today), None)

    def to_dict(self):
        return {
            "start": format_date(self.start),
            "end": format_date(self.end),
            "label": self.label,
            "year": self.year,
            "month": self.month,
            "week_number": self.week_number,
            "days": [c.to_dict() for c in self.days],
        }


def shift_week(reference: DateLike, weeks: int) -> date:
    """Move ``reference`` by whole weeks; no bounds in either direction."""
    return as_date(reference) + timedelta(days=7 * weeks)


def render_week(reference: DateLike, plans: Iterable[PlanEntry], today: Optional[DateLike] = None) -> WeekView:
    """Build the week containing ``reference`` and bucket ``plans`` by exact date string.

    Plans dated outside the week, or with placeholder dates, are left out.
    """
    start = monday_of(reference)
    current = format_date(today if today is not None else date.today())

    by_date: Dict[str, List[str]] = {}
    for plan in plans:
        by_date.setdefault(plan.date, []).append(plan.item)

    days = []
    for i in range(7):
        day = start + timedelta(days=i)
        key = format_date(day)
        days.append(DayCell(day, is_today=(key == current), events=by_date.get(key, [])))
    return WeekView(start, days)


__all__ = ['DayCell', 'WeekView', 'shift_week', 'render_week']
