"""Plan list helpers: the display-time retention filter and the rows shown beside the calendar."""
from __future__ import annotations

from typing import Iterable, List, Optional

from assistant.domain.PlanEntry import PlanEntry
from assistant.logic.week.dates import DateLike, as_date, countdown, countdown_text, last_week_monday


def visible_plans(plans: Iterable[PlanEntry], today: Optional[DateLike] = None) -> List[PlanEntry]:
    """Drop dated entries older than last week's Monday.

    Only the display is filtered; the store keeps every entry. Placeholder-dated
    entries have no age and stay visible.
    """
    cutoff = last_week_monday(today)
    out = []
    for plan in plans:
        d = plan.calendar_date
        if d is None or d >= cutoff:
            out.append(plan)
    return out


def plan_rows(plans: Iterable[PlanEntry], today: Optional[DateLike] = None) -> List[dict]:
    """Rows for the plan list, in the given order, with a countdown for real dates."""
    ref = as_date(today) if today is not None else None
    rows = []
    for plan in plans:
        d = plan.calendar_date
        row = {
            "id": plan.id,
            "date": plan.date,
            "display_date": f"{d:%B} {d.day}, {d.year}" if d else plan.date,
            "item": plan.item,
            "countdown": None,
        }
        if d is not None:
            cd = countdown(d, ref)
            row["countdown"] = {"days": cd.days, "bucket": cd.bucket, "text": countdown_text(cd)}
        rows.append(row)
    return rows


__all__ = ['visible_plans', 'plan_rows']
