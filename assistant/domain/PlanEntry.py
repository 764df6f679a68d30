"""PlanEntry domain entity: one dated to-do in the plan book (id, date, item, creation timestamp)."""
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from assistant.logic.week.dates import parse_plan_date


def _utc_timestamp() -> str:
    """Current instant as ISO-8601 UTC with millisecond precision and a 'Z' suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PlanEntry:
    def __init__(self, id: str, date: str, item: str, timestamp: str = ""):
        self.id = id
        self.date = date
        self.item = item
        self.timestamp = timestamp

    @classmethod
    def create(cls, date: str, item: str) -> "PlanEntry":
        """New entry with a fresh UUID4 id and the current timestamp."""
        return cls(str(uuid4()), date, item, _utc_timestamp())

    @property
    def calendar_date(self):
        """The entry's date as a ``date``, or None for placeholders such as '待定'."""
        return parse_plan_date(self.date)

    def sort_key(self):
        # Real dates ascending, placeholders last; ISO strings order like dates.
        return (self.calendar_date is None, self.date if self.calendar_date else "")

    def __eq__(self, other):
        if not isinstance(other, PlanEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.date} - {self.item} ({self.id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> Optional["PlanEntry"]:
        '''Creates a PlanEntry from a dictionary. Returns None when id is missing.'''
        if not isinstance(data, dict) or not data.get("id"):
            return None
        return PlanEntry(
            id=str(data["id"]),
            date=str(data.get("date", "")),
            item=str(data.get("item", "")),
            timestamp=str(data.get("timestamp", "")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "item": self.item,
            "timestamp": self.timestamp,
        }
