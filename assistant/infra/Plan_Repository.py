import logging
from pathlib import Path
from typing import List, Optional

from assistant.domain.PlanEntry import PlanEntry
from assistant.infra.json_files import read_json_array, write_json_array
from assistant.infra.paths import PLANS_FILE
from assistant.utilities.errors import NotFound, ValidationError

logger = logging.getLogger(__name__)


class PlanRepository:
    """Plan book backed by a JSON array file.

    Every operation is a whole-collection read-modify-write; entries are never
    edited in place, only added or deleted by id. Writes work on the raw array,
    so records that do not parse as a PlanEntry are kept on disk.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else PLANS_FILE

    def _load(self) -> List[PlanEntry]:
        plans = []
        for raw in read_json_array(self.path):
            plan = PlanEntry.from_dict(raw)
            if plan is None:
                logger.warning("Skipping malformed plan record in %s: %r", self.path.name, raw)
                continue
            plans.append(plan)
        return plans

    def list_plans(self) -> List[PlanEntry]:
        """All entries, real dates ascending, placeholder dates last (insertion order on ties)."""
        return sorted(self._load(), key=PlanEntry.sort_key)

    def add_plan(self, date: str, item: str) -> PlanEntry:
        date = (date or "").strip()
        item = (item or "").strip()
        if not date or not item:
            raise ValidationError("Date and item are required for adding a plan.")
        records = read_json_array(self.path)
        existing = {r.get("id") for r in records if isinstance(r, dict)}
        plan = PlanEntry.create(date, item)
        while plan.id in existing:  # uuid4 collision, practically unreachable
            plan = PlanEntry.create(date, item)
        records.append(plan.to_dict())
        write_json_array(self.path, records)
        logger.info("Plan saved id=%s date=%s", plan.id, plan.date)
        return plan

    def delete_plan(self, plan_id: str) -> bool:
        plan_id = (plan_id or "").strip()
        if not plan_id:
            raise ValidationError("Plan ID is required for deleting a plan.")
        records = read_json_array(self.path)
        remaining = [r for r in records if not (isinstance(r, dict) and r.get("id") == plan_id)]
        if len(remaining) == len(records):
            raise NotFound("Plan not found.")
        write_json_array(self.path, remaining)
        logger.info("Plan deleted id=%s", plan_id)
        return True


__all__ = ['PlanRepository']
