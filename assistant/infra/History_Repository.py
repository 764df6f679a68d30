"""Conversation log repository (append-only JSON array file)."""
import logging
from pathlib import Path
from typing import List, Optional

from assistant.domain.HistoryRecord import HistoryRecord
from assistant.infra.json_files import read_json_array, write_json_array
from assistant.infra.paths import HISTORY_FILE
from assistant.utilities.constants import MAX_HISTORY_LENGTH

logger = logging.getLogger(__name__)


class HistoryRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else HISTORY_FILE

    def read_all(self) -> List[HistoryRecord]:
        records = []
        for raw in read_json_array(self.path):
            record = HistoryRecord.from_dict(raw)
            if record is not None:
                records.append(record)
        return records

    def context_window(self, n: int = MAX_HISTORY_LENGTH) -> List[HistoryRecord]:
        """The most recent ``n`` records (fewer if the log is shorter). The file is not touched."""
        if n <= 0:
            return []
        return self.read_all()[-n:]

    def append(self, *records: HistoryRecord) -> None:
        if not records:
            return
        # Extend the raw array; records read_all ignores stay on disk.
        history = read_json_array(self.path)
        history.extend(r.to_dict() for r in records)
        write_json_array(self.path, history)


__all__ = ['HistoryRepository']
