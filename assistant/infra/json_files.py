"""Flat-file persistence for JSON arrays.

Reads create the file as ``[]`` on first access. Every failure is logged and
degrades to an empty list (reads) or a no-op (writes), so a broken data file
never takes the process down. Writes replace the whole file through a temp
file in the same directory; there is no locking, the last writer wins.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, List

logger = logging.getLogger(__name__)


def read_json_array(path: Path) -> List[Any]:
    path = Path(path)
    try:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write("[]")
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s, treating as empty: %s", path.name, e)
        return []
    except OSError as e:
        logger.error("Error reading %s, treating as empty: %s", path, e)
        return []
    if not isinstance(data, list):
        logger.error("Expected a JSON array in %s, got %s; treating as empty", path.name, type(data).__name__)
        return []
    return data


def write_json_array(path: Path, items: List[Any]) -> bool:
    """Atomically replace ``path`` with ``items``. Returns False (after logging) on failure."""
    path = Path(path)
    tmp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(items, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error("Error writing %s: %s", path, e)
        return False
    finally:
        if tmp_path and os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                logger.warning("Could not remove temp file %s", tmp_path)


__all__ = ['read_json_array', 'write_json_array']
