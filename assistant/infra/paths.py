from pathlib import Path

from assistant.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
HISTORY_FILE = DATA_DIR / 'history.json'
PLANS_FILE = DATA_DIR / 'plans.json'

__all__ = ['DATA_DIR', 'HISTORY_FILE', 'PLANS_FILE']
