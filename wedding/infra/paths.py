from pathlib import Path
from wedding.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
STORAGE_FILE = DATA_DIR / 'plan_storage.json'

__all__ = ['DATA_DIR', 'STORAGE_FILE']
