from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "simple-notes"
STORAGE_KEY = "savedNotes"

APP_HOME = Path(os.environ.get("SIMPLE_NOTES_HOME") or Path.home() / f".{APP_NAME}")
DATA_DIR = APP_HOME / "data"
LOG_DIR = APP_HOME / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
