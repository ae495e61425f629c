from __future__ import annotations
from pathlib import Path

APP_NAME = "noted"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

# Autosave debounce and how long "Auto-saved" stays in the status bar
AUTOSAVE_DEBOUNCE_MS = 2000
SAVED_STATUS_MS = 1500

STATUS_READY = "Ready"
STATUS_SAVED = "Auto-saved"

BULLET_MARKERS = ("•", "-", "*")
INDENT = "    "

COPY_SUFFIX = " (Copy)"
NEW_NOTE_CONTENT = "• "

EXPORT_SEPARATOR = "=" * 50
DEFAULT_EXPORT_NAME = "notes_export.txt"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5
