from __future__ import annotations
from pathlib import Path

APP_NAME = "notes-app"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"

WINDOW_DEFAULT_WIDTH = 420
WINDOW_DEFAULT_HEIGHT = 640


def normalize_log_level(name: str | None) -> str:
    name = (name or "").strip().upper()
    return name if name in LOG_LEVELS else DEFAULT_LOG_LEVEL
