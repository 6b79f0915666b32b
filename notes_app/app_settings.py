from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings

from notes_app.settings import APP_NAME


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"
    UI_WIDTH: str = "ui/width"
    UI_HEIGHT: str = "ui/height"
    LOG_LEVEL: str = "log/console_level"


def open_settings() -> QSettings:
    # Only UI/runtime options live here, never note data.
    return QSettings(APP_NAME, APP_NAME)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except Exception:
        return default
