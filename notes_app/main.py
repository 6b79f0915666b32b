from __future__ import annotations

import argparse

from PySide6.QtWidgets import QApplication

from notes_app.app_settings import SettingsKeys, get_str, open_settings
from notes_app.core.store import NoteStore
from notes_app.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from notes_app.settings import DEFAULT_LOG_LEVEL, LOG_LEVELS, normalize_log_level
from notes_app.ui.main_window import NotesWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="In-memory notes")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Console log level. Remembered between runs.",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    app = QApplication([])

    settings = open_settings()
    if args.log_level:
        settings.setValue(SettingsKeys.LOG_LEVEL, args.log_level)
        level = args.log_level
    else:
        level = normalize_log_level(get_str(settings, SettingsKeys.LOG_LEVEL, DEFAULT_LOG_LEVEL))

    log = setup_logging(level)
    install_global_exception_hooks(log)

    # The store lives exactly as long as the process.
    store = NoteStore()
    win = NotesWindow(store, settings)
    win.start()
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
