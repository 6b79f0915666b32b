from __future__ import annotations

import logging

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from notes_app.app_settings import SettingsKeys, get_int
from notes_app.core.edit_form import EditForm
from notes_app.core.navigation import Destination, NavigationController, Screen, format_route
from notes_app.core.screens import DetailScreen, OverviewScreen
from notes_app.core.store import NoteStore
from notes_app.services.markdown_renderer import MarkdownRenderer
from notes_app.settings import APP_NAME, WINDOW_DEFAULT_HEIGHT, WINDOW_DEFAULT_WIDTH
from notes_app.ui.views import DetailView, EditView, OverviewView

log = logging.getLogger(APP_NAME)


class NotesWindow(QMainWindow):
    """
    Главное окно: три экрана в QStackedWidget.
    Какой экран показан, решает NavigationController; окно только
    создаёт презентер под Destination и привязывает его к виджету.
    """

    def __init__(self, store: NoteStore, settings: QSettings):
        super().__init__()
        self.setWindowTitle("Notes")

        self.store = store
        self._settings = settings
        self.renderer = MarkdownRenderer()

        self.overview_view = OverviewView()
        self.detail_view = DetailView(self.renderer)
        self.edit_view = EditView()

        self.stack = QStackedWidget()
        self.stack.addWidget(self.overview_view)
        self.stack.addWidget(self.detail_view)
        self.stack.addWidget(self.edit_view)
        self.setCentralWidget(self.stack)

        self.nav = NavigationController(self._open_destination)

        self._unsubscribe = self.store.subscribe(self._on_store_changed)

        act_back = QAction("Back", self)
        act_back.setShortcut(QKeySequence("Alt+Left"))
        act_back.triggered.connect(self._on_back_shortcut)
        self.addAction(act_back)

        self._restore_geometry()

    def start(self) -> None:
        self.nav.navigate_to(Destination.overview())

    def _open_destination(self, destination: Destination) -> bool:
        log.debug("Navigate: %s", format_route(destination))

        if destination.screen is Screen.OVERVIEW:
            self.overview_view.bind(OverviewScreen(self.store, self.nav))
            self.stack.setCurrentWidget(self.overview_view)
            return True

        if destination.screen is Screen.DETAIL:
            screen = DetailScreen(self.store, self.nav, destination.note_id)
            note = screen.activate()
            if note is None:
                # the back request cancels this open; previous page stays
                return True
            self.detail_view.bind(screen, note)
            self.stack.setCurrentWidget(self.detail_view)
            return True

        form = EditForm(self.store, self.nav, destination.note_id)
        form.activate()
        self.edit_view.bind(form)
        self.stack.setCurrentWidget(self.edit_view)
        return True

    def _on_store_changed(self) -> None:
        current = self.nav.current
        if current is not None and current.screen is Screen.OVERVIEW:
            self.overview_view.render()

    def _on_back_shortcut(self) -> None:
        current = self.nav.current
        if current is not None and current.screen is Screen.EDIT:
            self.edit_view.discard()
        else:
            self.nav.navigate_back()

    def _restore_geometry(self) -> None:
        geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
        if geo and self.restoreGeometry(geo):
            return
        # geometry blob missing or from another Qt build: fall back to plain size
        self.resize(
            get_int(self._settings, SettingsKeys.UI_WIDTH, WINDOW_DEFAULT_WIDTH),
            get_int(self._settings, SettingsKeys.UI_HEIGHT, WINDOW_DEFAULT_HEIGHT),
        )

    def closeEvent(self, event):  # type: ignore[override]
        self._settings.setValue(SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        self._settings.setValue(SettingsKeys.UI_WIDTH, self.width())
        self._settings.setValue(SettingsKeys.UI_HEIGHT, self.height())
        self._unsubscribe()
        log.info("Window closed, notes in memory discarded: count=%d", len(self.store))
        super().closeEvent(event)
