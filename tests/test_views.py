import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication, QLabel

from notes_app.core.navigation import Destination
from notes_app.core.screens import OverviewScreen
from notes_app.core.store import NoteStore
from notes_app.ui.views import NOTE_ID_ROLE, OverviewView, _note_card

_app = QApplication.instance() or QApplication([])


class RecordingNav:
    def __init__(self):
        self.calls = []

    def navigate_to(self, destination):
        self.calls.append(destination)
        return True

    def navigate_back(self):
        return True


def _labels(widget):
    return {label.text(): label.font().bold() for label in widget.findChildren(QLabel)}


def test_only_title_is_bold():
    card = _note_card("Groceries", "Milk, eggs")
    assert _labels(card) == {"Groceries": True, "Milk, eggs": False}


def test_card_without_text_has_title_only():
    card = _note_card("Call mom", "")
    assert _labels(card) == {"Call mom": True}


def test_overview_rows_follow_store():
    store = NoteStore()
    store.add_note("Groceries", "Milk, eggs")
    store.add_note("Call mom", "")
    nav = RecordingNav()
    view = OverviewView()
    view.bind(OverviewScreen(store, nav))

    assert view.listw.count() == 2
    row = view.listw.item(1)
    assert row.data(NOTE_ID_ROLE) == 1
    assert _labels(view.listw.itemWidget(row)) == {"Call mom": True}

    view._on_item_clicked(row)
    assert nav.calls == [Destination.detail(1)]
