from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QListWidget, QListWidgetItem,
    QPlainTextEdit, QPushButton, QTextBrowser, QVBoxLayout, QWidget,
)

from notes_app.core.edit_form import EditForm
from notes_app.core.models import Note
from notes_app.core.screens import DetailScreen, OverviewScreen
from notes_app.services.markdown_renderer import MarkdownRenderer
from notes_app.ui.qt_utils import blocked_signals

NOTE_ID_ROLE = Qt.UserRole


def _heading(text: str) -> QLabel:
    label = QLabel(text)
    font = label.font()
    font.setPointSize(font.pointSize() + 4)
    font.setBold(True)
    label.setFont(font)
    return label


def _plain_label(text: str) -> QLabel:
    label = QLabel(text)
    label.setTextFormat(Qt.PlainText)
    label.setWordWrap(True)
    return label


def _note_card(title: str, text: str) -> QWidget:
    """Overview row: bold title, body-style text under it."""
    card = QWidget()
    card.setAttribute(Qt.WA_TransparentForMouseEvents)
    title_label = _plain_label(title)
    font = title_label.font()
    font.setBold(True)
    title_label.setFont(font)

    layout = QVBoxLayout(card)
    layout.setContentsMargins(8, 6, 8, 6)
    layout.addWidget(title_label)
    if text:
        layout.addWidget(_plain_label(text))
    return card


class OverviewView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._screen: OverviewScreen | None = None

        self.listw = QListWidget()
        self.listw.setWordWrap(True)
        self.add_button = QPushButton("+")
        self.add_button.setToolTip("Add Note")

        bottom = QHBoxLayout()
        bottom.addStretch(1)
        bottom.addWidget(self.add_button)

        layout = QVBoxLayout(self)
        layout.addWidget(_heading("Notes Overview"))
        layout.addWidget(self.listw)
        layout.addLayout(bottom)

        self.listw.itemClicked.connect(self._on_item_clicked)
        self.add_button.clicked.connect(self._on_add)

    def bind(self, screen: OverviewScreen) -> None:
        self._screen = screen
        self.render()

    def render(self) -> None:
        if self._screen is None:
            return
        with blocked_signals(self.listw):
            self.listw.clear()
            for item in self._screen.items():
                row = QListWidgetItem()
                row.setData(NOTE_ID_ROLE, item.note_id)
                card = _note_card(item.title, item.text)
                row.setSizeHint(card.sizeHint())
                self.listw.addItem(row)
                self.listw.setItemWidget(row, card)

    def _on_item_clicked(self, row: QListWidgetItem) -> None:
        if self._screen is not None:
            self._screen.select(int(row.data(NOTE_ID_ROLE)))

    def _on_add(self) -> None:
        if self._screen is not None:
            self._screen.create()


class DetailView(QWidget):
    def __init__(self, renderer: MarkdownRenderer, parent: QWidget | None = None):
        super().__init__(parent)
        self._renderer = renderer
        self._screen: DetailScreen | None = None

        self.back_button = QPushButton("Back")
        self.title_label = QLabel()
        self.title_label.setTextFormat(Qt.PlainText)
        self.title_label.setWordWrap(True)
        font = self.title_label.font()
        font.setBold(True)
        self.title_label.setFont(font)
        self.body = QTextBrowser()
        self.body.setOpenExternalLinks(True)
        self.edit_button = QPushButton("Edit")
        self.delete_button = QPushButton("Delete")

        top = QHBoxLayout()
        top.addWidget(self.back_button)
        top.addWidget(_heading("Note Detail"), 1)

        actions = QHBoxLayout()
        actions.addWidget(self.edit_button)
        actions.addWidget(self.delete_button)

        layout = QVBoxLayout(self)
        layout.addLayout(top)
        layout.addWidget(self.title_label)
        layout.addWidget(self.body, 1)
        layout.addLayout(actions)

        self.back_button.clicked.connect(self._on_back)
        self.edit_button.clicked.connect(self._on_edit)
        self.delete_button.clicked.connect(self._on_delete)

    def bind(self, screen: DetailScreen, note: Note) -> None:
        self._screen = screen
        self.title_label.setText(note.title)
        self.body.setHtml(self._renderer.render_page(note.text))

    def _on_back(self) -> None:
        if self._screen is not None:
            self._screen.back()

    def _on_edit(self) -> None:
        if self._screen is not None:
            self._screen.edit()

    def _on_delete(self) -> None:
        if self._screen is not None:
            self._screen.delete()


class EditView(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._form: EditForm | None = None

        self.back_button = QPushButton("Back")
        self.heading = _heading("")
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Title")
        self.text_edit = QPlainTextEdit()
        self.text_edit.setPlaceholderText("Text")
        self.errors_label = QLabel()
        self.errors_label.setStyleSheet("color: red;")
        self.errors_label.setWordWrap(True)
        self.save_button = QPushButton("Save")
        self.save_button.setDefault(True)

        top = QHBoxLayout()
        top.addWidget(self.back_button)
        top.addWidget(self.heading, 1)

        bottom = QHBoxLayout()
        bottom.addStretch(1)
        bottom.addWidget(self.save_button)

        layout = QVBoxLayout(self)
        layout.addLayout(top)
        layout.addWidget(self.title_edit)
        layout.addWidget(self.text_edit, 1)
        layout.addWidget(self.errors_label)
        layout.addLayout(bottom)

        self.title_edit.textChanged.connect(self._on_title_changed)
        self.text_edit.textChanged.connect(self._on_text_changed)
        self.save_button.clicked.connect(self._on_save)
        self.back_button.clicked.connect(self.discard)

    @property
    def form(self) -> EditForm | None:
        return self._form

    def bind(self, form: EditForm) -> None:
        self._form = form
        self.heading.setText(form.heading)
        with blocked_signals(self.title_edit, self.text_edit):
            self.title_edit.setText(form.title)
            self.text_edit.setPlainText(form.text)
        self._render_errors()
        self.title_edit.setFocus()

    def _render_errors(self) -> None:
        errors = self._form.errors if self._form is not None else []
        self.errors_label.setText("\n".join(errors))
        self.errors_label.setVisible(bool(errors))

    def _on_title_changed(self, value: str) -> None:
        if self._form is not None:
            self._form.set_title(value)

    def _on_text_changed(self) -> None:
        if self._form is not None:
            self._form.set_text(self.text_edit.toPlainText())

    def _on_save(self) -> None:
        if self._form is None:
            return
        if not self._form.save():
            self._render_errors()

    def discard(self) -> None:
        if self._form is not None:
            self._form.back()
