from __future__ import annotations

import logging
from enum import Enum

from notes_app.core.models import WriteOutcome
from notes_app.core.navigation import Navigator
from notes_app.core.store import NoteStore
from notes_app.core.validation import validate_note
from notes_app.settings import APP_NAME

log = logging.getLogger(APP_NAME)


class EditState(Enum):
    LOADING_OR_EMPTY = "loading_or_empty"
    EDITING = "editing"
    INVALID = "invalid"
    SAVED = "saved"
    DISCARDED = "discarded"


TERMINAL_STATES = frozenset({EditState.SAVED, EditState.DISCARDED})


class EditForm:
    """
    Форма создания/редактирования заметки.

    note_id=None -> режим создания, Save вызывает add_note.
    note_id=<int> -> режим редактирования, Save вызывает update_note(note_id, ...),
    даже если заметки с таким id уже нет (тогда это no-op со стороны хранилища).

    Поля меняются только локально; в хранилище пишет только успешный save().
    """

    def __init__(self, store: NoteStore, nav: Navigator, note_id: int | None = None) -> None:
        self.store = store
        self.nav = nav
        self.note_id = note_id

        self.title = ""
        self.text = ""
        self.errors: list[str] = []
        self.state = EditState.LOADING_OR_EMPTY
        self.last_outcome: WriteOutcome | None = None

        self._activated = False

    @property
    def is_edit_mode(self) -> bool:
        return self.note_id is not None

    @property
    def heading(self) -> str:
        return "Edit Note" if self.is_edit_mode else "Create Note"

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def activate(self) -> None:
        """One-time seed from the store. Later calls keep the local edits."""
        if self._activated:
            return
        self._activated = True

        if self.note_id is not None:
            note = self.store.get_note(self.note_id)
            if note is not None:
                self.title = note.title
                self.text = note.text
            else:
                log.info("Edit: note not found, starting with empty fields. id=%d", self.note_id)
        self.state = EditState.EDITING

    def set_title(self, value: str) -> None:
        if self.finished:
            return
        self.title = value

    def set_text(self, value: str) -> None:
        if self.finished:
            return
        self.text = value

    def save(self) -> bool:
        if self.finished:
            return False
        if not self._activated:
            self.activate()

        self.errors = validate_note(self.title, self.text)
        if self.errors:
            self.state = EditState.INVALID
            log.debug("Edit: validation failed: %s", "; ".join(self.errors))
            return False

        self.state = EditState.SAVED
        if self.note_id is None:
            new_id = self.store.add_note(self.title, self.text)
            log.info("Edit: note created. id=%d", new_id)
        else:
            self.last_outcome = self.store.update_note(self.note_id, self.title, self.text)
            log.info("Edit: note saved. id=%d outcome=%s", self.note_id, self.last_outcome.value)
        self.nav.navigate_back()
        return True

    def back(self) -> bool:
        if self.finished:
            return False
        self.state = EditState.DISCARDED
        return self.nav.navigate_back()
