from __future__ import annotations

import logging
from collections.abc import Callable

from notes_app.core.models import Note, WriteOutcome
from notes_app.settings import APP_NAME

log = logging.getLogger(APP_NAME)

ChangeListener = Callable[[], None]


class NoteStore:
    """
    Единственный владелец заметок и счётчика id.

    Заметки хранятся в порядке добавления. Счётчик никогда не уменьшается,
    поэтому id удалённых заметок повторно не выдаются.
    Отсутствующий id — это не ошибка: update/delete возвращают
    WriteOutcome.NOT_FOUND, get_note возвращает None.
    """

    def __init__(self) -> None:
        self._notes: list[Note] = []
        self._next_id = 0
        self._listeners: list[ChangeListener] = []

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return any(n.id == note_id for n in self._notes)

    @property
    def next_id(self) -> int:
        return self._next_id

    def notes(self) -> list[Note]:
        """Snapshot of the collection in insertion order."""
        return list(self._notes)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Register a callback fired after every applied mutation.
        Returns a function that removes the callback again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def add_note(self, title: str, text: str) -> int:
        note_id = self._next_id
        self._next_id += 1
        self._notes.append(Note(id=note_id, title=title, text=text))
        log.debug("Note added: id=%d title_len=%d text_len=%d", note_id, len(title), len(text))
        self._notify()
        return note_id

    def update_note(self, note_id: int, title: str, text: str) -> WriteOutcome:
        note = self.get_note(note_id)
        if note is None:
            log.info("Update ignored, note not found: id=%d", note_id)
            return WriteOutcome.NOT_FOUND
        note.title = title
        note.text = text
        log.debug("Note updated: id=%d", note_id)
        self._notify()
        return WriteOutcome.APPLIED

    def delete_note(self, note_id: int) -> WriteOutcome:
        before = len(self._notes)
        self._notes = [n for n in self._notes if n.id != note_id]
        if len(self._notes) == before:
            log.info("Delete ignored, note not found: id=%d", note_id)
            return WriteOutcome.NOT_FOUND
        log.debug("Note deleted: id=%d", note_id)
        self._notify()
        return WriteOutcome.APPLIED

    def get_note(self, note_id: int) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None
