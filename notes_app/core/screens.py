from __future__ import annotations

import logging
from dataclasses import dataclass

from notes_app.core.models import Note
from notes_app.core.navigation import Destination, Navigator
from notes_app.core.store import NoteStore
from notes_app.settings import APP_NAME

log = logging.getLogger(APP_NAME)


@dataclass(frozen=True)
class OverviewItem:
    note_id: int
    title: str
    text: str


class OverviewScreen:
    """List of all notes plus the "create" action. Never mutates the store."""

    def __init__(self, store: NoteStore, nav: Navigator) -> None:
        self.store = store
        self.nav = nav

    def items(self) -> list[OverviewItem]:
        return [OverviewItem(n.id, n.title, n.text) for n in self.store.notes()]

    def select(self, note_id: int) -> bool:
        return self.nav.navigate_to(Destination.detail(note_id))

    def create(self) -> bool:
        return self.nav.navigate_to(Destination.edit())


class DetailScreen:
    """
    Read-only view of one note with "edit" and "delete".

    activate() must be called every time the screen is shown: if the note
    is gone (deleted meanwhile or a bogus id) it asks to go back and
    returns None, and the view renders nothing.
    """

    def __init__(self, store: NoteStore, nav: Navigator, note_id: int) -> None:
        self.store = store
        self.nav = nav
        self.note_id = note_id

    def activate(self) -> Note | None:
        note = self.store.get_note(self.note_id)
        if note is None:
            log.info("Detail: note not found, going back. id=%d", self.note_id)
            self.nav.navigate_back()
        return note

    def edit(self) -> bool:
        return self.nav.navigate_to(Destination.edit(self.note_id))

    def delete(self) -> bool:
        # No confirmation, no undo.
        self.store.delete_note(self.note_id)
        return self.nav.navigate_back()

    def back(self) -> bool:
        return self.nav.navigate_back()
