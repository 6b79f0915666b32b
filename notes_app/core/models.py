from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class Note:
    """
    Заметка. `id` выдаётся хранилищем один раз и больше не меняется;
    title/text меняются только через NoteStore.update_note.
    """
    id: int
    title: str
    text: str


class WriteOutcome(Enum):
    """Result of a store write addressed by id."""
    APPLIED = "applied"
    NOT_FOUND = "not_found"

    @property
    def applied(self) -> bool:
        return self is WriteOutcome.APPLIED
