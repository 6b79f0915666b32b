from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeAlias
from urllib.parse import parse_qs, urlsplit

# Route parameter value meaning "no note id" (create mode of the edit screen).
NO_NOTE_ID = -1


class RouteError(ValueError):
    """Route string or destination that does not match any screen."""


class Screen(str, Enum):
    OVERVIEW = "overview"
    DETAIL = "detail"
    EDIT = "edit"


@dataclass(frozen=True)
class Destination:
    screen: Screen
    note_id: int | None = None

    def __post_init__(self) -> None:
        if self.screen is Screen.OVERVIEW and self.note_id is not None:
            raise RouteError("overview takes no note id")
        if self.screen is Screen.DETAIL and self.note_id is None:
            raise RouteError("detail requires a note id")

    @classmethod
    def overview(cls) -> "Destination":
        return cls(Screen.OVERVIEW)

    @classmethod
    def detail(cls, note_id: int) -> "Destination":
        return cls(Screen.DETAIL, note_id)

    @classmethod
    def edit(cls, note_id: int | None = None) -> "Destination":
        return cls(Screen.EDIT, note_id)


class Navigator(Protocol):
    """What screens need from navigation."""

    def navigate_to(self, destination: Destination) -> bool: ...

    def navigate_back(self) -> bool: ...


def decode_note_id(raw: int | None) -> int | None:
    """The only place where the NO_NOTE_ID sentinel turns into None."""
    if raw is None or raw == NO_NOTE_ID:
        return None
    return raw


def format_route(destination: Destination) -> str:
    if destination.screen is Screen.OVERVIEW:
        return "overview"
    if destination.screen is Screen.DETAIL:
        return f"detail/{destination.note_id}"
    if destination.note_id is None:
        return "edit"
    return f"edit?noteId={destination.note_id}"


def _parse_int(value: str, route: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise RouteError(f"note id is not an integer in route {route!r}") from None


def parse_route(route: str) -> Destination:
    """
    Разобрать строку маршрута:
      overview | detail/{noteId} | edit | edit?noteId={noteId}
    noteId=-1 у edit означает «без заметки» (режим создания).
    """
    parts = urlsplit(route.strip())
    path = parts.path.strip("/")
    query = parse_qs(parts.query, keep_blank_values=True)

    if path == Screen.OVERVIEW.value and not query:
        return Destination.overview()

    head, _, tail = path.partition("/")
    if head == Screen.DETAIL.value and tail and not query:
        return Destination.detail(_parse_int(tail, route))

    if path == Screen.EDIT.value and set(query) <= {"noteId"}:
        values = query.get("noteId")
        if not values:
            return Destination.edit()
        if len(values) != 1:
            raise RouteError(f"noteId given more than once in route {route!r}")
        return Destination.edit(decode_note_id(_parse_int(values[0], route)))

    raise RouteError(f"unknown route {route!r}")


OpenCallbackResult: TypeAlias = bool | None
OpenCallback: TypeAlias = Callable[[Destination], OpenCallbackResult]


class NavigationController:
    """
    Стек экранов (только "назад").
    Не знает ничего про UI — только Destination. Реальное переключение
    экрана делает open_callback.

    Если экран, который сейчас открывается, сам просит "назад" (экран
    деталей без заметки), открытие отменяется: экран не попадает в стек,
    а остаётся предыдущий. Просьба вернёт False, если предыдущего нет.
    """

    def __init__(self, open_callback: OpenCallback, *, history_limit: int | None = None) -> None:
        if history_limit is not None and history_limit < 0:
            raise ValueError("history_limit must be >= 0 or None")

        self._open_callback: OpenCallback = open_callback
        self._back: deque[Destination] = deque(maxlen=history_limit)
        self._current: Destination | None = None

        self._opening: Destination | None = None
        self._cancel_requested = False

    @property
    def current(self) -> Destination | None:
        """Текущий экран (или None, если ещё ничего не открыто)."""
        return self._current

    @property
    def can_back(self) -> bool:
        return self._current is not None and bool(self._back)

    @property
    def depth(self) -> int:
        """Number of destinations on the stack, current included."""
        return len(self._back) + (1 if self._current is not None else 0)

    @property
    def history(self) -> list[Destination]:
        out = list(self._back)
        if self._current is not None:
            out.append(self._current)
        return out

    def _try_open(self, destination: Destination) -> bool:
        """
        Success: callback returned None or True and did not ask to go back.
        Failure: False or a back request from inside the callback
        (state is left untouched).
        Exceptions propagate.
        """
        self._opening = destination
        self._cancel_requested = False
        try:
            result = self._open_callback(destination)
        finally:
            self._opening = None

        if result is not None and not isinstance(result, bool):
            raise TypeError(
                "open_callback must return bool | None (got "
                f"{type(result).__name__}: {result!r})"
            )
        if self._cancel_requested:
            return False
        return result is None or result is True

    def navigate_to(self, destination: Destination) -> bool:
        """Open destination on top of the stack. True if the switch happened."""
        if self._opening is not None:
            raise RuntimeError(
                f"navigate_to({destination}) called while opening {self._opening}"
            )

        if not self._try_open(destination):
            return False

        if self._current is not None:
            self._back.append(self._current)
        self._current = destination
        return True

    def navigate_back(self) -> bool:
        """
        Return to the previous destination. False when there is nowhere to go.
        Destinations that refuse to open on the way back are dropped.
        """
        if self._opening is not None:
            self._cancel_requested = True
            return self._current is not None

        while self.can_back:
            previous = self._back[-1]
            if self._try_open(previous):
                self._back.pop()
                self._current = previous
                return True
            if not self._cancel_requested:
                return False
            # the previous screen asked to go back itself: drop it
            self._back.pop()
        return False

    def navigate_route(self, route: str) -> bool:
        return self.navigate_to(parse_route(route))

    def clear(self) -> None:
        self._back.clear()
        self._current = None
