from .models import Note, WriteOutcome
from .store import NoteStore
from .validation import validate_note
from .navigation import Destination, NavigationController, RouteError, Screen, format_route, parse_route
from .screens import DetailScreen, OverviewItem, OverviewScreen
from .edit_form import EditForm, EditState

__all__ = ["Note",
           "WriteOutcome",
           "NoteStore",
           "validate_note",
           "Destination",
           "NavigationController",
           "RouteError",
           "Screen",
           "format_route",
           "parse_route",
           "DetailScreen",
           "OverviewItem",
           "OverviewScreen",
           "EditForm",
           "EditState",
           ]
