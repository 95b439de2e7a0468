"""Calendar grid, event store and editor state."""

from .calendar_view import CalendarView, DayCell, EditorForm, build_view
from .config import APP_AUTHOR, APP_NAME, LOG_DIR, ensure_log_dir
from .date_grid import compute_view, navigate, start_of_week, wrap_rows
from .editor import EditorState
from .event_store import EventStore
from .session import CalendarSession, new_session

__all__ = [
    "APP_AUTHOR",
    "APP_NAME",
    "LOG_DIR",
    "CalendarSession",
    "CalendarView",
    "DayCell",
    "EditorForm",
    "EditorState",
    "EventStore",
    "build_view",
    "compute_view",
    "ensure_log_dir",
    "navigate",
    "new_session",
    "start_of_week",
    "wrap_rows",
]
