"""Domain models for the in-memory calendar."""

from __future__ import annotations

from .enums import Direction, EditorMode, ViewMode
from .errors import CalendarError, DraftValidationError, EditorStateError
from .models import DAY_FORMAT, Event, format_day, is_day_key, parse_day

__all__ = [
    "CalendarError",
    "DAY_FORMAT",
    "Direction",
    "DraftValidationError",
    "EditorMode",
    "EditorStateError",
    "Event",
    "ViewMode",
    "format_day",
    "is_day_key",
    "parse_day",
]
