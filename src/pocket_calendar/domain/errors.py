from __future__ import annotations


class CalendarError(Exception):
    """Base class for calendar state errors."""


class DraftValidationError(CalendarError, ValueError):
    """The draft in the event editor cannot be committed as it stands."""


class EditorStateError(CalendarError, RuntimeError):
    """An editor transition was requested from a state that does not allow it."""
