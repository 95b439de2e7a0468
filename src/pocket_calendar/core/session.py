"""Session state and the transitions triggered by user interaction.

Every handler in the window takes the current :class:`CalendarSession` and
replaces it with the one returned here. The event store is the only
mutable piece and is shared between successive sessions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from ..domain import Direction, DraftValidationError, EditorMode, ViewMode
from . import editor
from .date_grid import SUNDAY, navigate
from .editor import CLOSED, EditorState
from .event_store import EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarSession:
    anchor: date
    view_mode: ViewMode = ViewMode.MONTH
    store: EventStore = field(default_factory=EventStore, compare=False)
    editor: EditorState = CLOSED
    first_weekday: int = SUNDAY
    notice: Optional[str] = None


def new_session(
    *,
    today: Optional[date] = None,
    view_mode: ViewMode = ViewMode.MONTH,
    store: Optional[EventStore] = None,
    first_weekday: int = SUNDAY,
) -> CalendarSession:
    return CalendarSession(
        anchor=today or date.today(),
        view_mode=view_mode,
        store=store if store is not None else EventStore(),
        first_weekday=first_weekday,
    )


# ------------------------------------------------------------------ window


def go(session: CalendarSession, direction: Direction) -> CalendarSession:
    anchor = navigate(session.anchor, session.view_mode, direction)
    logger.debug("Navigated %s from %s to %s", direction.value, session.anchor, anchor)
    return replace(session, anchor=anchor)


def jump_to_today(session: CalendarSession, *, today: Optional[date] = None) -> CalendarSession:
    return replace(session, anchor=today or date.today())


def switch_view(session: CalendarSession, mode: ViewMode) -> CalendarSession:
    return replace(session, view_mode=mode)


# ------------------------------------------------------------------ editor


def open_create(session: CalendarSession, day: str) -> CalendarSession:
    return replace(session, editor=editor.open_create(session.editor, day), notice=None)


def open_edit(session: CalendarSession, day: str, index: int, title: str) -> CalendarSession:
    return replace(session, editor=editor.open_edit(session.editor, day, index, title), notice=None)


def set_draft_title(session: CalendarSession, text: str) -> CalendarSession:
    return replace(session, editor=editor.edit_title(session.editor, text))


def set_draft_date(session: CalendarSession, day: Optional[str]) -> CalendarSession:
    return replace(session, editor=editor.edit_date(session.editor, day))


def save(session: CalendarSession) -> CalendarSession:
    """Commit the draft; on a rejected draft keep the editor open with a notice."""

    commit = editor.commit_update if session.editor.mode is EditorMode.EDIT else editor.commit_create
    try:
        state = commit(session.editor, session.store)
    except DraftValidationError as exc:
        return replace(session, notice=str(exc))
    return replace(session, editor=state, notice=None)


def delete(session: CalendarSession) -> CalendarSession:
    return replace(session, editor=editor.commit_delete(session.editor, session.store), notice=None)


def close_editor(session: CalendarSession) -> CalendarSession:
    return replace(session, editor=editor.cancel(session.editor), notice=None)


def dismiss_notice(session: CalendarSession) -> CalendarSession:
    return replace(session, notice=None)


__all__ = [
    "CalendarSession",
    "close_editor",
    "delete",
    "dismiss_notice",
    "go",
    "jump_to_today",
    "new_session",
    "open_create",
    "open_edit",
    "save",
    "set_draft_date",
    "set_draft_title",
    "switch_view",
]
