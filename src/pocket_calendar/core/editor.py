"""State machine behind the event editor modal.

The editor is either closed, open to create an event on a day, or open to
edit the event at a store index. Transitions return a new
:class:`EditorState`; only the ``commit_*`` functions touch the store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..domain import DraftValidationError, EditorMode, EditorStateError, Event, is_day_key
from .event_store import EventStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Enter both a date and a title for the event."


@dataclass(frozen=True)
class EditorState:
    is_open: bool = False
    target_date: Optional[str] = None
    editing_index: Optional[int] = None
    draft_title: str = ""

    @property
    def mode(self) -> EditorMode:
        if not self.is_open:
            return EditorMode.CLOSED
        if self.editing_index is None:
            return EditorMode.CREATE
        return EditorMode.EDIT


CLOSED = EditorState()


def open_create(state: EditorState, day: str) -> EditorState:
    return EditorState(is_open=True, target_date=day, editing_index=None, draft_title="")


def open_edit(state: EditorState, day: str, index: int, title: str) -> EditorState:
    return EditorState(is_open=True, target_date=day, editing_index=index, draft_title=title)


def edit_title(state: EditorState, text: str) -> EditorState:
    _require(state, EditorMode.CREATE, EditorMode.EDIT, action="edit the title")
    return replace(state, draft_title=text)


def edit_date(state: EditorState, day: Optional[str]) -> EditorState:
    _require(state, EditorMode.CREATE, EditorMode.EDIT, action="edit the date")
    return replace(state, target_date=day or None)


def commit_create(state: EditorState, store: EventStore) -> EditorState:
    _require(state, EditorMode.CREATE, action="create an event")
    title, day = _validated_draft(state)
    index = store.add(Event(title=title, date=day))
    logger.debug("Editor created event #%s", index)
    return CLOSED


def commit_update(state: EditorState, store: EventStore) -> EditorState:
    _require(state, EditorMode.EDIT, action="update an event")
    title, day = _validated_draft(state)
    assert state.editing_index is not None
    store.update(state.editing_index, title, day)
    logger.debug("Editor updated event #%s", state.editing_index)
    return CLOSED


def commit_delete(state: EditorState, store: EventStore) -> EditorState:
    _require(state, EditorMode.EDIT, action="delete an event")
    assert state.editing_index is not None
    store.remove(state.editing_index)
    logger.debug("Editor deleted event #%s", state.editing_index)
    return CLOSED


def cancel(state: EditorState) -> EditorState:
    if not state.is_open:
        return state
    return replace(state, is_open=False)


def _require(state: EditorState, *modes: EditorMode, action: str) -> None:
    if state.mode not in modes:
        raise EditorStateError(f"Cannot {action} while the editor is {state.mode.value}.")


def _validated_draft(state: EditorState) -> Tuple[str, str]:
    # Whitespace-only titles count as empty; the title is stored as typed.
    if not state.draft_title.strip() or not is_day_key(state.target_date):
        logger.info("Rejected draft title=%r date=%r", state.draft_title, state.target_date)
        raise DraftValidationError(MISSING_FIELDS_MESSAGE)
    assert state.target_date is not None
    return state.draft_title, state.target_date


__all__ = [
    "CLOSED",
    "EditorState",
    "MISSING_FIELDS_MESSAGE",
    "cancel",
    "commit_create",
    "commit_delete",
    "commit_update",
    "edit_date",
    "edit_title",
    "open_create",
    "open_edit",
]
