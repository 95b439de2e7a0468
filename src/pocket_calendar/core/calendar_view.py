"""Headless composition of the grid, the store and the editor."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from ..domain import EditorMode, Event, ViewMode, format_day
from .date_grid import compute_view, weekday_order, wrap_rows
from .session import CalendarSession

DEFAULT_HEADER_FORMAT = "%B %Y"

_EDITOR_TITLES = {
    EditorMode.CREATE: "New event",
    EditorMode.EDIT: "Edit event",
}


@dataclass(frozen=True)
class DayCell:
    day: date
    key: str
    is_today: bool
    muted: bool
    events: Tuple[Tuple[int, Event], ...] = ()

    def to_record(self) -> Dict[str, Any]:
        return {
            "date": self.key,
            "day": self.day.day,
            "today": self.is_today,
            "muted": self.muted,
            "events": [{"index": index, **event.to_record()} for index, event in self.events],
        }


@dataclass(frozen=True)
class EditorForm:
    heading: str
    target_date: Optional[str]
    draft_title: str
    can_delete: bool


@dataclass(frozen=True)
class CalendarView:
    header: str
    view_mode: ViewMode
    weekday_names: List[str]
    cells: List[DayCell]
    editor: Optional[EditorForm] = None
    notice: Optional[str] = None
    rows: List[List[DayCell]] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", wrap_rows(self.cells))

    def to_record(self) -> Dict[str, Any]:
        return {
            "header": self.header,
            "view": self.view_mode.value,
            "weekdays": list(self.weekday_names),
            "rows": [[cell.to_record() for cell in row] for row in self.rows],
        }


def build_view(
    session: CalendarSession,
    *,
    today: Optional[date] = None,
    header_format: str = DEFAULT_HEADER_FORMAT,
) -> CalendarView:
    today = today or date.today()
    anchor = session.anchor
    cells = []
    for day in compute_view(anchor, session.view_mode, first_weekday=session.first_weekday):
        key = format_day(day)
        cells.append(
            DayCell(
                day=day,
                key=key,
                is_today=day == today,
                muted=day.month != anchor.month,
                events=tuple(session.store.indexed_by_date(key)),
            )
        )
    return CalendarView(
        header=anchor.strftime(header_format),
        view_mode=session.view_mode,
        weekday_names=[calendar.day_abbr[weekday] for weekday in weekday_order(session.first_weekday)],
        cells=cells,
        editor=_editor_form(session),
        notice=session.notice,
    )


def _editor_form(session: CalendarSession) -> Optional[EditorForm]:
    state = session.editor
    if not state.is_open:
        return None
    return EditorForm(
        heading=_EDITOR_TITLES[state.mode],
        target_date=state.target_date,
        draft_title=state.draft_title,
        can_delete=state.mode is EditorMode.EDIT,
    )


__all__ = ["CalendarView", "DayCell", "EditorForm", "build_view"]
