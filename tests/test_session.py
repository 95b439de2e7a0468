from __future__ import annotations

import calendar
from datetime import date

from pocket_calendar.core import EventStore, build_view, new_session
from pocket_calendar.core import session as transitions
from pocket_calendar.core.editor import MISSING_FIELDS_MESSAGE
from pocket_calendar.core.session import CalendarSession
from pocket_calendar.domain import Direction, EditorMode, Event, ViewMode


def test_navigation_and_today(session: CalendarSession, today: date) -> None:
    moved = transitions.go(session, Direction.NEXT)
    assert moved.anchor == date(2024, 7, 15)

    weekly = transitions.go(transitions.switch_view(moved, ViewMode.WEEK), Direction.PREV)
    assert weekly.view_mode is ViewMode.WEEK
    assert weekly.anchor == date(2024, 7, 8)

    assert transitions.jump_to_today(weekly, today=today).anchor == today
    assert session.anchor == today


def test_create_scenario(session: CalendarSession, store: EventStore) -> None:
    state = transitions.open_create(session, "2024-06-15")
    state = transitions.set_draft_title(state, "Meeting")
    state = transitions.save(state)

    assert store.events == [Event(title="Meeting", date="2024-06-15")]
    assert state.editor.mode is EditorMode.CLOSED
    assert state.notice is None


def test_rejected_save_keeps_editor_open_with_notice(session: CalendarSession, store: EventStore) -> None:
    state = transitions.save(transitions.open_create(session, "2024-06-15"))

    assert len(store) == 0
    assert state.editor.mode is EditorMode.CREATE
    assert state.notice == MISSING_FIELDS_MESSAGE

    state = transitions.dismiss_notice(state)
    assert state.notice is None
    assert state.editor.is_open


def test_update_scenario(today: date) -> None:
    store = EventStore([Event(title="Meeting", date="2024-06-15")])
    state = transitions.open_edit(new_session(today=today, store=store), "2024-06-15", 0, "Meeting")
    state = transitions.set_draft_title(state, "Lunch")
    state = transitions.save(state)

    assert store.events == [Event(title="Lunch", date="2024-06-15")]
    assert not state.editor.is_open


def test_delete_scenario(today: date, two_event_store: EventStore) -> None:
    state = transitions.open_edit(new_session(today=today, store=two_event_store), "2024-06-15", 0, "Meeting")
    state = transitions.delete(state)

    assert two_event_store.events == [Event(title="Dinner", date="2024-06-20")]
    assert not state.editor.is_open


def test_close_editor_twice_from_closed_is_noop(session: CalendarSession) -> None:
    once = transitions.close_editor(session)
    twice = transitions.close_editor(once)

    assert once == session
    assert twice == session


def test_build_view_month_joins_events_by_day_key(today: date, two_event_store: EventStore) -> None:
    view = build_view(new_session(today=today, store=two_event_store), today=today)

    assert view.header == "June 2024"
    assert view.weekday_names == [calendar.day_abbr[day] for day in (6, 0, 1, 2, 3, 4, 5)]
    assert len(view.cells) == 36
    assert [len(row) for row in view.rows] == [7, 7, 7, 7, 7, 1]

    by_key = {cell.key: cell for cell in view.cells}
    assert [(index, event.title) for index, event in by_key["2024-06-15"].events] == [(0, "Meeting")]
    assert [(index, event.title) for index, event in by_key["2024-06-20"].events] == [(1, "Dinner")]
    assert by_key["2024-06-15"].is_today
    assert by_key["2024-05-31"].muted
    assert not by_key["2024-06-01"].muted
    assert view.editor is None


def test_build_view_week_marks_other_month_days_muted(today: date) -> None:
    session = transitions.switch_view(new_session(today=date(2024, 7, 2)), ViewMode.WEEK)
    view = build_view(session, today=today)

    assert [cell.key for cell in view.cells][0] == "2024-06-30"
    assert view.cells[0].muted
    assert not view.cells[2].muted
    assert not any(cell.is_today for cell in view.cells)


def test_build_view_describes_editor(session: CalendarSession, today: date) -> None:
    creating = build_view(transitions.open_create(session, "2024-06-15"), today=today).editor
    assert creating is not None
    assert creating.heading == "New event"
    assert not creating.can_delete

    editing = build_view(transitions.open_edit(session, "2024-06-15", 0, "Meeting"), today=today).editor
    assert editing is not None
    assert editing.heading == "Edit event"
    assert editing.draft_title == "Meeting"
    assert editing.can_delete


def test_view_record_shape(today: date, two_event_store: EventStore) -> None:
    session = transitions.switch_view(new_session(today=today, store=two_event_store), ViewMode.WEEK)
    record = build_view(session, today=today).to_record()

    assert record["view"] == "week"
    assert len(record["rows"]) == 1
    saturday = record["rows"][0][-1]
    assert saturday == {
        "date": "2024-06-15",
        "day": 15,
        "today": True,
        "muted": False,
        "events": [{"index": 0, "title": "Meeting", "date": "2024-06-15"}],
    }
