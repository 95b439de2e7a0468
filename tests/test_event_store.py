from __future__ import annotations

import pytest

from pocket_calendar.core import EventStore
from pocket_calendar.domain import Event


def test_add_appends_in_insertion_order(store: EventStore) -> None:
    assert store.add(Event(title="Meeting", date="2024-06-15")) == 0
    assert store.add(Event(title="Lunch", date="2024-06-15")) == 1

    assert len(store) == 2
    assert [event.title for event in store] == ["Meeting", "Lunch"]


def test_update_replaces_fields_in_place(two_event_store: EventStore) -> None:
    two_event_store.update(0, "Standup", "2024-06-16")

    assert two_event_store[0] == Event(title="Standup", date="2024-06-16")
    assert two_event_store[1] == Event(title="Dinner", date="2024-06-20")


def test_remove_shifts_later_events_down(two_event_store: EventStore) -> None:
    removed = two_event_store.remove(0)

    assert removed.title == "Meeting"
    assert two_event_store.events == [Event(title="Dinner", date="2024-06-20")]


def test_remove_invalid_index_raises(store: EventStore) -> None:
    with pytest.raises(IndexError):
        store.remove(0)


def test_by_date_matches_exact_day_key() -> None:
    store = EventStore(
        [
            Event(title="A", date="2024-06-15"),
            Event(title="B", date="2024-06-16"),
            Event(title="C", date="2024-06-15"),
        ]
    )

    assert [event.title for event in store.by_date("2024-06-15")] == ["A", "C"]
    assert [index for index, _ in store.indexed_by_date("2024-06-15")] == [0, 2]
    assert store.by_date("2024-6-15") == []


def test_events_property_is_a_copy(two_event_store: EventStore) -> None:
    snapshot = two_event_store.events
    snapshot.clear()

    assert len(two_event_store) == 2
