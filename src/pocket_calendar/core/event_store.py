from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from ..domain import Event

logger = logging.getLogger(__name__)


class EventStore:
    """Insertion-ordered, index-addressed events held in memory.

    Indexes shift down after :meth:`remove`, so an index is only meaningful
    until the next removal.
    """

    def __init__(self, events: Optional[Iterable[Event]] = None) -> None:
        self._events: List[Event] = list(events or [])

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __getitem__(self, index: int) -> Event:
        return self._events[index]

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    def add(self, event: Event) -> int:
        self._events.append(event)
        index = len(self._events) - 1
        logger.debug("Added event #%s %r on %s", index, event.title, event.date)
        return index

    def update(self, index: int, title: str, date: str) -> None:
        event = self._events[index]
        event.title = title
        event.date = date
        logger.debug("Updated event #%s to %r on %s", index, title, date)

    def remove(self, index: int) -> Event:
        event = self._events.pop(index)
        logger.debug("Removed event #%s %r on %s", index, event.title, event.date)
        return event

    def by_date(self, day: str) -> List[Event]:
        return [event for event in self._events if event.date == day]

    def indexed_by_date(self, day: str) -> List[Tuple[int, Event]]:
        return [(index, event) for index, event in enumerate(self._events) if event.date == day]


__all__ = ["EventStore"]
