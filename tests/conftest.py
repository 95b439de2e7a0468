from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from pocket_calendar.config import get_settings
from pocket_calendar.core import EventStore, new_session
from pocket_calendar.core.session import CalendarSession
from pocket_calendar.domain import Event


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point logging at a sandbox and drop any cached settings around each test."""
    for name in (
        "POCKET_CALENDAR_APP_NAME",
        "POCKET_CALENDAR_WEEK_START",
        "POCKET_CALENDAR_DEFAULT_VIEW",
        "POCKET_CALENDAR_HEADER_FORMAT",
        "POCKET_CALENDAR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("POCKET_CALENDAR_LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def two_event_store() -> EventStore:
    return EventStore([Event(title="Meeting", date="2024-06-15"), Event(title="Dinner", date="2024-06-20")])


@pytest.fixture
def session(today: date, store: EventStore) -> CalendarSession:
    return new_session(today=today, store=store)
