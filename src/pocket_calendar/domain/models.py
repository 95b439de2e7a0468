from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict

DAY_FORMAT = "%Y-%m-%d"

_DAY_KEY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def format_day(value: date) -> str:
    """Render a date in the canonical ``YYYY-MM-DD`` form used for matching."""

    return value.strftime(DAY_FORMAT)


def parse_day(value: str) -> date:
    if not isinstance(value, str) or not _DAY_KEY.match(value):
        raise ValueError(f"Unsupported day value: {value!r}")
    return datetime.strptime(value, DAY_FORMAT).date()


def is_day_key(value: Any) -> bool:
    try:
        parse_day(value)
    except ValueError:
        return False
    return True


@dataclass(slots=True)
class Event:
    title: str
    date: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Event":
        return cls(title=str(record["title"]), date=str(record["date"]))

    def to_record(self) -> Dict[str, Any]:
        return {"title": self.title, "date": self.date}
