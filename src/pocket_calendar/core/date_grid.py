"""Pure date arithmetic behind the visible calendar window."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import List, Sequence, TypeVar

from dateutil.relativedelta import relativedelta

from ..domain import Direction, ViewMode

SUNDAY = calendar.SUNDAY
DAYS_PER_WEEK = 7

T = TypeVar("T")


def start_of_week(day: date, first_weekday: int = SUNDAY) -> date:
    offset = (day.weekday() - first_weekday) % DAYS_PER_WEEK
    return day - timedelta(days=offset)


def compute_view(anchor: date, mode: ViewMode, *, first_weekday: int = SUNDAY) -> List[date]:
    """Return the ordered days shown for ``anchor`` in ``mode``.

    Month mode covers the whole month holding ``anchor``, preceded by the
    trailing days of the previous month needed to start on ``first_weekday``.
    Nothing from the following month is appended, so the length varies
    between 28 and 37 days.

    Week mode covers the seven days of the week holding ``anchor``.
    """

    if mode is ViewMode.MONTH:
        first = anchor.replace(day=1)
        padding = (first.weekday() - first_weekday) % DAYS_PER_WEEK
        days_in_month = calendar.monthrange(first.year, first.month)[1]
        start = first - timedelta(days=padding)
        return [start + timedelta(days=offset) for offset in range(padding + days_in_month)]

    start = start_of_week(anchor, first_weekday)
    return [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def navigate(anchor: date, mode: ViewMode, direction: Direction) -> date:
    step = 1 if direction is Direction.NEXT else -1
    if mode is ViewMode.MONTH:
        # relativedelta clamps to the last day of a shorter target month.
        return anchor + relativedelta(months=step)
    return anchor + timedelta(days=DAYS_PER_WEEK * step)


def wrap_rows(cells: Sequence[T], width: int = DAYS_PER_WEEK) -> List[List[T]]:
    return [list(cells[index : index + width]) for index in range(0, len(cells), width)]


def weekday_order(first_weekday: int = SUNDAY) -> List[int]:
    return [(first_weekday + offset) % DAYS_PER_WEEK for offset in range(DAYS_PER_WEEK)]


__all__ = [
    "DAYS_PER_WEEK",
    "SUNDAY",
    "compute_view",
    "navigate",
    "start_of_week",
    "weekday_order",
    "wrap_rows",
]
