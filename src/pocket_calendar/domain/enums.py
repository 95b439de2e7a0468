from __future__ import annotations

from enum import Enum


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"


class Direction(str, Enum):
    PREV = "prev"
    NEXT = "next"


class EditorMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"
