from __future__ import annotations

import calendar
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..core.config import APP_NAME, LOG_DIR
from ..domain import ViewMode

load_dotenv()

_WEEKDAY_NAMES = {name.lower(): index for index, name in enumerate(calendar.day_name)}


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    first_weekday: int
    default_view: ViewMode
    header_format: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    ui: UiSettings
    logging: LoggingSettings


def _weekday_from_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _WEEKDAY_NAMES:
        return _WEEKDAY_NAMES[raw]
    try:
        index = int(raw)
    except ValueError:
        return default
    return index if 0 <= index <= 6 else default


def _view_from_env(name: str, default: ViewMode) -> ViewMode:
    raw = (os.getenv(name) or "").strip().lower()
    try:
        return ViewMode(raw) if raw else default
    except ValueError:
        return default


def _path_from_env(name: str, default: Path) -> Path:
    raw: Optional[str] = os.getenv(name)
    return Path(raw) if raw else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    ui = UiSettings(
        app_name=os.getenv("POCKET_CALENDAR_APP_NAME", APP_NAME),
        first_weekday=_weekday_from_env("POCKET_CALENDAR_WEEK_START", calendar.SUNDAY),
        default_view=_view_from_env("POCKET_CALENDAR_DEFAULT_VIEW", ViewMode.MONTH),
        header_format=os.getenv("POCKET_CALENDAR_HEADER_FORMAT", "%B %Y"),
    )

    logging = LoggingSettings(
        level=os.getenv("POCKET_CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=_path_from_env("POCKET_CALENDAR_LOG_DIR", LOG_DIR),
    )

    return AppSettings(ui=ui, logging=logging)
