from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "Pocket Calendar"
APP_AUTHOR = "PocketCalendar"
LOG_DIR = Path(user_log_dir(APP_NAME, APP_AUTHOR))


def ensure_log_dir(path: Path = LOG_DIR) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
