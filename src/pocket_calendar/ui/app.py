from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    app.setApplicationName(settings.ui.app_name)
    apply_palette(app, AppPalette())

    window = MainWindow(settings=settings)
    window.show()
    logging.getLogger(__name__).info("Calendar window opened")
    sys.exit(app.exec())
