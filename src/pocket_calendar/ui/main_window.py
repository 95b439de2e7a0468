from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QMainWindow, QMessageBox, QScrollArea, QVBoxLayout, QWidget

from ..config.settings import AppSettings
from ..core import CalendarSession, EventStore, build_view, new_session
from ..core import session as transitions
from ..domain import Direction, ViewMode
from .components.calendar_panel import CalendarPanel
from .components.event_dialog import EventDialog
from .components.toolbar import NavigationBar

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, *, settings: AppSettings, store: Optional[EventStore] = None) -> None:
        super().__init__()
        self.settings = settings
        self.session: CalendarSession = new_session(
            view_mode=settings.ui.default_view,
            store=store,
            first_weekday=settings.ui.first_weekday,
        )
        self._dialog: Optional[EventDialog] = None

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1100, 820)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        title = QLabel(settings.ui.app_name)
        title.setObjectName("title")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.navigation = NavigationBar()
        layout.addWidget(self.navigation)

        self.calendar_panel = CalendarPanel()
        layout.addWidget(self.calendar_panel, stretch=1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(container)
        self.setCentralWidget(scroll)

        self.navigation.view_mode_selected.connect(self.switch_view)
        self.navigation.navigate_requested.connect(self.navigate)
        self.navigation.today_requested.connect(self.jump_to_today)
        self.calendar_panel.add_requested.connect(self.open_create)
        self.calendar_panel.event_selected.connect(self.open_edit)

        self.refresh()

    # ------------------------------------------------------------------ window

    def refresh(self) -> None:
        view = build_view(self.session, header_format=self.settings.ui.header_format)
        self.navigation.set_view_mode(view.view_mode)
        self.calendar_panel.show_view(view)

    def switch_view(self, mode: ViewMode) -> None:
        self._apply(transitions.switch_view, mode)
        self.refresh()

    def navigate(self, direction: Direction) -> None:
        self._apply(transitions.go, direction)
        self.refresh()

    def jump_to_today(self) -> None:
        self._apply(transitions.jump_to_today)
        self.refresh()

    # ------------------------------------------------------------------ editor

    def open_create(self, day: str) -> None:
        self._apply(transitions.open_create, day)
        self._run_editor()

    def open_edit(self, day: str, index: int, title: str) -> None:
        self._apply(transitions.open_edit, day, index, title)
        self._run_editor()

    def _run_editor(self) -> None:
        form = build_view(self.session).editor
        if form is None:
            return
        dialog = EventDialog(form, parent=self)
        dialog.title_edited.connect(lambda text: self._apply(transitions.set_draft_title, text))
        dialog.date_edited.connect(lambda day: self._apply(transitions.set_draft_date, day))
        dialog.save_requested.connect(self._save)
        dialog.delete_requested.connect(self._delete)
        self._dialog = dialog
        try:
            dialog.exec()
        finally:
            self._dialog = None
        if self.session.editor.is_open:
            self._apply(transitions.close_editor)
        self.refresh()

    def _save(self) -> None:
        self._apply(transitions.save)
        if self.session.editor.is_open:
            notice = self.session.notice or ""
            self._apply(transitions.dismiss_notice)
            QMessageBox.warning(self._dialog or self, "Missing details", notice)
            return
        self.statusBar().showMessage("Event saved.", 3000)
        self._close_dialog()

    def _delete(self) -> None:
        self._apply(transitions.delete)
        self.statusBar().showMessage("Event deleted.", 3000)
        self._close_dialog()

    def _close_dialog(self) -> None:
        if self._dialog is not None:
            self._dialog.accept()

    # ------------------------------------------------------------------ misc

    def _apply(self, transition: Callable[..., CalendarSession], *args: Any) -> None:
        self.session = transition(self.session, *args)
