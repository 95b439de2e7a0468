from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QButtonGroup, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from ...domain import Direction, ViewMode


class NavigationBar(QWidget):
    view_mode_selected = pyqtSignal(object)
    navigate_requested = pyqtSignal(object)
    today_requested = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        mode_row = QHBoxLayout()
        mode_row.addStretch(1)
        self._mode_group = QButtonGroup(self)
        self._mode_buttons: dict[ViewMode, QPushButton] = {}
        for mode, label in ((ViewMode.WEEK, "Week"), (ViewMode.MONTH, "Month")):
            button = QPushButton(label)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, mode=mode: self.view_mode_selected.emit(mode))
            self._mode_group.addButton(button)
            self._mode_buttons[mode] = button
            mode_row.addWidget(button)
        mode_row.addStretch(1)
        layout.addLayout(mode_row)

        nav_row = QHBoxLayout()
        nav_row.addStretch(1)
        prev_button = QPushButton("prev")
        prev_button.clicked.connect(lambda: self.navigate_requested.emit(Direction.PREV))
        nav_row.addWidget(prev_button)

        today_button = QPushButton("today")
        today_button.clicked.connect(self.today_requested)
        nav_row.addWidget(today_button)

        next_button = QPushButton("next")
        next_button.clicked.connect(lambda: self.navigate_requested.emit(Direction.NEXT))
        nav_row.addWidget(next_button)
        nav_row.addStretch(1)
        layout.addLayout(nav_row)

    def set_view_mode(self, mode: ViewMode) -> None:
        self._mode_buttons[mode].setChecked(True)
