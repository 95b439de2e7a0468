from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from ...core import CalendarView, DayCell
from ...domain import ViewMode

_EVENT_AREA_HEIGHT = {
    ViewMode.MONTH: 48,
    ViewMode.WEEK: 160,
}


class DayCellWidget(QFrame):
    add_requested = pyqtSignal(str)
    event_selected = pyqtSignal(str, int, str)

    def __init__(self, cell: DayCell, *, event_area_height: int) -> None:
        super().__init__()
        self.setObjectName("dayCell")
        self.setProperty("today", cell.is_today)
        self.setMinimumWidth(96)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(4)

        top_row = QHBoxLayout()
        number = QLabel(str(cell.day.day))
        number.setObjectName("dayNumber")
        number.setProperty("muted", cell.muted)
        top_row.addWidget(number)
        top_row.addStretch(1)

        add_button = QToolButton()
        add_button.setObjectName("addButton")
        add_button.setText("add")
        add_button.setCursor(Qt.CursorShape.PointingHandCursor)
        add_button.clicked.connect(lambda _checked=False, key=cell.key: self.add_requested.emit(key))
        top_row.addWidget(add_button)
        layout.addLayout(top_row)

        chips = QWidget()
        chip_layout = QVBoxLayout(chips)
        chip_layout.setContentsMargins(0, 0, 0, 0)
        chip_layout.setSpacing(2)
        for index, event in cell.events:
            chip = QPushButton(event.title)
            chip.setObjectName("eventChip")
            chip.setCursor(Qt.CursorShape.PointingHandCursor)
            chip.setToolTip(event.title)
            chip.clicked.connect(
                lambda _checked=False, key=cell.key, index=index, title=event.title: self.event_selected.emit(
                    key, index, title
                )
            )
            chip_layout.addWidget(chip)
        chip_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidget(chips)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setFixedHeight(event_area_height)
        layout.addWidget(scroll)


class CalendarPanel(QWidget):
    add_requested = pyqtSignal(str)
    event_selected = pyqtSignal(str, int, str)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.header_label = QLabel("")
        self.header_label.setObjectName("monthHeader")
        self.header_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.header_label)

        self.grid = QGridLayout()
        self.grid.setSpacing(12)
        layout.addLayout(self.grid)
        layout.addStretch(1)

    def show_view(self, view: CalendarView) -> None:
        self.header_label.setText(view.header)
        self._clear_grid()

        for column, name in enumerate(view.weekday_names):
            label = QLabel(name)
            label.setObjectName("weekdayName")
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.grid.addWidget(label, 0, column)

        height = _EVENT_AREA_HEIGHT[view.view_mode]
        for row, week in enumerate(view.rows, start=1):
            for column, cell in enumerate(week):
                widget = DayCellWidget(cell, event_area_height=height)
                widget.add_requested.connect(self.add_requested)
                widget.event_selected.connect(self.event_selected)
                self.grid.addWidget(widget, row, column)

    def _clear_grid(self) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            widget = item.widget() if item else None
            if widget is not None:
                widget.deleteLater()
