from __future__ import annotations

from PyQt6.QtCore import QDate, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QDateEdit,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from ...core import EditorForm

_QT_DAY_FORMAT = "yyyy-MM-dd"


class EventDialog(QDialog):
    title_edited = pyqtSignal(str)
    date_edited = pyqtSignal(str)
    save_requested = pyqtSignal()
    delete_requested = pyqtSignal()

    def __init__(self, form: EditorForm, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle(form.heading)
        self.setModal(True)
        layout = QVBoxLayout(self)

        heading = QLabel(form.heading)
        heading.setObjectName("monthHeader")
        layout.addWidget(heading)

        fields = QFormLayout()
        self.date_input = QDateEdit()
        self.date_input.setCalendarPopup(True)
        self.date_input.setDisplayFormat(_QT_DAY_FORMAT)
        if form.target_date:
            self.date_input.setDate(QDate.fromString(form.target_date, _QT_DAY_FORMAT))
        self.date_input.dateChanged.connect(self._emit_date)
        fields.addRow("Date", self.date_input)

        self.title_input = QLineEdit(form.draft_title)
        self.title_input.setPlaceholderText("Event title")
        self.title_input.textChanged.connect(self.title_edited)
        fields.addRow("Title", self.title_input)
        layout.addLayout(fields)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        save_button = QPushButton("Update" if form.can_delete else "Save")
        save_button.setObjectName("primaryButton")
        save_button.setDefault(True)
        save_button.clicked.connect(self.save_requested)
        buttons.addWidget(save_button)

        if form.can_delete:
            delete_button = QPushButton("Delete")
            delete_button.setObjectName("dangerButton")
            delete_button.clicked.connect(self.delete_requested)
            buttons.addWidget(delete_button)

        close_button = QPushButton("Close")
        close_button.clicked.connect(self.reject)
        buttons.addWidget(close_button)
        layout.addLayout(buttons)

        self.title_input.setFocus(Qt.FocusReason.OtherFocusReason)

    def _emit_date(self, value: QDate) -> None:
        self.date_edited.emit(value.toString(_QT_DAY_FORMAT))
