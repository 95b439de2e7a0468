from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#fff7ed"
    surface: str = "#fed7aa"
    cell_background: str = "#ffffff"
    accent_primary: str = "#f97316"
    accent_strong: str = "#ea580c"
    accent_danger: str = "#ef4444"
    chip_background: str = "#bbf7d0"
    chip_hover: str = "#86efac"
    today_border: str = "#3b82f6"
    text_primary: str = "#1f2937"
    text_muted: str = "#9ca3af"
    border_subtle: str = "#e5e7eb"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the calendar window and the event dialog."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QLabel#title {{
            font-size: 22px;
            font-weight: 700;
            color: {self.accent_primary};
        }}
        QLabel#monthHeader {{
            font-size: 18px;
            font-weight: 700;
            background-color: transparent;
        }}
        QLabel#weekdayName {{
            font-weight: 700;
            background-color: transparent;
        }}
        QPushButton {{
            background-color: {self.border_subtle};
            border: none;
            padding: 8px 16px;
            border-radius: 6px;
        }}
        QPushButton:hover {{
            background-color: #d1d5db;
        }}
        QPushButton:checked {{
            background-color: {self.accent_primary};
            color: #ffffff;
        }}
        QPushButton#primaryButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
        }}
        QPushButton#primaryButton:hover {{
            background-color: {self.accent_strong};
        }}
        QPushButton#dangerButton {{
            background-color: {self.accent_danger};
            color: #ffffff;
        }}
        QWidget#calendarPanel {{
            background-color: {self.surface};
            border-radius: 8px;
        }}
        QFrame#dayCell {{
            background-color: {self.cell_background};
            border: 2px solid transparent;
            border-radius: 6px;
        }}
        QFrame#dayCell[today="true"] {{
            border-color: {self.today_border};
        }}
        QLabel#dayNumber {{
            font-weight: 700;
            background-color: transparent;
        }}
        QLabel#dayNumber[muted="true"] {{
            color: {self.text_muted};
        }}
        QToolButton#addButton {{
            color: {self.accent_primary};
            background-color: transparent;
            border: none;
            font-size: 11px;
        }}
        QToolButton#addButton:hover {{
            background-color: #ffedd5;
        }}
        QPushButton#eventChip {{
            background-color: {self.chip_background};
            text-align: left;
            padding: 2px 4px;
            font-size: 11px;
            border-radius: 4px;
        }}
        QPushButton#eventChip:hover {{
            background-color: {self.chip_hover};
        }}
        QLineEdit, QDateEdit {{
            background-color: {self.cell_background};
            border: 1px solid {self.border_subtle};
            border-radius: 4px;
            padding: 6px 8px;
        }}
        QLineEdit:focus, QDateEdit:focus {{
            border-color: {self.accent_primary};
        }}
        """
