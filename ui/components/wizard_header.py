# -*- coding: utf-8 -*-
"""
Wizard Header Component - title, step counter and progress indicators.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar
from PyQt5.QtGui import QFont

from app.config import Config


class WizardHeader(QWidget):
    """
    Header shown above the active step.

    Features:
    - Wizard title and current step title
    - "Step i of n" counter with a position bar
    - Section completion percentage from the form data store

    Usage:
        header = WizardHeader(title="Self-Assessment Questionnaire")
        header.set_position(0, 5)
        header.set_completion(36)
    """

    def __init__(self, title: str, parent=None):
        """
        Initialize wizard header.

        Args:
            title: Main title text
            parent: Parent widget
        """
        super().__init__(parent)
        self.title_text = title
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: #f8f9fa;
                border-bottom: 1px solid {Config.BORDER_COLOR};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(self.title_text)
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.title_label.setStyleSheet(f"background: transparent; border: none; color: {Config.PRIMARY_COLOR};")
        layout.addWidget(self.title_label)

        self.step_title_label = QLabel("")
        self.step_title_label.setStyleSheet("background: transparent; border: none; font-size: 15px;")
        layout.addWidget(self.step_title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.step_counter_label = QLabel("")
        self.step_counter_label.setStyleSheet("background: transparent; border: none;")
        progress_layout.addWidget(self.step_counter_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_LIGHT};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        self.completion_label = QLabel("")
        self.completion_label.setStyleSheet("background: transparent; border: none; color: #6c757d;")
        progress_layout.addWidget(self.completion_label)

        layout.addLayout(progress_layout)

    def set_step_title(self, title: str):
        self.step_title_label.setText(title)

    def set_position(self, index: int, total: int):
        """Show "Step i of n" and the position-based bar."""
        self.step_counter_label.setText(f"Step {index + 1} of {total}")
        percentage = ((index + 1) / total) * 100 if total else 0
        self.progress_bar.setValue(int(percentage))

    def set_completion(self, percentage: int):
        """Show the store's section completion percentage."""
        self.completion_label.setText(f"{percentage}% complete")
