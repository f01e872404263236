# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Previous/Next navigation for the wizard.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from ui.components.action_button import ActionButton


class WizardFooter(QWidget):
    """
    Reusable wizard footer component.

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted on every Next activation (double activations included)

    Usage:
        footer = WizardFooter()
        footer.next_clicked.connect(navigator.request_advance)
        footer.set_next_text("Confirm & Submit", variant="success")
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(
        self,
        next_text: str = "Next Step",
        previous_text: str = "Previous",
        parent=None
    ):
        """
        Initialize wizard footer.

        Args:
            next_text: Text for next button
            previous_text: Text for previous button
            parent: Parent widget
        """
        super().__init__(parent)
        self.next_text = next_text
        self.previous_text = previous_text

        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: #f8f9fa;
                border-top: 1px solid {Config.BORDER_COLOR};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_previous = ActionButton(self.previous_text, variant="secondary")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = ActionButton(self.next_text, variant="primary")
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        self.btn_next.setEnabled(enabled)

    def set_previous_enabled(self, enabled: bool):
        self.btn_previous.setEnabled(enabled)

    def set_next_text(self, text: str, variant: str = "primary"):
        """Update next button text and style."""
        self.btn_next.setText(text)
        self.btn_next.set_variant(variant)
