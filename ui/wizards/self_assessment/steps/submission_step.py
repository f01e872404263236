# -*- coding: utf-8 -*-
"""
Submission Step - last screen; "Finish" here finalizes the wizard.
"""

from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont

from app.config import Config
from ui.wizards.framework.base_step import NoValidationStep


class SubmissionStep(NoValidationStep):
    """Confirmation screen with nothing to validate."""

    def setup_ui(self):
        self.main_layout.addStretch()

        title = QLabel("Ready to submit")
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Config.PRIMARY_COLOR};")
        self.main_layout.addWidget(title)

        message = QLabel(
            "Your self-assessment information has been saved. Press Finish to "
            "complete the questionnaire; your answers will be cleared from this device."
        )
        message.setAlignment(Qt.AlignCenter)
        message.setWordWrap(True)
        self.main_layout.addWidget(message)

        self.main_layout.addStretch()
