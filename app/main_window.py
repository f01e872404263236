# -*- coding: utf-8 -*-
"""
Main application window hosting the self-assessment wizard.
"""

from PyQt5.QtWidgets import QMainWindow, QShortcut
from PyQt5.QtGui import QKeySequence

from .config import Config
from services.form_data_store import FormDataStore
from ui.wizards.self_assessment import SelfAssessmentWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, store: FormDataStore, parent=None):
        super().__init__(parent)
        self.store = store

        self._setup_window()
        self._setup_shortcuts()
        self._create_widgets()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        # Center on screen
        screen = self.screen().geometry()
        x = (screen.width() - Config.WINDOW_MIN_WIDTH) // 2
        y = (screen.height() - Config.WINDOW_MIN_HEIGHT) // 2
        self.setGeometry(x, y, Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        # Quit: Ctrl+Q
        self.quit_shortcut = QShortcut(QKeySequence("Ctrl+Q"), self)
        self.quit_shortcut.activated.connect(self.close)

    def _create_widgets(self):
        self.wizard = SelfAssessmentWizard(store=self.store, parent=self)
        self.wizard.wizard_completed.connect(self._on_wizard_completed)
        self.setCentralWidget(self.wizard)

    def _on_wizard_completed(self, record: dict):
        logger.info(f"Questionnaire completed ({len(record.get('form_data', {}))} answers)")
