# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title, step counter and completion
- Step container (one step mounted at a time)
- Navigation buttons (Previous, Next/Finish)
- Inline validation banner
- Completion page after finalization
"""

import time
from typing import Callable, Dict, Optional, Tuple
from abc import abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QFrame, QStackedWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from services.form_data_store import FormDataStore
from services.wizard.step_protocol import Rejected
from services.wizard.step_registry import StepDefinition
from ui.components.action_button import ActionButton
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from .base_step import ABCQWidgetMeta, BaseStep
from .step_navigator import StepNavigator
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_store(): Create and return the form data store
    - create_step_widget(): Build the widget mounted for a step definition
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted with the final record

    WIZARD_PAGE = 0
    COMPLETION_PAGE = 1

    def __init__(
        self,
        store: Optional[FormDataStore] = None,
        parent: Optional[QWidget] = None,
        clock: Callable[[], float] = time.monotonic,
        double_activation_enabled: Optional[bool] = None,
    ):
        """
        Initialize the wizard.

        Args:
            store: Form data store (default: create_store())
            parent: Parent widget
            clock: Time source for double-activation detection
            double_activation_enabled: Override Config.DOUBLE_ACTIVATION_FORCE_ADVANCE
        """
        super().__init__(parent)

        self.store = store or self.create_store()
        self._step_widgets: Dict[str, QWidget] = {}

        # Create navigator
        self.navigator = StepNavigator(
            self.store,
            handle_provider=self._mount_step,
            clock=clock,
            double_activation_enabled=double_activation_enabled,
            parent=self,
        )

        # Connect navigator signals
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.can_go_previous_changed.connect(self._update_navigation_buttons)
        self.navigator.validation_failed.connect(self._on_validation_failed)
        self.navigator.wizard_finalized.connect(self._on_finalized)

        # Setup UI
        self._setup_ui()

        # Show first step
        self.navigator.start()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_store(self) -> FormDataStore:
        """
        Create and return the form data store.

        Returns:
            FormDataStore instance
        """
        pass

    @abstractmethod
    def create_step_widget(self, step: StepDefinition) -> Optional[BaseStep]:
        """
        Create the widget for a step definition.

        Returning None mounts an empty placeholder; Next then advances
        without validation.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return Config.APP_TITLE

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return "Finish"

    def get_next_button(self, step: StepDefinition) -> Tuple[str, str]:
        """Text and variant of the Next button on a step."""
        if self.navigator.is_last_step():
            return self.get_submit_button_text(), "success"
        return "Next Step", "primary"

    def get_completion_message(self) -> str:
        return "Your answers have been submitted."

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.pages = QStackedWidget()
        self.pages.addWidget(self._create_wizard_page())
        self.pages.addWidget(self._create_completion_page())
        main_layout.addWidget(self.pages)

    def _create_wizard_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header
        self.header = WizardHeader(self.get_wizard_title())
        layout.addWidget(self.header)

        # Validation banner
        self.warning_banner = QLabel("")
        self.warning_banner.setWordWrap(True)
        self.warning_banner.setStyleSheet(f"""
            QLabel {{
                background-color: #FDECEA;
                color: {Config.ERROR_COLOR};
                border: 1px solid {Config.ERROR_COLOR};
                border-radius: 6px;
                padding: 10px;
                margin: 12px 20px 0 20px;
            }}
        """)
        self.warning_banner.setVisible(False)
        layout.addWidget(self.warning_banner)

        # Step container
        self.step_container = QStackedWidget()
        self._placeholder = QWidget()
        self.step_container.addWidget(self._placeholder)
        layout.addWidget(self.step_container, 1)

        # Footer with navigation buttons
        self.footer = WizardFooter()
        self.footer.previous_clicked.connect(self._handle_previous)
        self.footer.next_clicked.connect(self._handle_next)
        layout.addWidget(self.footer)

        return page

    def _create_completion_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(20)
        layout.addStretch()

        title = QLabel("Thank you!")
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Config.SUCCESS_COLOR};")
        layout.addWidget(title)

        self.completion_label = QLabel(self.get_completion_message())
        self.completion_label.setAlignment(Qt.AlignCenter)
        self.completion_label.setWordWrap(True)
        layout.addWidget(self.completion_label)

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("background-color: #ddd;")
        separator.setFixedHeight(1)
        layout.addWidget(separator)

        self.btn_start_again = ActionButton("Start again", variant="primary")
        self.btn_start_again.clicked.connect(self._handle_start_again)
        layout.addWidget(self.btn_start_again, 0, Qt.AlignCenter)

        layout.addStretch()
        return page

    # =========================================================================
    # Step mounting
    # =========================================================================

    def _mount_step(self, step: StepDefinition) -> Optional[QWidget]:
        """Resolve (and cache) the widget for a step, then show it."""
        widget = self._step_widgets.get(step.id)
        if widget is None:
            widget = self.create_step_widget(step)
            if widget is not None:
                self._step_widgets[step.id] = widget
                self.step_container.addWidget(widget)

        self.step_container.setCurrentWidget(widget if widget is not None else self._placeholder)
        return widget

    def current_step_widget(self) -> Optional[QWidget]:
        return self.navigator.handle

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.navigator.retreat()

    def _handle_next(self):
        self.navigator.request_advance()

    def _handle_start_again(self):
        self.pages.setCurrentIndex(self.WIZARD_PAGE)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        """Handle step change."""
        self.warning_banner.setVisible(False)
        self._update_progress()
        self._update_navigation_buttons()

    def _update_progress(self):
        """Update progress indicator."""
        step = self.navigator.get_current_step()
        if step is None:
            return
        self.header.set_step_title(step.title)
        self.header.set_position(self.navigator.current_index, self.navigator.get_step_count())
        self.header.set_completion(self.navigator.calculate_completion())

    def _update_navigation_buttons(self, *args):
        """Update navigation button states."""
        self.footer.set_previous_enabled(self.navigator.can_go_previous())

        step = self.navigator.get_current_step()
        if step is not None:
            text, variant = self.get_next_button(step)
            self.footer.set_next_text(text, variant)

    def _on_validation_failed(self, result: Rejected):
        """Show the step's errors above it."""
        message = "\n".join(f"• {error}" for error in result.errors)
        self.warning_banner.setText(message or "Please check the highlighted fields.")
        self.warning_banner.setVisible(True)

    def _on_finalized(self, record: dict):
        logger.info("Showing completion page")
        self.pages.setCurrentIndex(self.COMPLETION_PAGE)
        self.wizard_completed.emit(record)
