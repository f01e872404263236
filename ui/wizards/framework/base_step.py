# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

Every step answers the navigator's RequestSubmit with Submitted or
Rejected. Two variants exist:
- BaseStep: validates and rejects on error (the default)
- NoValidationStep: named always-succeed variant for steps without constraints

Subclasses implement:
- setup_ui(): Create the step's UI
- collect_data(): Collect data from UI
- populate_data(): Populate UI with data from the store (optional)
"""

from typing import Dict, Any, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import pyqtSignal

from services.form_data_store import FormDataStore
from services.wizard.step_protocol import RequestSubmit, Submitted, Rejected, StepResult
from services.wizard.step_registry import StepDefinition
from services.wizard.step_validator import StepValidationResult, StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for validating wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Data validation against the section's rule set
    - The submit_form() reply to the navigator
    """

    # Signals
    step_data_changed = pyqtSignal(dict)
    validation_changed = pyqtSignal(bool)

    # Tag read by the navigator and the tests
    requires_validation = True

    def __init__(
        self,
        store: FormDataStore,
        step: StepDefinition,
        parent: Optional[QWidget] = None,
        validator: Optional[StepValidator] = None,
    ):
        """
        Initialize the step.

        Args:
            store: Form data store shared by the wizard
            step: Catalog definition of this step
            parent: Parent widget
            validator: Section validator (default: shared rule sets)
        """
        super().__init__(parent)
        self.store = store
        self.step = step
        self.validator = validator or StepValidator()
        self._is_initialized = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step is mounted."""
        if not self._is_initialized:
            self.initialize()
        self.populate_data()

    def on_hide(self):
        """Called when the step is unmounted."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        """
        pass

    @abstractmethod
    def collect_data(self) -> Dict[str, Any]:
        """
        Collect data from the step's UI.

        Returns:
            Dictionary of top-level answer keys to merge into the store
        """
        pass

    # =========================================================================
    # Navigator contract
    # =========================================================================

    def validate(self) -> StepValidationResult:
        """Validate the collected data against this step's section rules."""
        return self.validator.validate_step(self.step, self.collect_data())

    def submit_form(self, request: RequestSubmit) -> StepResult:
        """
        Answer the navigator's RequestSubmit.

        On success the reply carries the data to merge and the section to
        mark complete; the navigator applies both. On failure errors are
        shown inline and nothing is written.
        """
        if not self._is_initialized:
            self.initialize()

        result = self.validate()
        self.show_validation_result(result)
        self.validation_changed.emit(result.is_valid)

        if not result.is_valid:
            logger.debug(f"Step {self.step.id} rejected: {result.errors}")
            return Rejected(errors=list(result.errors))

        data = self.collect_data()
        self.step_data_changed.emit(data)
        return Submitted(data=data, section_id=self.step.section_id)

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """
        Populate the step's UI with data from the store.

        Override this method to restore answers when navigating back.
        """
        pass

    def show_validation_result(self, result: StepValidationResult):
        """Render field-level errors. Override in steps with inputs."""
        pass

    def get_step_title(self) -> str:
        return self.step.title

    def get_step_description(self) -> str:
        """Description shown to the user above the inputs."""
        return ""

    def get_from_store(self, key: str, default: Any = None) -> Any:
        return self.store.get_value(key, default)


class NoValidationStep(BaseStep):
    """
    Step whose input is always accepted.

    Use only for sections with no constraints; the tag makes the choice
    visible instead of an accidental omission.
    """

    requires_validation = False

    def validate(self) -> StepValidationResult:
        return StepValidationResult(is_valid=True, errors=[])

    def collect_data(self) -> Dict[str, Any]:
        return {}
