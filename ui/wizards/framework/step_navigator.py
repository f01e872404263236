# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Deriving the active step list from the stored selections
- Gating forward navigation on the mounted step's submit reply
- Forced advancement (missing handle, double activation)
- Re-deriving and clamping when the selections change mid-flow
- Finalization and reset
"""

import time
from typing import Any, Callable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from models.form_data import SELECTION_KEYS
from services.form_data_store import FormDataStore
from services.wizard.step_protocol import RequestSubmit, Rejected, StepResult, has_submit_handle
from services.wizard.step_registry import STEP_REGISTRY, StepDefinition, StepRegistry
from services.wizard.step_sequencer import section_ids, sequence_steps, step_ids
from utils.logger import get_logger

logger = get_logger(__name__)

# Returns the mounted object for a step definition (a step widget, or None)
HandleProvider = Callable[[StepDefinition], Any]


class StepNavigator(QObject):
    """
    Controller for the wizard's position over the active step list.

    Responsibilities:
    - Track the current index and the active list
    - Ask the mounted step to submit before moving forward
    - Commit accepted data and completion flags into the store
    - Emit signals for UI updates
    - Manage step lifecycle (show/hide)
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    steps_changed = pyqtSignal(list)  # list of step ids
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(object)  # Rejected
    forced_advance = pyqtSignal(str)  # reason
    wizard_finalized = pyqtSignal(dict)  # final record

    def __init__(
        self,
        store: FormDataStore,
        registry: StepRegistry = STEP_REGISTRY,
        handle_provider: Optional[HandleProvider] = None,
        clock: Callable[[], float] = time.monotonic,
        double_activation_enabled: Optional[bool] = None,
        double_activation_window_ms: Optional[int] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the navigator.

        Args:
            store: Form data store shared with the steps
            registry: Step catalog
            handle_provider: Resolves the object mounted for a step
            clock: Seconds source for double-activation timing
            double_activation_enabled: Default Config.DOUBLE_ACTIVATION_FORCE_ADVANCE
            double_activation_window_ms: Default Config.DOUBLE_ACTIVATION_WINDOW_MS
            parent: Parent QObject
        """
        super().__init__(parent)
        self.store = store
        self.registry = registry
        self.handle_provider = handle_provider
        self._clock = clock

        if double_activation_enabled is None:
            double_activation_enabled = Config.DOUBLE_ACTIVATION_FORCE_ADVANCE
        if double_activation_window_ms is None:
            double_activation_window_ms = Config.DOUBLE_ACTIVATION_WINDOW_MS
        self.double_activation_enabled = double_activation_enabled
        self.double_activation_window_ms = double_activation_window_ms

        self.active_steps: List[StepDefinition] = self._derive_steps()
        self.current_index = 0
        self._handle: Any = None
        self._last_activation: Optional[float] = None

        self.store.add_listener(self._on_store_updated)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_current_step(self) -> Optional[StepDefinition]:
        """Get the current step definition."""
        if 0 <= self.current_index < len(self.active_steps):
            return self.active_steps[self.current_index]
        return None

    def get_step_count(self) -> int:
        return len(self.active_steps)

    def get_step_ids(self) -> List[str]:
        return step_ids(self.active_steps)

    def can_go_next(self) -> bool:
        """Next is always offered; on the last step it finalizes."""
        return len(self.active_steps) > 0

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def is_last_step(self) -> bool:
        return self.current_index == len(self.active_steps) - 1

    def get_progress_percentage(self) -> float:
        """
        Position-based progress for the step bar.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if not self.active_steps:
            return 0.0
        return ((self.current_index + 1) / len(self.active_steps)) * 100.0

    def calculate_completion(self) -> int:
        """Store completion percentage over the active list's sections."""
        return self.store.calculate_progress(section_ids(self.active_steps))

    @property
    def handle(self) -> Any:
        """Object currently mounted for the current step."""
        return self._handle

    def bind_handle(self, handle: Any):
        """Bind the object that answers RequestSubmit for the current step."""
        self._handle = handle

    # =========================================================================
    # Navigation
    # =========================================================================

    def start(self):
        """Mount the step at the current index."""
        self._navigate_to(self.current_index)

    def request_advance(self) -> bool:
        """
        Handle a "Next" activation.

        Returns:
            True if the position moved forward (or the wizard finalized)
        """
        if self._is_double_activation():
            logger.warning(f"Double activation on step {self._current_id()}, forcing advance")
            return self.force_advance("double_activation")

        if not has_submit_handle(self._handle):
            logger.warning(f"Step {self._current_id()} exposes no submit handle, forcing advance")
            return self.force_advance("missing_handle")

        step = self.get_current_step()
        request = RequestSubmit(step_id=step.id)
        try:
            result: StepResult = self._handle.submit_form(request)
        except Exception as e:
            logger.error(f"Step {step.id} failed during submit: {e}", exc_info=True)
            result = Rejected(errors=[str(e)])

        if not result.accepted:
            logger.warning(f"Step {step.id} validation failed: {result.errors}")
            self.validation_failed.emit(result)
            return False

        self._commit(result)
        return self._advance()

    def force_advance(self, reason: str = "forced") -> bool:
        """Advance without consulting the step, or finalize on the last one."""
        self.forced_advance.emit(reason)
        return self._advance()

    def retreat(self) -> bool:
        """Navigate to the previous step. Never validates."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def finalize(self) -> dict:
        """
        Finish the questionnaire.

        Emits the final record, clears the store and returns to the first
        step.
        """
        record = self.store.get_snapshot().to_dict()
        logger.info(f"Wizard finalized with answers: {record['form_data']}")
        self.wizard_finalized.emit(record)

        # reset() notifies the selection listener, which re-derives the list
        self.store.reset()
        self._last_activation = None
        self._navigate_to(0)
        return record

    def reset(self):
        """Reset navigator to first step."""
        self._navigate_to(0)

    def resequence(self):
        """
        Recompute the active list from the stored selections.

        The index is clamped into range when the list shrank; the current
        step is remounted when its id changed.
        """
        old_id = self._current_id()
        old_index = self.current_index
        self.active_steps = self._derive_steps()

        if self.current_index > len(self.active_steps) - 1:
            self.current_index = len(self.active_steps) - 1
            logger.info(f"Step list shrank, clamped index {old_index} → {self.current_index}")

        self.steps_changed.emit(self.get_step_ids())

        if self._current_id() != old_id:
            self._navigate_to(self.current_index, old_index=old_index)

    # =========================================================================
    # Internal
    # =========================================================================

    def _derive_steps(self) -> List[StepDefinition]:
        snapshot = self.store.get_snapshot()
        return sequence_steps(snapshot.income_selections, snapshot.relief_selections, self.registry)

    def _current_id(self) -> Optional[str]:
        step = self.get_current_step()
        return step.id if step else None

    def _is_double_activation(self) -> bool:
        now = self._clock()
        last = self._last_activation
        self._last_activation = now
        if not self.double_activation_enabled or last is None:
            return False
        # Whole milliseconds, so a gap of exactly the window is not a double
        return round((now - last) * 1000) < self.double_activation_window_ms

    def _commit(self, result: StepResult):
        """Merge accepted data, then mark the section complete."""
        if result.data:
            self.store.update(result.data)
        if result.section_id:
            self.store.set_section_completed(result.section_id, True)

    def _advance(self) -> bool:
        if self.is_last_step():
            self.finalize()
            return True

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        return self._navigate_to(self.current_index + 1)

    def _navigate_to(self, new_index: int, old_index: Optional[int] = None) -> bool:
        """
        Internal method to navigate to a step.

        Args:
            new_index: Target step index
            old_index: Index reported as the origin (default: current index)

        Returns:
            True if navigation was successful
        """
        if new_index < 0 or new_index >= len(self.active_steps):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.active_steps)-1})")
            return False

        if old_index is None:
            old_index = self.current_index

        if self._handle is not None and hasattr(self._handle, "on_hide"):
            self._handle.on_hide()

        self.current_index = new_index
        step = self.get_current_step()
        self._handle = self.handle_provider(step) if self.handle_provider else None

        if self._handle is not None and hasattr(self._handle, "on_show"):
            self._handle.on_show()

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

        logger.debug(f"Step {new_index} ({step.id}) is now active")
        return True

    def _on_store_updated(self, partial: dict):
        """Re-derive the step list when a selection key changed."""
        if any(key in partial for key in SELECTION_KEYS):
            self.resequence()
