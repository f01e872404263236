# -*- coding: utf-8 -*-
"""
Selection Step - toggle list that writes one selection field.

The stored list keeps the order in which options were ticked; the
sequencer ignores that order when it builds the step list.
"""

from typing import Any, Dict, List

from PyQt5.QtWidgets import QCheckBox, QLabel

from app.config import Config
from services.wizard.step_registry import STEP_REGISTRY
from ui.wizards.framework.base_step import NoValidationStep


class SelectionStep(NoValidationStep):
    """
    Toggle list over a selection catalog.

    Any combination is accepted, including none; the options come from
    the catalog so no unknown token can be ticked.

    Subclasses set:
        CATEGORY: Category.INCOME or Category.RELIEF
        SELECTION_KEY: answer key holding the chosen tokens
        DESCRIPTION: intro text
    """

    CATEGORY: str = ""
    SELECTION_KEY: str = ""
    DESCRIPTION: str = ""

    def setup_ui(self):
        self._checkboxes: Dict[str, QCheckBox] = {}
        self._selected: List[str] = []

        intro = QLabel(self.DESCRIPTION)
        intro.setWordWrap(True)
        intro.setStyleSheet(
            f"background-color: #EEF5FC; border: 1px solid {Config.PRIMARY_LIGHT}; "
            "border-radius: 8px; padding: 12px; color: #104B8D;"
        )
        self.main_layout.addWidget(intro)

        self.count_label = QLabel("")
        self.count_label.setStyleSheet("color: #104B8D; font-weight: 600;")
        self.main_layout.addWidget(self.count_label)

        for option in STEP_REGISTRY.options(self.CATEGORY):
            checkbox = QCheckBox(option.label)
            checkbox.setToolTip(option.description)
            checkbox.toggled.connect(
                lambda checked, token=option.token: self._on_toggled(token, checked)
            )
            self._checkboxes[option.token] = checkbox
            self.main_layout.addWidget(checkbox)

            if option.description:
                hint = QLabel(option.description)
                hint.setStyleSheet("color: #6c757d; font-size: 11px; margin-left: 24px;")
                self.main_layout.addWidget(hint)

        self.main_layout.addStretch()
        self._update_count()

    def _on_toggled(self, token: str, checked: bool):
        if checked and token not in self._selected:
            self._selected.append(token)
        elif not checked and token in self._selected:
            self._selected.remove(token)
        self._update_count()

    def _update_count(self):
        count = len(self._selected)
        noun = "option" if count == 1 else "options"
        self.count_label.setText(
            "Select all that apply" if count == 0 else f"{count} {noun} selected"
        )

    def toggle(self, token: str):
        """Flip one option, as a click on its checkbox would."""
        if not self._is_initialized:
            self.initialize()
        checkbox = self._checkboxes[token]
        checkbox.setChecked(not checkbox.isChecked())

    def selected_tokens(self) -> List[str]:
        return list(self._selected)

    def populate_data(self):
        stored = list(self.get_from_store(self.SELECTION_KEY) or [])
        # Reset without losing the stored order
        self._selected = []
        for token, checkbox in self._checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(token in stored)
            checkbox.blockSignals(False)
        self._selected = [token for token in stored if token in self._checkboxes]
        self._update_count()

    def collect_data(self) -> Dict[str, Any]:
        if not self._is_initialized:
            self.initialize()
        return {self.SELECTION_KEY: self.selected_tokens()}
