# -*- coding: utf-8 -*-
"""
Summary Step - review before submission.

Displays summary cards built from the store and checks that the answers
needed for a return are present.
"""

from typing import Any, Dict, List, Tuple

from PyQt5.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from app.config import Config
from services.validation import SUMMARY_VALIDATOR
from services.wizard.step_registry import STEP_REGISTRY, Category
from services.wizard.step_validator import StepValidationResult
from ui.wizards.framework.base_step import BaseStep


class SummaryStep(BaseStep):
    """Read-only review of the answers; marks no section."""

    def setup_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)

        content = QWidget()
        self.cards_layout = QVBoxLayout(content)
        self.cards_layout.setSpacing(16)
        scroll.setWidget(content)
        self.main_layout.addWidget(scroll)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.error_label.setVisible(False)
        self.main_layout.addWidget(self.error_label)

    def _clear_layout(self, layout):
        """Clear all widgets from a layout."""
        while layout.count():
            item = layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

    def _create_card(self, title: str, rows: List[Tuple[str, str]]) -> QFrame:
        card = QFrame()
        card.setStyleSheet(f"""
            QFrame {{
                background-color: white;
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 8px;
            }}
            QLabel {{ border: none; }}
        """)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 12, 16, 12)

        heading = QLabel(title)
        heading.setStyleSheet(f"color: {Config.PRIMARY_COLOR}; font-weight: 600; font-size: 14px;")
        layout.addWidget(heading)

        for label, value in rows:
            row = QLabel(f"{label}: {value}" if label else value)
            row.setWordWrap(True)
            layout.addWidget(row)
        return card

    def summary_sections(self) -> Dict[str, List[Tuple[str, str]]]:
        """Rows shown per card, derived from the current answers."""
        snapshot = self.store.get_snapshot()
        data = snapshot.form_data
        registry = STEP_REGISTRY

        def show(key: str) -> str:
            value = data.get(key)
            return str(value) if value else "Not provided"

        income = [
            ("", registry.label_for(Category.INCOME, token))
            for token in snapshot.income_selections
        ] or [("", "None selected")]
        reliefs = [
            ("", registry.label_for(Category.RELIEF, token))
            for token in snapshot.relief_selections
        ] or [("", "None selected")]

        done = snapshot.completed_count()
        return {
            "Personal Information": [
                ("Full name", show("fullName")),
                ("National Insurance number", show("nationalInsuranceNumber")),
                ("UTR", show("utr")),
                ("Date of birth", show("dateOfBirth")),
                ("Email", show("email")),
            ],
            "Income Sources": income,
            "Tax Reliefs": reliefs,
            "Progress": [("Sections completed", str(done))],
        }

    def populate_data(self):
        self._clear_layout(self.cards_layout)
        for title, rows in self.summary_sections().items():
            self.cards_layout.addWidget(self._create_card(title, rows))
        self.cards_layout.addStretch()

    def validate(self) -> StepValidationResult:
        """Check the stored answers, not this screen's inputs."""
        return self.validator.validate_section(SUMMARY_VALIDATOR, self.store.form_data)

    def collect_data(self) -> Dict[str, Any]:
        return {}

    def show_validation_result(self, result: StepValidationResult):
        self.error_label.setText("\n".join(result.errors))
        self.error_label.setVisible(not result.is_valid)
