# -*- coding: utf-8 -*-
"""
Form Step - a validating step built from declarative field specs.

Detail sections declare FIELDS; the step builds one input per field,
restores values from the store, collects them on submit and shows the
first error of each field under its input.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from PyQt5.QtWidgets import (
    QCheckBox, QComboBox, QFormLayout, QLabel, QLineEdit, QPlainTextEdit,
    QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt

from app.config import Config
from services.wizard.step_validator import StepValidationResult
from ui.wizards.framework.base_step import BaseStep


class FieldKind:
    TEXT = "text"
    AMOUNT = "amount"
    DATE = "date"
    SELECT = "select"
    CHECKBOX = "checkbox"
    TEXTAREA = "textarea"


@dataclass(frozen=True)
class FieldSpec:
    """One input of a form step."""
    name: str
    label: str
    kind: str = FieldKind.TEXT
    required: bool = False
    placeholder: str = ""
    options: Tuple[Tuple[str, str], ...] = ()   # (value, label) for selects
    tooltip: str = ""
    required_when: str = ""   # checkbox field that makes this one required

    def label_text(self, flags: Dict[str, bool]) -> str:
        if self.kind == FieldKind.CHECKBOX:
            return ""
        required = self.required or bool(self.required_when and flags.get(self.required_when))
        return self.label + (" *" if required else "")


class FormStep(BaseStep):
    """
    Validating step whose inputs come from FIELDS.

    Subclasses set:
        FIELDS: sequence of FieldSpec
        DESCRIPTION: optional intro text
    """

    FIELDS: Sequence[FieldSpec] = ()
    DESCRIPTION: str = ""

    def setup_ui(self):
        self._inputs: Dict[str, QWidget] = {}
        self._error_labels: Dict[str, QLabel] = {}
        self._row_labels: Dict[str, QLabel] = {}

        description = self.get_step_description()
        if description:
            intro = QLabel(description)
            intro.setWordWrap(True)
            intro.setStyleSheet(
                f"background-color: #EEF5FC; border-left: 4px solid {Config.PRIMARY_LIGHT}; "
                "padding: 10px; color: #104B8D;"
            )
            self.main_layout.addWidget(intro)

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignLeft)
        form.setSpacing(10)

        for spec in self.FIELDS:
            widget = self._create_input(spec)
            if spec.tooltip:
                widget.setToolTip(spec.tooltip)
            self._inputs[spec.name] = widget

            error_label = QLabel("")
            error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 11px;")
            error_label.setVisible(False)
            self._error_labels[spec.name] = error_label

            container = QWidget()
            column = QVBoxLayout(container)
            column.setContentsMargins(0, 0, 0, 0)
            column.setSpacing(2)
            column.addWidget(widget)
            column.addWidget(error_label)

            row_label = QLabel(spec.label_text({}))
            self._row_labels[spec.name] = row_label
            form.addRow(row_label, container)

        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

        for spec in self.FIELDS:
            if spec.kind == FieldKind.CHECKBOX:
                self._inputs[spec.name].toggled.connect(self._refresh_required_markers)

    def _refresh_required_markers(self, *_):
        flags = {
            spec.name: self._inputs[spec.name].isChecked()
            for spec in self.FIELDS if spec.kind == FieldKind.CHECKBOX
        }
        for spec in self.FIELDS:
            self._row_labels[spec.name].setText(spec.label_text(flags))

    def _create_input(self, spec: FieldSpec) -> QWidget:
        if spec.kind == FieldKind.CHECKBOX:
            return QCheckBox(spec.label)

        if spec.kind == FieldKind.SELECT:
            combo = QComboBox()
            combo.addItem("Select...", "")
            for value, label in spec.options:
                combo.addItem(label, value)
            return combo

        if spec.kind == FieldKind.TEXTAREA:
            text = QPlainTextEdit()
            text.setPlaceholderText(spec.placeholder)
            text.setFixedHeight(80)
            return text

        line = QLineEdit()
        placeholder = spec.placeholder
        if not placeholder and spec.kind == FieldKind.DATE:
            placeholder = "YYYY-MM-DD"
        elif not placeholder and spec.kind == FieldKind.AMOUNT:
            placeholder = "£ 0.00"
        line.setPlaceholderText(placeholder)
        return line

    def get_step_description(self) -> str:
        return self.DESCRIPTION

    # =========================================================================
    # Data
    # =========================================================================

    def field_names(self) -> List[str]:
        return [spec.name for spec in self.FIELDS]

    def get_field_value(self, name: str) -> Any:
        widget = self._inputs[name]
        if isinstance(widget, QCheckBox):
            return widget.isChecked()
        if isinstance(widget, QComboBox):
            return widget.currentData() or ""
        if isinstance(widget, QPlainTextEdit):
            return widget.toPlainText().strip()
        return widget.text().strip()

    def set_field_value(self, name: str, value: Any):
        widget = self._inputs[name]
        if isinstance(widget, QCheckBox):
            widget.setChecked(bool(value))
        elif isinstance(widget, QComboBox):
            index = widget.findData(value if value is not None else "")
            widget.setCurrentIndex(index if index >= 0 else 0)
        elif isinstance(widget, QPlainTextEdit):
            widget.setPlainText("" if value is None else str(value))
        else:
            widget.setText("" if value is None else str(value))

    def populate_data(self):
        for spec in self.FIELDS:
            default = False if spec.kind == FieldKind.CHECKBOX else ""
            self.set_field_value(spec.name, self.get_from_store(spec.name, default))

    def collect_data(self) -> Dict[str, Any]:
        if not self._is_initialized:
            self.initialize()
        return {name: self.get_field_value(name) for name in self.field_names()}

    def show_validation_result(self, result: StepValidationResult):
        for name, label in self._error_labels.items():
            message: Optional[str] = result.field_errors.get(name)
            label.setText(message or "")
            label.setVisible(bool(message))

    def field_label(self, name: str) -> str:
        return self._row_labels[name].text()

    def field_error(self, name: str) -> str:
        """Inline error text currently shown for a field."""
        label = self._error_labels.get(name)
        return label.text() if label and not label.isHidden() else ""
