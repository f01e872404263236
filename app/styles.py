# -*- coding: utf-8 -*-
"""
Application stylesheet for PyQt5.
"""

from .config import Config


def get_stylesheet() -> str:
    """Generate the main application stylesheet."""
    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        font-family: "{Config.FONT_FAMILY}", sans-serif;
        font-size: {Config.FONT_SIZE}pt;
        color: {Config.TEXT_COLOR};
    }}

    QMainWindow {{
        background-color: {Config.BACKGROUND_COLOR};
    }}

    /* ===== Input Fields ===== */
    QLineEdit, QPlainTextEdit {{
        background-color: {Config.INPUT_BG};
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 6px;
        padding: 8px 12px;
        min-height: 20px;
    }}

    QLineEdit:focus, QPlainTextEdit:focus {{
        border: 2px solid {Config.INPUT_FOCUS};
        padding: 7px 11px;
        outline: none;
    }}

    /* ===== ComboBox ===== */
    QComboBox {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        border-radius: 4px;
        padding: 8px 12px;
        min-height: 20px;
        min-width: 100px;
    }}

    QComboBox:hover {{
        border-color: {Config.PRIMARY_COLOR};
    }}

    QComboBox QAbstractItemView {{
        background-color: white;
        border: 1px solid {Config.BORDER_COLOR};
        selection-background-color: {Config.PRIMARY_LIGHT};
        selection-color: white;
    }}

    /* ===== CheckBox ===== */
    QCheckBox {{
        spacing: 8px;
        padding: 4px 0;
    }}

    /* ===== ScrollBar ===== */
    QScrollBar:vertical {{
        background-color: {Config.BACKGROUND_COLOR};
        width: 12px;
        border-radius: 6px;
    }}

    QScrollBar::handle:vertical {{
        background-color: #c0c0c0;
        border-radius: 6px;
        min-height: 30px;
        margin: 2px;
    }}

    QScrollBar::handle:vertical:hover {{
        background-color: {Config.PRIMARY_COLOR};
    }}

    QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
        height: 0px;
    }}
    """
