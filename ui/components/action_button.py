# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer and the completion page so every navigation
button shares one look.
"""

from PyQt5.QtWidgets import QPushButton

from app.config import Config

_VARIANT_STYLES = {
    # Next, Finish
    "primary": (Config.PRIMARY_COLOR, "#0B3A6E", "white"),
    # Previous, Start again
    "secondary": ("#6c757d", "#5c636a", "white"),
    # Confirm & Submit on the summary screen
    "success": (Config.SUCCESS_COLOR, "#1E8449", "white"),
}


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Supports three variants:
    - primary: Brand blue - main forward actions
    - secondary: Gray - Previous and other secondary actions
    - success: Green - the confirm action on the review screen

    Usage:
        btn = ActionButton("Next Step", variant="primary")
        btn.set_variant("success")
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 140,
        height: int = 44,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary" or "success"
            width: Minimum width in pixels
            height: Fixed height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)
        self.setMinimumWidth(width)
        self.setFixedHeight(height)
        self.variant = None
        self.set_variant(variant)

    def set_variant(self, variant: str):
        """
        Apply button styling based on variant.

        Args:
            variant: "primary", "secondary" or "success"
        """
        if variant not in _VARIANT_STYLES:
            raise ValueError(
                f"Invalid variant: {variant}. Must be one of {', '.join(_VARIANT_STYLES)}"
            )
        if variant == self.variant:
            return

        background, hover, color = _VARIANT_STYLES[variant]
        self.variant = variant
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {color};
                border: none;
                padding: 8px 16px;
                border-radius: 4px;
                font-size: 13px;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:disabled {{
                background-color: #adb5bd;
            }}
        """)
