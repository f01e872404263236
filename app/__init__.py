# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard Application Core Module
"""

from .config import Config
from .main_window import MainWindow
from .styles import get_stylesheet

__all__ = ["Config", "MainWindow", "get_stylesheet"]
