#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app import MainWindow, get_stylesheet
from services.form_data_store import FormDataStore
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        # Create Qt application
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)
        app.setStyleSheet(get_stylesheet())

        # Log startup
        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        # Load (or migrate) persisted answers
        logger.info(f"Using data directory: {Config.DATA_DIR}")
        store = FormDataStore(storage_dir=Config.DATA_DIR)
        logger.info(f">> Form data loaded (progress policy: {store.progress_policy})")

        # Create main window
        window = MainWindow(store)
        window.show()
        logger.info(">> Main window created and displayed")

        # Run application event loop
        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except ImportError as e:
        error_msg = f"Import Error: {e}"
        print(f"\n[ERROR] {error_msg}")
        print("\nPossible causes:")
        print("1. Missing dependencies - Run: pip install -e .")
        print("2. Python path issue - Make sure you're in the correct directory")
        print("\nDetails:", str(e))
        logger.exception(error_msg)
        sys.exit(1)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
