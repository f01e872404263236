# -*- coding: utf-8 -*-
"""
Shared test configuration.

Qt runs on the offscreen platform and logs go to a temporary directory;
both must be set before the application modules are imported.
"""

import os
import tempfile

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("SA_WIZARD_LOGS_DIR", tempfile.mkdtemp(prefix="sa_wizard_logs_"))
os.environ.setdefault("SA_WIZARD_DATA_DIR", tempfile.mkdtemp(prefix="sa_wizard_data_"))

import pytest

from app.config import ProgressPolicy
from services.form_data_store import FormDataStore


class FakeClock:
    """Manually advanced seconds source for timing-dependent tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, milliseconds: float):
        self.now += milliseconds / 1000.0


@pytest.fixture
def storage_dir(tmp_path):
    """Directory holding the persisted form record."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def store(storage_dir):
    """Store with the default (fixed) progress policy."""
    return FormDataStore(storage_dir=storage_dir, progress_policy=ProgressPolicy.FIXED)


@pytest.fixture
def clock():
    return FakeClock()
