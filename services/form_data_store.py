# -*- coding: utf-8 -*-
"""
Form Data Store - answer state for the self-assessment wizard.

Holds the answer snapshot and section-completion map, and writes the
whole record to a single JSON file after every mutation. The store is
constructed explicitly and handed to the navigator and to every step.

Persistence failures never reach the caller: they are logged and the
wizard keeps running on in-memory state.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from app.config import Config, ProgressPolicy
from models.form_data import (
    FormSnapshot,
    default_form_data,
    default_sections_completed,
)
from services.exceptions import StorageException
from utils.logger import get_logger

logger = get_logger(__name__)

UpdateListener = Callable[[Dict[str, Any]], None]


class FormDataStore:
    """
    Process-wide answer state with load/merge/persist/reset.

    Usage:
        store = FormDataStore(storage_dir=Config.DATA_DIR)
        store.update({"fullName": "Jane Doe"})
        store.set_section_completed("personalInfo", True)
        store.calculate_progress()
    """

    def __init__(
        self,
        storage_dir: Optional[Path] = None,
        total_steps: Optional[int] = None,
        progress_policy: Optional[str] = None,
    ):
        """
        Initialize the store and load any persisted record.

        Args:
            storage_dir: Directory holding the persisted record (default Config.DATA_DIR)
            total_steps: Denominator for the "fixed" progress policy
            progress_policy: ProgressPolicy.FIXED or ProgressPolicy.ACTIVE
        """
        self.storage_dir = Path(storage_dir) if storage_dir else Config.DATA_DIR
        self.storage_path = self.storage_dir / Config.FORM_DATA_FILE
        self.legacy_path = self.storage_dir / Config.LEGACY_ONBOARDING_FILE
        self.total_steps = total_steps or Config.TOTAL_STEPS
        self.progress_policy = progress_policy or Config.PROGRESS_POLICY
        if self.progress_policy not in ProgressPolicy.ALL:
            raise ValueError(f"Unknown progress policy: {self.progress_policy}")

        self._listeners: List[UpdateListener] = []
        self._snapshot = self._load()
        self._migrate_legacy_onboarding()

    # =========================================================================
    # Public API
    # =========================================================================

    def get_snapshot(self) -> FormSnapshot:
        """Return a copy of the current answers and completion map."""
        return self._snapshot.copy()

    def get_value(self, key: str, default: Any = None) -> Any:
        """Read a single answer."""
        return self._snapshot.form_data.get(key, default)

    @property
    def form_data(self) -> Dict[str, Any]:
        return self.get_snapshot().form_data

    @property
    def sections_completed(self) -> Dict[str, bool]:
        return dict(self._snapshot.sections_completed)

    def update(self, partial: Dict[str, Any]):
        """
        Shallow-merge a partial update, then persist the whole record.

        Only the given top-level keys change; nested values are replaced,
        not merged.
        """
        if not partial:
            return

        self._snapshot.form_data.update(partial)
        logger.debug(f"Form data updated: {sorted(partial.keys())}")
        self._persist()

        for listener in list(self._listeners):
            listener(dict(partial))

    def set_section_completed(self, section_id: str, completed: bool = True):
        """Set a single section-completion flag."""
        self._snapshot.sections_completed[section_id] = bool(completed)
        logger.debug(f"Section '{section_id}' completed={completed}")
        self._persist()

    def is_section_completed(self, section_id: str) -> bool:
        return self._snapshot.sections_completed.get(section_id, False)

    def reset(self):
        """Restore hard-coded defaults and remove the persisted record."""
        self._snapshot = FormSnapshot(
            form_data=default_form_data(),
            sections_completed=default_sections_completed(),
        )
        try:
            self.storage_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            self._log_storage_error("Could not remove persisted form data", e)

        logger.info("Form data reset to defaults")
        for listener in list(self._listeners):
            listener(self._snapshot.copy().form_data)

    def calculate_progress(self, active_section_ids: Optional[Iterable[str]] = None) -> int:
        """
        Percentage of sections completed.

        Under the "fixed" policy the denominator is the TOTAL_STEPS
        constant, so the value can stay below 100 when fewer optional
        sections were selected. Under the "active" policy it is the number
        of section ids passed in (the sections of the active step list).
        """
        if self.progress_policy == ProgressPolicy.ACTIVE:
            sections = list(dict.fromkeys(active_section_ids or []))
            if not sections:
                return 0
            done = sum(1 for s in sections if self.is_section_completed(s))
            return round(100 * done / len(sections))

        return round(100 * self._snapshot.completed_count() / self.total_steps)

    def add_listener(self, listener: UpdateListener):
        """Register a callable invoked with each applied partial update."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: UpdateListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    # =========================================================================
    # Persistence
    # =========================================================================

    def _load(self) -> FormSnapshot:
        """Load the persisted record, falling back to defaults."""
        if not self.storage_path.exists():
            logger.debug("No persisted form data, using defaults")
            return FormSnapshot()

        try:
            with open(self.storage_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            self._log_storage_error("Error loading form data", e)
            return FormSnapshot()

        snapshot = FormSnapshot.from_dict(raw)
        if snapshot is None:
            logger.warning(f"Unreadable form data record at {self.storage_path}, using defaults")
            return FormSnapshot()

        logger.info(f"Loaded form data from {self.storage_path}")
        return snapshot

    def _persist(self) -> bool:
        """
        Write the full record. Returns False when the write failed.

        The record is serialized before anything touches the disk and
        swapped in with a rename, so a failed save leaves the previous
        file intact.
        """
        temp_path = self.storage_path.with_name(self.storage_path.name + ".tmp")
        try:
            payload = json.dumps(self._snapshot.to_dict(), ensure_ascii=False, indent=2)
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(payload)
            temp_path.replace(self.storage_path)
        except (OSError, TypeError, ValueError) as e:
            self._log_storage_error("Error saving form data", e)
            if temp_path.exists():
                temp_path.unlink()
            return False
        return True

    def _log_storage_error(self, message: str, error: Exception):
        exc = StorageException(
            f"{message}: {error}",
            path=str(self.storage_path),
            original_error=error,
            context="form_data_store",
        )
        logger.error(str(exc))

    def _migrate_legacy_onboarding(self):
        """
        Fold the retired onboarding-progress record into the store.

        completedSections become completion flags; per-section formData
        sub-mappings are flattened without overwriting existing answers.
        The legacy file is deleted once the merged record is written.
        """
        if not self.legacy_path.exists():
            return

        try:
            with open(self.legacy_path, "r", encoding="utf-8") as f:
                legacy = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Could not read legacy onboarding record {self.legacy_path}: {e}")
            return

        if not isinstance(legacy, dict):
            logger.warning(f"Ignoring malformed legacy onboarding record {self.legacy_path}")
            return

        for section in legacy.get("completedSections") or []:
            self._snapshot.sections_completed[str(section)] = True

        sections_data = legacy.get("formData") or {}
        if isinstance(sections_data, dict):
            for values in sections_data.values():
                if not isinstance(values, dict):
                    continue
                for key, value in values.items():
                    if key not in self._snapshot.form_data:
                        self._snapshot.form_data[key] = value

        if not self._persist():
            return

        try:
            self.legacy_path.unlink()
        except OSError as e:
            logger.error(f"Could not remove legacy onboarding record {self.legacy_path}: {e}")
            return

        logger.info(f"Migrated legacy onboarding record {self.legacy_path}")
