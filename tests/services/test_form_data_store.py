# -*- coding: utf-8 -*-
"""
Tests for FormDataStore.

Tests cover:
- Shallow merge and snapshot isolation
- Progress under both policies
- Persistence round-trip and legacy records
- Storage failures
- Reset and listeners
"""

import json
import logging

import pytest

from app.config import Config, ProgressPolicy
from models.form_data import SCHEMA_VERSION, FormSnapshot, default_form_data
from services.form_data_store import FormDataStore


def _read_record(storage_dir):
    with open(storage_dir / Config.FORM_DATA_FILE, encoding="utf-8") as f:
        return json.load(f)


class TestMerge:
    """Test partial updates."""

    def test_update_overlays_only_given_keys(self, store):
        store.update({"fullName": "Jane Doe"})
        store.update({"email": "jane@example.com"})

        data = store.form_data
        assert data["fullName"] == "Jane Doe"
        assert data["email"] == "jane@example.com"
        assert data["utr"] == ""

    def test_nested_values_are_replaced_not_merged(self, store):
        store.update({"employmentExpenses": {"details": "Uniform"}})
        assert store.get_value("employmentExpenses") == {"details": "Uniform"}

    def test_snapshot_is_a_copy(self, store):
        snapshot = store.get_snapshot()
        snapshot.form_data["fullName"] = "Mutated"
        snapshot.form_data["selectedIncomeTypes"].append("employment")
        snapshot.sections_completed["personalInfo"] = True

        assert store.get_value("fullName") == ""
        assert store.get_value("selectedIncomeTypes") == []
        assert store.is_section_completed("personalInfo") is False

    def test_empty_update_does_not_notify(self, store):
        calls = []
        store.add_listener(calls.append)
        store.update({})
        assert calls == []

    def test_listener_receives_partial(self, store):
        calls = []
        store.add_listener(calls.append)
        store.update({"selectedIncomeTypes": ["employment"]})
        assert calls == [{"selectedIncomeTypes": ["employment"]}]

        store.remove_listener(calls.append)
        store.update({"fullName": "x"})
        assert len(calls) == 1


class TestProgress:
    """Test calculate_progress under both policies."""

    def test_fixed_five_of_fourteen(self, store):
        for section in ["personalInfo", "employment", "selfEmployment", "partnership", "ukProperty"]:
            store.set_section_completed(section)
        assert store.calculate_progress() == 36

    def test_fixed_ignores_active_list(self, store):
        store.set_section_completed("personalInfo")
        assert store.calculate_progress(["personalInfo"]) == round(100 / 14)

    def test_fixed_is_monotonic(self, store):
        values = []
        for section in list(store.sections_completed):
            store.set_section_completed(section)
            values.append(store.calculate_progress())
        assert values == sorted(values)
        assert values[-1] == 100

    def test_active_policy_uses_active_sections(self, storage_dir):
        store = FormDataStore(storage_dir=storage_dir, progress_policy=ProgressPolicy.ACTIVE)
        active = ["personalInfo", "incomeSelection", "taxReliefSelection", "ukProperty"]
        store.set_section_completed("personalInfo")
        store.set_section_completed("ukProperty")
        store.set_section_completed("employment")  # not active
        assert store.calculate_progress(active) == 50

        store.set_section_completed("incomeSelection")
        store.set_section_completed("taxReliefSelection")
        assert store.calculate_progress(active) == 100

    def test_active_policy_empty_list(self, storage_dir):
        store = FormDataStore(storage_dir=storage_dir, progress_policy=ProgressPolicy.ACTIVE)
        assert store.calculate_progress([]) == 0

    def test_unknown_policy_rejected(self, storage_dir):
        with pytest.raises(ValueError):
            FormDataStore(storage_dir=storage_dir, progress_policy="sometimes")


class TestPersistence:
    """Test the persisted record."""

    def test_round_trip(self, storage_dir, store):
        store.update({"fullName": "Jane Doe", "selectedIncomeTypes": ["property"]})
        store.set_section_completed("personalInfo")

        reloaded = FormDataStore(storage_dir=storage_dir)
        assert reloaded.get_value("fullName") == "Jane Doe"
        assert reloaded.get_value("selectedIncomeTypes") == ["property"]
        assert reloaded.is_section_completed("personalInfo") is True

    def test_record_is_versioned(self, storage_dir, store):
        store.update({"fullName": "Jane Doe"})
        record = _read_record(storage_dir)
        assert record["schema_version"] == SCHEMA_VERSION
        assert record["form_data"]["fullName"] == "Jane Doe"
        assert "sections_completed" in record

    def test_missing_record_gives_defaults(self, store):
        assert store.form_data == default_form_data()
        assert store.get_snapshot().completed_count() == 0

    def test_legacy_unversioned_record(self, storage_dir):
        with open(storage_dir / Config.FORM_DATA_FILE, "w", encoding="utf-8") as f:
            json.dump({"fullName": "Old Format", "selectedIncomeTypes": ["employment"]}, f)

        store = FormDataStore(storage_dir=storage_dir)
        assert store.get_value("fullName") == "Old Format"
        assert store.get_snapshot().income_selections == ["employment"]
        assert store.get_snapshot().completed_count() == 0

    def test_newer_schema_falls_back_to_defaults(self, storage_dir):
        with open(storage_dir / Config.FORM_DATA_FILE, "w", encoding="utf-8") as f:
            json.dump({"schema_version": SCHEMA_VERSION + 1, "form_data": {"fullName": "x"}}, f)

        store = FormDataStore(storage_dir=storage_dir)
        assert store.get_value("fullName") == ""

    def test_corrupt_record_falls_back_to_defaults(self, storage_dir, caplog):
        (storage_dir / Config.FORM_DATA_FILE).write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            store = FormDataStore(storage_dir=storage_dir)

        assert store.form_data == default_form_data()
        assert any("Error loading form data" in r.getMessage() for r in caplog.records)

    def test_unwritable_storage_is_logged_not_raised(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file where the directory should be", encoding="utf-8")

        store = FormDataStore(storage_dir=blocker)
        with caplog.at_level(logging.ERROR):
            store.update({"fullName": "Still in memory"})

        assert store.get_value("fullName") == "Still in memory"
        assert any("Error saving form data" in r.getMessage() for r in caplog.records)

    def test_failed_save_keeps_previous_record(self, storage_dir, store, caplog):
        store.update({"fullName": "Jane Doe"})

        with caplog.at_level(logging.ERROR):
            store.update({"attachment": object()})

        assert any("Error saving form data" in r.getMessage() for r in caplog.records)
        assert _read_record(storage_dir)["form_data"]["fullName"] == "Jane Doe"
        assert not (storage_dir / (Config.FORM_DATA_FILE + ".tmp")).exists()

        reloaded = FormDataStore(storage_dir=storage_dir)
        assert reloaded.get_value("fullName") == "Jane Doe"


class TestLegacyOnboardingMigration:
    """Test folding the retired onboarding record into the store."""

    def _write_legacy(self, storage_dir, record):
        with open(storage_dir / Config.LEGACY_ONBOARDING_FILE, "w", encoding="utf-8") as f:
            json.dump(record, f)

    def test_completed_sections_and_form_data_migrated(self, storage_dir):
        self._write_legacy(storage_dir, {
            "completedSections": ["personalInfo", "employment"],
            "formData": {
                "personalInfo": {"fullName": "Legacy Name", "city": "Leeds"},
                "employment": {"employerName": "Acme"},
            },
        })

        store = FormDataStore(storage_dir=storage_dir)

        assert store.is_section_completed("personalInfo") is True
        assert store.is_section_completed("employment") is True
        assert store.get_value("employerName") == "Acme"
        assert not (storage_dir / Config.LEGACY_ONBOARDING_FILE).exists()
        assert _read_record(storage_dir)["form_data"]["employerName"] == "Acme"

    def test_migration_does_not_overwrite_existing_answers(self, storage_dir):
        record = FormSnapshot(form_data={"fullName": "Current"}).to_dict()
        with open(storage_dir / Config.FORM_DATA_FILE, "w", encoding="utf-8") as f:
            json.dump(record, f)
        self._write_legacy(storage_dir, {
            "completedSections": [],
            "formData": {"personalInfo": {"fullName": "Legacy", "postcode": "LS1 1AA"}},
        })

        store = FormDataStore(storage_dir=storage_dir)
        assert store.get_value("fullName") == "Current"
        assert store.get_value("postcode") == "LS1 1AA"

    def test_malformed_legacy_record_left_in_place(self, storage_dir):
        (storage_dir / Config.LEGACY_ONBOARDING_FILE).write_text("[]", encoding="utf-8")
        FormDataStore(storage_dir=storage_dir)
        assert (storage_dir / Config.LEGACY_ONBOARDING_FILE).exists()


class TestReset:
    """Test reset to defaults."""

    def test_reset_restores_defaults_and_removes_record(self, storage_dir, store):
        store.update({"fullName": "Jane"})
        store.set_section_completed("personalInfo")
        assert (storage_dir / Config.FORM_DATA_FILE).exists()

        store.reset()

        assert store.form_data == default_form_data()
        assert store.get_snapshot().completed_count() == 0
        assert not (storage_dir / Config.FORM_DATA_FILE).exists()

    def test_reset_notifies_listeners(self, store):
        calls = []
        store.add_listener(calls.append)
        store.reset()
        assert len(calls) == 1
        assert calls[0]["selectedIncomeTypes"] == []
