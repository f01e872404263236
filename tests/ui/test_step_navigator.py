# -*- coding: utf-8 -*-
"""
Tests for StepNavigator.

Steps are replaced by plain handle objects so navigation rules are
tested without widgets.

Tests cover:
- Gating on Submitted / Rejected
- Commit of data and completion flags
- Missing-handle fallback
- Double activation (enabled and disabled)
- Re-derivation and clamping when selections change
- Retreat and finalize
"""

import pytest

from services.wizard.step_protocol import Rejected, Submitted
from ui.wizards.framework.step_navigator import StepNavigator


class FakeStep:
    """Handle that answers RequestSubmit with a scripted reply."""

    def __init__(self, step):
        self.step = step
        self.reply = Submitted(data={}, section_id=step.section_id)
        self.requests = []
        self.shown = 0
        self.hidden = 0

    def submit_form(self, request):
        self.requests.append(request)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    def on_show(self):
        self.shown += 1

    def on_hide(self):
        self.hidden += 1


class HandleFactory:
    """handle_provider that builds one FakeStep per step id."""

    def __init__(self, missing=()):
        self.handles = {}
        self.missing = set(missing)

    def __call__(self, step):
        if step.id in self.missing:
            return None
        if step.id not in self.handles:
            self.handles[step.id] = FakeStep(step)
        return self.handles[step.id]


@pytest.fixture
def handles():
    return HandleFactory()


@pytest.fixture
def navigator(qapp, store, handles, clock):
    nav = StepNavigator(store, handle_provider=handles, clock=clock, double_activation_enabled=True)
    nav.start()
    return nav


def _advance(navigator, clock):
    """Single activation, spaced well outside the double-activation window."""
    clock.advance_ms(1000)
    return navigator.request_advance()


class TestInitialState:
    """Test the navigator before any activation."""

    def test_starts_at_first_step(self, navigator):
        assert navigator.current_index == 0
        assert navigator.get_current_step().id == "personal_info"
        assert navigator.get_step_count() == 5

    def test_cannot_go_previous_from_first_step(self, navigator):
        assert navigator.can_go_previous() is False
        assert navigator.retreat() is False
        assert navigator.current_index == 0

    def test_active_list_follows_stored_selections(self, qapp, store, handles):
        store.update({"selectedIncomeTypes": ["property", "employment"]})
        nav = StepNavigator(store, handle_provider=handles)
        assert nav.get_step_ids() == [
            "personal_info", "income_selection", "tax_relief_selection",
            "employment_details", "property_details", "summary", "submission",
        ]

    def test_position_progress(self, navigator, clock):
        assert navigator.get_progress_percentage() == pytest.approx(20.0)
        _advance(navigator, clock)
        assert navigator.get_progress_percentage() == pytest.approx(40.0)


class TestGating:
    """Test forward navigation on the step's reply."""

    def test_rejected_leaves_position_and_store_unchanged(self, navigator, handles, store, clock, qtbot):
        before = store.get_snapshot()
        handles.handles["personal_info"].reply = Rejected(errors=["Full name is required"])

        with qtbot.waitSignal(navigator.validation_failed) as blocker:
            assert _advance(navigator, clock) is False

        assert blocker.args[0].errors == ["Full name is required"]
        assert navigator.current_index == 0
        assert store.get_snapshot() == before

    def test_submitted_commits_and_advances(self, navigator, handles, store, clock):
        handles.handles["personal_info"].reply = Submitted(
            data={"fullName": "Jane Doe"}, section_id="personalInfo"
        )

        assert _advance(navigator, clock) is True

        assert navigator.current_index == 1
        assert store.get_value("fullName") == "Jane Doe"
        assert store.is_section_completed("personalInfo") is True

    def test_request_carries_step_id(self, navigator, handles, clock):
        _advance(navigator, clock)
        request = handles.handles["personal_info"].requests[0]
        assert request.step_id == "personal_info"

    def test_exception_in_step_is_a_rejection(self, navigator, handles, clock, qtbot):
        handles.handles["personal_info"].reply = RuntimeError("boom")

        with qtbot.waitSignal(navigator.validation_failed):
            assert _advance(navigator, clock) is False
        assert navigator.current_index == 0

    def test_lifecycle_hooks_called_on_navigation(self, navigator, handles, clock):
        first = handles.handles["personal_info"]
        _advance(navigator, clock)
        assert first.hidden == 1
        assert handles.handles["income_selection"].shown == 1


class TestForcedAdvance:
    """Test the missing-handle fallback and the double-activation escape hatch."""

    def test_missing_handle_forces_advance(self, qapp, store, clock, qtbot, caplog):
        nav = StepNavigator(store, handle_provider=HandleFactory(missing={"personal_info"}), clock=clock)
        nav.start()

        with qtbot.waitSignal(nav.forced_advance) as blocker:
            assert nav.request_advance() is True

        assert blocker.args == ["missing_handle"]
        assert nav.current_index == 1
        assert "no submit handle" in caplog.text

    def test_object_without_submit_form_forces_advance(self, qapp, store, clock):
        nav = StepNavigator(store, handle_provider=lambda step: object(), clock=clock)
        nav.start()
        assert nav.request_advance() is True
        assert nav.current_index == 1

    def test_double_activation_forces_past_rejection(self, navigator, handles, clock, qtbot):
        handles.handles["personal_info"].reply = Rejected(errors=["invalid"])

        clock.advance_ms(1000)
        assert navigator.request_advance() is False  # first of the pair: normal path
        assert navigator.current_index == 0

        clock.advance_ms(150)
        with qtbot.waitSignal(navigator.forced_advance) as blocker:
            assert navigator.request_advance() is True

        assert blocker.args == ["double_activation"]
        assert navigator.current_index == 1
        assert len(handles.handles["personal_info"].requests) == 1

    def test_activations_outside_window_are_normal(self, navigator, handles, clock):
        handles.handles["personal_info"].reply = Rejected(errors=["invalid"])

        clock.advance_ms(1000)
        navigator.request_advance()
        clock.advance_ms(500)
        assert navigator.request_advance() is False
        assert navigator.current_index == 0

    @pytest.mark.parametrize("gap_ms, forced", [(299, True), (300, False)])
    def test_double_activation_window_boundary(self, navigator, handles, clock, gap_ms, forced):
        handles.handles["personal_info"].reply = Rejected(errors=["invalid"])

        clock.advance_ms(1000)
        navigator.request_advance()
        clock.advance_ms(gap_ms)

        assert navigator.request_advance() is forced
        assert navigator.current_index == (1 if forced else 0)

    def test_double_activation_disabled(self, qapp, store, handles, clock):
        nav = StepNavigator(store, handle_provider=handles, clock=clock, double_activation_enabled=False)
        nav.start()
        handles.handles["personal_info"].reply = Rejected(errors=["invalid"])

        clock.advance_ms(1000)
        nav.request_advance()
        clock.advance_ms(50)
        assert nav.request_advance() is False
        assert nav.current_index == 0

    def test_forced_advance_does_not_commit(self, navigator, handles, store, clock):
        handles.handles["personal_info"].reply = Submitted(
            data={"fullName": "Never stored"}, section_id="personalInfo"
        )
        navigator.force_advance()
        assert navigator.current_index == 1
        assert store.get_value("fullName") == ""
        assert store.is_section_completed("personalInfo") is False


class TestResequence:
    """Test re-derivation when selections change."""

    def test_selection_commit_extends_list(self, navigator, handles, clock, qtbot):
        _advance(navigator, clock)  # personal_info -> income_selection
        handles.handles["income_selection"].reply = Submitted(
            data={"selectedIncomeTypes": ["property", "employment"]},
            section_id="incomeSelection",
        )

        with qtbot.waitSignal(navigator.steps_changed):
            _advance(navigator, clock)

        assert navigator.get_step_count() == 7
        assert navigator.get_current_step().id == "tax_relief_selection"
        _advance(navigator, clock)
        assert navigator.get_current_step().id == "employment_details"

    def test_shrinking_list_clamps_index(self, navigator, store, clock):
        store.update({"selectedIncomeTypes": ["employment", "property", "partnership"]})
        assert navigator.get_step_count() == 8
        for _ in range(7):
            navigator.force_advance()
        assert navigator.current_index == 7
        assert navigator.get_current_step().id == "submission"

        store.update({"selectedIncomeTypes": []})

        assert navigator.get_step_count() == 5
        assert navigator.current_index == 4
        assert navigator.get_current_step().id == "submission"

    def test_removed_current_step_remounts(self, navigator, store, qtbot):
        store.update({"selectedIncomeTypes": ["employment", "property"]})
        for _ in range(4):
            navigator.force_advance()
        assert navigator.get_current_step().id == "property_details"

        with qtbot.waitSignal(navigator.step_changed):
            store.update({"selectedIncomeTypes": ["employment"]})

        assert navigator.current_index == 4
        assert navigator.get_current_step().id == "summary"

    def test_unrelated_update_does_not_resequence(self, navigator, store, qtbot):
        with qtbot.assertNotEmitted(navigator.steps_changed):
            store.update({"fullName": "Jane"})


class TestRetreatAndFinalize:
    """Test backward navigation and finalization."""

    def test_retreat_never_validates(self, navigator, handles, clock):
        _advance(navigator, clock)
        handles.handles["income_selection"].reply = Rejected(errors=["invalid"])

        assert navigator.retreat() is True
        assert navigator.current_index == 0
        assert handles.handles["income_selection"].requests == []

    def test_finalize_on_last_step(self, navigator, store, clock, qtbot):
        store.update({"fullName": "Jane Doe"})
        for _ in range(4):
            navigator.force_advance()
        assert navigator.is_last_step()

        with qtbot.waitSignal(navigator.wizard_finalized) as blocker:
            assert _advance(navigator, clock) is True

        record = blocker.args[0]
        assert record["form_data"]["fullName"] == "Jane Doe"
        assert navigator.current_index == 0
        assert store.get_value("fullName") == ""

    def test_finalize_resets_selections(self, navigator, store):
        store.update({"selectedIncomeTypes": ["employment"]})
        assert navigator.get_step_count() == 6

        navigator.finalize()

        assert navigator.get_step_count() == 5
        assert navigator.current_index == 0


class TestCompletion:
    """Test completion percentage through the navigator."""

    def test_fixed_policy_by_default(self, navigator, store):
        for section in ["personalInfo", "employment", "selfEmployment", "partnership", "ukProperty"]:
            store.set_section_completed(section)
        assert navigator.calculate_completion() == 36
