"""
Tests for the profile write-path helpers.
"""

import copy

import pytest

from digital_presence.contracts.profile import BusinessProfile
from digital_presence.services.action_service import compute_actions
from digital_presence.services.profile_updates import (
    InvalidStepError,
    complete_wizard_step,
    set_action_completed,
    set_current_step,
    to_record,
)
from digital_presence.services.progress_service import compute_progress


class TestSetActionCompleted:

    def test_mark_complete(self, new_profile_record):
        updated = set_action_completed(new_profile_record, "select-service", True)
        assert updated.wizard_progress.completed_actions == ["select-service"]

    def test_marking_twice_is_idempotent(self, new_profile_record):
        once = set_action_completed(new_profile_record, "select-service", True)
        twice = set_action_completed(once, "select-service", True)

        assert twice.completed_actions == once.completed_actions == frozenset({"select-service"})
        assert twice.wizard_progress.completed_actions == ["select-service"]

    def test_unmarking_absent_action_is_noop(self, new_profile_record):
        updated = set_action_completed(new_profile_record, "select-service", False)
        assert updated.completed_actions == frozenset()

    def test_unmark(self, new_profile_record):
        marked = set_action_completed(new_profile_record, "select-service", True)
        marked = set_action_completed(marked, "create-social-plan", True)

        unmarked = set_action_completed(marked, "select-service", False)

        assert unmarked.wizard_progress.completed_actions == ["create-social-plan"]

    def test_input_not_mutated(self, new_profile_record):
        original = copy.deepcopy(new_profile_record)
        profile = BusinessProfile.model_validate(new_profile_record)

        set_action_completed(profile, "select-service", True)

        assert new_profile_record == original
        assert profile.completed_actions == frozenset()

    def test_other_fields_survive(self, finished_profile_record):
        updated = set_action_completed(finished_profile_record, "explore-resources", True)

        assert updated.id == 8
        assert updated.current_step == "complete"
        assert updated.wizard_progress.get("launchPreferences") == {"launchDate": "2024-05-01"}
        assert updated.wizard_progress.service_tier == "pro"

    def test_recompute_after_toggle(self, new_profile_record):
        updated = set_action_completed(new_profile_record, "complete-branding", True)

        actions = compute_actions(updated)
        assert actions[-1].id == "complete-branding"
        assert actions[-1].completed is True

    def test_requires_profile(self):
        with pytest.raises(ValueError):
            set_action_completed(None, "select-service", True)

    @pytest.mark.parametrize("action_id", ["", None, 3])
    def test_invalid_action_id(self, new_profile_record, action_id):
        with pytest.raises(ValueError):
            set_action_completed(new_profile_record, action_id, True)


class TestCompleteWizardStep:

    def test_advances_current_step(self, new_profile_record):
        updated = complete_wizard_step(new_profile_record, "branding")

        assert updated.completed_steps == ["business-info", "branding"]
        assert updated.current_step == "website"
        assert compute_progress(updated).percent == 40

    def test_stores_preferences(self, new_profile_record):
        updated = complete_wizard_step(
            new_profile_record, "website", preferences={"websiteType": "ecommerce"}
        )
        assert updated.wizard_progress.get("websitePreferences") == {"websiteType": "ecommerce"}
        assert updated.current_step == "marketing"

    def test_launch_marks_wizard_complete(self, new_profile_record):
        updated = complete_wizard_step(new_profile_record, "launch")
        assert updated.current_step == "complete"

    def test_repeat_completion_is_idempotent(self, new_profile_record):
        updated = complete_wizard_step(new_profile_record, "business-info")
        assert updated.completed_steps == ["business-info"]

    def test_unknown_step_rejected(self, new_profile_record):
        with pytest.raises(InvalidStepError):
            complete_wizard_step(new_profile_record, "checkout")

    def test_full_walkthrough(self):
        profile = BusinessProfile(id=1)
        for step_id in ["business-info", "branding", "website", "marketing", "launch"]:
            profile = complete_wizard_step(profile, step_id)

        assert compute_progress(profile).is_complete
        assert "explore-resources" in [a.id for a in compute_actions(profile)]


class TestSetCurrentStep:

    def test_set(self, new_profile_record):
        assert set_current_step(new_profile_record, "marketing").current_step == "marketing"

    def test_complete_sentinel_allowed(self, new_profile_record):
        assert set_current_step(new_profile_record, "complete").current_step == "complete"

    def test_unknown_step_rejected(self, new_profile_record):
        with pytest.raises(InvalidStepError):
            set_current_step(new_profile_record, "checkout")


class TestToRecord:

    def test_round_trip_keeps_stored_shape(self, new_profile_record):
        record = to_record(BusinessProfile.model_validate(new_profile_record))
        assert record == new_profile_record

    def test_updated_record(self, new_profile_record):
        record = to_record(set_action_completed(new_profile_record, "select-service", True))

        assert record["businessName"] == "Sunrise Bakery"
        assert record["wizardProgress"] == {
            "currentStep": "branding",
            "completedActions": ["select-service"],
        }
