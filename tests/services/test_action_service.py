"""
Tests for recommended action derivation.
"""

import math

import pytest

from digital_presence.contracts.dashboard import ActionPriority
from digital_presence.services.action_service import (
    ACTION_IDS,
    ACTION_RULES,
    ActionRule,
    compute_actions,
    is_provided,
    sort_actions,
)

ALL_STEPS = ["business-info", "branding", "website", "marketing", "launch"]


def _ids(actions):
    return [a.id for a in actions]


def _record(completed=(), **progress):
    return {"id": 1, "completedSteps": list(completed), "wizardProgress": progress}


def test_absent_profile_has_no_actions():
    assert compute_actions(None) == []


def test_business_info_only():
    actions = compute_actions(_record(["business-info"]))

    assert _ids(actions) == ["complete-branding", "create-social-plan", "select-service"]
    assert [a.priority for a in actions] == [
        ActionPriority.HIGH, ActionPriority.MEDIUM, ActionPriority.LOW,
    ]
    assert not any(a.completed for a in actions)


def test_everything_done_leaves_resource_exploration(finished_profile_record):
    actions = compute_actions(finished_profile_record)

    assert _ids(actions) == ["explore-resources"]
    assert actions[0].priority == ActionPriority.LOW
    assert actions[0].link == "/resources"


def test_empty_profile():
    assert _ids(compute_actions(_record())) == ["create-social-plan", "select-service"]


def test_branding_done_without_questionnaire():
    actions = compute_actions(_record(["business-info", "branding"], serviceTier="basic"))
    assert _ids(actions) == ["create-social-plan", "detailed-branding"]


def test_all_rules_can_fire_together():
    record = _record(ALL_STEPS)
    actions = compute_actions(record)

    assert _ids(actions) == ["create-social-plan", "detailed-branding", "select-service", "explore-resources"]


def test_completed_actions_mark_but_do_not_hide():
    actions = compute_actions(_record(["business-info"], completedActions=["complete-branding"]))

    assert _ids(actions) == ["create-social-plan", "select-service", "complete-branding"]
    assert [a.completed for a in actions] == [False, False, True]


def test_completed_items_sorted_by_priority_among_themselves():
    actions = compute_actions(
        _record(["business-info"], completedActions=["select-service", "complete-branding", "create-social-plan"])
    )
    assert _ids(actions) == ["complete-branding", "create-social-plan", "select-service"]
    assert all(a.completed for a in actions)


def test_unknown_completed_action_ids_ignored():
    actions = compute_actions(_record(["business-info"], completedActions=["not-an-action"]))
    assert not any(a.completed for a in actions)


def test_equal_keys_keep_rule_order():
    actions = compute_actions(_record(["business-info", "branding"]))

    medium = [a.id for a in actions if a.priority == ActionPriority.MEDIUM]
    assert medium == ["create-social-plan", "detailed-branding"]


def test_sort_is_stable_for_custom_rules():
    always = lambda profile: True  # noqa: E731
    rules = [
        ActionRule("low-a", "A", "d", "/a", "Go", ActionPriority.LOW, always),
        ActionRule("high-b", "B", "d", "/b", "Go", ActionPriority.HIGH, always),
        ActionRule("low-c", "C", "d", "/c", "Go", ActionPriority.LOW, always),
        ActionRule("high-d", "D", "d", "/d", "Go", ActionPriority.HIGH, always),
    ]
    assert _ids(compute_actions(_record(), rules=rules)) == ["high-b", "high-d", "low-a", "low-c"]


def test_duplicate_rule_ids_deduplicated():
    always = lambda profile: True  # noqa: E731
    rules = [
        ActionRule("same", "First", "d", "/a", "Go", ActionPriority.LOW, always),
        ActionRule("same", "Second", "d", "/b", "Go", ActionPriority.HIGH, always),
    ]
    actions = compute_actions(_record(), rules=rules)

    assert len(actions) == 1
    assert actions[0].title == "First"


@pytest.mark.parametrize("value", [None, False, 0, 0.0, "", math.nan])
def test_falsy_progress_values_count_as_missing(value):
    record = _record(["business-info", "branding"], socialMediaPlan=value, serviceTier=value, brandingQuestionnaire=value)
    assert _ids(compute_actions(record)) == ["create-social-plan", "detailed-branding", "select-service"]


@pytest.mark.parametrize("value", ["pro", 1, True, {}, [], {"platforms": []}])
def test_truthy_progress_values_count_as_provided(value):
    record = _record(["business-info", "branding"], socialMediaPlan=value, serviceTier=value, brandingQuestionnaire=value)
    assert compute_actions(record) == []


def test_is_provided():
    assert is_provided("x") is True
    assert is_provided(-1) is True
    assert is_provided(0) is False
    assert is_provided(None) is False


def test_deterministic(new_profile_record):
    assert compute_actions(new_profile_record) == compute_actions(new_profile_record)


def test_rule_table():
    assert ACTION_IDS == (
        "complete-branding", "create-social-plan", "detailed-branding", "select-service", "explore-resources",
    )
    assert [r.priority.rank for r in ACTION_RULES] == [0, 1, 1, 2, 2]


def test_sort_actions_incomplete_first():
    actions = compute_actions(_record(["business-info"], completedActions=["complete-branding"]))
    assert sort_actions(list(reversed(actions)))[-1].id == "complete-branding"


def test_to_dict():
    action = compute_actions(_record(["business-info"]))[0]

    assert action.to_dict() == {
        "id": "complete-branding",
        "title": "Complete your brand development",
        "description": "Define your brand identity and visual elements",
        "link": "/business-wizard?step=branding",
        "linkText": "Continue Setup",
        "completed": False,
        "priority": "high",
    }
