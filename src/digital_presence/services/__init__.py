"""
Engine Services - Pure logic layer behind the dashboard and onboarding screens.

Key Principles:
1. Pure functions of their inputs (no storage, no UI imports)
2. Unknown IDs and missing profile fields degrade to empty results
3. Writes are computed here and persisted by the host
"""

from .action_service import ACTION_IDS, ACTION_RULES, ActionRule, compute_actions, is_provided
from .dashboard_viewmodel import DashboardViewModel
from .governance_service import (
    can_user_vote,
    get_governance_level_by_scope,
    get_onboarding_progress,
    get_required_approvers,
    get_role_by_id,
    get_steps_for_role,
)
from .profile_updates import (
    InvalidStepError,
    complete_wizard_step,
    set_action_completed,
    set_current_step,
    to_record,
)
from .progress_service import completion_percent, compute_progress

__all__ = [
    "ACTION_IDS",
    "ACTION_RULES",
    "ActionRule",
    "compute_actions",
    "is_provided",
    "DashboardViewModel",
    "can_user_vote",
    "get_governance_level_by_scope",
    "get_onboarding_progress",
    "get_required_approvers",
    "get_role_by_id",
    "get_steps_for_role",
    "InvalidStepError",
    "complete_wizard_step",
    "set_action_completed",
    "set_current_step",
    "to_record",
    "completion_percent",
    "compute_progress",
]
